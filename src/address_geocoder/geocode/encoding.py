# src/address_geocoder/geocode/encoding.py
from urllib.parse import quote

# left literal after encoding so urls match the ones built by the browser client
_REVERT = {"%21": "!", "%2A": "*", "%27": "'", "%28": "(", "%29": ")"}


def encode_uri_component(value=None) -> str:
    """
    Encode a string the way ECMAScript's encodeURIComponent does.

    Everything except unreserved characters (A-Z a-z 0-9 - _ . ~) is
    percent-encoded from its UTF-8 bytes, then ! * ' ( ) are put back.
    None encodes to an empty string; other non-strings are str()'d first.
    """
    if value is None:
        return ""
    encoded = quote(str(value), safe="")
    for seq, char in _REVERT.items():
        encoded = encoded.replace(seq, char)
    return encoded
