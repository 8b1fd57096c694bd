# src/address_geocoder/geocode/__init__.py
from .address import AddressRecord, Coordinate, to_address_string
from .client import ClientConfig, GeocodeClient, LookupMode
from .encoding import encode_uri_component
from .errors import (
    DecodeError,
    GeocodeError,
    InvalidCoordinateError,
    InvalidModeError,
    TransportError,
)

__all__ = [
    "AddressRecord",
    "ClientConfig",
    "Coordinate",
    "DecodeError",
    "GeocodeClient",
    "GeocodeError",
    "InvalidCoordinateError",
    "InvalidModeError",
    "LookupMode",
    "TransportError",
    "encode_uri_component",
    "to_address_string",
]
