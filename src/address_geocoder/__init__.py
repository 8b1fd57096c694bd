# src/address_geocoder/__init__.py
from .geocode import (
    AddressRecord,
    ClientConfig,
    Coordinate,
    DecodeError,
    GeocodeClient,
    GeocodeError,
    InvalidCoordinateError,
    InvalidModeError,
    LookupMode,
    TransportError,
    encode_uri_component,
    to_address_string,
)

__version__ = "1.0.0"

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
