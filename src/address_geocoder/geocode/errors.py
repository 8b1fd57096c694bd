# src/address_geocoder/geocode/errors.py


class GeocodeError(RuntimeError):
    pass


class InvalidModeError(GeocodeError, ValueError):
    """Raised when send() is asked for a lookup mode it does not know."""

    def __init__(self, mode):
        self.mode = mode
        super().__init__(f"Invalid send mode: {mode!r} (expected 'address' or 'lat-lng')")


class InvalidCoordinateError(GeocodeError, ValueError):
    pass


class TransportError(GeocodeError):
    """Network failure; the requests exception is chained as __cause__."""


class DecodeError(GeocodeError):
    """Response body is not JSON; the decode error is chained as __cause__."""
