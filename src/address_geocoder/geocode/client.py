# src/address_geocoder/geocode/client.py
import logging
import re
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Mapping, Optional, Tuple, Union

import requests

from ..core.config import GOOGLE_GEOCODE_URL, Settings
from .address import AddressRecord, Coordinate, to_address_string
from .encoding import encode_uri_component
from .errors import DecodeError, InvalidCoordinateError, InvalidModeError, TransportError

logger = logging.getLogger(__name__)

HEADERS = {"Content-Type": "application/json"}
DEFAULT_TIMEOUT = 10

_KEY_PARAM = re.compile(r"([?&]key=)[^&\s]*")


class LookupMode(str, Enum):
    ADDRESS = "address"
    LAT_LNG = "lat-lng"


@dataclass(frozen=True)
class ClientConfig:
    api_key: str = ""
    base_url: str = GOOGLE_GEOCODE_URL
    country_code: Optional[str] = None
    default_mode: str = LookupMode.ADDRESS.value

    @classmethod
    def from_settings(cls, settings: Settings) -> "ClientConfig":
        return cls(
            api_key=settings.google_maps_api_key,
            base_url=settings.geocode_url,
            country_code=settings.country_code,
            default_mode=settings.lookup_mode,
        )


def _redact(url: str) -> str:
    return _KEY_PARAM.sub(r"\1***", url)


def _resolve_mode(mode) -> LookupMode:
    try:
        return LookupMode(mode)
    except ValueError:
        raise InvalidModeError(mode) from None


def _coordinates(data) -> Tuple[Any, Any]:
    if isinstance(data, Coordinate):
        lat, lng = data.lat, data.lng
    else:
        try:
            lat, lng = data["lat"], data["lng"]
        except (KeyError, TypeError) as e:
            raise InvalidCoordinateError("lat-lng lookup requires 'lat' and 'lng'") from e
    if lat is None or lng is None:
        raise InvalidCoordinateError("lat-lng lookup requires 'lat' and 'lng'")
    return lat, lng


# -------------------------
# Client
# -------------------------
class GeocodeClient:
    """
    Thin client for the Google Maps geocoding endpoint.

    Looks up either a structured address or a lat/lng pair and returns the
    decoded JSON body untouched. Status codes and API-level statuses
    ("ZERO_RESULTS", "REQUEST_DENIED", ...) are left to the caller.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        if config is None:
            # read at call time; core.config.settings is fixed at import
            env = Settings()
            config = ClientConfig.from_settings(env)
            if timeout is None:
                timeout = env.timeout
        self.config = config
        self.session = session
        self.timeout = timeout if timeout is not None else DEFAULT_TIMEOUT

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        **overrides,
    ) -> "GeocodeClient":
        """
        Build a client from environment settings. Keyword overrides
        (api_key, base_url, country_code, default_mode) win over the
        settings when they are not None.
        """
        settings = settings or Settings()
        known = {f.name for f in fields(ClientConfig)}
        unknown = set(overrides) - known
        if unknown:
            raise TypeError(f"Unknown client option(s): {', '.join(sorted(unknown))}")

        config = ClientConfig.from_settings(settings)
        config = replace(config, **{k: v for k, v in overrides.items() if v is not None})
        if timeout is None:
            timeout = settings.timeout
        return cls(config, session=session, timeout=timeout)

    def build_base_url(self) -> str:
        url = f"{self.config.base_url}?key={encode_uri_component(self.config.api_key)}"
        if self.config.country_code:
            url += f"&components=country:{self.config.country_code}"
        return url

    def send(self, data, mode: Union[LookupMode, str, None] = None) -> Any:
        """Dispatch on lookup mode (default: config.default_mode) and return the API response."""
        mode = _resolve_mode(mode if mode is not None else self.config.default_mode)
        logger.debug("geocode lookup, mode=%s", mode.value)

        if mode is LookupMode.LAT_LNG:
            return self._send_lat_lng(data)
        return self._send_address(data)

    def lookup(self, record: Union[AddressRecord, Mapping]) -> Any:
        return self.send(record, mode=LookupMode.ADDRESS)

    def reverse(self, lat, lng) -> Any:
        return self.send(Coordinate(lat=lat, lng=lng), mode=LookupMode.LAT_LNG)

    def _send_lat_lng(self, data) -> Any:
        lat, lng = _coordinates(data)
        url = self.build_base_url()
        url += f"&latlng={encode_uri_component(lat)},{encode_uri_component(lng)}"
        return self.get(url)

    def _send_address(self, data) -> Any:
        address = encode_uri_component(to_address_string(data))
        url = self.build_base_url()
        url += f"&address={address}"
        return self.get(url)

    def get(self, url: str) -> Any:
        """
        GET the url and return the json-decoded body.
        Raises TransportError on network failure, DecodeError on a non-JSON body.
        """
        http = self.session if self.session is not None else requests
        logger.debug("GET %s", _redact(url))
        try:
            resp = http.get(url, headers=HEADERS, timeout=self.timeout)
        except requests.RequestException as e:
            reason = _redact(str(e))
            logger.warning("geocode request failed: %s", reason)
            raise TransportError(f"Geocode network error: {reason}") from e

        try:
            return resp.json()
        except ValueError as e:
            logger.warning("geocode response is not JSON (HTTP %s)", resp.status_code)
            raise DecodeError(f"Geocode HTTP {resp.status_code}: body is not valid JSON") from e
