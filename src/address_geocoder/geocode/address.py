# src/address_geocoder/geocode/address.py
from dataclasses import asdict, dataclass
from typing import Mapping, Optional, Union

ADDRESS_FIELDS = (
    "address_line_1",
    "address_line_2",
    "city",
    "province",
    "postal_code",
    "state",
    "zip_code",
    "country",
)


@dataclass(frozen=True)
class AddressRecord:
    address_line_1: Optional[str] = None
    address_line_2: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    postal_code: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping) -> "AddressRecord":
        # unknown keys are dropped
        return cls(**{k: data.get(k) for k in ADDRESS_FIELDS})


@dataclass(frozen=True)
class Coordinate:
    lat: Union[str, float]
    lng: Union[str, float]


def _as_dict(record) -> dict:
    if record is None:
        return asdict(AddressRecord())
    if isinstance(record, AddressRecord):
        return asdict(record)
    return asdict(AddressRecord.from_mapping(record))


def _part(value, sep: str) -> str:
    return f"{value}{sep}" if value else ""


def to_address_string(record: Union[AddressRecord, Mapping, None] = None) -> str:
    """
    Format an address into a single free-text string usable as the
    `address` search parameter.

    Fields are joined in a fixed order; absent or empty fields contribute
    nothing. When province or postal_code is given, state and zip_code are
    ignored (Canadian vs US style).
    """
    data = _as_dict(record)

    parts = [
        _part(data["address_line_1"], " "),
        _part(data["address_line_2"], " "),
        _part(data["city"], ", "),
    ]
    if data["province"] or data["postal_code"]:
        parts.append(_part(data["province"], ", "))
        parts.append(_part(data["postal_code"], ", "))
    else:
        parts.append(_part(data["state"], ", "))
        parts.append(_part(data["zip_code"], ", "))
    parts.append(data["country"] or "")
    return "".join(parts)
