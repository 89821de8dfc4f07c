"""
Romanian postal addresses: a validated model and display formatting.

`RomanianAddress` enforces the two address invariants at construction (known
county code, six-digit postal code). The formatters only compose strings and
trust their input; validate first.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .contact import validate_romanian_postal_code
from .counties import get_county_name, is_valid_county_code

DEFAULT_COUNTRY = "România"
BUCHAREST = "B"


class RomanianAddress(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    county_code: str = Field(..., description="Address county code, e.g. 'CJ' or 'B'")
    locality: str = Field(..., min_length=1)
    street: str = Field(..., min_length=1)
    number: str = Field(..., min_length=1, description="Street number, may contain letters ('12A')")
    building: Optional[str] = Field(default=None, description="Bloc")
    staircase: Optional[str] = Field(default=None, description="Scara")
    floor: Optional[str] = Field(default=None, description="Etaj")
    apartment: Optional[str] = Field(default=None, description="Apartament")
    postal_code: str
    notes: Optional[str] = None

    @field_validator("county_code")
    @classmethod
    def _known_county(cls, v: str) -> str:
        code = v.upper()
        if not is_valid_county_code(code):
            raise ValueError(f"unknown county code: {v!r}")
        return code

    @field_validator("postal_code")
    @classmethod
    def _six_digits(cls, v: str) -> str:
        if not validate_romanian_postal_code(v):
            raise ValueError("postal code must be exactly 6 digits")
        return v


AddressLike = Union[RomanianAddress, Mapping[str, Any]]


def _coerce(address: AddressLike) -> RomanianAddress:
    if isinstance(address, RomanianAddress):
        return address
    # formatting never validates; callers are expected to have done so
    data = dict.fromkeys(("county_code", "locality", "street", "number", "postal_code"), "")
    data.update(address)
    return RomanianAddress.model_construct(**data)


def _street_line(a: RomanianAddress) -> str:
    head = " ".join(filter(None, (a.street, f"nr. {a.number}" if a.number else "")))
    parts = [head] if head else []
    for label, value in (("bl.", a.building), ("sc.", a.staircase), ("et.", a.floor), ("ap.", a.apartment)):
        if value:
            parts.append(f"{label} {value}")
    return ", ".join(parts)


def _locality_line(a: RomanianAddress, county_name: Optional[str]) -> str:
    name = county_name or get_county_name(a.county_code) or a.county_code
    if not name or name == a.locality:
        return a.locality
    if (a.county_code or "").upper() == BUCHAREST:
        return f"{a.locality}, {name}"
    return f"{a.locality}, jud. {name}"


def _lines(address: AddressLike, county_name: Optional[str], country: str) -> List[str]:
    a = _coerce(address)
    lines = [_street_line(a), _locality_line(a, county_name), a.postal_code]
    if country:
        lines.append(country)
    return [line for line in lines if line]


def format_romanian_address(
    address: AddressLike,
    county_name: Optional[str] = None,
    country: str = DEFAULT_COUNTRY,
) -> str:
    """
    Multi-line display form::

        Str. Memorandumului nr. 28, bl. A, ap. 4
        Cluj-Napoca, jud. Cluj
        400114
        România

    `county_name` overrides the table lookup; unknown codes fall back to the
    code itself.
    """
    return "\n".join(_lines(address, county_name, country))


def format_romanian_address_single_line(
    address: AddressLike,
    county_name: Optional[str] = None,
    country: str = DEFAULT_COUNTRY,
) -> str:
    """Same fields as `format_romanian_address`, comma-separated on one line."""
    return ", ".join(_lines(address, county_name, country))
