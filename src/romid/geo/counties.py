"""
County lookup tables.

Romania uses two unrelated county codings:

- the alphabetic codes of addresses and number plates ("CJ", "B", ...), and
- the two-digit numeric codes embedded in a CNP ("12", "41", ...).

Both are packaged as YAML under `romid/geo/tables/`, read once at import and
frozen into read-only mappings, so they can be shared by any number of
threads without locking.
"""

from __future__ import annotations

from importlib import resources
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

import yaml

_TABLES = "romid.geo.tables"


def _load(fname: str, key: str) -> Dict[str, object]:
    text = resources.files(_TABLES).joinpath(fname).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    return dict(data.get(key, {}) or {})


ROMANIAN_COUNTIES: Mapping[str, str] = MappingProxyType(
    {str(k): str(v) for k, v in _load("counties.yaml", "counties").items()}
)

CNP_COUNTY_CODES: Mapping[str, str] = MappingProxyType(
    {str(k): str(v) for k, v in _load("cnp_counties.yaml", "cnp_counties").items()}
)

# Reference only; postal codes are never rejected for a prefix mismatch.
POSTAL_PREFIXES: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        str(k): tuple(str(p) for p in v)
        for k, v in _load("postal_prefixes.yaml", "postal_prefixes").items()
    }
)


def _clean_code(code: Optional[str]) -> str:
    return code.strip().upper() if isinstance(code, str) else ""


def is_valid_county_code(code: Optional[str]) -> bool:
    """True if `code` (any case, surrounding spaces ignored) is an address county code."""
    return _clean_code(code) in ROMANIAN_COUNTIES


def get_county_name(code: Optional[str]) -> Optional[str]:
    """Name for an address county code, e.g. "CJ" -> "Cluj"; None if unknown."""
    return ROMANIAN_COUNTIES.get(_clean_code(code))


def is_valid_cnp_county_code(code: Optional[str]) -> bool:
    """True if `code` is one of the two-digit county codes a CNP may carry."""
    return isinstance(code, str) and code in CNP_COUNTY_CODES


def get_cnp_county_name(code: Optional[str]) -> Optional[str]:
    """Name for a CNP county code, e.g. "41" -> "București - Sector 1"; None if unknown."""
    if not isinstance(code, str):
        return None
    return CNP_COUNTY_CODES.get(code)


def postal_prefix_for_county(code: Optional[str]) -> Tuple[str, ...]:
    """
    Approximate leading two digits of postal codes in a county.

    Advisory: useful for hints in a UI, never for validation. Returns an empty
    tuple for unknown codes.
    """
    return POSTAL_PREFIXES.get(_clean_code(code), ())
