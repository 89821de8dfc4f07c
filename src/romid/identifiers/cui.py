"""
Romanian company tax identifier (CUI / CIF).

2 to 10 digits, optionally written with the VAT prefix "RO". The last digit
is a control digit over the others, left-padded to nine digits:

    control = (sum(d[i] * w[i]) * 10) % 11, with 10 -> 0
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Optional

from .validators import is_ascii_digits, strip_whitespace, weighted_sum

logger = logging.getLogger(__name__)

CUI_WEIGHTS = (7, 5, 3, 2, 1, 7, 5, 3, 2)
CUI_MIN_DIGITS = 2
CUI_MAX_DIGITS = 10

_VAT_PREFIX = re.compile(r"^RO", re.I)


class CuiReason(str, Enum):
    BAD_FORMAT = "BAD_FORMAT"
    BAD_CHECKSUM = "BAD_CHECKSUM"


def normalize_cui(raw: Optional[str]) -> str:
    """Drop whitespace and an optional leading "RO" (any case)."""
    return _VAT_PREFIX.sub("", strip_whitespace(raw), count=1)


def compute_cui_control_digit(payload: str) -> int:
    """Control digit for a 1-9 digit CUI payload (everything but the last digit)."""
    if not (1 <= len(payload) <= 9) or not is_ascii_digits(payload):
        raise ValueError("expected 1 to 9 digits")
    rem = weighted_sum(payload.zfill(9), CUI_WEIGHTS) * 10 % 11
    return 0 if rem == 10 else rem


def cui_failure(raw: Optional[str]) -> Optional[CuiReason]:
    """First failed check for a CUI, or None if it is valid."""
    cui = normalize_cui(raw)

    if not (CUI_MIN_DIGITS <= len(cui) <= CUI_MAX_DIGITS) or not is_ascii_digits(cui):
        reason = CuiReason.BAD_FORMAT
    elif compute_cui_control_digit(cui[:-1]) != int(cui[-1]):
        reason = CuiReason.BAD_CHECKSUM
    else:
        return None

    logger.debug("CUI rejected: %s", reason.value)
    return reason


def validate_romanian_cui(raw: Optional[str]) -> bool:
    """True if `raw` is a CUI/CIF with a correct control digit."""
    return cui_failure(raw) is None


def format_cui(raw: Optional[str]) -> str:
    """VAT display form, "RO" + digits; empty input stays empty."""
    digits = "".join(ch for ch in normalize_cui(raw) if "0" <= ch <= "9")
    return f"RO{digits}" if digits else ""
