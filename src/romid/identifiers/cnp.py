"""
CNP (Cod Numeric Personal) decoding and validation.

Layout of the 13 digits::

    S YY MM DD JJ NNN C
    | |  |  |  |  |   +-- control digit
    | |  |  |  |  +------ sequence number (same county, same day)
    | |  |  |  +--------- county code, see CNP_COUNTY_CODES
    | +--+--+------------ birth date, two-digit year
    +-------------------- sex and century of birth

Checks run in a fixed order and the first failure is reported:
length, digits, sex digit, county, calendar date, future date, checksum.
A decode is only produced when every check passes.
"""

from __future__ import annotations

import datetime as dt
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from ..errors import InvalidCnpError
from ..geo.counties import get_cnp_county_name, is_valid_cnp_county_code
from .validators import as_text, is_ascii_digits, normalize_spaces_dashes, weighted_sum

logger = logging.getLogger(__name__)

CNP_LENGTH = 13
CNP_WEIGHTS = (2, 7, 9, 1, 4, 6, 3, 5, 8, 2, 7, 9)
DEFAULT_MASK_CHAR = "*"

# Sex/century digit -> first year of the century bucket.
# 7/8 (residents) and 9 (foreigners) carry no century; 1900 is an
# approximation kept for compatibility with existing callers.
_CENTURY: Dict[int, int] = {
    1: 1900, 2: 1900,
    3: 1800, 4: 1800,
    5: 2000, 6: 2000,
    7: 1900, 8: 1900,
    9: 1900,
}

_CNP_SHAPE = re.compile(r"[0-9]{13}")


class CnpReason(str, Enum):
    WRONG_LENGTH = "WRONG_LENGTH"
    NON_DIGIT = "NON_DIGIT"
    BAD_SEX_DIGIT = "BAD_SEX_DIGIT"
    BAD_COUNTY = "BAD_COUNTY"
    BAD_DATE = "BAD_DATE"
    FUTURE_DATE = "FUTURE_DATE"
    BAD_CHECKSUM = "BAD_CHECKSUM"


@dataclass(frozen=True)
class CnpInfo:
    """Fields decoded from a valid CNP."""
    cnp: str
    sex_century_digit: int
    birth_date: dt.date
    gender: Optional[str]          # "male", "female", or None for foreigners
    county_code: str
    county_name: str
    sequence_number: str
    control_digit: int

    @property
    def is_resident(self) -> bool:
        """Non-citizen resident (sex digit 7 or 8)."""
        return self.sex_century_digit in (7, 8)

    @property
    def is_foreigner(self) -> bool:
        return self.sex_century_digit == 9


@dataclass(frozen=True)
class CnpValidation:
    """
    Outcome of `validate_cnp`.

    Exactly one of `reason` (invalid) or `info` (valid) is set.
    """
    valid: bool
    reason: Optional[CnpReason] = None
    info: Optional[CnpInfo] = None

    @property
    def birth_date(self) -> Optional[dt.date]:
        return self.info.birth_date if self.info else None

    @property
    def gender(self) -> Optional[str]:
        return self.info.gender if self.info else None

    @property
    def county_code(self) -> Optional[str]:
        return self.info.county_code if self.info else None

    @property
    def county_name(self) -> Optional[str]:
        return self.info.county_name if self.info else None


def compute_cnp_control_digit(first12: str) -> int:
    """
    Control digit for the first 12 digits of a CNP.

    Weighted sum with CNP_WEIGHTS, modulo 11; a remainder of 10 maps to 1.
    """
    if len(first12) != 12 or not is_ascii_digits(first12):
        raise ValueError("expected exactly 12 digits")
    rem = weighted_sum(first12, CNP_WEIGHTS) % 11
    return 1 if rem == 10 else rem


def _gender(sex_digit: int) -> Optional[str]:
    if sex_digit == 9:
        return None
    return "male" if sex_digit % 2 == 1 else "female"


def _invalid(reason: CnpReason, cnp: str) -> CnpValidation:
    logger.debug("CNP rejected (%s): %s", reason.value, mask_cnp(cnp))
    return CnpValidation(valid=False, reason=reason)


def validate_cnp(raw: Optional[str], today: Optional[dt.date] = None) -> CnpValidation:
    """
    Validate and decode a CNP.

    Args:
        raw:   Candidate string. Whitespace and dashes are ignored.
        today: Reference date for the future-birth-date check. Defaults to
               the current local date; pass it explicitly for deterministic
               results.

    Returns:
        A `CnpValidation`: either `valid=False` with the first violated
        `reason`, or `valid=True` with the decoded `info`.
    """
    cnp = normalize_spaces_dashes(as_text(raw))

    if len(cnp) != CNP_LENGTH:
        return _invalid(CnpReason.WRONG_LENGTH, cnp)
    if not _CNP_SHAPE.fullmatch(cnp):
        return _invalid(CnpReason.NON_DIGIT, cnp)

    sex_digit = int(cnp[0])
    if sex_digit not in _CENTURY:
        return _invalid(CnpReason.BAD_SEX_DIGIT, cnp)

    county_code = cnp[7:9]
    if not is_valid_cnp_county_code(county_code):
        return _invalid(CnpReason.BAD_COUNTY, cnp)

    year = _CENTURY[sex_digit] + int(cnp[1:3])
    try:
        birth_date = dt.date(year, int(cnp[3:5]), int(cnp[5:7]))
    except ValueError:
        # month 00/13+, day 00, or a day the month doesn't have (Feb 30)
        return _invalid(CnpReason.BAD_DATE, cnp)

    if birth_date > (today or dt.date.today()):
        return _invalid(CnpReason.FUTURE_DATE, cnp)

    control = int(cnp[12])
    if compute_cnp_control_digit(cnp[:12]) != control:
        return _invalid(CnpReason.BAD_CHECKSUM, cnp)

    info = CnpInfo(
        cnp=cnp,
        sex_century_digit=sex_digit,
        birth_date=birth_date,
        gender=_gender(sex_digit),
        county_code=county_code,
        county_name=get_cnp_county_name(county_code) or county_code,
        sequence_number=cnp[9:12],
        control_digit=control,
    )
    return CnpValidation(valid=True, info=info)


def parse_cnp(raw: Optional[str], today: Optional[dt.date] = None) -> CnpInfo:
    """
    Decode a CNP or raise.

    Raises:
        InvalidCnpError: carrying the same reason `validate_cnp` reports.
    """
    result = validate_cnp(raw, today=today)
    if not result.valid or result.info is None:
        raise InvalidCnpError(result.reason or CnpReason.WRONG_LENGTH)
    return result.info


def mask_cnp(cnp: Optional[str], mask_char: str = DEFAULT_MASK_CHAR) -> str:
    """
    Keep the first six characters, mask the rest: "1900101123457" -> "190010*******".

    No validation is done; any 13-character string is masked the same way.
    Anything else becomes 13 mask characters so nothing leaks.
    """
    s = as_text(cnp)
    if len(s) != CNP_LENGTH:
        return mask_char * CNP_LENGTH
    return s[:6] + mask_char * (CNP_LENGTH - 6)
