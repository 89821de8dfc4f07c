"""
Romanian IBAN validation (ISO 13616, mod-97).

A Romanian IBAN is always 24 characters::

    RO kk BBBB AAAAAAAAAAAAAAAA
       |   |    +-- account number, 16 letters or digits
       |   +------- bank code, 4 letters
       +----------- check digits

Steps:
  1) Strip whitespace and uppercase.
  2) Check length, country and shape.
  3) Move the first 4 chars to the end.
  4) Replace letters A..Z with 10..35.
  5) Fold the digit string modulo 97 one digit at a time; valid iff it is 1.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Optional

from .validators import expand_letters, mod97, strip_whitespace

logger = logging.getLogger(__name__)

IBAN_LENGTH = 24
COUNTRY_CODE = "RO"

_RO_IBAN = re.compile(r"RO[0-9]{2}[A-Z]{4}[A-Z0-9]{16}")


class IbanReason(str, Enum):
    WRONG_LENGTH = "WRONG_LENGTH"
    BAD_COUNTRY = "BAD_COUNTRY"
    BAD_FORMAT = "BAD_FORMAT"
    BAD_CHECKSUM = "BAD_CHECKSUM"


def normalize_iban(raw: Optional[str]) -> str:
    """Canonical electronic form: no whitespace, upper case."""
    return strip_whitespace(raw).upper()


def iban_remainder(iban: str) -> Optional[int]:
    """
    The mod-97 remainder of an already-normalized IBAN.

    Returns None if the string holds anything besides A-Z and 0-9.
    """
    digits = expand_letters(iban[4:] + iban[:4])
    if digits is None:
        return None
    return mod97(digits)


def iban_failure(raw: Optional[str]) -> Optional[IbanReason]:
    """First failed check for a Romanian IBAN, or None if it is valid."""
    iban = normalize_iban(raw)

    if len(iban) != IBAN_LENGTH:
        reason = IbanReason.WRONG_LENGTH
    elif not iban.startswith(COUNTRY_CODE):
        reason = IbanReason.BAD_COUNTRY
    elif not _RO_IBAN.fullmatch(iban):
        reason = IbanReason.BAD_FORMAT
    elif iban_remainder(iban) != 1:
        reason = IbanReason.BAD_CHECKSUM
    else:
        return None

    logger.debug("IBAN rejected: %s", reason.value)
    return reason


def validate_romanian_iban(raw: Optional[str]) -> bool:
    """True if `raw` is a well-formed Romanian IBAN with a correct checksum."""
    return iban_failure(raw) is None


def format_iban(raw: Optional[str]) -> str:
    """
    Print form: groups of four separated by spaces.

    "RO49AAAA1B31007593840000" -> "RO49 AAAA 1B31 0075 9384 0000".
    Does not validate.
    """
    iban = normalize_iban(raw)
    return " ".join(iban[i : i + 4] for i in range(0, len(iban), 4))
