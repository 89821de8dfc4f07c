"""
Postal code and phone number checks for Romanian addresses.

Postal codes are six digits. Every leading digit is accepted: the per-county
prefixes in POSTAL_PREFIXES overlap and are kept as a reference only.

Phones are national significant numbers of nine digits, mobile ("7...") or
landline ("2..." / "3..."), written with "+40", "0040", a national "0" or no
prefix at all.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Optional

from ..identifiers.validators import as_text, is_ascii_digits, strip_whitespace

logger = logging.getLogger(__name__)

POSTAL_CODE_LENGTH = 6
INTERNATIONAL_PREFIX = "+40"

_PHONE_SEPARATORS = re.compile(r"[\s\-.()/]")
_RO_PHONE = re.compile(r"(?:\+40|0040|0)?([237][0-9]{8})")


class PostalCodeReason(str, Enum):
    WRONG_LENGTH = "WRONG_LENGTH"
    NON_DIGIT = "NON_DIGIT"


def postal_code_failure(raw: Optional[str]) -> Optional[PostalCodeReason]:
    """First failed check for a postal code, or None if it is valid."""
    code = strip_whitespace(raw)
    if len(code) != POSTAL_CODE_LENGTH:
        reason = PostalCodeReason.WRONG_LENGTH
    elif not is_ascii_digits(code):
        reason = PostalCodeReason.NON_DIGIT
    else:
        return None
    logger.debug("postal code rejected: %s", reason.value)
    return reason


def validate_romanian_postal_code(raw: Optional[str]) -> bool:
    """True if `raw` is exactly six digits (surrounding whitespace ignored)."""
    return postal_code_failure(raw) is None


def _clean_phone(raw: Optional[str]) -> str:
    return _PHONE_SEPARATORS.sub("", as_text(raw))


def validate_romanian_phone(raw: Optional[str]) -> bool:
    """True for a Romanian mobile or landline number in any accepted prefix style."""
    return _RO_PHONE.fullmatch(_clean_phone(raw)) is not None


def normalize_romanian_phone(raw: Optional[str]) -> str:
    """
    Rewrite a phone number to the "+40..." international form.

    Best effort: the input is not validated, only its prefix is rewritten.
    "0721 234 567", "0040721234567" and "+40 (0)721-234-567" all become
    "+40721234567". The output is a fixed point of this function.
    """
    s = _clean_phone(raw)
    if not s:
        return ""

    if s.startswith(INTERNATIONAL_PREFIX):
        rest = s[3:]
    elif s.startswith("0040"):
        rest = s[4:]
    elif s.startswith("40") and len(s) == 11:
        rest = s[2:]
    else:
        rest = s

    # national trunk prefix, also found after "+40" as in "+40 (0)721..."
    return INTERNATIONAL_PREFIX + rest.lstrip("0")
