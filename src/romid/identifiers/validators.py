"""
Shared normalizers and checksum primitives used by the identifier validators.

Why this file exists
--------------------
CNP, IBAN and CUI all follow the same two steps: canonicalize a user-typed
string, then run a small piece of checksum arithmetic over its digits. The
arithmetic differs (weighted mod-11 vs. ISO 7064 mod-97) but the building
blocks are shared, so they live here once.

Design principles
-----------------
- **Pure functions**: no state, no I/O, safe to call from any thread.
- **Total**: every function accepts any string (or None) without raising.
- **ASCII only**: `str.isdigit()` accepts things like "²" or Arabic-Indic
  digits; identifiers never contain those, so we test against "0123456789".
"""

from __future__ import annotations

import re
from typing import Optional, Sequence

_ASCII_DIGITS = frozenset("0123456789")
_WHITESPACE = re.compile(r"\s+")

# Letters expand to two decimal digits in mod-97 checks: A=10 ... Z=35.
_LETTER_OFFSET = ord("A") - 10


def as_text(s: Optional[str]) -> str:
    """Coerce None to the empty string so validators stay total."""
    return s if isinstance(s, str) else ""


def strip_whitespace(s: Optional[str]) -> str:
    """Remove every whitespace character (spaces, tabs, newlines)."""
    return _WHITESPACE.sub("", as_text(s))


def normalize_spaces_dashes(s: Optional[str]) -> str:
    """
    Remove whitespace and dashes from a string.

    Normalization step used before validation so callers can pass
    user-friendly formats (e.g. "1900101-12345-7" or a spaced CNP) while the
    validators operate on a canonical representation.
    """
    return strip_whitespace(s).replace("-", "")


def is_ascii_digits(s: str) -> bool:
    """True if `s` is non-empty and made only of the digits 0-9."""
    return bool(s) and all(ch in _ASCII_DIGITS for ch in s)


def weighted_sum(digits: str, weights: Sequence[int]) -> int:
    """
    Multiply digit `i` by `weights[i]` and sum the products.

    `digits` and `weights` must have the same length; callers slice first.
    """
    return sum((ord(ch) - 48) * w for ch, w in zip(digits, weights))


def expand_letters(s: str) -> Optional[str]:
    """
    Replace every letter A..Z with its two-digit value (A=10 ... Z=35).

    Digits pass through unchanged. Returns None if anything else is present,
    including lower-case letters; callers upper-case first.
    """
    out = []
    for ch in s:
        if ch in _ASCII_DIGITS:
            out.append(ch)
        elif "A" <= ch <= "Z":
            out.append(str(ord(ch) - _LETTER_OFFSET))
        else:
            return None
    return "".join(out)


def mod97(digits: str) -> int:
    """
    Remainder of a decimal digit string modulo 97, folded one digit at a time.

    The expanded form of an IBAN is 30+ digits long. We never build the full
    integer: remainder = (remainder * 10 + digit) % 97 keeps every
    intermediate value below 970.
    """
    rem = 0
    for ch in digits:
        rem = (rem * 10 + (ord(ch) - 48)) % 97
    return rem
