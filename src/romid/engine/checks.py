"""
Uniform verdicts over all identifier kinds.

The per-identifier APIs differ on purpose: CNP returns a decoded result with
a reason, IBAN/CUI/postal code return plain booleans. Tools that handle any
kind (the CLI, batch jobs, API layers) want one shape instead, so this module
wraps every validator into a `Verdict`:

    kind        which check ran ("cnp", "iban", ...)
    valid       the verdict
    reason      first failed check, None when valid
    normalized  canonical form of the input (a CNP is masked unless revealed)
    details     decoded extras, e.g. CNP gender and county

Verdicts are safe to log: they never contain a full CNP unless the config
asks for it.
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, Field

from ..config import RomidConfig
from ..errors import UnknownCheckError
from ..geo.contact import (
    normalize_romanian_phone,
    postal_code_failure,
    validate_romanian_phone,
)
from ..identifiers.cnp import mask_cnp, validate_cnp
from ..identifiers.cui import cui_failure, format_cui, normalize_cui
from ..identifiers.iban import format_iban, iban_failure, normalize_iban
from ..identifiers.validators import normalize_spaces_dashes, strip_whitespace

logger = logging.getLogger(__name__)

PHONE_BAD_FORMAT = "BAD_FORMAT"


class Verdict(BaseModel):
    kind: str
    valid: bool
    reason: Optional[str] = None
    normalized: Optional[str] = None
    details: Dict[str, Any] = Field(default_factory=dict)


CheckFn = Callable[[Optional[str], RomidConfig, Optional[dt.date]], Verdict]


def check_cnp(raw: Optional[str], cfg: RomidConfig, today: Optional[dt.date] = None) -> Verdict:
    result = validate_cnp(raw, today=today)
    cnp = normalize_spaces_dashes(raw)
    shown = cnp if cfg.cnp.reveal else mask_cnp(cnp, cfg.mask.char)

    if not result.valid or result.info is None:
        return Verdict(kind="cnp", valid=False, reason=result.reason.value, normalized=shown)

    info = result.info
    details: Dict[str, Any] = {
        "gender": info.gender,
        "county_code": info.county_code,
        "county_name": info.county_name,
    }
    if cfg.cnp.reveal:
        details["birth_date"] = info.birth_date.isoformat()
        details["sequence_number"] = info.sequence_number
    return Verdict(kind="cnp", valid=True, normalized=shown, details=details)


def check_iban(raw: Optional[str], cfg: RomidConfig, today: Optional[dt.date] = None) -> Verdict:
    reason = iban_failure(raw)
    iban = normalize_iban(raw)
    if reason is not None:
        return Verdict(kind="iban", valid=False, reason=reason.value, normalized=iban)
    return Verdict(
        kind="iban",
        valid=True,
        normalized=iban,
        details={"bank_code": iban[4:8], "formatted": format_iban(iban)},
    )


def check_cui(raw: Optional[str], cfg: RomidConfig, today: Optional[dt.date] = None) -> Verdict:
    reason = cui_failure(raw)
    if reason is not None:
        return Verdict(kind="cui", valid=False, reason=reason.value, normalized=normalize_cui(raw))
    return Verdict(kind="cui", valid=True, normalized=format_cui(raw))


def check_postal_code(raw: Optional[str], cfg: RomidConfig, today: Optional[dt.date] = None) -> Verdict:
    reason = postal_code_failure(raw)
    return Verdict(
        kind="postal",
        valid=reason is None,
        reason=reason.value if reason else None,
        normalized=strip_whitespace(raw),
    )


def check_phone(raw: Optional[str], cfg: RomidConfig, today: Optional[dt.date] = None) -> Verdict:
    valid = validate_romanian_phone(raw)
    return Verdict(
        kind="phone",
        valid=valid,
        reason=None if valid else PHONE_BAD_FORMAT,
        normalized=normalize_romanian_phone(raw),
    )


# Map kind names (as used on the command line) to checks.
_CHECKS: Dict[str, CheckFn] = {
    "cnp": check_cnp,
    "iban": check_iban,
    "cui": check_cui,
    "postal": check_postal_code,
    "phone": check_phone,
}

KINDS = tuple(_CHECKS)


def check(
    kind: str,
    raw: Optional[str],
    config: Optional[RomidConfig] = None,
    today: Optional[dt.date] = None,
) -> Verdict:
    """
    Run the check registered for `kind` and return its verdict.

    Raises:
        UnknownCheckError: if `kind` is not one of KINDS.
    """
    fn = _CHECKS.get((kind or "").lower())
    if fn is None:
        raise UnknownCheckError(kind)
    verdict = fn(raw, config or RomidConfig(), today)
    logger.debug("check %s -> valid=%s reason=%s", verdict.kind, verdict.valid, verdict.reason)
    return verdict
