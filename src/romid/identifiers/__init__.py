"""Checksum-bearing identifiers: CNP, IBAN and CUI/CIF."""

from .cnp import (
    CnpInfo,
    CnpReason,
    CnpValidation,
    compute_cnp_control_digit,
    mask_cnp,
    parse_cnp,
    validate_cnp,
)
from .cui import CuiReason, compute_cui_control_digit, cui_failure, format_cui, validate_romanian_cui
from .iban import IbanReason, format_iban, iban_failure, validate_romanian_iban

__all__ = [
    "CnpInfo",
    "CnpReason",
    "CnpValidation",
    "compute_cnp_control_digit",
    "mask_cnp",
    "parse_cnp",
    "validate_cnp",
    "CuiReason",
    "compute_cui_control_digit",
    "cui_failure",
    "format_cui",
    "validate_romanian_cui",
    "IbanReason",
    "format_iban",
    "iban_failure",
    "validate_romanian_iban",
]
