"""romid: Romanian identifier validation (CNP, IBAN, CUI/CIF, postal codes, phones, addresses)."""

from .errors import InvalidCnpError, RomidError, UnknownCheckError
from .identifiers import (
    CnpInfo,
    CnpReason,
    CnpValidation,
    CuiReason,
    IbanReason,
    compute_cnp_control_digit,
    compute_cui_control_digit,
    cui_failure,
    format_cui,
    format_iban,
    iban_failure,
    mask_cnp,
    parse_cnp,
    validate_cnp,
    validate_romanian_cui,
    validate_romanian_iban,
)
from .geo import (
    CNP_COUNTY_CODES,
    ROMANIAN_COUNTIES,
    PostalCodeReason,
    RomanianAddress,
    format_romanian_address,
    format_romanian_address_single_line,
    get_cnp_county_name,
    get_county_name,
    normalize_romanian_phone,
    postal_code_failure,
    validate_romanian_phone,
    validate_romanian_postal_code,
)

__version__ = "0.1.0"

__all__ = [
    "InvalidCnpError",
    "RomidError",
    "UnknownCheckError",
    "CnpInfo",
    "CnpReason",
    "CnpValidation",
    "CuiReason",
    "IbanReason",
    "compute_cnp_control_digit",
    "compute_cui_control_digit",
    "cui_failure",
    "format_cui",
    "format_iban",
    "iban_failure",
    "mask_cnp",
    "parse_cnp",
    "validate_cnp",
    "validate_romanian_cui",
    "validate_romanian_iban",
    "CNP_COUNTY_CODES",
    "ROMANIAN_COUNTIES",
    "PostalCodeReason",
    "RomanianAddress",
    "format_romanian_address",
    "format_romanian_address_single_line",
    "get_cnp_county_name",
    "get_county_name",
    "normalize_romanian_phone",
    "postal_code_failure",
    "validate_romanian_phone",
    "validate_romanian_postal_code",
]
