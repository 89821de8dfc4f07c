"""County tables, postal/phone checks and address formatting."""

from .address import RomanianAddress, format_romanian_address, format_romanian_address_single_line
from .contact import (
    PostalCodeReason,
    normalize_romanian_phone,
    postal_code_failure,
    validate_romanian_phone,
    validate_romanian_postal_code,
)
from .counties import (
    CNP_COUNTY_CODES,
    POSTAL_PREFIXES,
    ROMANIAN_COUNTIES,
    get_cnp_county_name,
    get_county_name,
    is_valid_cnp_county_code,
    is_valid_county_code,
    postal_prefix_for_county,
)

__all__ = [
    "RomanianAddress",
    "format_romanian_address",
    "format_romanian_address_single_line",
    "PostalCodeReason",
    "normalize_romanian_phone",
    "postal_code_failure",
    "validate_romanian_phone",
    "validate_romanian_postal_code",
    "CNP_COUNTY_CODES",
    "POSTAL_PREFIXES",
    "ROMANIAN_COUNTIES",
    "get_cnp_county_name",
    "get_county_name",
    "is_valid_cnp_county_code",
    "is_valid_county_code",
    "postal_prefix_for_county",
]
