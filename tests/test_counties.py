import pytest

from romid.geo.counties import (
    CNP_COUNTY_CODES,
    POSTAL_PREFIXES,
    ROMANIAN_COUNTIES,
    get_cnp_county_name,
    get_county_name,
    is_valid_cnp_county_code,
    is_valid_county_code,
    postal_prefix_for_county,
)


def test_address_table_has_41_counties_and_bucharest():
    assert len(ROMANIAN_COUNTIES) == 42
    assert ROMANIAN_COUNTIES["B"] == "București"
    assert ROMANIAN_COUNTIES["CJ"] == "Cluj"
    assert ROMANIAN_COUNTIES["IF"] == "Ilfov"


def test_cnp_table_covers_expected_codes():
    expected = {f"{n:02d}" for n in range(1, 47)} | {"51", "52"}
    assert set(CNP_COUNTY_CODES) == expected
    assert CNP_COUNTY_CODES["41"] == "București - Sector 1"
    assert CNP_COUNTY_CODES["51"] == "Călărași"
    assert CNP_COUNTY_CODES["52"] == "Giurgiu"


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        ROMANIAN_COUNTIES["XX"] = "Nowhere"  # type: ignore[index]
    with pytest.raises(TypeError):
        CNP_COUNTY_CODES["99"] = "Nowhere"  # type: ignore[index]


@pytest.mark.parametrize("code", ["CJ", "cj", " b ", "Vn"])
def test_address_codes_any_case(code):
    assert is_valid_county_code(code)
    assert get_county_name(code) is not None


@pytest.mark.parametrize("code", ["", "XX", "C", None, "01"])
def test_unknown_address_codes(code):
    assert not is_valid_county_code(code)
    assert get_county_name(code) is None


def test_cnp_codes_are_exact():
    assert is_valid_cnp_county_code("01")
    assert not is_valid_cnp_county_code("1")
    assert not is_valid_cnp_county_code("47")
    assert not is_valid_cnp_county_code(None)
    assert get_cnp_county_name("40") == "București"
    assert get_cnp_county_name("99") is None


def test_postal_prefixes_are_reference_for_every_county():
    assert set(POSTAL_PREFIXES) == set(ROMANIAN_COUNTIES)
    assert postal_prefix_for_county("cj") == ("40",)
    assert "03" in postal_prefix_for_county("B")
    assert postal_prefix_for_county("XX") == ()
