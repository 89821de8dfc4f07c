import datetime as dt
import json

import pytest

from romid.config import CnpConfig, MaskConfig, RomidConfig
from romid.engine.checks import KINDS, Verdict, check
from romid.errors import UnknownCheckError

TODAY = dt.date(2024, 6, 1)


@pytest.fixture
def revealing():
    return RomidConfig(cnp=CnpConfig(reveal=True))


def test_kinds():
    assert set(KINDS) == {"cnp", "iban", "cui", "postal", "phone"}


def test_unknown_kind():
    with pytest.raises(UnknownCheckError) as exc:
        check("ssn", "123-45-6789")
    assert exc.value.kind == "ssn"


def test_kind_is_case_insensitive():
    assert check("IBAN", "RO49AAAA1B31007593840000").valid


class TestCnpVerdict:

    def test_valid_is_masked_by_default(self):
        v = check("cnp", "1900101123457", today=TODAY)
        assert v.valid
        assert v.reason is None
        assert v.normalized == "190010*******"
        assert v.details == {"gender": "male", "county_code": "12", "county_name": "Cluj"}
        assert "1900101123457" not in v.model_dump_json()

    def test_reveal(self, revealing):
        v = check("cnp", "1900-101-123457", config=revealing, today=TODAY)
        assert v.normalized == "1900101123457"
        assert v.details["birth_date"] == "1990-01-01"
        assert v.details["sequence_number"] == "345"

    def test_invalid_reports_reason(self):
        v = check("cnp", "1900101123458", today=TODAY)
        assert not v.valid
        assert v.reason == "BAD_CHECKSUM"
        assert v.normalized == "190010*******"
        assert v.details == {}

    def test_wrong_length_is_fully_masked(self):
        assert check("cnp", "12345", today=TODAY).normalized == "*" * 13

    def test_mask_char_from_config(self):
        cfg = RomidConfig(mask=MaskConfig(char="#"))
        assert check("cnp", "1900101123457", config=cfg, today=TODAY).normalized == "190010#######"


class TestOtherVerdicts:

    def test_iban(self):
        v = check("iban", "ro49 aaaa 1b31 0075 9384 0000")
        assert v.valid
        assert v.normalized == "RO49AAAA1B31007593840000"
        assert v.details == {"bank_code": "AAAA", "formatted": "RO49 AAAA 1B31 0075 9384 0000"}

    def test_iban_invalid(self):
        v = check("iban", "RO00AAAA1B31007593840000")
        assert (v.valid, v.reason) == (False, "BAD_CHECKSUM")

    def test_cui(self):
        v = check("cui", "18547290")
        assert v.valid
        assert v.normalized == "RO18547290"
        assert check("cui", "RO18547291").reason == "BAD_CHECKSUM"

    def test_postal(self):
        assert check("postal", " 400114 ").normalized == "400114"
        assert check("postal", "12345").reason == "WRONG_LENGTH"
        assert check("postal", "ABCDEF").reason == "NON_DIGIT"

    def test_phone(self):
        v = check("phone", "0721 234 567")
        assert v.valid
        assert v.normalized == "+40721234567"
        bad = check("phone", "0821234567")
        assert (bad.valid, bad.reason) == (False, "BAD_FORMAT")


def test_verdict_round_trips_as_json():
    v = check("cui", "18547290")
    assert Verdict(**json.loads(v.model_dump_json())) == v
