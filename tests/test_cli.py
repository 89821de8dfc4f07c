import json

import pytest
from typer.testing import CliRunner
from romid.__main__ import main
from romid.cli import app

runner = CliRunner()


def test_help():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "Romanian identifier validator" in result.stdout


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "romid 0.1.0" in result.stdout


def test_main_is_callable():
    assert callable(main)


def test_check_valid_cnp():
    result = runner.invoke(app, ["check", "cnp", "1900101123457", "--today", "2024-06-01"])
    assert result.exit_code == 0
    assert "valid cnp: 190010*******" in result.stdout
    assert "invalid" not in result.stdout
    assert "county_name: Cluj" in result.stdout


def test_check_invalid_cnp_exits_1():
    result = runner.invoke(app, ["check", "cnp", "1900101123458", "--today", "2024-06-01"])
    assert result.exit_code == 1
    assert "invalid cnp: BAD_CHECKSUM" in result.stdout


def test_check_json():
    result = runner.invoke(app, ["check", "iban", "RO49AAAA1B31007593840000", "--json"])
    assert result.exit_code == 0
    verdict = json.loads(result.stdout)
    assert verdict["kind"] == "iban"
    assert verdict["valid"] is True
    assert verdict["details"]["formatted"] == "RO49 AAAA 1B31 0075 9384 0000"


def test_check_kind_case_insensitive():
    result = runner.invoke(app, ["check", "CUI", "RO18547290"])
    assert result.exit_code == 0


def test_check_unknown_kind_is_usage_error():
    result = runner.invoke(app, ["check", "ssn", "123"])
    assert result.exit_code == 2


def test_config_reveal(tmp_path):
    cfg = tmp_path / "romid.yaml"
    cfg.write_text("cnp:\n  reveal: true\n", encoding="utf-8")
    result = runner.invoke(
        app, ["--config", str(cfg), "check", "cnp", "1900101123457", "--today", "2024-06-01", "--json"]
    )
    assert result.exit_code == 0
    verdict = json.loads(result.stdout)
    assert verdict["normalized"] == "1900101123457"
    assert verdict["details"]["birth_date"] == "1990-01-01"


def test_mask():
    result = runner.invoke(app, ["mask", "1900101123457"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "190010*******"


def test_phone():
    result = runner.invoke(app, ["phone", "0721 234 567"])
    assert result.stdout.strip() == "+40721234567"


def test_iban_format():
    result = runner.invoke(app, ["iban-format", "RO49AAAA1B31007593840000"])
    assert result.stdout.strip() == "RO49 AAAA 1B31 0075 9384 0000"


@pytest.mark.parametrize("code, name", [("CJ", "Cluj"), ("b", "București"), ("41", "București - Sector 1")])
def test_county(code, name):
    result = runner.invoke(app, ["county", code])
    assert result.exit_code == 0
    assert result.stdout.strip() == name


def test_unknown_county():
    result = runner.invoke(app, ["county", "XX"])
    assert result.exit_code == 2


ADDRESS_YAML = """\
county_code: CJ
locality: Cluj-Napoca
street: Str. Memorandumului
number: 28
apartment: 4
postal_code: "400114"
"""


def test_address(tmp_path):
    src = tmp_path / "address.yaml"
    src.write_text(ADDRESS_YAML, encoding="utf-8")
    result = runner.invoke(app, ["address", str(src), "--single-line"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "Str. Memorandumului nr. 28, ap. 4, Cluj-Napoca, jud. Cluj, 400114, România"


def test_address_multi_line_uses_config_country(tmp_path):
    src = tmp_path / "address.yaml"
    src.write_text(ADDRESS_YAML, encoding="utf-8")
    cfg = tmp_path / "romid.yaml"
    cfg.write_text("address:\n  country: Romania\n", encoding="utf-8")
    result = runner.invoke(app, ["--config", str(cfg), "address", str(src)])
    assert result.exit_code == 0
    assert result.stdout.splitlines()[-1] == "Romania"


def test_invalid_address(tmp_path):
    src = tmp_path / "address.yaml"
    src.write_text(ADDRESS_YAML.replace('"400114"', '"4001"'), encoding="utf-8")
    result = runner.invoke(app, ["address", str(src)])
    assert result.exit_code == 1
    assert "postal_code" in result.stdout


def test_kind_choices_follow_check_registry():
    from romid.cli import Kind
    from romid.engine.checks import KINDS

    assert [k.value for k in Kind] == list(KINDS)


def test_mask_uses_config_char(tmp_path):
    cfg = tmp_path / "romid.yaml"
    cfg.write_text("mask:\n  char: '#'\n", encoding="utf-8")
    result = runner.invoke(app, ["--config", str(cfg), "mask", "1900101123457"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "190010#######"


def test_check_verbose():
    result = runner.invoke(app, ["--verbose", "check", "cui", "18547290"])
    assert result.exit_code == 0
    assert "valid cui: RO18547290" in result.stdout
