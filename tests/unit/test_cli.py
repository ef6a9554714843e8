import json
import logging

from typer.testing import CliRunner

from cpf_document.domain.value_objects.cpf import CPF
from cpf_document.logging_config import configure_logging
from cpf_document.presentation.cli.main import app

runner = CliRunner()


def test_validate_valid():
    result = runner.invoke(app, ["validate", "31675745501"])
    assert result.exit_code == 0
    assert "316.757.455-01: valid" in result.stdout


def test_validate_invalid_check_digits():
    result = runner.invoke(app, ["validate", "316.757.455-12"])
    assert result.exit_code == 1
    assert "invalid, check digits do not match" in result.stdout


def test_validate_too_short_and_missing():
    result = runner.invoke(app, ["validate", "3167"])
    assert result.exit_code == 1
    assert "too short (4 of 11 digits)" in result.stdout
    result = runner.invoke(app, ["validate", "abc"])
    assert result.exit_code == 1
    assert "no digits found" in result.stdout


def test_validate_json():
    result = runner.invoke(app, ["validate", "--json", "316.757.455-01"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["valid"] is True
    assert payload["digits"] == "31675745501"


def test_format():
    result = runner.invoke(app, ["format", "31675745501"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "316.757.455-01"


def test_generate():
    result = runner.invoke(app, ["generate", "-n", "3"])
    assert result.exit_code == 0
    lines = result.stdout.split()
    assert len(lines) == 3
    assert all(CPF.from_string(line).check_validity() for line in lines)


def test_generate_formatted():
    result = runner.invoke(app, ["generate", "--formatted"])
    assert result.exit_code == 0
    assert len(result.stdout.strip()) == len("###.###.###-##")


def test_generate_rejects_zero_count():
    result = runner.invoke(app, ["generate", "-n", "0"])
    assert result.exit_code != 0


def test_log_level_option_emits_logs():
    result = runner.invoke(app, ["--log-level", "INFO", "validate", "31675745501"])
    assert result.exit_code == 0
    assert "Validated CPF" in result.output
    configure_logging(logging.WARNING)


def test_configure_logging_installs_one_handler():
    configure_logging("DEBUG")
    configure_logging("INFO")
    logger = logging.getLogger("cpf_document")
    assert logger.level == logging.INFO
    assert len([h for h in logger.handlers if getattr(h, "_cpf_document", False)]) == 1
    configure_logging("nonsense")
    assert logger.level == logging.WARNING
