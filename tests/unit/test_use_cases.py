import pytest

from cpf_document.application.dtos.cpf_report_dto import CPFReportDTO
from cpf_document.application.use_cases.generate_cpf import GenerateCPFUseCase
from cpf_document.application.use_cases.validate_cpf import ValidateCPFUseCase
from cpf_document.domain.value_objects.cpf import CPF
from tests.unit._fakes_rng import FakeRandom


def test_report_from_domain():
    report = CPFReportDTO.from_domain(CPF([3, 1, 6, 7]))
    assert report.as_dict() == {
        "digits": "3167",
        "formatted": "316.7",
        "valid": False,
        "value_missing": False,
        "too_short": True,
        "type_mismatch": False,
    }


def test_validate_valid_cpf():
    report = ValidateCPFUseCase().execute("316.757.455-01")
    assert report.valid
    assert report.digits == "31675745501"
    assert report.formatted == "316.757.455-01"


def test_validate_invalid_cpf():
    report = ValidateCPFUseCase().execute("316.757.455-12")
    assert not report.valid
    assert report.type_mismatch


def test_validate_uses_injected_parser():
    seen = []

    def parser(text):
        seen.append(text)
        return CPF.NIL

    report = ValidateCPFUseCase(parser=parser).execute("whatever")
    assert seen == ["whatever"]
    assert report.value_missing


def test_generate_uses_rng():
    cpfs = GenerateCPFUseCase(rng=FakeRandom()).execute(count=2)
    assert [c.to_json() for c in cpfs] == ["31675745501", "31675745501"]


def test_generate_default_rng_gives_valid_cpfs():
    cpfs = GenerateCPFUseCase().execute(count=20)
    assert len(cpfs) == 20
    assert all(c.check_validity() for c in cpfs)


def test_generate_rejects_non_positive_count():
    with pytest.raises(ValueError):
        GenerateCPFUseCase().execute(count=0)
