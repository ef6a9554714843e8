from dataclasses import asdict, dataclass

from cpf_document.domain.value_objects.cpf import CPF


@dataclass(frozen=True)
class CPFReportDTO:
    digits: str
    formatted: str
    valid: bool
    value_missing: bool
    too_short: bool
    type_mismatch: bool

    @classmethod
    def from_domain(cls, cpf: CPF) -> "CPFReportDTO":
        validity = cpf.get_validity()
        return cls(
            digits=cpf.to_json(),
            formatted=cpf.format(),
            valid=validity.valid,
            value_missing=validity.value_missing,
            too_short=validity.too_short,
            type_mismatch=validity.type_mismatch,
        )

    def as_dict(self) -> dict[str, str | bool]:
        return asdict(self)
