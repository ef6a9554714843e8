from __future__ import annotations

import logging
from collections.abc import Callable

from cpf_document.application.dtos.cpf_report_dto import CPFReportDTO
from cpf_document.domain.value_objects.cpf import CPF

logger = logging.getLogger(__name__)


class ValidateCPFUseCase:
    def __init__(self, parser: Callable[[str], CPF] = CPF.from_string) -> None:
        self.parser = parser

    def execute(self, text: str) -> CPFReportDTO:
        report = CPFReportDTO.from_domain(self.parser(text))
        logger.info("Validated CPF %r: valid=%s", report.formatted, report.valid)
        return report
