from __future__ import annotations

import logging

from cpf_document.domain.value_objects.cpf import CPF, DigitSource

logger = logging.getLogger(__name__)


class GenerateCPFUseCase:
    """Produces random, checksum-valid CPFs."""

    def __init__(self, rng: DigitSource | None = None) -> None:
        self.rng = rng

    def execute(self, count: int = 1) -> list[CPF]:
        if count < 1:
            raise ValueError(f"count must be at least 1, got {count}")
        cpfs = [CPF.create(self.rng) for _ in range(count)]
        logger.info("Generated %d CPF(s)", count)
        return cpfs
