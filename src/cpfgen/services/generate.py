"""GenerateService: CPF generation behind the ServiceResult contract."""

from __future__ import annotations

import logging

from cpfgen.domain.cpf import CPFGenerator
from cpfgen.services.result import ServiceResult

logger = logging.getLogger(__name__)

OP_GENERATE = "generate_cpf"


class GenerateService:
    """Produces CPF numbers from one shared :class:`CPFGenerator`.

    Build it either around an existing generator or from a seed; the seed
    is echoed in ``meta`` so a run can be repeated.

    Usage::

        result = GenerateService(seed=42).generate(count=3)
        result.data["items"]  # ["...", "...", "..."]
    """

    def __init__(self, generator: CPFGenerator | None = None, *, seed: int | None = None) -> None:
        if generator is not None and seed is not None:
            msg = "Pass either generator or seed, not both"
            raise ValueError(msg)
        self._seed = seed
        self._generator = generator if generator is not None else CPFGenerator(seed=seed)

    def generate(self, count: int = 1) -> ServiceResult:
        """Generate *count* CPF numbers; ``INVALID_COUNT`` when *count* < 1."""
        if count < 1:
            return ServiceResult.failure(
                OP_GENERATE,
                "INVALID_COUNT",
                f"Count must be at least 1, got {count}",
                count=count,
            )

        items = self._generator.generate_many(count)
        logger.debug("Generated %d CPF number(s)", count)
        meta = {"seed": self._seed} if self._seed is not None else None
        return ServiceResult.success(OP_GENERATE, {"items": items, "count": count}, meta=meta)

    def generate_one(self) -> str:
        """Generate a single CPF string for the interactive menu."""
        cpf = self._generator.generate()
        logger.debug("Generated CPF %s", cpf)
        return cpf
