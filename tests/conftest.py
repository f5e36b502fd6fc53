"""Shared pytest fixtures and test helpers for cpfgen tests."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no cpfgen env overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` so config
    discovery never walks into a real ``cpfgen.toml``.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CPFGEN_CONFIG", raising=False)
    monkeypatch.delenv("CPFGEN_GENERATOR__SEED", raising=False)
    monkeypatch.delenv("CPFGEN_GENERATOR__COUNT", raising=False)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


class FixedSource:
    """Random source that replays a fixed digit stream."""

    def __init__(self, digits: Iterable[int]) -> None:
        self._digits = iter(digits)
        self.calls: list[int] = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        return next(self._digits)


def has_valid_check_digits(cpf: str) -> bool:
    """Independent check of both verification digits of a CPF string."""
    digits = [int(c) for c in cpf if c.isdigit()]
    if len(digits) != 11:
        return False
    for position in (9, 10):
        total = sum(digits[j] * (position + 1 - j) for j in range(position))
        if digits[position] != (total * 10) % 11 % 10:
            return False
    return True
