"""CPF generation: base digits, modulo-11 verification digits, formatting.

A CPF is 9 base digits followed by 2 verification digits. Each
verification digit is a weighted sum modulo 11, collapsed to 0 when the
remainder is below 2.

INVARIANT: verification digits are a pure function of the base digits.
"""

from __future__ import annotations

import random
import re
import threading
from collections.abc import Sequence
from typing import Protocol

BASE_LENGTH = 9
CPF_PATTERN: re.Pattern[str] = re.compile(r"^\d{3}\.\d{3}\.\d{3}-\d{2}$")

_default_rng = random.Random()


class RandomSource(Protocol):
    """Anything exposing ``randrange`` (``random.Random`` and friends)."""

    def randrange(self, stop: int) -> int: ...


def generate_base_digits(rng: RandomSource | None = None) -> tuple[int, ...]:
    """Draw 9 independent, uniform digits from *rng*."""
    source = rng if rng is not None else _default_rng
    return tuple(source.randrange(10) for _ in range(BASE_LENGTH))


def _check_digit(digits: Sequence[int], top_weight: int) -> int:
    total = sum(d * (top_weight - i) for i, d in enumerate(digits))
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def _require_base(base: Sequence[int]) -> None:
    if len(base) != BASE_LENGTH:
        msg = f"Expected {BASE_LENGTH} base digits, got {len(base)}"
        raise ValueError(msg)


def first_digit(base: Sequence[int]) -> int:
    """First verification digit (weights 10 down to 2)."""
    _require_base(base)
    return _check_digit(base, 10)


def second_digit(base: Sequence[int], first: int) -> int:
    """Second verification digit over base + *first* (weights 11 down to 2)."""
    _require_base(base)
    return _check_digit([*base, first], 11)


def format_cpf(base: Sequence[int], first: int, second: int) -> str:
    """Render as ``NNN.NNN.NNN-NN``."""
    _require_base(base)
    parts: list[str] = []
    for i, digit in enumerate(base):
        if i in (3, 6):
            parts.append(".")
        parts.append(str(digit))
    parts.append(f"-{first}{second}")
    return "".join(parts)


def generate(rng: RandomSource | None = None) -> str:
    """Generate one formatted, self-consistent CPF number."""
    base = generate_base_digits(rng)
    first = first_digit(base)
    second = second_digit(base, first)
    return format_cpf(base, first, second)


class CPFGenerator:
    """Generator bound to one random source.

    Draws are serialized so a single instance can be shared between
    threads. Pass ``seed`` (or a seeded ``rng``) for reproducible output.
    """

    def __init__(self, rng: RandomSource | None = None, *, seed: int | None = None) -> None:
        if rng is not None and seed is not None:
            msg = "Pass either rng or seed, not both"
            raise ValueError(msg)
        self._rng: RandomSource = rng if rng is not None else random.Random(seed)
        self._lock = threading.Lock()

    def generate(self) -> str:
        with self._lock:
            base = generate_base_digits(self._rng)
        first = first_digit(base)
        return format_cpf(base, first, second_digit(base, first))

    def generate_many(self, count: int) -> list[str]:
        return [self.generate() for _ in range(count)]
