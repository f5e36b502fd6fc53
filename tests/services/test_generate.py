"""Tests for GenerateService and the ServiceResult contract."""

import logging

import pytest

from cpfgen.domain.cpf import CPF_PATTERN, CPFGenerator
from cpfgen.services.generate import GenerateService
from cpfgen.services.result import ServiceResult
from tests.conftest import FixedSource, has_valid_check_digits


class TestGenerate:
    def test_single(self) -> None:
        result = GenerateService().generate()
        assert result.ok
        assert result.op == "generate_cpf"
        assert result.data["count"] == 1
        (cpf,) = result.data["items"]
        assert CPF_PATTERN.match(cpf)
        assert has_valid_check_digits(cpf)

    def test_many(self) -> None:
        result = GenerateService(seed=3).generate(count=25)
        assert result.ok
        assert len(result.data["items"]) == 25

    def test_seed_matches_generator(self) -> None:
        result = GenerateService(seed=5).generate(count=3)
        assert result.data["items"] == CPFGenerator(seed=5).generate_many(3)
        assert result.meta == {"seed": 5}

    def test_unseeded_has_no_meta(self) -> None:
        assert GenerateService().generate().meta is None

    def test_injected_generator(self) -> None:
        service = GenerateService(CPFGenerator(FixedSource([0] * 9)))
        assert service.generate().data["items"] == ["000.000.000-00"]

    def test_generator_and_seed_are_exclusive(self) -> None:
        with pytest.raises(ValueError, match="not both"):
            GenerateService(CPFGenerator(seed=1), seed=5)

    @pytest.mark.parametrize("count", [0, -1])
    def test_invalid_count(self, count: int) -> None:
        result = GenerateService().generate(count=count)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_COUNT"
        assert result.error.detail == {"count": count}
        assert result.data == {}

    def test_logs_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="cpfgen"):
            GenerateService(seed=1).generate(count=2)
        assert "Generated 2 CPF number(s)" in caplog.text


class TestGenerateOne:
    def test_returns_string(self) -> None:
        service = GenerateService(CPFGenerator(FixedSource([1] * 9)))
        assert service.generate_one() == "111.111.111-11"


class TestServiceResult:
    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="x")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]

    def test_defaults(self) -> None:
        result = ServiceResult(ok=True, op="x")
        assert result.data == {}
        assert result.error is None
        assert result.meta is None

    def test_failure_collects_detail(self) -> None:
        result = ServiceResult.failure("x", "E", "boom", count=2)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "E"
        assert result.error.detail == {"count": 2}

    def test_success(self) -> None:
        result = ServiceResult.success("x", {"items": []}, meta={"seed": 1})
        assert result.ok
        assert result.error is None
        assert result.meta == {"seed": 1}
