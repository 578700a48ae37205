"""Tests for fault-injected multiplication and the retry driver."""

import logging
import random

import pytest

from drillctl.domain.arithmetic import (
    DEFAULT_FAULT_RATE,
    FailureKind,
    FaultInjector,
    MultiplicationError,
    MultiplicationFailure,
    Product,
    RetryExhausted,
    multiply,
    primitive_multiply,
    retrying_multiply,
)


class ScriptedInjector(FaultInjector):
    """Faults for the first *faults* attempts, then succeeds."""

    def __init__(self, faults: int) -> None:
        super().__init__(fault_rate=0.5)
        self.remaining = faults
        self.calls = 0

    def should_fault(self) -> bool:
        self.calls += 1
        if self.remaining > 0:
            self.remaining -= 1
            return True
        return False


class TestFaultInjector:
    def test_default_rate(self) -> None:
        assert FaultInjector().fault_rate == DEFAULT_FAULT_RATE == 0.8

    @pytest.mark.parametrize("rate", [-0.1, 1.5])
    def test_rejects_out_of_range(self, rate: float) -> None:
        with pytest.raises(ValueError, match="fault_rate"):
            FaultInjector(fault_rate=rate)

    def test_zero_never_faults(self, never_faults: FaultInjector) -> None:
        assert not any(never_faults.should_fault() for _ in range(200))

    def test_one_always_faults(self, always_faults: FaultInjector) -> None:
        assert all(always_faults.should_fault() for _ in range(200))

    def test_seeded_is_reproducible(self) -> None:
        first = FaultInjector.seeded(42)
        second = FaultInjector.seeded(42)
        assert [first.should_fault() for _ in range(50)] == [
            second.should_fault() for _ in range(50)
        ]

    def test_rate_is_roughly_honoured(self) -> None:
        injector = FaultInjector(fault_rate=0.8, rng=random.Random(1234))
        faults = sum(injector.should_fault() for _ in range(5000))
        assert 3800 < faults < 4200


class TestPrimitiveMultiply:
    def test_success(self, never_faults: FaultInjector) -> None:
        assert primitive_multiply(12, 5, injector=never_faults) == Product(60)

    def test_unit_failure(self, always_faults: FaultInjector) -> None:
        outcome = primitive_multiply(12, 5, injector=always_faults)
        assert isinstance(outcome, MultiplicationFailure)
        assert outcome.kind is FailureKind.UNIT_FAILURE
        assert outcome.retryable is True

    def test_invalid_operand(self, never_faults: FaultInjector) -> None:
        outcome = primitive_multiply("12", 5, injector=never_faults)  # type: ignore[arg-type]
        assert isinstance(outcome, MultiplicationFailure)
        assert outcome.kind is FailureKind.INVALID_OPERAND
        assert outcome.retryable is False

    def test_bool_is_not_an_operand(self, never_faults: FaultInjector) -> None:
        outcome = primitive_multiply(True, 5, injector=never_faults)
        assert isinstance(outcome, MultiplicationFailure)

    def test_operands_checked_before_fault(self, always_faults: FaultInjector) -> None:
        outcome = primitive_multiply(None, 5, injector=always_faults)  # type: ignore[arg-type]
        assert isinstance(outcome, MultiplicationFailure)
        assert outcome.kind is FailureKind.INVALID_OPERAND

    def test_floats(self, never_faults: FaultInjector) -> None:
        assert primitive_multiply(1.5, 4, injector=never_faults) == Product(6.0)


class TestMultiply:
    def test_returns_product(self, never_faults: FaultInjector) -> None:
        assert multiply(3, 7, injector=never_faults) == 21

    def test_raises_on_failure(self, always_faults: FaultInjector) -> None:
        with pytest.raises(MultiplicationError) as excinfo:
            multiply(3, 7, injector=always_faults)
        assert excinfo.value.failure.kind is FailureKind.UNIT_FAILURE


class TestRetryingMultiply:
    def test_retries_until_success(self) -> None:
        injector = ScriptedInjector(faults=5)
        assert retrying_multiply(12, 5, injector=injector) == 60
        assert injector.calls == 6

    def test_reports_each_failure(self) -> None:
        seen: list[tuple[int, FailureKind]] = []
        retrying_multiply(
            2,
            3,
            injector=ScriptedInjector(faults=3),
            on_failure=lambda attempt, failure: seen.append((attempt, failure.kind)),
        )
        assert seen == [(1, FailureKind.UNIT_FAILURE), (2, FailureKind.UNIT_FAILURE), (3, FailureKind.UNIT_FAILURE)]

    def test_non_retryable_propagates_immediately(self) -> None:
        calls: list[int] = []
        with pytest.raises(MultiplicationError) as excinfo:
            retrying_multiply(
                "x",  # type: ignore[arg-type]
                5,
                injector=FaultInjector(fault_rate=0.0),
                on_failure=lambda attempt, failure: calls.append(attempt),
            )
        assert excinfo.value.failure.kind is FailureKind.INVALID_OPERAND
        assert not isinstance(excinfo.value, RetryExhausted)
        assert calls == []

    def test_unbounded_by_default(self) -> None:
        injector = ScriptedInjector(faults=500)
        assert retrying_multiply(4, 4, injector=injector) == 16
        assert injector.calls == 501

    def test_bounded_gives_up(self, always_faults: FaultInjector) -> None:
        with pytest.raises(RetryExhausted) as excinfo:
            retrying_multiply(4, 4, injector=always_faults, max_attempts=3)
        assert excinfo.value.attempts == 3
        assert excinfo.value.failure.kind is FailureKind.UNIT_FAILURE

    def test_bounded_success_within_cap(self) -> None:
        assert retrying_multiply(4, 4, injector=ScriptedInjector(faults=2), max_attempts=3) == 16

    def test_rejects_non_positive_cap(self, never_faults: FaultInjector) -> None:
        with pytest.raises(ValueError, match="max_attempts"):
            retrying_multiply(1, 1, injector=never_faults, max_attempts=0)

    @pytest.mark.parametrize("seed", range(10))
    def test_result_is_always_the_product(self, seed: int) -> None:
        injector = FaultInjector.seeded(seed)
        a, b = seed + 3, seed - 7
        assert retrying_multiply(a, b, injector=injector) == a * b


class TestFailureLogging:
    def test_each_unit_failure_logged_at_info(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="drillctl.domain.arithmetic"):
            retrying_multiply(6, 7, injector=ScriptedInjector(faults=2))
        failures = [r for r in caplog.records if "failed" in r.getMessage()]
        assert [r.levelno for r in failures] == [logging.INFO, logging.INFO]
        assert failures[0].getMessage() == "Multiplication attempt 1 failed: Failed to multiply"
        assert failures[1].getMessage() == "Multiplication attempt 2 failed: Failed to multiply"

    def test_hidden_below_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="drillctl.domain.arithmetic"):
            retrying_multiply(6, 7, injector=ScriptedInjector(faults=1))
        assert [r for r in caplog.records if "failed" in r.getMessage()] == []
