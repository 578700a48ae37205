"""Fault-injected multiplication and its retry driver.

The primitive returns a tagged outcome instead of raising:

- :class:`Product` on success.
- :class:`MultiplicationFailure` with a :class:`FailureKind` otherwise.

:func:`retrying_multiply` pattern-matches on the outcome. Only
``UNIT_FAILURE`` is retried; every other kind is raised at once as
:class:`MultiplicationError`.

INVARIANT: the driver never returns anything but ``a * b``.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from numbers import Real
from typing import TypeAlias

logger = logging.getLogger(__name__)

Number: TypeAlias = int | float

DEFAULT_FAULT_RATE = 0.8


class FailureKind(StrEnum):
    """Why a multiplication attempt failed."""

    UNIT_FAILURE = "unit_failure"
    INVALID_OPERAND = "invalid_operand"


@dataclass(frozen=True)
class Product:
    """Successful outcome of one multiplication attempt."""

    value: Number


@dataclass(frozen=True)
class MultiplicationFailure:
    """Failed outcome of one multiplication attempt."""

    kind: FailureKind
    message: str

    @property
    def retryable(self) -> bool:
        return self.kind is FailureKind.UNIT_FAILURE


MultiplyOutcome: TypeAlias = Product | MultiplicationFailure


class MultiplicationError(Exception):
    """Raised when a multiplication outcome cannot be turned into a product."""

    def __init__(self, failure: MultiplicationFailure) -> None:
        super().__init__(failure.message)
        self.failure = failure


class RetryExhausted(MultiplicationError):
    """Raised when a bounded retry loop runs out of attempts."""

    def __init__(self, failure: MultiplicationFailure, attempts: int) -> None:
        super().__init__(failure)
        self.attempts = attempts


@dataclass
class FaultInjector:
    """Decides, independently of the operands, whether an attempt faults.

    Attributes:
        fault_rate: Probability in ``[0, 1]`` that an attempt fails.
        rng: Random source; pass a seeded ``random.Random`` for
            reproducible sequences.
    """

    fault_rate: float = DEFAULT_FAULT_RATE
    rng: random.Random = field(default_factory=random.Random)

    def __post_init__(self) -> None:
        if not 0.0 <= self.fault_rate <= 1.0:
            msg = f"fault_rate must be between 0 and 1, got {self.fault_rate}"
            raise ValueError(msg)

    @classmethod
    def seeded(cls, seed: int | None, fault_rate: float = DEFAULT_FAULT_RATE) -> FaultInjector:
        """Build an injector whose RNG is seeded with *seed*."""
        return cls(fault_rate=fault_rate, rng=random.Random(seed))

    def should_fault(self) -> bool:
        return self.rng.random() < self.fault_rate


def _is_operand(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def primitive_multiply(a: Number, b: Number, *, injector: FaultInjector) -> MultiplyOutcome:
    """Attempt ``a * b`` once.

    Operands are checked before the fault decision, so bad input always
    yields ``INVALID_OPERAND`` rather than a retryable failure.
    """
    for operand in (a, b):
        if not _is_operand(operand):
            return MultiplicationFailure(
                kind=FailureKind.INVALID_OPERAND,
                message=f"Cannot multiply non-numeric operand {operand!r}",
            )
    if injector.should_fault():
        return MultiplicationFailure(
            kind=FailureKind.UNIT_FAILURE,
            message="Failed to multiply",
        )
    return Product(a * b)


def multiply(a: Number, b: Number, *, injector: FaultInjector) -> Number:
    """Raising form of :func:`primitive_multiply`.

    Raises:
        MultiplicationError: On any failed outcome.
    """
    match primitive_multiply(a, b, injector=injector):
        case Product(value=value):
            return value
        case MultiplicationFailure() as failure:
            raise MultiplicationError(failure)


def retrying_multiply(
    a: Number,
    b: Number,
    *,
    injector: FaultInjector,
    max_attempts: int | None = None,
    on_failure: Callable[[int, MultiplicationFailure], None] | None = None,
) -> Number:
    """Multiply *a* and *b*, retrying unit failures.

    With ``max_attempts=None`` (the default) the loop only ends on
    success or on a non-retryable failure. A positive *max_attempts*
    caps the number of attempts.

    Args:
        a: Left operand.
        b: Right operand.
        injector: Fault source shared by every attempt.
        max_attempts: Attempt cap, or None for no cap.
        on_failure: Called with ``(attempt, failure)`` after each
            retryable failure.

    Raises:
        MultiplicationError: On a non-retryable failure.
        RetryExhausted: When *max_attempts* attempts all failed.
    """
    if max_attempts is not None and max_attempts < 1:
        msg = f"max_attempts must be positive, got {max_attempts}"
        raise ValueError(msg)

    attempt = 0
    while True:
        attempt += 1
        match primitive_multiply(a, b, injector=injector):
            case Product(value=value):
                logger.debug("Multiplied %r * %r after %d attempt(s)", a, b, attempt)
                return value
            case MultiplicationFailure(kind=FailureKind.UNIT_FAILURE) as failure:
                logger.info("Multiplication attempt %d failed: %s", attempt, failure.message)
                if on_failure is not None:
                    on_failure(attempt, failure)
                if max_attempts is not None and attempt >= max_attempts:
                    raise RetryExhausted(failure, attempt)
            case MultiplicationFailure() as failure:
                raise MultiplicationError(failure)
