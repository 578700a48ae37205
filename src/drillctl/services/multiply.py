"""MultiplyService — the retrying multiplication drill.

Reads ``[multiply]`` settings (fault rate, attempt cap, seed), runs
:func:`~drillctl.domain.arithmetic.retrying_multiply`, and reports the
product together with the retryable failures it survived (a total
count plus the most recent messages).
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING

from drillctl.domain.arithmetic import (
    FaultInjector,
    MultiplicationError,
    MultiplicationFailure,
    Number,
    RetryExhausted,
    retrying_multiply,
)
from drillctl.services.base import BaseService
from drillctl.services.result import ServiceResult

if TYPE_CHECKING:
    from drillctl.config.settings import DrillSettings

logger = logging.getLogger(__name__)

# Failure messages kept in the result; older ones are only counted.
MAX_REPORTED_FAILURES = 20


class MultiplyService(BaseService):
    """Multiplies through an unreliable unit, retrying unit failures."""

    def __init__(
        self,
        settings: DrillSettings | None = None,
        injector: FaultInjector | None = None,
    ) -> None:
        super().__init__(settings)
        cfg = self._settings.multiply
        if injector is None:
            injector = FaultInjector.seeded(cfg.seed, fault_rate=cfg.fault_rate)
        self._injector = injector

    def multiply(self, a: Number, b: Number, *, max_attempts: int | None = None) -> ServiceResult:
        """Multiply *a* and *b*.

        Args:
            a: Left operand.
            b: Right operand.
            max_attempts: Attempt cap; ``None`` falls back to
                ``[multiply] max_attempts``, where 0 means no cap.
        """
        op = "multiply"
        if max_attempts is None:
            max_attempts = self._settings.multiply.max_attempts
        cap = max_attempts or None

        failed = 0
        recent: deque[str] = deque(maxlen=MAX_REPORTED_FAILURES)

        def record(attempt: int, failure: MultiplicationFailure) -> None:
            nonlocal failed
            failed += 1
            recent.append(f"attempt {attempt}: {failure.message}")

        try:
            product = retrying_multiply(
                a,
                b,
                injector=self._injector,
                max_attempts=cap,
                on_failure=record,
            )
        except RetryExhausted as exc:
            return ServiceResult.failure(
                op,
                "RETRY_EXHAUSTED",
                f"Gave up after {exc.attempts} attempt(s): {exc.failure.message}",
                detail={"attempts": exc.attempts, "max_attempts": cap, "failures": failed},
                warnings=list(recent),
            )
        except MultiplicationError as exc:
            return ServiceResult.failure(
                op,
                exc.failure.kind.upper(),
                exc.failure.message,
                detail={"attempts": failed + 1},
                warnings=list(recent),
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "a": a,
                "b": b,
                "product": product,
                "attempts": failed + 1,
                "failures": failed,
            },
            warnings=list(recent),
            meta={"fault_rate": self._injector.fault_rate, "max_attempts": cap},
        )
