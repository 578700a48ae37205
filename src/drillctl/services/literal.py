"""LiteralService — check strings against the numeric literal grammar."""

from __future__ import annotations

from collections.abc import Sequence

from drillctl.domain.literals import REFERENCE_SAMPLES, is_valid_numeric_literal
from drillctl.services.base import BaseService
from drillctl.services.result import ServiceResult


class LiteralService(BaseService):
    """Validates numeric literals."""

    def check(self, literals: Sequence[str] = ()) -> ServiceResult:
        """Check each literal; the reference samples when none are given."""
        samples = list(literals) if literals else list(REFERENCE_SAMPLES)
        items = [{"literal": s, "valid": is_valid_numeric_literal(s)} for s in samples]
        valid = sum(1 for item in items if item["valid"])
        return ServiceResult(
            ok=True,
            op="check_literals",
            data={
                "count": len(items),
                "valid": valid,
                "invalid": len(items) - valid,
                "items": items,
            },
            meta={"source": "arguments" if literals else "reference_samples"},
        )
