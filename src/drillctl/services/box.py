"""BoxService — scripted scenarios against a LockedBox.

The box is owned by the service instance, not shared process-wide.
Each CLI invocation builds its own, seeded from ``[box] contents``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from drillctl.domain.box import AccessDenied, LockedBox
from drillctl.services.base import BaseService
from drillctl.services.result import ServiceResult

if TYPE_CHECKING:
    from drillctl.config.settings import DrillSettings

logger = logging.getLogger(__name__)


class BoxAborted(RuntimeError):
    """Raised inside a stash body to simulate an interrupted operation."""


class BoxService(BaseService):
    """Runs stash/peek/inspect operations on a single LockedBox."""

    def __init__(self, settings: DrillSettings | None = None, box: LockedBox | None = None) -> None:
        super().__init__(settings)
        self.box = box if box is not None else LockedBox(self._settings.box.contents)

    def stash(self, items: Sequence[Any], *, fail_with: str | None = None) -> ServiceResult:
        """Append *items* to the box while it is unlocked.

        With *fail_with*, the body raises after stashing. The error is
        reported, and the box is locked again either way.
        """
        op = "stash"

        def body() -> None:
            self.box.content.extend(items)
            if fail_with is not None:
                raise BoxAborted(fail_with)

        try:
            self.box.with_unlocked(body)
        except BoxAborted as exc:
            logger.info("Stash aborted: %s", exc)
            return ServiceResult.failure(
                op,
                "ABORTED",
                str(exc),
                detail={"locked": self.box.locked, "stashed": len(items)},
            )
        content = self.box.with_unlocked(lambda: list(self.box.content))
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "stashed": len(items),
                "count": len(content),
                "items": content,
                "locked": self.box.locked,
            },
        )

    def peek(self) -> ServiceResult:
        """Read the box content through a scoped unlock."""
        items = self.box.with_unlocked(lambda: list(self.box.content))
        return ServiceResult(
            ok=True,
            op="peek",
            data={"count": len(items), "items": items, "locked": self.box.locked},
        )

    def inspect(self) -> ServiceResult:
        """Read the box content without unlocking it first."""
        try:
            items = list(self.box.content)
        except AccessDenied as exc:
            return ServiceResult.failure(
                "inspect",
                "ACCESS_DENIED",
                f"Box is locked: {exc}",
                detail={"locked": self.box.locked},
            )
        return ServiceResult(
            ok=True,
            op="inspect",
            data={"count": len(items), "items": items, "locked": self.box.locked},
        )
