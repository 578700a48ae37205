"""LockedBox — a mutable collection guarded by a lock flag.

State machine::

    LOCKED --unlock()--> UNLOCKED --lock()--> LOCKED

The box starts LOCKED. :meth:`LockedBox.with_unlocked` and the
:meth:`LockedBox.unlocked` context manager open the box for the duration
of a body and re-lock it on every exit path, but only when they were the
ones that unlocked it. A nested call inside an already-open box leaves
the lock to the outer caller.

No synchronization: concurrent callers on one box race on the flag.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator, Iterable
from contextlib import contextmanager
from enum import StrEnum
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AccessDenied(Exception):
    """Raised when the box content is read while the box is locked."""


class BoxState(StrEnum):
    """Lock states of a :class:`LockedBox`."""

    LOCKED = "locked"
    UNLOCKED = "unlocked"


class LockedBox:
    """A list that can only be reached while the box is unlocked."""

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self._state = BoxState.LOCKED
        self._content: list[Any] = list(contents)

    def __repr__(self) -> str:
        return f"LockedBox(state={self._state.value!r})"

    @property
    def state(self) -> BoxState:
        return self._state

    @property
    def locked(self) -> bool:
        return self._state is BoxState.LOCKED

    def lock(self) -> None:
        self._state = BoxState.LOCKED

    def unlock(self) -> None:
        self._state = BoxState.UNLOCKED

    @property
    def content(self) -> list[Any]:
        """The live content list.

        Raises:
            AccessDenied: If the box is locked.
        """
        if self.locked:
            raise AccessDenied("Locked!")
        return self._content

    @contextmanager
    def unlocked(self) -> Generator[list[Any]]:
        """Open the box for the ``with`` block and yield its content."""
        unlocked_here = False
        if self.locked:
            self.unlock()
            unlocked_here = True
            logger.debug("Box unlocked")
        try:
            yield self._content
        finally:
            if unlocked_here:
                self.lock()
                logger.debug("Box locked")

    def with_unlocked(self, body: Callable[[], T]) -> T:
        """Run *body* with the box open and return its result.

        Exceptions from *body* propagate after the lock is restored.
        """
        with self.unlocked():
            return body()
