"""Reentrancy guard shared by the router and the adapters."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from swap_router.errors import ReentrantCall


class ReentrancyGuard:
    """Allows at most one in-flight call through the guarded entry points.

    The flag is cleared on every exit path, so a failed call never leaves
    the guarded component locked.
    """

    def __init__(self, owner: str) -> None:
        self.owner = owner
        self._entered = False

    @property
    def entered(self) -> bool:
        return self._entered

    @contextmanager
    def enter(self, operation: str) -> Iterator[None]:
        if self._entered:
            raise ReentrantCall(f"{self.owner} is already executing a call", operation=operation)
        self._entered = True
        try:
            yield
        finally:
            self._entered = False


__all__ = ["ReentrancyGuard"]
