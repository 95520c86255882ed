"""Router error classes.

Every failure raised by the router or an adapter derives from RouterError and
carries the name of the operation that failed plus a coarse category, so a
caller can tell bad input, registry/authorization problems, and venue
rejections apart without correlating logs.
"""

from __future__ import annotations

from enum import Enum


class ErrorCategory(str, Enum):
    """Coarse classification of router failures."""

    INPUT = "input"
    REGISTRY = "registry"
    AUTHORIZATION = "authorization"
    FUNDS = "funds"
    VENUE = "venue"


class RouterError(Exception):
    """Base error for router and adapter operations."""

    category: ErrorCategory = ErrorCategory.INPUT

    def __init__(self, message: str, *, operation: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.operation = operation

    @property
    def code(self) -> str:
        """Stable error name exposed to callers."""
        return type(self).__name__

    def with_operation(self, operation: str) -> RouterError:
        """Attach the failing operation name if none was recorded yet."""
        if self.operation is None:
            self.operation = operation
        return self

    def __str__(self) -> str:
        if self.operation:
            return f"{self.operation}: {self.message}"
        return self.message


class UnknownAdapter(RouterError):
    """Adapter identity is zero or not registered as approved."""

    category = ErrorCategory.REGISTRY


class Unauthorized(RouterError):
    """Caller is not allowed to perform an administrative operation."""

    category = ErrorCategory.AUTHORIZATION


class ReentrantCall(RouterError):
    """A guarded entry point was re-entered before the outer call resolved."""

    category = ErrorCategory.AUTHORIZATION


class ValueMismatch(RouterError):
    """Attached native value does not match the amount being transferred."""


class FundsNotReceived(RouterError):
    """Adapter custody does not hold the committed input amount."""

    category = ErrorCategory.FUNDS


class NothingToWithdraw(RouterError):
    """Emergency withdrawal requested for an asset with zero balance."""

    category = ErrorCategory.FUNDS


class InvalidPath(RouterError):
    """Swap path has fewer than two tokens."""


class PathParameterMismatch(RouterError):
    """Per-hop parameter array length does not match the hop count."""


class InvalidTickSpacing(RouterError):
    """Tick spacing must be strictly positive."""


class MalformedAuxData(RouterError):
    """Auxiliary payload does not match the adapter's grammar."""


class InvalidVenueAddress(RouterError):
    """Venue or factory address supplied at construction is zero or invalid."""

    category = ErrorCategory.REGISTRY


class FeeTooHigh(RouterError):
    """Fee rate above the 1000 basis point cap."""


class ZeroAddress(RouterError):
    """Zero address supplied where a real address is required."""


class InvalidAddress(RouterError):
    """Address is not 20 bytes of 0x-prefixed hex."""


class InvalidDeadlineWindow(RouterError):
    """Default deadline window must be strictly positive."""


class VenueCallFailed(RouterError):
    """The downstream venue rejected the swap.

    Attributes:
        reason: Human-readable reason, or the raw failure payload rendered as
            lowercase hex with a 0x prefix.
    """

    category = ErrorCategory.VENUE

    def __init__(self, reason: str, *, operation: str | None = None) -> None:
        super().__init__(f"venue call failed: {reason}", operation=operation)
        self.reason = reason


__all__ = [
    "ErrorCategory",
    "RouterError",
    "UnknownAdapter",
    "Unauthorized",
    "ReentrantCall",
    "ValueMismatch",
    "FundsNotReceived",
    "NothingToWithdraw",
    "InvalidPath",
    "PathParameterMismatch",
    "InvalidTickSpacing",
    "MalformedAuxData",
    "InvalidVenueAddress",
    "FeeTooHigh",
    "ZeroAddress",
    "InvalidAddress",
    "InvalidDeadlineWindow",
    "VenueCallFailed",
]
