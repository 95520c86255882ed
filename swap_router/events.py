"""Append-only audit event stream.

Every successful swap, every administrative change, and every venue failure
is recorded here. The log is never rolled back: a venue failure event stays
visible even though the dispatch that produced it reverted.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import structlog

logger = structlog.get_logger()


class EventKind(str, Enum):
    """Kinds of audit events."""

    SWAP_EXECUTED = "swap_executed"  # Router-level outcome
    SWAP_SUCCESS = "swap_success"  # Adapter-level venue success
    SWAP_FAILED = "swap_failed"  # Adapter-level venue failure
    REFUND_ISSUED = "refund_issued"
    FEE_UPDATED = "fee_updated"
    FEE_RECEIVER_UPDATED = "fee_receiver_updated"
    FEE_EXEMPTION_UPDATED = "fee_exemption_updated"
    ADAPTER_APPROVAL_UPDATED = "adapter_approval_updated"
    DEADLINE_WINDOW_UPDATED = "deadline_window_updated"
    EMERGENCY_WITHDRAW = "emergency_withdraw"


@dataclass(frozen=True)
class AuditEvent:
    """A single immutable audit record."""

    sequence: int
    kind: EventKind
    fields: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"sequence": self.sequence, "kind": self.kind.value, **self.fields}


class EventLog:
    """Append-only list of audit events, mirrored to the structured log."""

    def __init__(self) -> None:
        self._events: list[AuditEvent] = []

    def emit(self, kind: EventKind, **fields: Any) -> AuditEvent:
        event = AuditEvent(sequence=len(self._events), kind=kind, fields=fields)
        self._events.append(event)
        logger.info(kind.value, sequence=event.sequence, **fields)
        return event

    def of_kind(self, *kinds: EventKind) -> list[AuditEvent]:
        """Return events matching any of the given kinds, in emission order."""
        return [e for e in self._events if e.kind in kinds]

    def since(self, sequence: int) -> list[AuditEvent]:
        """Return events with sequence >= the given value."""
        return self._events[max(sequence, 0) :]

    def __iter__(self) -> Iterator[AuditEvent]:
        return iter(list(self._events))

    def __len__(self) -> int:
        return len(self._events)


__all__ = ["EventKind", "AuditEvent", "EventLog"]
