"""Types shared by the router and venue adapters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from swap_router.codec.hex import to_hex
from swap_router.constants import DEFAULT_DEADLINE_WINDOW


class SwapOperation(str, Enum):
    """The four operations every adapter implements."""

    EXACT_INPUT = "swap_exact_input"
    EXACT_OUTPUT = "swap_exact_output"
    EXACT_INPUT_PATH = "swap_exact_input_path"
    EXACT_OUTPUT_PATH = "swap_exact_output_path"

    @property
    def is_exact_output(self) -> bool:
        return self in (SwapOperation.EXACT_OUTPUT, SwapOperation.EXACT_OUTPUT_PATH)

    @property
    def is_path(self) -> bool:
        return self in (SwapOperation.EXACT_INPUT_PATH, SwapOperation.EXACT_OUTPUT_PATH)


@dataclass(frozen=True)
class SwapContext:
    """Per-call context handed from the router to an adapter.

    Attributes:
        payer: Original caller; unused exact-output input is refunded here,
            never to the recipient
        deadline_window: Seconds added to the current time when the aux
            payload carries no deadline
    """

    payer: str
    deadline_window: int = DEFAULT_DEADLINE_WINDOW


@dataclass(frozen=True)
class RevertReason:
    """Structured venue failure."""

    reason: str

    def render(self) -> str:
        return self.reason


@dataclass(frozen=True)
class RevertPayload:
    """Opaque venue failure; rendered as 0x-prefixed lowercase hex."""

    payload: bytes

    def render(self) -> str:
        return to_hex(self.payload)


VenueFailure = RevertReason | RevertPayload


@dataclass(frozen=True)
class VenueCallResult:
    """Outcome of one venue call: amounts on success, a failure otherwise.

    Examples:
        result = VenueCallResult.ok((1000, 990))
        assert result.realized_amount(exact_output=False) == 990

        result = VenueCallResult.err(RevertPayload(b"\\xde\\xad"))
        assert result.failure.render() == "0xdead"
    """

    amounts: tuple[int, ...] = ()
    failure: VenueFailure | None = None

    def realized_amount(self, *, exact_output: bool) -> int:
        """Pick the realized amount from the venue's per-hop results.

        Exact-input results end with the final output; exact-output results
        start with the input actually consumed.
        """
        return self.amounts[0] if exact_output else self.amounts[-1]

    @classmethod
    def ok(cls, amounts: tuple[int, ...]) -> VenueCallResult:
        return cls(amounts=amounts)

    @classmethod
    def err(cls, failure: VenueFailure) -> VenueCallResult:
        return cls(failure=failure)


__all__ = [
    "SwapOperation",
    "SwapContext",
    "RevertReason",
    "RevertPayload",
    "VenueFailure",
    "VenueCallResult",
]
