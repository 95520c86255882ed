"""Base class for venue adapters.

Every adapter runs the same protocol around exactly one venue call:

1. Check that the adapter already holds the committed input amount
2. Reset-then-raise the venue's allowance to exactly that amount
3. Decode the variant-specific aux payload and resolve the deadline
4. Call the venue (the venue enforces the slippage bound itself)
5. Translate the result: return the realized amount, or record the failure
   and raise VenueCallFailed
6. For exact-output swaps, refund unused input to the original caller

Subclasses supply only step 3 and the venue invocation of step 4.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import Any, ClassVar, Protocol, TypeVar

import structlog

from swap_router.adapters.types import (
    RevertPayload,
    RevertReason,
    SwapContext,
    SwapOperation,
    VenueCallResult,
)
from swap_router.allowance import AllowanceManager
from swap_router.errors import (
    FundsNotReceived,
    InvalidPath,
    InvalidVenueAddress,
    RouterError,
    VenueCallFailed,
)
from swap_router.events import EventKind, EventLog
from swap_router.guard import ReentrancyGuard
from swap_router.ledger.base import LedgerError, TokenLedger
from swap_router.models.types import is_valid_address, is_zero_address, normalize_address
from swap_router.safe_int import S
from swap_router.venues.base import RawRevert, ReasonRevert, Venue, VenueRevert

logger = structlog.get_logger()


class DecodedAux(Protocol):
    """Any decoded aux payload; all grammars carry an optional deadline."""

    @property
    def deadline(self) -> int | None: ...


P = TypeVar("P", bound=DecodedAux)


def require_venue_address(address: Any, role: str = "venue") -> str:
    """Validate a venue or factory address supplied at construction.

    Raises:
        InvalidVenueAddress: If the address is missing, malformed, or zero
    """
    if not isinstance(address, str) or not is_valid_address(normalize_address(address)):
        raise InvalidVenueAddress(f"{role} address is missing or malformed: {address!r}")
    if is_zero_address(address):
        raise InvalidVenueAddress(f"{role} address cannot be the zero address")
    return normalize_address(address)


class VenueAdapter(ABC):
    """Translates normalized swap requests into one venue's native calls.

    Adapters hold no state beyond their own address, the venue, and the
    collaborators injected here; everything else is scoped to a call.

    Attributes:
        address: The adapter's own custody address
        venue: Downstream venue (validated at construction)
        ledger: Value-transfer primitive
        allowances: Allowance manager used before every venue call
        events: Audit event stream
        clock: Returns the current time in seconds
    """

    kind: ClassVar[str] = "unknown"

    def __init__(
        self,
        address: str,
        venue: Venue,
        ledger: TokenLedger,
        *,
        events: EventLog | None = None,
        allowances: AllowanceManager | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.address = normalize_address(address, validate=True)
        require_venue_address(getattr(venue, "address", None))
        self.venue = venue
        self.ledger = ledger
        self.events = events if events is not None else EventLog()
        self.allowances = allowances or AllowanceManager(ledger)
        self.clock = clock
        self._guard = ReentrancyGuard(f"{self.kind} adapter {self.address}")

    @property
    def venue_address(self) -> str:
        return normalize_address(self.venue.address)

    # --- Operations -----------------------------------------------------

    @abstractmethod
    def swap_exact_input(
        self,
        token_in: str,
        token_out: str,
        amount_in: int,
        min_amount_out: int,
        recipient: str,
        aux_data: bytes,
        *,
        context: SwapContext,
    ) -> int:
        """Swap exactly amount_in of token_in; return the amount received."""
        ...

    @abstractmethod
    def swap_exact_output(
        self,
        token_in: str,
        token_out: str,
        max_amount_in: int,
        amount_out: int,
        recipient: str,
        aux_data: bytes,
        *,
        context: SwapContext,
    ) -> int:
        """Buy exactly amount_out of token_out; return the input consumed."""
        ...

    @abstractmethod
    def swap_exact_input_path(
        self,
        path: Sequence[str],
        amount_in: int,
        min_amount_out: int,
        recipient: str,
        aux_data: bytes,
        *,
        context: SwapContext,
    ) -> int:
        """Multi-hop exact-input swap along path; return the final output."""
        ...

    @abstractmethod
    def swap_exact_output_path(
        self,
        path: Sequence[str],
        max_amount_in: int,
        amount_out: int,
        recipient: str,
        aux_data: bytes,
        *,
        context: SwapContext,
    ) -> int:
        """Multi-hop exact-output swap along path; return the input consumed."""
        ...

    # --- Shared protocol ------------------------------------------------

    def _execute(
        self,
        operation: SwapOperation,
        *,
        token_in: str,
        token_out: str,
        committed: int,
        context: SwapContext,
        decode: Callable[[], P],
        invoke: Callable[[P, int], Sequence[int] | int],
    ) -> int:
        """Run the shared adapter protocol around a single venue call.

        Args:
            operation: Operation being executed (for events and errors)
            token_in: Input token
            token_out: Output token
            committed: amount_in for exact-input, max_amount_in for exact-output
            context: Router-supplied call context
            decode: Parses the aux payload into venue parameters
            invoke: Calls the venue with decoded parameters and a deadline

        Returns:
            Output amount for exact-input, input consumed for exact-output
        """
        with self._guard.enter(operation.value):
            try:
                self._require_funds(token_in, committed)
                self.allowances.ensure_exact_allowance(
                    token_in, self.address, self.venue_address, committed
                )
                params = decode()
                deadline = self._resolve_deadline(params.deadline, context)
                result = self._call_venue(lambda: invoke(params, deadline))
                amount = self._translate(operation, token_in, token_out, committed, result)
                if operation.is_exact_output:
                    self._refund(operation, token_in, committed, amount, context)
                return amount
            except RouterError as err:
                raise err.with_operation(operation.value)

    def _require_funds(self, token: str, committed: int) -> None:
        held = self.ledger.balance_of(token, self.address)
        if held < committed:
            raise FundsNotReceived(f"adapter holds {held} of {token}, expected {committed}")

    def _resolve_deadline(self, deadline: int | None, context: SwapContext) -> int:
        if deadline:
            return deadline
        return int(self.clock()) + context.deadline_window

    def _call_venue(self, call: Callable[[], Sequence[int] | int]) -> VenueCallResult:
        try:
            amounts = call()
        except ReasonRevert as err:
            return VenueCallResult.err(RevertReason(err.reason))
        except RawRevert as err:
            return VenueCallResult.err(RevertPayload(err.payload))
        except VenueRevert as err:
            return VenueCallResult.err(RevertReason(str(err)))
        except LedgerError as err:
            return VenueCallResult.err(RevertReason(err.message))

        if isinstance(amounts, int):
            return VenueCallResult.ok((amounts,))
        return VenueCallResult.ok(tuple(amounts))

    def _translate(
        self,
        operation: SwapOperation,
        token_in: str,
        token_out: str,
        committed: int,
        result: VenueCallResult,
    ) -> int:
        fields = {
            "adapter": self.address,
            "venue_kind": self.kind,
            "operation": operation.value,
            "token_in": normalize_address(token_in),
            "token_out": normalize_address(token_out),
        }

        if result.failure is None and not result.amounts:
            result = VenueCallResult.err(RevertReason("venue returned no amounts"))

        if result.failure is not None:
            reason = result.failure.render()
            self.events.emit(EventKind.SWAP_FAILED, **fields, reason=reason)
            raise VenueCallFailed(reason)

        amount = result.realized_amount(exact_output=operation.is_exact_output)
        if operation.is_exact_output and amount > committed:
            reason = f"venue consumed {amount} above committed maximum {committed}"
            self.events.emit(EventKind.SWAP_FAILED, **fields, reason=reason)
            raise VenueCallFailed(reason)

        self.events.emit(EventKind.SWAP_SUCCESS, **fields, committed=committed, amount=amount)
        return amount

    def _refund(
        self,
        operation: SwapOperation,
        token_in: str,
        committed: int,
        used: int,
        context: SwapContext,
    ) -> None:
        remainder = (S(committed) - used).value
        if remainder == 0:
            return
        self.ledger.transfer(token_in, self.address, context.payer, remainder)
        self.events.emit(
            EventKind.REFUND_ISSUED,
            adapter=self.address,
            operation=operation.value,
            token=normalize_address(token_in),
            to=normalize_address(context.payer),
            amount=remainder,
        )

    @staticmethod
    def _path_ends(path: Sequence[str], operation: SwapOperation) -> tuple[str, str]:
        if len(path) < 2:
            raise InvalidPath(
                f"path needs at least 2 tokens, got {len(path)}", operation=operation.value
            )
        return path[0], path[-1]


__all__ = ["VenueAdapter", "DecodedAux", "require_venue_address"]
