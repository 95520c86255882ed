"""Swap router: the single entry point for swap requests.

The router validates the request, deducts the protocol fee, moves the net
input into the chosen adapter's custody, and invokes the adapter operation
matching the request shape. All value movement of one dispatch happens
inside a single ledger ``atomic()`` scope, so a failure anywhere leaves
balances exactly as they were before the call.
"""

from __future__ import annotations

from collections.abc import Callable

import structlog

from swap_router.adapters.base import VenueAdapter
from swap_router.adapters.types import SwapContext, SwapOperation
from swap_router.constants import DEFAULT_DEADLINE_WINDOW
from swap_router.errors import (
    InvalidDeadlineWindow,
    NothingToWithdraw,
    RouterError,
    Unauthorized,
    UnknownAdapter,
    ValueMismatch,
    ZeroAddress,
)
from swap_router.events import EventKind, EventLog
from swap_router.fees import FeeConfig, FeePolicy
from swap_router.guard import ReentrancyGuard
from swap_router.ledger.base import TokenLedger
from swap_router.models.requests import ExactInputRequest, ExactOutputRequest, SwapOutcome
from swap_router.models.types import NATIVE_ASSET, is_zero_address, normalize_address
from swap_router.routing.auth import Authorizer, OwnerAuthorizer
from swap_router.routing.registry import AdapterRegistry
from swap_router.settings import RouterSettings

logger = structlog.get_logger()


def validate_deadline_window(seconds: int) -> int:
    """Return seconds if it is a positive integer.

    Raises:
        InvalidDeadlineWindow: If seconds is not a positive integer
    """
    if isinstance(seconds, bool) or not isinstance(seconds, int) or seconds <= 0:
        raise InvalidDeadlineWindow(f"deadline window must be a positive integer, got {seconds!r}")
    return seconds


class Router:
    """Dispatches swap requests to approved venue adapters.

    Attributes:
        address: The router's own custody address (the fee spender)
        ledger: Value-transfer primitive
        authorizer: Gate for administrative operations
        registry: Approved adapters by identity
        events: Audit event stream
        deadline_window: Default deadline window passed to adapters
    """

    def __init__(
        self,
        address: str,
        ledger: TokenLedger,
        authorizer: Authorizer,
        *,
        fee_config: FeeConfig | None = None,
        events: EventLog | None = None,
        registry: AdapterRegistry | None = None,
        deadline_window: int = DEFAULT_DEADLINE_WINDOW,
    ) -> None:
        self.address = normalize_address(address, validate=True)
        self.ledger = ledger
        self.authorizer = authorizer
        self.registry = registry or AdapterRegistry()
        self.events = events if events is not None else EventLog()
        self.deadline_window = validate_deadline_window(deadline_window)
        self._fees = FeePolicy(fee_config or FeeConfig(), ledger, self.address)
        self._guard = ReentrancyGuard(f"router {self.address}")

    @property
    def fee_config(self) -> FeeConfig:
        return self._fees.config

    # --- Swaps ----------------------------------------------------------

    def dispatch(
        self,
        caller: str,
        adapter_id: str,
        request: ExactInputRequest | ExactOutputRequest,
        *,
        value: int = 0,
    ) -> SwapOutcome:
        """Route one swap through the adapter registered under adapter_id.

        Args:
            caller: Account paying the input (and the fee)
            adapter_id: Identity of an approved adapter
            request: Exact-input or exact-output request, pair or path form
            value: Native value attached to the call

        Returns:
            The successful SwapOutcome

        Raises:
            UnknownAdapter: adapter_id is zero or not approved
            ValueMismatch: attached value does not match the request
            ReentrantCall: a dispatch is already in progress
            RouterError: any adapter, fee, or ledger failure, unchanged
        """
        with self._guard.enter("dispatch"):
            adapter = self.registry.get_approved(adapter_id)
            token_in = normalize_address(request.input_token)
            gross = request.committed_amount
            native = token_in == NATIVE_ASSET
            self._check_value(native, gross, value)

            with self.ledger.atomic():
                if native:
                    self.ledger.transfer(token_in, caller, self.address, value)
                net = self._fees.apply(token_in, caller, gross, from_custody=native)
                fee = gross - net
                if native:
                    self.ledger.transfer(token_in, self.address, adapter.address, net)
                else:
                    self.ledger.transfer_from(token_in, self.address, caller, adapter.address, net)

                operation, amount_in, amount_out = self._invoke(adapter, caller, request, net)

            outcome = SwapOutcome(
                adapter=adapter.address,
                operation=operation.value,
                token_in=token_in,
                token_out=normalize_address(request.output_token),
                amount_in=amount_in,
                amount_out=amount_out,
                fee=fee,
                success=True,
            )
            self.events.emit(
                EventKind.SWAP_EXECUTED,
                adapter=outcome.adapter,
                caller=normalize_address(caller),
                recipient=request.recipient,
                token_in=outcome.token_in,
                token_out=outcome.token_out,
                amount_in=amount_in,
                amount_out=amount_out,
                fee=fee,
            )
            return outcome

    def try_dispatch(
        self,
        caller: str,
        adapter_id: str,
        request: ExactInputRequest | ExactOutputRequest,
        *,
        value: int = 0,
    ) -> SwapOutcome:
        """Like dispatch, but report a RouterError as a failed SwapOutcome."""
        try:
            return self.dispatch(caller, adapter_id, request, value=value)
        except RouterError as err:
            logger.warning(
                "dispatch_failed",
                adapter=adapter_id,
                error=err.code,
                category=err.category.value,
                operation=err.operation,
                message=err.message,
            )
            return SwapOutcome.failed(adapter_id, request, err)

    def _check_value(self, native: bool, gross: int, value: int) -> None:
        if native and value != gross:
            raise ValueMismatch(
                f"attached value {value} does not equal requested amount {gross}",
                operation="dispatch",
            )
        if not native and value != 0:
            raise ValueMismatch(
                f"value {value} attached to a non-native swap", operation="dispatch"
            )

    def _invoke(
        self,
        adapter: VenueAdapter,
        caller: str,
        request: ExactInputRequest | ExactOutputRequest,
        net: int,
    ) -> tuple[SwapOperation, int, int]:
        """Call the adapter operation matching the request shape.

        Returns:
            (operation, input consumed, output produced)
        """
        context = SwapContext(payer=normalize_address(caller), deadline_window=self.deadline_window)

        if isinstance(request, ExactInputRequest):
            if request.is_path:
                amount_out = adapter.swap_exact_input_path(
                    request.tokens,
                    net,
                    request.min_amount_out,
                    request.recipient,
                    request.aux_data,
                    context=context,
                )
                return SwapOperation.EXACT_INPUT_PATH, net, amount_out
            amount_out = adapter.swap_exact_input(
                request.input_token,
                request.output_token,
                net,
                request.min_amount_out,
                request.recipient,
                request.aux_data,
                context=context,
            )
            return SwapOperation.EXACT_INPUT, net, amount_out

        if request.is_path:
            used = adapter.swap_exact_output_path(
                request.tokens,
                net,
                request.amount_out,
                request.recipient,
                request.aux_data,
                context=context,
            )
            return SwapOperation.EXACT_OUTPUT_PATH, used, request.amount_out
        used = adapter.swap_exact_output(
            request.input_token,
            request.output_token,
            net,
            request.amount_out,
            request.recipient,
            request.aux_data,
            context=context,
        )
        return SwapOperation.EXACT_OUTPUT, used, request.amount_out

    # --- Administration -------------------------------------------------

    def set_fee_bps(self, caller: str, fee_bps: int) -> None:
        """Set the protocol fee rate (at most 1000 basis points)."""
        previous = self.fee_config.fee_bps
        self._admin("set_fee_bps", caller, lambda: self.fee_config.with_fee_bps(fee_bps))
        self.events.emit(EventKind.FEE_UPDATED, previous=previous, fee_bps=fee_bps)

    def set_fee_receiver(self, caller: str, receiver: str) -> None:
        """Set the address collecting fees (non-zero)."""
        previous = self.fee_config.fee_receiver
        self._admin("set_fee_receiver", caller, lambda: self.fee_config.with_fee_receiver(receiver))
        self.events.emit(
            EventKind.FEE_RECEIVER_UPDATED,
            previous=previous,
            receiver=self.fee_config.fee_receiver,
        )

    def set_fee_exemption(self, caller: str, wallet: str, exempt: bool) -> None:
        """Add wallet to, or remove it from, the fee exemption list."""
        self._admin(
            "set_fee_exemption",
            caller,
            lambda: self.fee_config.with_exemption(wallet, exempt),
        )
        self.events.emit(
            EventKind.FEE_EXEMPTION_UPDATED,
            wallet=normalize_address(wallet),
            exempt=exempt,
        )

    def set_adapter_approval(self, caller: str, adapter: VenueAdapter, approved: bool) -> None:
        """Register adapter (if new) and set whether dispatch may use it."""
        self._require_authorized("set_adapter_approval", caller)
        if is_zero_address(getattr(adapter, "address", None)):
            raise UnknownAdapter(
                "adapter identity cannot be the zero address", operation="set_adapter_approval"
            )
        entry = self.registry.set_approval(adapter, approved)
        self.events.emit(
            EventKind.ADAPTER_APPROVAL_UPDATED,
            adapter=entry.adapter.address,
            venue_kind=entry.adapter.kind,
            approved=approved,
        )

    def set_registered_adapter_approval(
        self, caller: str, adapter_id: str, approved: bool
    ) -> None:
        """Change the approval flag of an adapter already in the registry."""
        operation = "set_adapter_approval"
        self._require_authorized(operation, caller)
        try:
            entry = self.registry.get(adapter_id)
        except RouterError as err:
            raise err.with_operation(operation)
        self.set_adapter_approval(caller, entry.adapter, approved)

    def set_default_deadline_window(self, caller: str, seconds: int) -> None:
        """Set the deadline window adapters use when aux data carries none."""
        self._require_authorized("set_default_deadline_window", caller)
        try:
            window = validate_deadline_window(seconds)
        except RouterError as err:
            raise err.with_operation("set_default_deadline_window")
        previous, self.deadline_window = self.deadline_window, window
        self.events.emit(EventKind.DEADLINE_WINDOW_UPDATED, previous=previous, seconds=window)

    def emergency_withdraw(self, caller: str, asset: str, to: str) -> int:
        """Sweep the router's entire balance of asset to to.

        Returns:
            The amount withdrawn

        Raises:
            Unauthorized: caller is not authorized
            ZeroAddress: to is the zero address
            NothingToWithdraw: the router holds none of asset
        """
        operation = "emergency_withdraw"
        self._require_authorized(operation, caller)
        if is_zero_address(to):
            raise ZeroAddress("withdrawal target cannot be the zero address", operation=operation)

        balance = self.ledger.balance_of(asset, self.address)
        if balance == 0:
            raise NothingToWithdraw(f"router holds no {asset}", operation=operation)

        self.ledger.transfer(asset, self.address, to, balance)
        self.events.emit(
            EventKind.EMERGENCY_WITHDRAW,
            asset=normalize_address(asset),
            to=normalize_address(to),
            amount=balance,
        )
        return balance

    def _require_authorized(self, operation: str, caller: str) -> None:
        if not self.authorizer.is_authorized(caller):
            logger.warning("unauthorized_admin_call", operation=operation, caller=caller)
            raise Unauthorized(f"{caller} may not call {operation}", operation=operation)

    def _admin(self, operation: str, caller: str, update: Callable[[], FeeConfig]) -> None:
        self._require_authorized(operation, caller)
        try:
            self._fees.config = update()
        except RouterError as err:
            raise err.with_operation(operation)


def create_router(settings: RouterSettings | None = None) -> Router:
    """Create a router over a fresh in-memory ledger.

    The router starts with no adapters and no balances. Callers that serve it
    register venue adapters with set_adapter_approval and fund the ledger
    first, then hand it to swap_router.api.main.create_app.
    """
    from swap_router.ledger.memory import InMemoryLedger

    settings = settings or RouterSettings.from_env()
    logger.info(
        "router_created",
        address=settings.address,
        owner=settings.owner,
        fee_bps=settings.fee_bps,
        deadline_window=settings.deadline_window,
    )
    return Router(
        settings.address,
        InMemoryLedger(),
        OwnerAuthorizer(settings.owner),
        fee_config=settings.fee_config(),
        deadline_window=settings.deadline_window,
    )


__all__ = ["Router", "create_router", "validate_deadline_window"]
