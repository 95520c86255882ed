"""API endpoints for the swap router."""

from typing import Any

import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from swap_router.errors import ErrorCategory, ReentrantCall, RouterError, UnknownAdapter
from swap_router.models.requests import SwapOutcome, SwapRequest
from swap_router.models.types import Address, Uint256
from swap_router.routing.router import Router

logger = structlog.get_logger()

router = APIRouter()

# HTTP status per error category; a few error classes override their category
CATEGORY_STATUS = {
    ErrorCategory.INPUT: 400,
    ErrorCategory.FUNDS: 400,
    ErrorCategory.REGISTRY: 404,
    ErrorCategory.AUTHORIZATION: 403,
    ErrorCategory.VENUE: 502,
}
ERROR_STATUS: dict[type[RouterError], int] = {
    UnknownAdapter: 404,
    ReentrantCall: 409,
}


class DispatchBody(BaseModel):
    """Body of a swap dispatch call."""

    caller: Address = Field(description="Account paying the input and the fee.")
    value: Uint256 = Field(default=0, description="Native value attached to the call.")
    request: SwapRequest


class AdminBody(BaseModel):
    """Fields shared by every administrative call."""

    caller: Address = Field(description="Account requesting the change; must be authorized.")


class FeeBody(AdminBody):
    fee_bps: int = Field(alias="feeBps")

    model_config = {"populate_by_name": True}


class FeeReceiverBody(AdminBody):
    receiver: Address


class FeeExemptionBody(AdminBody):
    wallet: Address
    exempt: bool


class AdapterApprovalBody(AdminBody):
    approved: bool


class DeadlineWindowBody(AdminBody):
    seconds: int


class WithdrawBody(AdminBody):
    asset: Address
    to: Address


def get_router(request: Request) -> Router:
    """Dependency provider for the router instance.

    Returns the router the app was created with (see create_app). Override
    this in tests to inject a different one:
        app.dependency_overrides[get_router] = lambda: router
    """
    return request.app.state.router


def status_for(err: RouterError) -> int:
    """HTTP status code reported for a router error."""
    for error_type, status in ERROR_STATUS.items():
        if isinstance(err, error_type):
            return status
    return CATEGORY_STATUS.get(err.category, 400)


@router.post("/swaps/{adapter_id}", response_model_exclude_none=True)
async def dispatch_swap(
    adapter_id: str,
    body: DispatchBody,
    swap_router: Router = Depends(get_router),
) -> SwapOutcome:
    """Dispatch one swap to the adapter registered under adapter_id.

    Error Handling:
        - Invalid request schema: 422 Validation Error (Pydantic)
        - Router error: status by error category, failed SwapOutcome as body
    """
    request = body.request
    logger.info(
        "received_swap",
        adapter=adapter_id,
        caller=body.caller,
        kind=request.kind,
        token_in=request.input_token,
        token_out=request.output_token,
        hops=request.hops,
    )

    try:
        outcome = swap_router.dispatch(body.caller, adapter_id, request, value=body.value)
    except RouterError as err:
        status = status_for(err)
        logger.warning(
            "swap_rejected",
            adapter=adapter_id,
            error=err.code,
            category=err.category.value,
            status=status,
            message=str(err),
        )
        failed = SwapOutcome.failed(adapter_id, request, err)
        return JSONResponse(  # type: ignore[return-value]
            status_code=status,
            content=failed.model_dump(mode="json", by_alias=True, exclude_none=True),
        )

    logger.info(
        "swap_completed",
        adapter=outcome.adapter,
        amount_in=outcome.amount_in,
        amount_out=outcome.amount_out,
        fee=outcome.fee,
    )
    return outcome


@router.get("/adapters")
async def list_adapters(swap_router: Router = Depends(get_router)) -> list[dict[str, Any]]:
    """List registered adapters with their venue and approval flag."""
    return [
        {
            "adapter": adapter_id,
            "kind": entry.adapter.kind,
            "venue": entry.adapter.venue_address,
            "approved": entry.approved,
        }
        for adapter_id, entry in swap_router.registry.entries().items()
    ]


@router.get("/config")
async def get_config(swap_router: Router = Depends(get_router)) -> dict[str, Any]:
    """Current fee and deadline configuration."""
    return _config(swap_router)


def _config(swap_router: Router) -> dict[str, Any]:
    config = swap_router.fee_config
    return {
        "address": swap_router.address,
        "feeBps": config.fee_bps,
        "feeReceiver": config.fee_receiver,
        "feeExempt": sorted(config.exempt),
        "deadlineWindow": swap_router.deadline_window,
    }


@router.get("/events")
async def list_events(
    since: int = 0,
    swap_router: Router = Depends(get_router),
) -> list[dict[str, Any]]:
    """Audit events with sequence number >= since."""
    return [event.to_dict() for event in swap_router.events.since(since)]


# --- Administration ---------------------------------------------------------


def _admin_error(operation: str, caller: str, err: RouterError) -> JSONResponse:
    status = status_for(err)
    logger.warning(
        "admin_rejected",
        operation=operation,
        caller=caller,
        error=err.code,
        status=status,
        message=err.message,
    )
    return JSONResponse(
        status_code=status,
        content={
            "error": err.code,
            "category": err.category.value,
            "operation": err.operation or operation,
            "message": err.message,
        },
    )


@router.put("/admin/fee")
async def set_fee(body: FeeBody, swap_router: Router = Depends(get_router)) -> dict[str, Any]:
    """Set the protocol fee rate in basis points."""
    try:
        swap_router.set_fee_bps(body.caller, body.fee_bps)
    except RouterError as err:
        return _admin_error("set_fee_bps", body.caller, err)  # type: ignore[return-value]
    return _config(swap_router)


@router.put("/admin/fee-receiver")
async def set_fee_receiver(
    body: FeeReceiverBody, swap_router: Router = Depends(get_router)
) -> dict[str, Any]:
    """Set the address collecting fees."""
    try:
        swap_router.set_fee_receiver(body.caller, body.receiver)
    except RouterError as err:
        return _admin_error("set_fee_receiver", body.caller, err)  # type: ignore[return-value]
    return _config(swap_router)


@router.put("/admin/fee-exemption")
async def set_fee_exemption(
    body: FeeExemptionBody, swap_router: Router = Depends(get_router)
) -> dict[str, Any]:
    """Grant or revoke a wallet's fee exemption."""
    try:
        swap_router.set_fee_exemption(body.caller, body.wallet, body.exempt)
    except RouterError as err:
        return _admin_error("set_fee_exemption", body.caller, err)  # type: ignore[return-value]
    return _config(swap_router)


@router.put("/admin/adapters/{adapter_id}/approval")
async def set_adapter_approval(
    adapter_id: str,
    body: AdapterApprovalBody,
    swap_router: Router = Depends(get_router),
) -> dict[str, Any]:
    """Approve or disapprove an adapter already in the registry.

    Adapters enter the registry in process, through Router.set_adapter_approval
    with an adapter instance; over HTTP only their flag can change.
    """
    try:
        swap_router.set_registered_adapter_approval(body.caller, adapter_id, body.approved)
    except RouterError as err:
        return _admin_error("set_adapter_approval", body.caller, err)  # type: ignore[return-value]
    entry = swap_router.registry.get(adapter_id)
    return {
        "adapter": entry.adapter.address,
        "kind": entry.adapter.kind,
        "venue": entry.adapter.venue_address,
        "approved": entry.approved,
    }


@router.put("/admin/deadline-window")
async def set_deadline_window(
    body: DeadlineWindowBody, swap_router: Router = Depends(get_router)
) -> dict[str, Any]:
    """Set the default deadline window in seconds."""
    try:
        swap_router.set_default_deadline_window(body.caller, body.seconds)
    except RouterError as err:
        return _admin_error(  # type: ignore[return-value]
            "set_default_deadline_window", body.caller, err
        )
    return _config(swap_router)


@router.post("/admin/emergency-withdraw")
async def emergency_withdraw(
    body: WithdrawBody, swap_router: Router = Depends(get_router)
) -> dict[str, Any]:
    """Sweep the router's whole balance of an asset to a target account."""
    try:
        amount = swap_router.emergency_withdraw(body.caller, body.asset, body.to)
    except RouterError as err:
        return _admin_error("emergency_withdraw", body.caller, err)  # type: ignore[return-value]
    logger.info("emergency_withdraw_completed", asset=body.asset, to=body.to, amount=amount)
    return {"asset": body.asset, "to": body.to, "amount": str(amount)}
