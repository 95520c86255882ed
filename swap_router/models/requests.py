"""Pydantic models for swap requests and outcomes.

A swap request is either exact-input (spend exactly ``amount_in``, receive
at least ``min_amount_out``) or exact-output (receive exactly
``amount_out``, spend at most ``max_amount_in``). Either shape names a
single pair through ``token_in``/``token_out`` or a multi-hop route through
``path``; a pair is equivalent to a two-token path.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Annotated, Literal

from pydantic import BaseModel, Field, model_validator

from swap_router.errors import RouterError, VenueCallFailed
from swap_router.models.types import Address, HexBytes, Uint256


class SwapRequestBase(BaseModel, ABC):
    """Fields shared by both request shapes."""

    token_in: Address | None = Field(default=None, alias="tokenIn")
    token_out: Address | None = Field(default=None, alias="tokenOut")
    path: tuple[Address, ...] | None = Field(
        default=None,
        description="Token route from input to output; at least two tokens.",
    )
    recipient: Address = Field(description="Account receiving the output tokens.")
    aux_data: HexBytes = Field(
        default=b"",
        alias="auxData",
        description="Venue-specific parameters, interpreted only by the adapter.",
    )

    model_config = {"populate_by_name": True, "frozen": True}

    @model_validator(mode="after")
    def _check_route(self) -> SwapRequestBase:
        if self.path is None:
            if self.token_in is None or self.token_out is None:
                raise ValueError("either tokenIn and tokenOut or path is required")
            return self

        if len(self.path) < 2:
            raise ValueError(f"path needs at least 2 tokens, got {len(self.path)}")
        if self.token_in is not None and self.token_in != self.path[0]:
            raise ValueError("tokenIn does not match the first token of path")
        if self.token_out is not None and self.token_out != self.path[-1]:
            raise ValueError("tokenOut does not match the last token of path")
        return self

    @property
    def is_path(self) -> bool:
        """True if the request was given as a multi-hop path."""
        return self.path is not None

    @property
    def tokens(self) -> tuple[str, ...]:
        """Full token route, input first."""
        if self.path is not None:
            return self.path
        if self.token_in is None or self.token_out is None:
            raise ValueError("request names neither a token pair nor a path")
        return (self.token_in, self.token_out)

    @property
    def input_token(self) -> str:
        return self.tokens[0]

    @property
    def output_token(self) -> str:
        return self.tokens[-1]

    @property
    def hops(self) -> int:
        return len(self.tokens) - 1

    @property
    @abstractmethod
    def committed_amount(self) -> int:
        """Input amount the caller commits up front."""


class ExactInputRequest(SwapRequestBase):
    """Spend exactly amount_in; the venue enforces min_amount_out."""

    kind: Literal["exact_input"] = "exact_input"
    amount_in: Uint256 = Field(alias="amountIn")
    min_amount_out: Uint256 = Field(alias="minAmountOut")

    @property
    def committed_amount(self) -> int:
        return self.amount_in


class ExactOutputRequest(SwapRequestBase):
    """Receive exactly amount_out; the venue enforces max_amount_in."""

    kind: Literal["exact_output"] = "exact_output"
    max_amount_in: Uint256 = Field(alias="maxAmountIn")
    amount_out: Uint256 = Field(alias="amountOut")

    @property
    def committed_amount(self) -> int:
        return self.max_amount_in


SwapRequest = Annotated[ExactInputRequest | ExactOutputRequest, Field(discriminator="kind")]


class SwapOutcome(BaseModel):
    """Result of one dispatch, returned to the caller and recorded for audit.

    Attributes:
        amount_in: Net input actually consumed (after fee and refund)
        amount_out: Output actually produced
        failure_reason: Venue reason or hex payload, or the error message
        error: Error class name when the dispatch failed
        category: Coarse error category when the dispatch failed
    """

    adapter: str
    operation: str | None = None
    token_in: str | None = Field(default=None, alias="tokenIn")
    token_out: str | None = Field(default=None, alias="tokenOut")
    amount_in: Uint256 = Field(default=0, alias="amountIn")
    amount_out: Uint256 = Field(default=0, alias="amountOut")
    fee: Uint256 = 0
    success: bool
    failure_reason: str | None = Field(default=None, alias="failureReason")
    error: str | None = None
    category: str | None = None

    model_config = {"populate_by_name": True}

    @classmethod
    def failed(
        cls,
        adapter: str,
        request: SwapRequestBase | None,
        err: RouterError,
    ) -> SwapOutcome:
        """Build the outcome describing a failed dispatch."""
        reason = err.reason if isinstance(err, VenueCallFailed) else err.message
        return cls(
            adapter=adapter,
            operation=err.operation,
            token_in=request.input_token if request is not None else None,
            token_out=request.output_token if request is not None else None,
            success=False,
            failure_reason=reason,
            error=err.code,
            category=err.category.value,
        )


__all__ = [
    "SwapRequestBase",
    "ExactInputRequest",
    "ExactOutputRequest",
    "SwapRequest",
    "SwapOutcome",
]
