"""Runtime configuration read from environment variables.

Variables:
- SWAP_ROUTER_ADDRESS: The router's custody address
- SWAP_ROUTER_OWNER: Address allowed to call administrative operations
- SWAP_ROUTER_FEE_BPS: Initial protocol fee in basis points (default: 0)
- SWAP_ROUTER_FEE_RECEIVER: Initial fee receiver (default: the owner)
- SWAP_ROUTER_DEADLINE_WINDOW: Default swap deadline window in seconds (default: 300)
- SWAP_ROUTER_HOST: Host the API binds to (default: 0.0.0.0)
- SWAP_ROUTER_PORT: Port the API binds to (default: 8000)
- SWAP_ROUTER_DEBUG: Enable FastAPI debug mode (default: false)
- SWAP_ROUTER_LOG_LEVEL: Minimum log level (default: info)
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from swap_router.constants import DEFAULT_DEADLINE_WINDOW
from swap_router.fees import FeeConfig
from swap_router.models.types import is_zero_address, normalize_address

DEFAULT_ROUTER_ADDRESS = "0x00000000000000000000000000000000000a11ce"
DEFAULT_OWNER = "0x00000000000000000000000000000000000b0b00"


def _parse_bool(value: str) -> bool:
    return value.lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class RouterSettings:
    """Router and API settings.

    Attributes:
        address: Router custody address
        owner: Administrative owner address
        fee_bps: Initial protocol fee rate
        fee_receiver: Initial fee receiver
        deadline_window: Default deadline window in seconds
        host: API bind host
        port: API bind port
        debug: Run the API app in debug mode
        log_level: Name of the minimum log level
    """

    address: str = DEFAULT_ROUTER_ADDRESS
    owner: str = DEFAULT_OWNER
    fee_bps: int = 0
    fee_receiver: str | None = None
    deadline_window: int = DEFAULT_DEADLINE_WINDOW
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    log_level: str = "info"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> RouterSettings:
        """Build settings from environment variables (or the given mapping)."""
        env = os.environ if environ is None else environ
        return cls(
            address=normalize_address(
                env.get("SWAP_ROUTER_ADDRESS", DEFAULT_ROUTER_ADDRESS), validate=True
            ),
            owner=normalize_address(env.get("SWAP_ROUTER_OWNER", DEFAULT_OWNER), validate=True),
            fee_bps=int(env.get("SWAP_ROUTER_FEE_BPS", "0")),
            fee_receiver=env.get("SWAP_ROUTER_FEE_RECEIVER") or None,
            deadline_window=int(
                env.get("SWAP_ROUTER_DEADLINE_WINDOW", str(DEFAULT_DEADLINE_WINDOW))
            ),
            host=env.get("SWAP_ROUTER_HOST", "0.0.0.0"),
            port=int(env.get("SWAP_ROUTER_PORT", "8000")),
            debug=_parse_bool(env.get("SWAP_ROUTER_DEBUG", "false")),
            log_level=env.get("SWAP_ROUTER_LOG_LEVEL", "info").lower(),
        )

    @property
    def log_level_value(self) -> int:
        """Numeric logging level, falling back to INFO for unknown names."""
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO

    def fee_config(self) -> FeeConfig:
        """Initial fee configuration; the receiver defaults to the owner."""
        receiver = self.fee_receiver
        if receiver is None or is_zero_address(receiver):
            receiver = self.owner
        return FeeConfig(
            fee_bps=self.fee_bps, fee_receiver=normalize_address(receiver, validate=True)
        )


__all__ = ["RouterSettings", "DEFAULT_ROUTER_ADDRESS", "DEFAULT_OWNER"]
