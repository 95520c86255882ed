"""Downstream venue interfaces."""

from swap_router.venues.base import (
    ConstantProductVenue,
    FeeTierVenue,
    MultiRouteVenue,
    RawRevert,
    ReasonRevert,
    TickSpacingVenue,
    Venue,
    VenueRevert,
)
from swap_router.venues.params import (
    ExactInputParams,
    ExactInputSingleParams,
    ExactOutputParams,
    ExactOutputSingleParams,
    Route,
    TickExactInputSingleParams,
    TickExactOutputSingleParams,
)

__all__ = [
    # Failures
    "VenueRevert",
    "ReasonRevert",
    "RawRevert",
    # Protocols
    "Venue",
    "ConstantProductVenue",
    "FeeTierVenue",
    "TickSpacingVenue",
    "MultiRouteVenue",
    # Call structs
    "ExactInputSingleParams",
    "ExactOutputSingleParams",
    "TickExactInputSingleParams",
    "TickExactOutputSingleParams",
    "ExactInputParams",
    "ExactOutputParams",
    "Route",
]
