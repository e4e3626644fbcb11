"""Domain layer - core business logic and models."""

from wl_trip_planner.domain.errors import StationNotFoundError
from wl_trip_planner.domain.models import (
    Itinerary,
    RouteSegment,
    Station,
    StopPoint,
    TransportLeg,
)
from wl_trip_planner.domain.ports import StationDirectory, TripRepository

__all__ = [
    "Itinerary",
    "RouteSegment",
    "Station",
    "StationDirectory",
    "StationNotFoundError",
    "StopPoint",
    "TransportLeg",
    "TripRepository",
]
