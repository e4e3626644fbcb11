"""Domain models for the trip planner."""

from wl_trip_planner.domain.models.extraction_result import (
    ExtractionError,
    ExtractionErrorKind,
    ExtractionResult,
    StationNamesResult,
)
from wl_trip_planner.domain.models.itinerary import Itinerary
from wl_trip_planner.domain.models.map_marker import MapMarker
from wl_trip_planner.domain.models.point_selection import PointSelection
from wl_trip_planner.domain.models.route_segment import NOT_AVAILABLE, RouteSegment
from wl_trip_planner.domain.models.station import Station
from wl_trip_planner.domain.models.stop_point import StopPoint, StopReference
from wl_trip_planner.domain.models.transport_leg import TransportLeg
from wl_trip_planner.domain.models.trip_plan import TripPlan

__all__ = [
    "NOT_AVAILABLE",
    "ExtractionError",
    "ExtractionErrorKind",
    "ExtractionResult",
    "Itinerary",
    "MapMarker",
    "PointSelection",
    "RouteSegment",
    "Station",
    "StationNamesResult",
    "StopPoint",
    "StopReference",
    "TransportLeg",
    "TripPlan",
]
