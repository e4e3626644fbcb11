"""Application layer - use cases."""

from wl_trip_planner.application.route_assembler import (
    RouteAssembler,
    segments_from_json,
    segments_to_json,
)
from wl_trip_planner.application.services import TripPlanningService

__all__ = ["RouteAssembler", "TripPlanningService", "segments_from_json", "segments_to_json"]
