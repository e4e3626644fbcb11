"""Adapters layer - external system integrations."""

from wl_trip_planner.adapters.config import AppConfig
from wl_trip_planner.adapters.station_data import JsonStationDirectory
from wl_trip_planner.adapters.wl_routing_api import (
    ItineraryParser,
    WlRoutingHttpClient,
    WlTripRepository,
)

__all__ = [
    "AppConfig",
    "ItineraryParser",
    "JsonStationDirectory",
    "WlRoutingHttpClient",
    "WlTripRepository",
]
