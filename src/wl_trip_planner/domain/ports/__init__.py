"""Ports (interfaces) for the ports-and-adapters architecture."""

from wl_trip_planner.domain.ports.station_directory import NOT_FOUND_DIVA, StationDirectory
from wl_trip_planner.domain.ports.trip_repository import TripRepository

__all__ = [
    "NOT_FOUND_DIVA",
    "StationDirectory",
    "TripRepository",
]
