"""Station reference data adapters."""

from wl_trip_planner.adapters.station_data.json_station_directory import (
    JsonStationDirectory,
    StationRecord,
)

__all__ = ["JsonStationDirectory", "StationRecord"]
