"""Station directory port."""

from typing import Protocol

from wl_trip_planner.domain.models.station import Station

NOT_FOUND_DIVA = 0


class StationDirectory(Protocol):
    """Port for looking up stations by their platform name."""

    def find_station(self, name: str) -> Station | None:
        """Return the station with exactly this platform name."""
        ...

    def resolve_identifier(self, name: str) -> int:
        """Return the DIVA number, or NOT_FOUND_DIVA if the name is unknown."""
        ...

    def resolve_coordinates(self, name: str) -> tuple[float, float] | None:
        """Return (longitude, latitude), or None if the name is unknown."""
        ...

    def exists(self, name: str) -> bool:
        """Check whether a station with this platform name exists."""
        ...
