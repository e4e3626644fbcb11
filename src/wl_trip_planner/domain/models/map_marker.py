"""Map marker domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MapMarker:
    """A station along a route, placed on the map."""

    latitude: float
    longitude: float
    title: str
    description: str
