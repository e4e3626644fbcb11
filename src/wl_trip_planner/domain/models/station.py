"""Station domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Station:
    """Represents a public transport platform from the station reference table."""

    platform_text: str
    diva: int
    longitude: float
    latitude: float
