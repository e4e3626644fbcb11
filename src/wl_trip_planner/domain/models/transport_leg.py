"""Transport leg domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TransportLeg:
    """One means-of-transport annotation on a route segment (bus, tram, train, ...)."""

    mode_type: str
    name: str
    short_name: str
    symbol: str
    destination: str
