"""Route segment domain model."""

from dataclasses import dataclass, field

from wl_trip_planner.domain.models.stop_point import StopPoint
from wl_trip_planner.domain.models.transport_leg import TransportLeg

NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class RouteSegment:
    """One partial route ("Teilroute") of an itinerary."""

    index: int  # 1-based position within its itdPartialRouteList
    duration_minutes: int | None
    legs: list[TransportLeg] = field(default_factory=list)
    points: list[StopPoint] = field(default_factory=list)

    @property
    def duration_label(self) -> str:
        """Duration as shown to users, e.g. ``"12 Minuten"`` or ``"N/A"``."""
        if self.duration_minutes is None:
            return NOT_AVAILABLE
        return f"{self.duration_minutes} Minuten"
