"""Itinerary domain model."""

from dataclasses import dataclass, field

from wl_trip_planner.domain.models.route_segment import RouteSegment


@dataclass(frozen=True)
class Itinerary:
    """One complete suggested trip: a contiguous run of segments starting at index 1."""

    segments: list[RouteSegment] = field(default_factory=list)

    @property
    def total_minutes(self) -> int | None:
        """Sum of segment durations, or None if any segment duration is unknown."""
        durations = [segment.duration_minutes for segment in self.segments]
        if not durations or any(d is None for d in durations):
            return None
        return sum(d for d in durations if d is not None)
