"""Trip plan domain model."""

from dataclasses import dataclass, field

from wl_trip_planner.domain.models.extraction_result import ExtractionError
from wl_trip_planner.domain.models.itinerary import Itinerary
from wl_trip_planner.domain.models.map_marker import MapMarker


@dataclass(frozen=True)
class TripPlan:
    """Outcome of one trip planning request."""

    origin: str
    destination: str
    itineraries: list[Itinerary] = field(default_factory=list)
    summary: str = ""
    markers: list[MapMarker] = field(default_factory=list)
    error: ExtractionError | None = None

    @property
    def is_success(self) -> bool:
        return self.error is None
