"""Trip repository port."""

from typing import Protocol

from wl_trip_planner.domain.models.extraction_result import ExtractionResult


class TripRepository(Protocol):
    """Port for retrieving trip suggestions from a routing API."""

    async def find_trips(
        self,
        origin_diva: int,
        destination_diva: int,
        date: str,
        time: str,
    ) -> ExtractionResult:
        """Request trips between two stops and extract their partial routes.

        Args:
            origin_diva: DIVA number of the origin stop.
            destination_diva: DIVA number of the destination stop.
            date: Departure date as YYYYMMDD.
            time: Departure time as HHMM.
        """
        ...
