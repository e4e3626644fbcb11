"""Application services (use cases) for trip planning."""

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from wl_trip_planner.application.route_assembler import RouteAssembler
from wl_trip_planner.domain import station_names
from wl_trip_planner.domain.errors import StationNotFoundError
from wl_trip_planner.domain.models import MapMarker, RouteSegment, TripPlan
from wl_trip_planner.domain.request_time import validate_request_datetime

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from wl_trip_planner.domain.ports import StationDirectory, TripRepository


class TripPlanningService:
    """Plans trips between two named stations."""

    def __init__(
        self,
        station_directory: "StationDirectory",
        trip_repository: "TripRepository",
        strip_city_prefix: bool = True,
        swap_marker_coordinates: bool = False,
    ) -> None:
        """Initialize the service.

        Args:
            station_directory: Lookup for station names, DIVA numbers and coordinates.
            trip_repository: Source of extracted trip responses.
            strip_city_prefix: Remove "Wien " from stop names before marker lookup.
            swap_marker_coordinates: Put the table longitude into the marker latitude
                and vice versa.
        """
        self._station_directory = station_directory
        self._trip_repository = trip_repository
        self._strip_city_prefix = strip_city_prefix
        self._swap_marker_coordinates = swap_marker_coordinates

    def validate_stations(self, origin: str, destination: str) -> None:
        """Check that both stations exist.

        Raises:
            StationNotFoundError: Naming every station that is missing.
        """
        missing = [
            name for name in (origin, destination) if not self._station_directory.exists(name)
        ]
        if missing:
            raise StationNotFoundError(missing)
        logger.debug(f"Stations verified: {origin} -> {destination}")

    async def plan(self, origin: str, destination: str, date: str, time: str) -> TripPlan:
        """Plan trips from origin to destination.

        Args:
            origin: Platform name of the origin station.
            destination: Platform name of the destination station.
            date: Departure date as YYYYMMDD.
            time: Departure time as HHMM.

        Returns:
            TripPlan with itineraries, text summary and map markers. If the response
            could not be read, the plan carries the extraction error instead.

        Raises:
            ValueError: If date or time are malformed.
            StationNotFoundError: If a station is unknown; no request is made.
        """
        validate_request_datetime(date, time)
        self.validate_stations(origin, destination)

        origin_diva = self._station_directory.resolve_identifier(origin)
        destination_diva = self._station_directory.resolve_identifier(destination)
        logger.info(
            f"Requesting trips {origin} ({origin_diva}) -> {destination} ({destination_diva})"
        )

        result = await self._trip_repository.find_trips(
            origin_diva, destination_diva, date, time
        )
        if not result.is_success:
            return TripPlan(origin=origin, destination=destination, error=result.error)

        itineraries = RouteAssembler.group(result.segments)
        logger.info(f"Found {len(itineraries)} itinerary(ies) for {origin} -> {destination}")

        return TripPlan(
            origin=origin,
            destination=destination,
            itineraries=itineraries,
            summary=RouteAssembler.format(itineraries),
            markers=self.build_markers(result.segments),
        )

    def build_markers(self, segments: Sequence[RouteSegment]) -> list[MapMarker]:
        """One marker per distinct known station along the segments, in first-seen order."""
        markers: list[MapMarker] = []
        seen: set[int] = set()

        for name in RouteAssembler.collect_station_names(segments):
            lookup_name = station_names.strip_city_prefix(name) if self._strip_city_prefix else name
            coordinates = self._station_directory.resolve_coordinates(lookup_name)
            if coordinates is None:
                logger.debug(f"No coordinates for stop {name!r}, skipping marker")
                continue

            diva = self._station_directory.resolve_identifier(lookup_name)
            if diva in seen:
                continue
            seen.add(diva)

            longitude, latitude = coordinates
            if self._swap_marker_coordinates:
                longitude, latitude = latitude, longitude
            markers.append(
                MapMarker(
                    latitude=latitude,
                    longitude=longitude,
                    title=lookup_name,
                    description=f"DIVA {diva}",
                )
            )

        return markers
