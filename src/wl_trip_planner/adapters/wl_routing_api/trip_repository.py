"""Trip repository adapter for the Wiener Linien routing API."""

import logging
from typing import TYPE_CHECKING

from wl_trip_planner.adapters.config.app_config import DEFAULT_ROUTING_API_URL
from wl_trip_planner.adapters.wl_routing_api.http_client import WlRoutingHttpClient
from wl_trip_planner.adapters.wl_routing_api.itinerary_parser import ItineraryParser
from wl_trip_planner.domain.models.extraction_result import ExtractionResult
from wl_trip_planner.domain.models.point_selection import PointSelection
from wl_trip_planner.domain.ports.trip_repository import TripRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

    from wl_trip_planner.adapters.config.app_config import AppConfig


class WlTripRepository(TripRepository):
    """Adapter for trip requests using the XML_TRIP_REQUEST2 endpoint."""

    def __init__(
        self,
        session: "ClientSession",
        base_url: str = DEFAULT_ROUTING_API_URL,
        timeout_seconds: float = 30,
        point_selection: PointSelection = PointSelection.ALL,
    ) -> None:
        """Initialize with an aiohttp session.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            base_url: Trip request endpoint.
            timeout_seconds: Total timeout for one request.
            point_selection: Which points of each partial route become stop points.
        """
        self._http_client = WlRoutingHttpClient(
            session=session, base_url=base_url, timeout_seconds=timeout_seconds
        )
        self._parser = ItineraryParser(point_selection=point_selection)

    @classmethod
    def from_config(cls, session: "ClientSession", config: "AppConfig") -> "WlTripRepository":
        """Create the repository from application configuration."""
        return cls(
            session=session,
            base_url=config.routing_api_url,
            timeout_seconds=config.request_timeout_seconds,
            point_selection=config.point_selection,
        )

    async def find_trips(
        self, origin_diva: int, destination_diva: int, date: str, time: str
    ) -> ExtractionResult:
        """Request trips between two stops and extract their partial routes.

        Args:
            origin_diva: DIVA number of the origin stop.
            destination_diva: DIVA number of the destination stop.
            date: Departure date as YYYYMMDD.
            time: Departure time as HHMM.

        Returns:
            ExtractionResult of the response body. Transport errors propagate.
        """
        xml_text = await self._http_client.fetch_trip_xml(
            origin_diva, destination_diva, date, time
        )
        result = self._parser.extract(xml_text)
        if not result.is_success:
            logger.warning(
                f"No trips extracted for {origin_diva} -> {destination_diva}: "
                f"{result.error.reason if result.error else ''}"
            )
        return result
