"""HTTP client for Wiener Linien trip requests."""

import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from wl_trip_planner.adapters.api_request_logger import log_api_request
from wl_trip_planner.adapters.config.app_config import DEFAULT_ROUTING_API_URL
from wl_trip_planner.adapters.request_guard import RequestGuard
from wl_trip_planner.adapters.wl_routing_api.constants import (
    DEFAULT_HEADERS,
    OUTPUT_FORMAT,
    ROUTING_API_MIN_DELAY_SECONDS,
    STOP_ID_TYPE,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class WlRoutingHttpClient:
    """HTTP client for the XML_TRIP_REQUEST2 endpoint.

    Network and HTTP errors are not handled here; they propagate to the caller.
    """

    def __init__(
        self,
        session: "ClientSession",
        base_url: str = DEFAULT_ROUTING_API_URL,
        timeout_seconds: float = 30,
    ) -> None:
        """Initialize the client.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            base_url: Trip request endpoint.
            timeout_seconds: Total timeout for one request.
        """
        self._session = session
        self._base_url = base_url
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._guard: RequestGuard | None = None

    async def _get_guard(self) -> RequestGuard:
        """Get the shared request guard for the routing API."""
        if self._guard is None:
            self._guard = await RequestGuard.get_instance(
                "wl_routing", ROUTING_API_MIN_DELAY_SECONDS
            )
        return self._guard

    @staticmethod
    def build_trip_params(
        origin_diva: int, destination_diva: int, date: str, time: str
    ) -> dict[str, str]:
        """Build query parameters for a stop-to-stop trip request."""
        return {
            "type_origin": STOP_ID_TYPE,
            "name_origin": str(origin_diva),
            "type_destination": STOP_ID_TYPE,
            "name_destination": str(destination_diva),
            "itdDate": date,
            "itdTime": time,
            "outputFormat": OUTPUT_FORMAT,
        }

    async def _log_error_response(self, response: Any) -> None:
        """Log error response details."""
        error_text = await response.text()
        error_body = error_text[:500] if error_text else "(empty response body)"
        content_type = response.headers.get("Content-Type", "unknown")
        logger.error(
            f"Routing API returned status {response.status} for {self._base_url}: "
            f"{error_body} (Content-Type: {content_type})"
        )

    async def _read_response(self, response: "ClientResponse") -> str:
        """Return the response body, raising for non-2xx statuses."""
        if response.status >= 400:
            await self._log_error_response(response)
        response.raise_for_status()
        return await response.text()

    async def fetch_trip_xml(
        self, origin_diva: int, destination_diva: int, date: str, time: str
    ) -> str:
        """Fetch the XML trip response between two stops.

        Args:
            origin_diva: DIVA number of the origin stop.
            destination_diva: DIVA number of the destination stop.
            date: Departure date as YYYYMMDD.
            time: Departure time as HHMM.

        Returns:
            The raw response body.

        Raises:
            aiohttp.ClientResponseError: If the API answers with an error status.
            aiohttp.ClientError: If the request could not be completed.
            asyncio.TimeoutError: If the request exceeds the configured timeout.
        """
        params = self.build_trip_params(origin_diva, destination_diva, date, time)
        log_api_request("GET", self._base_url, params=params, headers=DEFAULT_HEADERS)

        guard = await self._get_guard()
        async with guard:
            async with self._session.get(
                self._base_url, params=params, headers=DEFAULT_HEADERS, timeout=self._timeout
            ) as response:
                body = await self._read_response(response)

        logger.debug(f"Received {len(body)} characters from routing API")
        return body
