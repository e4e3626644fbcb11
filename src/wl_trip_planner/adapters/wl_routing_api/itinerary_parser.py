"""Parser for Wiener Linien XML_TRIP_REQUEST2 responses (EFA itd format).

The response nests trips as::

    itdPartialRouteList
      itdPartialRoute            one per partial route, in travel order
        itdPoint                 departure, arrival and intermediate stops
          itdDateTime/itdTime    hour="8" minute="5"
        itdMeansOfTransport      type, name, shortName, symbol, destination
        itdDuration              timeMinute="12" (not always present)

Only these element names are read; everything else is ignored.
"""

import logging
import re
import xml.etree.ElementTree as ET
from collections.abc import Iterator

from wl_trip_planner.domain.models.extraction_result import (
    ExtractionErrorKind,
    ExtractionResult,
)
from wl_trip_planner.domain.models.point_selection import PointSelection
from wl_trip_planner.domain.models.route_segment import NOT_AVAILABLE, RouteSegment
from wl_trip_planner.domain.models.stop_point import StopPoint, StopReference
from wl_trip_planner.domain.models.transport_leg import TransportLeg

logger = logging.getLogger(__name__)

ROUTE_LIST_TAG = "itdPartialRouteList"
ROUTE_TAG = "itdPartialRoute"
TRANSPORT_TAG = "itdMeansOfTransport"
DURATION_TAG = "itdDuration"
POINT_TAG = "itdPoint"
TIME_TAG = "itdTime"

NO_ROUTE_LIST_MESSAGE = "Keine itdPartialRouteList gefunden."

# Routing API marks points without a real timestamp with 00:00
NO_TIMESTAMP = "00:00"
MINUTES_PER_DAY = 24 * 60

_DIGITS = re.compile(r"[0-9]+")


def _local_name(tag: str) -> str:
    """Strip an XML namespace from a tag name."""
    return tag.rsplit("}", 1)[-1]


def _iter_named(element: ET.Element, name: str) -> Iterator[ET.Element]:
    """Yield all descendants with the given local name, in document order."""
    for child in element.iter():
        if child is not element and _local_name(child.tag) == name:
            yield child


def _digits(value: str | None) -> str | None:
    """Return the value if it is a non-empty run of decimal digits."""
    if value is not None and _DIGITS.fullmatch(value):
        return value
    return None


class ItineraryParser:
    """Turns XML trip responses into RouteSegment lists."""

    def __init__(self, point_selection: PointSelection = PointSelection.ALL) -> None:
        """Initialize the parser.

        Args:
            point_selection: Which points of each partial route become stop points.
        """
        self.point_selection = point_selection

    def extract(self, xml_text: str) -> ExtractionResult:
        """Extract all partial routes from a trip response.

        Partial routes are numbered from 1 within each itdPartialRouteList, so a
        response with several trips restarts the numbering for every trip.

        Args:
            xml_text: Raw response body.

        Returns:
            ExtractionResult with segments and stop references in document order,
            or a failure when the body is not XML or has no itdPartialRouteList.
        """
        try:
            root = ET.fromstring(xml_text.lstrip("\ufeff"))
        except ET.ParseError as e:
            logger.warning(f"Trip response is not well-formed XML: {e}")
            return ExtractionResult.failure(ExtractionErrorKind.MALFORMED_XML, str(e))

        route_lists = [root] if _local_name(root.tag) == ROUTE_LIST_TAG else []
        route_lists.extend(_iter_named(root, ROUTE_LIST_TAG))
        if not route_lists:
            logger.debug("Trip response contains no itdPartialRouteList")
            return ExtractionResult.failure(
                ExtractionErrorKind.NO_ROUTE_LIST, NO_ROUTE_LIST_MESSAGE
            )

        segments: list[RouteSegment] = []
        stop_references: list[StopReference] = []
        for route_list in route_lists:
            for index, route in enumerate(_iter_named(route_list, ROUTE_TAG), start=1):
                segment = self._parse_segment(route, index)
                segments.append(segment)
                stop_references.extend(
                    StopReference(name=point.name, stop_id=point.stop_id)
                    for point in segment.points
                )

        logger.debug(
            f"Extracted {len(segments)} partial route(s) from {len(route_lists)} route list(s)"
        )
        return ExtractionResult(segments=segments, stop_references=stop_references)

    def _parse_segment(self, route: ET.Element, index: int) -> RouteSegment:
        """Parse one itdPartialRoute element."""
        legs = [self._parse_leg(means) for means in _iter_named(route, TRANSPORT_TAG)]

        all_points = [self._parse_point(point) for point in _iter_named(route, POINT_TAG)]
        points = all_points[self.point_selection.skipped_points :]

        duration = self._parse_explicit_duration(route)
        if duration is None:
            start_time, end_time = self._fallback_times(points)
            if start_time and end_time:
                duration = self._minutes_between(start_time, end_time)

        return RouteSegment(index=index, duration_minutes=duration, legs=legs, points=points)

    def _fallback_times(self, points: list[StopPoint]) -> tuple[str | None, str | None]:
        """Pick the two point times used when no itdDuration is given."""
        if self.point_selection is PointSelection.SKIP_BOARDING:
            if not points:
                return None, None
            return points[0].time, points[-1].time

        if len(points) < 2:
            return None, None
        return points[0].time, points[1].time

    @staticmethod
    def _parse_leg(means: ET.Element) -> TransportLeg:
        """Parse an itdMeansOfTransport element. Empty attributes count as missing."""
        return TransportLeg(
            mode_type=means.get("type") or NOT_AVAILABLE,
            name=means.get("name") or NOT_AVAILABLE,
            short_name=means.get("shortName") or "",
            symbol=means.get("symbol") or "",
            destination=means.get("destination") or NOT_AVAILABLE,
        )

    @staticmethod
    def _parse_explicit_duration(route: ET.Element) -> int | None:
        """Read timeMinute of the first itdDuration that carries one."""
        for duration in _iter_named(route, DURATION_TAG):
            minutes = _digits(duration.get("timeMinute"))
            if minutes is not None:
                return int(minutes)
        return None

    @staticmethod
    def _parse_point(point: ET.Element) -> StopPoint:
        """Parse an itdPoint element."""
        return StopPoint(
            name=point.get("name"),
            stop_id=point.get("stopID"),
            platform=point.get("platform"),
            time=ItineraryParser._parse_point_time(point),
        )

    @staticmethod
    def _parse_point_time(point: ET.Element) -> str | None:
        """Return the first usable HH:MM time of a point."""
        for time_element in _iter_named(point, TIME_TAG):
            formatted = ItineraryParser._format_time(time_element)
            if formatted is not None and formatted != NO_TIMESTAMP:
                return formatted
        return None

    @staticmethod
    def _format_time(time_element: ET.Element) -> str | None:
        """Format an itdTime element as HH:MM, or None if hour or minute is missing."""
        hour = _digits(time_element.get("hour"))
        minute = _digits(time_element.get("minute"))
        if hour is None or minute is None:
            return None
        return f"{hour.zfill(2)}:{minute.zfill(2)}"

    @staticmethod
    def _minutes_between(start: str, end: str) -> int:
        """Minutes from start to end, wrapping past midnight."""
        start_hour, start_minute = (int(part) for part in start.split(":"))
        end_hour, end_minute = (int(part) for part in end.split(":"))
        delta = (end_hour * 60 + end_minute) - (start_hour * 60 + start_minute)
        return delta % MINUTES_PER_DAY
