"""Grouping of partial routes into itineraries and their text rendering."""

import logging
from collections.abc import Sequence

from pydantic import TypeAdapter, ValidationError

from wl_trip_planner.domain.models import (
    NOT_AVAILABLE,
    ExtractionError,
    ExtractionErrorKind,
    Itinerary,
    RouteSegment,
    StationNamesResult,
    StopPoint,
    TransportLeg,
)

logger = logging.getLogger(__name__)

ITINERARY_DELIMITER = "---"

_SEGMENT_LIST = TypeAdapter(list[RouteSegment])


def segments_to_json(segments: Sequence[RouteSegment]) -> str:
    """Serialize a flat segment list to JSON."""
    return _SEGMENT_LIST.dump_json(list(segments), indent=2).decode("utf-8")


def segments_from_json(payload: str | bytes) -> list[RouteSegment]:
    """Deserialize a flat segment list.

    Raises:
        pydantic.ValidationError: If the payload is not a valid segment list.
    """
    return _SEGMENT_LIST.validate_json(payload)


class RouteAssembler:
    """Regroups flat partial route lists into itineraries."""

    @staticmethod
    def group(segments: Sequence[RouteSegment]) -> list[Itinerary]:
        """Group segments into itineraries.

        Every segment with index 1 starts a new itinerary that takes all following
        segments up to the next index-1 segment. Segments are neither copied nor
        renumbered.
        """
        itineraries: list[Itinerary] = []
        current: list[RouteSegment] = []
        for segment in segments:
            if segment.index == 1 and current:
                itineraries.append(Itinerary(segments=current))
                current = []
            current.append(segment)
        if current:
            itineraries.append(Itinerary(segments=current))

        logger.debug(f"Grouped {len(segments)} segment(s) into {len(itineraries)} itinerary(ies)")
        return itineraries

    @staticmethod
    def format(itineraries: Sequence[Itinerary]) -> str:
        """Render itineraries as plain text, one delimited block per itinerary."""
        return "".join(
            f"\nRoute {number}:\n{RouteAssembler._format_itinerary(itinerary)}"
            f"{ITINERARY_DELIMITER}\n"
            for number, itinerary in enumerate(itineraries, start=1)
        )

    @staticmethod
    def _format_itinerary(itinerary: Itinerary) -> str:
        blocks = []
        for number, segment in enumerate(itinerary.segments, start=1):
            legs = "\n".join(RouteAssembler._format_leg(leg) for leg in segment.legs)
            points = "\n".join(RouteAssembler._format_point(point) for point in segment.points)
            blocks.append(
                f"Teilroute {number}:\nDauer: {segment.duration_label}\n{legs}\n{points}\n"
            )
        return "\n".join(blocks)

    @staticmethod
    def _format_leg(leg: TransportLeg) -> str:
        return (
            f"Verkehrsmittel: {leg.mode_type}, Name: {leg.name}, Kurzname: {leg.short_name}, "
            f"Symbol: {leg.symbol}, Ziel: {leg.destination}"
        )

    @staticmethod
    def _format_point(point: StopPoint) -> str:
        return (
            f"Punkt: {point.name or NOT_AVAILABLE}, StopID: {point.stop_id or NOT_AVAILABLE}, "
            f"Platform: {point.platform or NOT_AVAILABLE}, Zeit: {point.time or NOT_AVAILABLE}"
        )

    @staticmethod
    def collect_station_names(segments: Sequence[RouteSegment]) -> list[str]:
        """Distinct stop names of all segments in first-seen order."""
        names: dict[str, None] = {}
        for segment in segments:
            for point in segment.points:
                if point.name:
                    names.setdefault(point.name, None)
        return list(names)

    @staticmethod
    def extract_station_names(payload: str | bytes) -> StationNamesResult:
        """Collect distinct stop names from a JSON segment list.

        Args:
            payload: JSON as produced by segments_to_json.

        Returns:
            StationNamesResult with the names, or an INVALID_PAYLOAD error if the
            payload is not a valid segment list.
        """
        try:
            segments = segments_from_json(payload)
        except ValidationError as e:
            logger.warning(f"Cannot read segment list: {e.error_count()} validation error(s)")
            return StationNamesResult(
                error=ExtractionError(
                    kind=ExtractionErrorKind.INVALID_PAYLOAD,
                    reason=f"Fehler beim Parsen des JSON-Strings: {e}",
                )
            )
        return StationNamesResult(names=RouteAssembler.collect_station_names(segments))
