"""Result types for response extraction."""

from dataclasses import dataclass, field
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from wl_trip_planner.domain.models.route_segment import RouteSegment
from wl_trip_planner.domain.models.stop_point import StopReference


class ExtractionErrorKind(StrEnum):
    """Why an extraction produced no data."""

    NO_ROUTE_LIST = "no_route_list"
    MALFORMED_XML = "malformed_xml"
    INVALID_PAYLOAD = "invalid_payload"


class ExtractionError(BaseModel):
    """Details about a failed extraction."""

    model_config = ConfigDict(frozen=True)

    kind: ExtractionErrorKind
    reason: str


@dataclass(frozen=True)
class ExtractionResult:
    """Segments extracted from one trip response.

    An empty ``segments`` list with ``error`` set to None means the response
    was well-formed but contained no partial routes.
    """

    segments: list[RouteSegment] = field(default_factory=list)
    stop_references: list[StopReference] = field(default_factory=list)
    error: ExtractionError | None = None

    @property
    def is_success(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, kind: ExtractionErrorKind, reason: str) -> "ExtractionResult":
        return cls(error=ExtractionError(kind=kind, reason=reason))


@dataclass(frozen=True)
class StationNamesResult:
    """Distinct stop names collected from a serialized segment list."""

    names: list[str] = field(default_factory=list)
    error: ExtractionError | None = None

    @property
    def is_success(self) -> bool:
        return self.error is None
