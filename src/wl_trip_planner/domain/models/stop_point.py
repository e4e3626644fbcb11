"""Stop point domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StopPoint:
    """A stop on a route segment.

    Attributes missing from the response stay ``None``; ``time`` is ``None``
    when the point carries no usable timestamp.
    """

    name: str | None
    stop_id: str | None
    platform: str | None
    time: str | None  # "HH:MM"


@dataclass(frozen=True)
class StopReference:
    """Name and stop id of a point, kept in extraction order for map display."""

    name: str | None
    stop_id: str | None
