"""Point selection strategies for partial routes."""

from enum import StrEnum


class PointSelection(StrEnum):
    """Which itdPoint elements of a partial route become stop points.

    ALL keeps every point and infers a missing duration from the first two
    point times. SKIP_BOARDING drops the first two points of each partial
    route and infers a missing duration from the first kept and the last
    point time.
    """

    ALL = "all"
    SKIP_BOARDING = "skip_boarding"

    @property
    def skipped_points(self) -> int:
        return 2 if self is PointSelection.SKIP_BOARDING else 0
