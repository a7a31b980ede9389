"""Multi-pass depth and plunge planning."""
import logging
import math
from dataclasses import dataclass
from typing import Iterator, List, Optional

from ..models import Point, Polyline
from .tool_compensation import calculate_line_normal

logger = logging.getLogger(__name__)

# Ratios above an integer by less than this still count as that integer,
# so 1.1 / 0.1 gives 11 passes rather than 12.
PASS_RATIO_TOLERANCE = 1e-9
SPIRAL_RADIUS_FACTOR = 0.75
MIN_SPIRAL_EDGE = 0.001


@dataclass(frozen=True)
class PassInfo:
    """One depth pass over a polyline."""
    index: int          # zero-indexed
    num_passes: int
    depth: float        # positive cumulative depth below Z0

    @property
    def is_first(self) -> bool:
        return self.index == 0

    @property
    def is_last(self) -> bool:
        return self.index == self.num_passes - 1


@dataclass(frozen=True)
class Plunge:
    """
    How the tool descends at the start of a pass.

    A vertical plunge has no `arc_point`. A spiral plunge moves to
    `arc_point` while descending to half depth, then back to the start.
    """
    depth: float
    arc_point: Optional[Point] = None
    fallback: bool = False

    @property
    def is_spiral(self) -> bool:
        return self.arc_point is not None


def calculate_num_passes(total_depth: float, pass_depth: float) -> int:
    """
    Calculate the number of passes needed for a given depth.

    Args:
        total_depth: Total depth to cut (mm)
        pass_depth: Maximum depth per pass (mm)

    Returns:
        Number of passes required (at least 1)
    """
    if pass_depth <= 0:
        return 1
    return max(1, math.ceil(total_depth / pass_depth - PASS_RATIO_TOLERANCE))


def calculate_pass_depths(total_depth: float, pass_depth: float) -> List[float]:
    """
    Calculate cumulative depths for each pass.

    Every pass removes a full `pass_depth` except the last, which is clipped
    to the requested total depth.

    Args:
        total_depth: Total depth to cut (mm)
        pass_depth: Maximum depth per pass (mm)

    Returns:
        List of cumulative depths, one per pass
    """
    num_passes = calculate_num_passes(total_depth, pass_depth)
    return [min((i + 1) * pass_depth, total_depth) for i in range(num_passes)]


def iter_passes(total_depth: float, pass_depth: float) -> Iterator[PassInfo]:
    """Iterate over passes, yielding a PassInfo for each."""
    depths = calculate_pass_depths(total_depth, pass_depth)
    for i, depth in enumerate(depths):
        yield PassInfo(index=i, num_passes=len(depths), depth=depth)


def calculate_spiral_point(polyline: Polyline, tool_diameter: float) -> Optional[Point]:
    """
    Point beside the polyline start used for a spiral plunge.

    It lies on the left perpendicular of the first edge at
    0.75 * tool_diameter from the start.

    Returns:
        The point, or None when the polyline has no usable first edge
    """
    if len(polyline) < 2:
        return None

    p0, p1 = polyline[0], polyline[1]
    if math.hypot(p1.x - p0.x, p1.y - p0.y) <= MIN_SPIRAL_EDGE:
        return None

    nx, ny = calculate_line_normal((p0.x, p0.y), (p1.x, p1.y))
    radius = tool_diameter * SPIRAL_RADIUS_FACTOR
    return Point(p0.x + nx * radius, p0.y + ny * radius)


def plan_plunge(
    polyline: Polyline,
    pass_info: PassInfo,
    plunge_mode: str,
    tool_diameter: float
) -> Plunge:
    """
    Choose the plunge for one pass.

    Only the first pass may spiral; later passes always plunge vertically
    since the tool is already in the cut.
    """
    if plunge_mode != 'spiral' or not pass_info.is_first:
        return Plunge(depth=pass_info.depth)

    arc_point = calculate_spiral_point(polyline, tool_diameter)
    if arc_point is None:
        logger.warning("Spiral plunge not possible at (%.3f, %.3f); using vertical plunge",
                       polyline[0].x, polyline[0].y)
        return Plunge(depth=pass_info.depth, fallback=True)
    return Plunge(depth=pass_info.depth, arc_point=arc_point)
