"""Tool compensation utilities for offset calculations.

Offsets are computed on an integer grid of CLIPPER_SCALE units per
millimetre. Scaled coordinates never leave this module.
"""
import logging
import math
from functools import reduce
from typing import List, Tuple

from shapely.geometry import LineString, MultiPolygon, Polygon
from shapely.geometry import Point as ShapelyPoint
from shapely.ops import unary_union
from shapely.validation import make_valid

from ..models import Point, Polyline

logger = logging.getLogger(__name__)

CLIPPER_SCALE = 1000
ROUND_JOIN_SEGMENTS = 16

IntRing = List[Tuple[int, int]]


def get_compensation_offset(tool_diameter: float, cut_mode: str) -> float:
    """
    Get the signed offset distance for a cut mode.

    Args:
        tool_diameter: Tool diameter (mm)
        cut_mode: "on-line", "inside", or "outside"

    Returns:
        Offset amount:
        - 0 for 'on-line' (tool center follows the path)
        - -tool_radius for 'inside' (shrink path, cut inside)
        - +tool_radius for 'outside' (expand path, cut outside)
    """
    tool_radius = tool_diameter / 2
    if cut_mode == 'inside':
        return -tool_radius
    elif cut_mode == 'outside':
        return tool_radius
    return 0.0


def calculate_line_normal(
    p1: Tuple[float, float],
    p2: Tuple[float, float]
) -> Tuple[float, float]:
    """
    Calculate the unit normal vector perpendicular to a line segment.

    The normal points to the left of the direction from p1 to p2.

    Args:
        p1: Start point (x, y)
        p2: End point (x, y)

    Returns:
        Unit normal vector (nx, ny), or (0, 0) for a zero-length segment
    """
    dx = p2[0] - p1[0]
    dy = p2[1] - p1[1]

    length = math.sqrt(dx * dx + dy * dy)
    if length == 0:
        return (0.0, 0.0)

    # (-dy, dx) points left of the direction vector
    return (-dy / length, dx / length)


def to_fixed_point(polyline: Polyline) -> IntRing:
    """Scale a polyline onto the integer offset grid."""
    return [
        (int(round(p.x * CLIPPER_SCALE)), int(round(p.y * CLIPPER_SCALE)))
        for p in polyline
    ]


def from_fixed_point(ring: IntRing) -> Polyline:
    """Convert integer grid coordinates back to millimetres."""
    return [Point(x / CLIPPER_SCALE, y / CLIPPER_SCALE) for x, y in ring]


def _dedupe(ring: IntRing) -> IntRing:
    """Drop consecutive duplicates and a repeated closing vertex."""
    result: IntRing = []
    for pt in ring:
        if not result or result[-1] != pt:
            result.append(pt)
    if len(result) > 1 and result[0] == result[-1]:
        result.pop()
    return result


def _ring_geometry(ring: IntRing):
    """Build a polygon for a ring; degenerate rings become lines or points."""
    if len(ring) == 1:
        return ShapelyPoint(ring[0])
    if len(ring) == 2:
        return LineString(ring)

    polygon = Polygon(ring)
    if not polygon.is_valid:
        # Self-intersecting contour: keep only the polygonal pieces
        repaired = make_valid(polygon)
        pieces = [g for g in getattr(repaired, 'geoms', [repaired]) if isinstance(g, (Polygon, MultiPolygon))]
        polygon = unary_union(pieces)
    if polygon.is_empty or polygon.area == 0:
        return LineString(ring + [ring[0]])
    return polygon


def _is_areal(geometry) -> bool:
    return isinstance(geometry, (Polygon, MultiPolygon)) and geometry.area > 0


def _polygon_rings(geometry) -> List[IntRing]:
    """Extract exterior and hole rings of every polygon, snapped to the grid."""
    if geometry.is_empty:
        return []
    if isinstance(geometry, Polygon):
        polygons = [geometry]
    elif isinstance(geometry, MultiPolygon):
        polygons = list(geometry.geoms)
    else:
        polygons = [g for g in getattr(geometry, 'geoms', []) if isinstance(g, Polygon)]

    rings = []
    for polygon in polygons:
        for linear_ring in [polygon.exterior, *polygon.interiors]:
            ring = _dedupe([(int(round(x)), int(round(y))) for x, y in linear_ring.coords])
            if ring:
                rings.append(ring)
    return rings


def _offset_rings(rings: List[IntRing], delta: float) -> List[IntRing]:
    """
    Offset closed integer rings by `delta` grid units with round joins.

    Rings are combined with even-odd semantics, so a ring nested inside
    another acts as a hole and moves the opposite way.
    """
    geometries = [_ring_geometry(ring) for ring in rings if ring]
    areas = [g for g in geometries if _is_areal(g)]
    degenerate = [g for g in geometries if not _is_areal(g)]

    parts = []
    if areas:
        region = reduce(lambda a, b: a.symmetric_difference(b), areas)
        parts.append(region.buffer(delta, quad_segs=ROUND_JOIN_SEGMENTS, join_style='round'))
    if degenerate and delta > 0:
        # Zero-area contours only grow; shrinking them leaves nothing
        for geometry in degenerate:
            parts.append(geometry.buffer(delta, quad_segs=ROUND_JOIN_SEGMENTS, join_style='round'))

    if not parts:
        return []
    return _polygon_rings(unary_union(parts))


def offset_subpaths(
    subpaths: List[Polyline],
    tool_diameter: float,
    cut_mode: str
) -> List[Polyline]:
    """
    Apply tool radius compensation to the subpaths of one source path.

    'on-line' returns the subpaths unchanged (no fixed-point round trip).
    'inside' and 'outside' treat every subpath as a closed contour and
    offset by half the tool diameter.

    Args:
        subpaths: Polylines from one (possibly compound) path
        tool_diameter: Tool diameter (mm)
        cut_mode: "on-line", "inside", or "outside"

    Returns:
        Zero or more offset polylines; closed rings are returned without a
        repeated closing vertex
    """
    if cut_mode == 'on-line':
        return [list(subpath) for subpath in subpaths]

    offset = get_compensation_offset(tool_diameter, cut_mode)
    rings = [_dedupe(to_fixed_point(subpath)) for subpath in subpaths]
    result = [from_fixed_point(ring) for ring in _offset_rings(rings, offset * CLIPPER_SCALE)]

    if not result:
        logger.warning(
            "Offset of %d subpath(s) by %.3f mm produced no geometry (feature smaller than tool?)",
            len(subpaths), offset
        )
    return result


def offset_subpath(subpath: Polyline, tool_diameter: float, cut_mode: str) -> List[Polyline]:
    """Apply tool radius compensation to a single subpath."""
    return offset_subpaths([subpath], tool_diameter, cut_mode)
