"""Bezier curve flattening utilities.

Curves are approximated by a fixed number of uniformly parameterized line
segments. The density does not adapt to curvature.
"""
from typing import List

from ..models import Point

BEZIER_SEGMENTS = 10


def flatten_cubic_bezier(
    p0: Point,
    p1: Point,
    p2: Point,
    p3: Point,
    segments: int = BEZIER_SEGMENTS
) -> List[Point]:
    """
    Sample a cubic Bezier at t = i/segments for i = 1..segments.

    The start point p0 is not included (it is the current cursor). The last
    sample equals p3 exactly.

    Args:
        p0: Start point
        p1: First control point
        p2: Second control point
        p3: End point
        segments: Number of line segments

    Returns:
        List of `segments` points ending at p3
    """
    points = []
    for i in range(1, segments + 1):
        t = i / segments
        inv_t = 1 - t
        a = inv_t * inv_t * inv_t
        b = 3 * inv_t * inv_t * t
        c = 3 * inv_t * t * t
        d = t * t * t
        points.append(Point(
            a * p0.x + b * p1.x + c * p2.x + d * p3.x,
            a * p0.y + b * p1.y + c * p2.y + d * p3.y
        ))
    return points


def flatten_quadratic_bezier(
    p0: Point,
    p1: Point,
    p2: Point,
    segments: int = BEZIER_SEGMENTS
) -> List[Point]:
    """
    Sample a quadratic Bezier at t = i/segments for i = 1..segments.

    Args:
        p0: Start point
        p1: Control point
        p2: End point
        segments: Number of line segments

    Returns:
        List of `segments` points ending at p2
    """
    points = []
    for i in range(1, segments + 1):
        t = i / segments
        inv_t = 1 - t
        a = inv_t * inv_t
        b = 2 * inv_t * t
        c = t * t
        points.append(Point(
            a * p0.x + b * p1.x + c * p2.x,
            a * p0.y + b * p1.y + c * p2.y
        ))
    return points
