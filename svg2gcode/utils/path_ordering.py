"""Path ordering by enclosed area."""
from typing import List

import numpy as np

from ..models import Polyline


def calculate_signed_area(polyline: Polyline) -> float:
    """
    Shoelace area of a polyline treated as a closed polygon.

    Positive for counter-clockwise vertex order (Y up), negative for
    clockwise. Polylines with fewer than three points have zero area.
    """
    if len(polyline) < 3:
        return 0.0
    xs = np.array([p.x for p in polyline], dtype=float)
    ys = np.array([p.y for p in polyline], dtype=float)
    return float(0.5 * (np.dot(xs, np.roll(ys, -1)) - np.dot(np.roll(xs, -1), ys)))


def calculate_area(polyline: Polyline) -> float:
    """Absolute enclosed area of a polyline."""
    return abs(calculate_signed_area(polyline))


def order_paths(polylines: List[Polyline], path_ordering: str) -> List[Polyline]:
    """
    Order polylines for cutting.

    'inside-out' cuts small features first by sorting on absolute area;
    the sort is stable, so equal areas keep their input order. 'natural'
    keeps extraction order.

    Args:
        polylines: Offset polylines from all source paths
        path_ordering: "natural" or "inside-out"

    Returns:
        New list in cutting order
    """
    if path_ordering == 'inside-out':
        return sorted(polylines, key=calculate_area)
    return list(polylines)
