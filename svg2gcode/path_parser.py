"""Path-data normalization, curve flattening and subpath segmentation.

Tokenizing the `d` attribute (including relative commands, implicit
repeats and smooth-curve reflection) is delegated to `svg.path`; this module
maps its segments onto the project's own absolute command types and turns
them into polylines.
"""
import logging
import re
from typing import List

from svg.path import Arc, Close, CubicBezier, Line, Move, QuadraticBezier, parse_path

from .file_parser import ParseError
from .models import ClosePath, Command, CubicTo, LineTo, MoveTo, Point, Polyline, QuadraticTo
from .utils.bezier import BEZIER_SEGMENTS, flatten_cubic_bezier, flatten_quadratic_bezier

logger = logging.getLogger(__name__)

# svg.path stops at the first unknown character instead of failing, so
# anything outside the path alphabet is rejected up front.
PATH_DATA_CHARS = re.compile(r"[MmZzLlHhVvCcSsQqTtAa0-9eE.,+\-\s]*")
FIRST_COMMAND = re.compile(r"\s*[Mm]")


class PathDataError(ParseError):
    """A path `d` attribute could not be parsed."""

    def __init__(self, path_data: str, reason: str):
        self.path_data = path_data
        snippet = path_data if len(path_data) <= 60 else path_data[:57] + '...'
        super().__init__(f"Invalid path data '{snippet}': {reason}")


def check_path_data(path_data: str):
    """
    Reject path data that svg.path would silently truncate.

    Raises:
        PathDataError: if the data does not open with a move-to or contains
            characters outside the path grammar
    """
    if not path_data.strip():
        return
    if not FIRST_COMMAND.match(path_data):
        raise PathDataError(path_data, "path data must start with a move-to command")
    valid = PATH_DATA_CHARS.match(path_data)
    if valid.end() != len(path_data):
        raise PathDataError(path_data, f"unexpected character {path_data[valid.end()]!r} at offset {valid.end()}")


def _point(value: complex) -> Point:
    return Point(value.real, value.imag)


def parse_path_data(path_data: str, segments: int = BEZIER_SEGMENTS) -> List[Command]:
    """
    Parse a path `d` string into absolute-coordinate commands.

    H/V lines arrive as general line-to commands. Elliptical arcs are sampled
    into `segments` line-to commands, since the pipeline never emits arcs.

    Args:
        path_data: Raw `d` attribute value
        segments: Subdivision count used for arcs

    Returns:
        List of MoveTo, LineTo, CubicTo, QuadraticTo and ClosePath commands

    Raises:
        PathDataError: if the string is not valid path data
    """
    check_path_data(path_data)

    try:
        path = parse_path(path_data)
    except Exception as e:
        raise PathDataError(path_data, str(e) or type(e).__name__)

    commands: List[Command] = []
    for segment in path:
        if isinstance(segment, Move):
            commands.append(MoveTo(_point(segment.end)))
        elif isinstance(segment, Close):
            commands.append(ClosePath(_point(segment.end)))
        elif isinstance(segment, Line):
            commands.append(LineTo(_point(segment.end)))
        elif isinstance(segment, CubicBezier):
            commands.append(CubicTo(
                _point(segment.control1),
                _point(segment.control2),
                _point(segment.end)
            ))
        elif isinstance(segment, QuadraticBezier):
            commands.append(QuadraticTo(_point(segment.control), _point(segment.end)))
        elif isinstance(segment, Arc):
            for i in range(1, segments + 1):
                commands.append(LineTo(_point(segment.point(i / segments))))
        else:
            raise PathDataError(path_data, f"unsupported segment {type(segment).__name__}")

    return commands


def flatten_commands(commands: List[Command], segments: int = BEZIER_SEGMENTS) -> List[Command]:
    """
    Replace curves and close-path commands with line-to commands.

    Returns:
        Stream of MoveTo and LineTo commands only
    """
    flat: List[Command] = []
    cursor = Point(0.0, 0.0)
    for command in commands:
        if isinstance(command, CubicTo):
            points = flatten_cubic_bezier(cursor, command.control1, command.control2, command.point, segments)
            flat.extend(LineTo(p) for p in points)
        elif isinstance(command, QuadraticTo):
            points = flatten_quadratic_bezier(cursor, command.control, command.point, segments)
            flat.extend(LineTo(p) for p in points)
        elif isinstance(command, ClosePath):
            flat.append(LineTo(command.point))
        else:
            flat.append(command)
        cursor = command.point
    return flat


def split_subpaths(commands: List[Command]) -> List[Polyline]:
    """
    Split a flattened command stream into subpaths at each move-to.

    Drawing commands that precede any move-to start an implicit subpath.
    Empty subpaths are dropped; the order of compound subpaths is kept.
    """
    subpaths: List[Polyline] = []
    current: Polyline = []
    for command in commands:
        if isinstance(command, MoveTo):
            if current:
                subpaths.append(current)
            current = [command.point]
        else:
            current.append(command.point)

    if current:
        subpaths.append(current)
    return subpaths


def path_to_subpaths(path_data: str, segments: int = BEZIER_SEGMENTS) -> List[Polyline]:
    """Parse, flatten and segment one path `d` string."""
    commands = parse_path_data(path_data, segments)
    subpaths = split_subpaths(flatten_commands(commands, segments))
    logger.debug("Path with %d commands produced %d subpaths", len(commands), len(subpaths))
    return subpaths
