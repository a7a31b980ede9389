"""Shared dataclasses for the SVG to G-code pipeline."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


CUT_MODES = ('on-line', 'inside', 'outside')
PLUNGE_MODES = ('vertical', 'spiral')
PATH_ORDERINGS = ('natural', 'inside-out')

RAPID = 'rapid'
CUT = 'cut'


class InvalidParametersError(ValueError):
    """Raised when tool parameters cannot be used for generation."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("Invalid tool parameters:\n" + "\n".join(f"- {e}" for e in self.errors))


@dataclass(frozen=True)
class Point:
    """A 2D coordinate point in millimetres."""
    x: float
    y: float


ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True)
class MoveTo:
    """Start a new subpath at an absolute point."""
    point: Point


@dataclass(frozen=True)
class LineTo:
    """Straight line to an absolute point."""
    point: Point


@dataclass(frozen=True)
class CubicTo:
    """Cubic Bezier from the cursor to `point`."""
    control1: Point
    control2: Point
    point: Point


@dataclass(frozen=True)
class QuadraticTo:
    """Quadratic Bezier from the cursor to `point`."""
    control: Point
    point: Point


@dataclass(frozen=True)
class ClosePath:
    """Close the current subpath; `point` is the subpath start."""
    point: Point


Command = Union[MoveTo, LineTo, CubicTo, QuadraticTo, ClosePath]

# A subpath or offset polyline: ordered, non-empty list of points.
Polyline = List[Point]


@dataclass(frozen=True)
class ToolParameters:
    """Cutting parameters for one generation run (millimetres, mm/min, rpm)."""
    spindle_speed: int
    feed_rate: float
    plunge_rate: float
    depth_of_cut: float
    pass_depth: float
    safe_z: float
    tool_diameter: float
    cut_mode: str = 'on-line'        # 'on-line', 'inside', 'outside'
    plunge_mode: str = 'vertical'    # 'vertical', 'spiral'
    path_ordering: str = 'natural'   # 'natural', 'inside-out'

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        defaults: Optional[Dict[str, Any]] = None
    ) -> 'ToolParameters':
        """
        Build parameters from form/JSON data merged over defaults.

        Accepts both snake_case and camelCase keys (``feedRate``).

        Raises:
            InvalidParametersError: if a value is missing or not a number
        """
        merged = dict(defaults or {})
        for key, value in (data or {}).items():
            if value is None or value == '':
                continue
            merged[_CAMEL_TO_SNAKE.get(key, key)] = value

        errors = []
        values = {}
        for name, converter in _FIELD_CONVERTERS.items():
            if name not in merged:
                errors.append(f"Missing parameter '{name}'")
                continue
            try:
                values[name] = converter(merged[name])
            except (TypeError, ValueError, OverflowError):
                errors.append(f"Parameter '{name}' has invalid value {merged[name]!r}")

        if errors:
            raise InvalidParametersError(errors)
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in _FIELD_CONVERTERS}


def _to_int(value: Any) -> int:
    return int(float(value))


_FIELD_CONVERTERS = {
    'spindle_speed': _to_int,
    'feed_rate': float,
    'plunge_rate': float,
    'depth_of_cut': float,
    'pass_depth': float,
    'safe_z': float,
    'tool_diameter': float,
    'cut_mode': str,
    'plunge_mode': str,
    'path_ordering': str,
}

_CAMEL_TO_SNAKE = {
    'spindleSpeed': 'spindle_speed',
    'feedRate': 'feed_rate',
    'plungeRate': 'plunge_rate',
    'depthOfCut': 'depth_of_cut',
    'passDepth': 'pass_depth',
    'safeZ': 'safe_z',
    'toolDiameter': 'tool_diameter',
    'cutMode': 'cut_mode',
    'plungeMode': 'plunge_mode',
    'pathOrdering': 'path_ordering',
}


@dataclass(frozen=True)
class ToolpathSegment:
    """One straight tool motion for the preview renderer."""
    start: Point
    end: Point
    kind: str  # 'rapid' or 'cut'

    def to_dict(self) -> Dict[str, Any]:
        return {
            'start': [self.start.x, self.start.y],
            'end': [self.end.x, self.end.y],
            'kind': self.kind,
        }


@dataclass
class GeneratedProgram:
    """Result of one generation run."""
    lines: List[str]
    segments: List[ToolpathSegment]
    warnings: List[str] = field(default_factory=list)

    @property
    def program(self) -> str:
        """The G-code program as a single newline-joined text block."""
        return "\n".join(self.lines)
