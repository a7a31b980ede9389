"""G-code generation module for SVG line art.

This module orchestrates the toolpath pipeline:
- Path extraction from the SVG document
- Normalization, Bezier flattening and subpath splitting
- Tool radius compensation (on-line, inside, outside)
- Optional inside-out ordering by enclosed area
- Multi-pass cutting with vertical or spiral plunge

Each run is a pure function of the document and the tool parameters; the
same inputs always produce byte-identical output.
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .file_parser import extract_path_data, parse_document
from .models import (
    CUT,
    ORIGIN,
    RAPID,
    GeneratedProgram,
    InvalidParametersError,
    Point,
    Polyline,
    ToolParameters,
    ToolpathSegment,
)
from .path_parser import path_to_subpaths
from .utils.gcode_format import (
    generate_feed,
    generate_footer,
    generate_header,
    generate_linear_move,
    generate_pass_comment,
    generate_rapid_move,
    with_comment,
)
from .utils.multipass import iter_passes, plan_plunge
from .utils.path_ordering import calculate_area, order_paths
from .utils.tool_compensation import get_compensation_offset, offset_subpaths
from .utils.validators import validate_tool_parameters

logger = logging.getLogger(__name__)


class GenerationCancelled(Exception):
    """Raised when the caller's cancellation check returns True."""
    pass


@dataclass
class PolylineEmission:
    """G-code and preview segments for one polyline, plus the new head position."""
    lines: List[str]
    segments: List[ToolpathSegment]
    head: Point
    warnings: List[str] = field(default_factory=list)


def emit_polyline(polyline: Polyline, params: ToolParameters, head: Point) -> PolylineEmission:
    """
    Generate every pass for one polyline.

    The tool travels to the start once, then for each pass plunges, traces
    the polyline and (for more than two points) cuts back to the start. It
    only retracts after the last pass.

    Args:
        polyline: Points to cut, first point is the start
        params: Tool parameters
        head: Current XY position of the tool

    Returns:
        PolylineEmission with the head position after the last move
    """
    lines: List[str] = []
    segments: List[ToolpathSegment] = []
    warnings: List[str] = []
    start = polyline[0]

    for pass_info in iter_passes(params.depth_of_cut, params.pass_depth):
        lines.append(generate_pass_comment(pass_info.index + 1, pass_info.num_passes, pass_info.depth))

        if pass_info.is_first:
            segments.append(ToolpathSegment(head, start, RAPID))
            head = start
            lines.append(generate_rapid_move(x=start.x, y=start.y))
            lines.append(with_comment(generate_rapid_move(z=params.safe_z), "Approach"))

        plunge = plan_plunge(polyline, pass_info, params.plunge_mode, params.tool_diameter)
        if plunge.is_spiral:
            arc = plunge.arc_point
            lines.append(with_comment(
                generate_linear_move(x=arc.x, y=arc.y, z=-plunge.depth / 2, feed=params.plunge_rate),
                "Spiral plunge 1/2"
            ))
            lines.append(with_comment(
                generate_linear_move(x=start.x, y=start.y, z=-plunge.depth, feed=params.plunge_rate),
                "Spiral plunge 2/2"
            ))
            segments.append(ToolpathSegment(head, arc, CUT))
            segments.append(ToolpathSegment(arc, start, CUT))
            head = start
        else:
            if plunge.fallback:
                comment = "Vertical plunge (fallback)"
                warnings.append(
                    f"Spiral plunge not possible at ({start.x:.3f}, {start.y:.3f}); used vertical plunge"
                )
            elif pass_info.is_first:
                comment = "Vertical plunge"
            else:
                comment = "Plunge to next depth"
            lines.append(with_comment(generate_linear_move(z=-plunge.depth, feed=params.plunge_rate), comment))

        lines.append(generate_feed(params.feed_rate))

        for point in polyline[1:]:
            segments.append(ToolpathSegment(head, point, CUT))
            head = point
            lines.append(generate_linear_move(x=point.x, y=point.y))

        if len(polyline) > 2:
            segments.append(ToolpathSegment(head, start, CUT))
            head = start
            lines.append(generate_linear_move(x=start.x, y=start.y))

        if pass_info.is_last:
            lines.append(with_comment(generate_rapid_move(z=params.safe_z), "Retract"))
        else:
            lines.append("; Next pass")

    return PolylineEmission(lines, segments, head, warnings)


class GCodeGenerator:
    """G-code generator for one set of tool parameters."""

    def __init__(self, params: ToolParameters):
        """
        Initialize the generator.

        Args:
            params: Tool parameters for every run of this generator

        Raises:
            InvalidParametersError: if the parameters fail validation
        """
        errors = validate_tool_parameters(params)
        if errors:
            raise InvalidParametersError(errors)
        self.params = params

    def _check_cancelled(self, should_cancel: Optional[Callable[[], bool]]):
        if should_cancel is not None and should_cancel():
            raise GenerationCancelled("G-code generation was cancelled")

    def collect_polylines(
        self,
        path_data: List[str],
        warnings: List[str],
        should_cancel: Optional[Callable[[], bool]] = None
    ) -> List[Polyline]:
        """
        Turn raw path strings into compensated polylines, in source order.

        Features that the offset removes are skipped; a message for each
        affected source path is appended to `warnings`.
        """
        params = self.params
        polylines: List[Polyline] = []
        offset = get_compensation_offset(params.tool_diameter, params.cut_mode)

        for path_num, d in enumerate(path_data, 1):
            self._check_cancelled(should_cancel)

            subpaths = path_to_subpaths(d)
            if not subpaths:
                continue

            compensated = offset_subpaths(subpaths, params.tool_diameter, params.cut_mode)
            if not compensated:
                warnings.append(
                    f"Path {path_num}: offset of {offset:.3f} mm left nothing to cut "
                    f"(feature smaller than the tool?); skipped"
                )
                continue

            if params.cut_mode != 'on-line':
                contours = sum(1 for subpath in subpaths if calculate_area(subpath) > 0)
                if len(compensated) < contours:
                    warnings.append(
                        f"Path {path_num}: offset of {offset:.3f} mm left {len(compensated)} of "
                        f"{contours} contours; features smaller than the tool were skipped"
                    )

            polylines.extend(compensated)

        return polylines

    def generate(
        self,
        source_document: str,
        should_cancel: Optional[Callable[[], bool]] = None
    ) -> GeneratedProgram:
        """
        Generate a complete program from SVG markup.

        Args:
            source_document: SVG document text
            should_cancel: Optional callable checked between source paths

        Returns:
            GeneratedProgram with G-code lines, preview segments and warnings

        Raises:
            DocumentParseError: if the document is not well-formed
            PathDataError: if a path `d` attribute is malformed
            GenerationCancelled: if should_cancel returned True
        """
        params = self.params
        warnings: List[str] = []

        path_data = extract_path_data(parse_document(source_document))
        polylines = order_paths(self.collect_polylines(path_data, warnings, should_cancel), params.path_ordering)

        lines = generate_header(params.spindle_speed, params.feed_rate, params.safe_z)
        segments: List[ToolpathSegment] = []
        head = ORIGIN

        for polyline in polylines:
            emission = emit_polyline(polyline, params, head)
            lines.extend(emission.lines)
            segments.extend(emission.segments)
            warnings.extend(emission.warnings)
            head = emission.head

        segments.append(ToolpathSegment(head, ORIGIN, RAPID))
        lines.extend(generate_footer())

        logger.info(
            "Generated %d G-code lines for %d polylines from %d paths",
            len(lines), len(polylines), len(path_data)
        )
        for warning in warnings:
            logger.warning(warning)

        return GeneratedProgram(lines=lines, segments=segments, warnings=warnings)


def generate(
    source_document: str,
    params: ToolParameters,
    should_cancel: Optional[Callable[[], bool]] = None
) -> GeneratedProgram:
    """Generate G-code for an SVG document with the given tool parameters."""
    return GCodeGenerator(params).generate(source_document, should_cancel)
