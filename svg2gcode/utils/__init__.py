"""Shared utility modules for G-code generation."""

from .bezier import BEZIER_SEGMENTS, flatten_cubic_bezier, flatten_quadratic_bezier
from .multipass import (
    calculate_num_passes,
    calculate_pass_depths,
    iter_passes,
    calculate_spiral_point,
    plan_plunge
)
from .tool_compensation import (
    CLIPPER_SCALE,
    get_compensation_offset,
    calculate_line_normal,
    offset_subpath,
    offset_subpaths
)
from .path_ordering import calculate_signed_area, calculate_area, order_paths
from .gcode_format import (
    format_coordinate,
    generate_header,
    generate_footer,
    generate_feed,
    generate_rapid_move,
    generate_linear_move,
    generate_pass_comment,
    sanitize_project_name
)
from .validators import (
    validate_tool_parameters,
    validate_stepdown,
    validate_feed_rates,
    get_parameter_warnings
)

__all__ = [
    # bezier
    'BEZIER_SEGMENTS',
    'flatten_cubic_bezier',
    'flatten_quadratic_bezier',
    # multipass
    'calculate_num_passes',
    'calculate_pass_depths',
    'iter_passes',
    'calculate_spiral_point',
    'plan_plunge',
    # tool_compensation
    'CLIPPER_SCALE',
    'get_compensation_offset',
    'calculate_line_normal',
    'offset_subpath',
    'offset_subpaths',
    # path_ordering
    'calculate_signed_area',
    'calculate_area',
    'order_paths',
    # gcode_format
    'format_coordinate',
    'generate_header',
    'generate_footer',
    'generate_feed',
    'generate_rapid_move',
    'generate_linear_move',
    'generate_pass_comment',
    'sanitize_project_name',
    # validators
    'validate_tool_parameters',
    'validate_stepdown',
    'validate_feed_rates',
    'get_parameter_warnings',
]
