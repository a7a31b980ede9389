"""Tool parameter validation utilities."""
import math
from typing import List

from ..models import CUT_MODES, PATH_ORDERINGS, PLUNGE_MODES, ToolParameters


def validate_tool_parameters(params: ToolParameters) -> List[str]:
    """
    Check that parameters can drive a generation run.

    Args:
        params: Tool parameters

    Returns:
        List of error messages (empty if valid)
    """
    errors = []

    positive = {
        'spindle_speed': params.spindle_speed,
        'feed_rate': params.feed_rate,
        'plunge_rate': params.plunge_rate,
        'pass_depth': params.pass_depth,
        'tool_diameter': params.tool_diameter,
    }
    for name, value in positive.items():
        if not math.isfinite(value):
            errors.append(f"{name} must be a finite number (got {value})")
        elif not value > 0:
            errors.append(f"{name} must be greater than 0 (got {value})")

    non_negative = {
        'depth_of_cut': params.depth_of_cut,
        'safe_z': params.safe_z,
    }
    for name, value in non_negative.items():
        if not math.isfinite(value):
            errors.append(f"{name} must be a finite number (got {value})")
        elif not value >= 0:
            errors.append(f"{name} must not be negative (got {value})")

    if params.cut_mode not in CUT_MODES:
        errors.append(f"Unknown cut mode '{params.cut_mode}'. Expected one of: {', '.join(CUT_MODES)}")
    if params.plunge_mode not in PLUNGE_MODES:
        errors.append(f"Unknown plunge mode '{params.plunge_mode}'. Expected one of: {', '.join(PLUNGE_MODES)}")
    if params.path_ordering not in PATH_ORDERINGS:
        errors.append(
            f"Unknown path ordering '{params.path_ordering}'. Expected one of: {', '.join(PATH_ORDERINGS)}"
        )

    return errors


def validate_stepdown(
    pass_depth: float,
    tool_diameter: float,
    max_stepdown_factor: float = 0.5
) -> List[str]:
    """
    Validate stepdown (pass depth) against tool diameter.

    Aggressive stepdowns can break end mills. Never blocks generation.

    Args:
        pass_depth: Depth per pass (mm)
        tool_diameter: End mill diameter (mm)
        max_stepdown_factor: Maximum safe ratio of pass_depth to tool_diameter

    Returns:
        List of warning messages
    """
    warnings = []

    if pass_depth <= 0 or tool_diameter <= 0:
        return warnings

    ratio = pass_depth / tool_diameter

    if ratio > 1.0:
        warnings.append(
            f"Pass depth ({pass_depth:.3f} mm) exceeds tool diameter ({tool_diameter:.3f} mm). "
            f"This will almost certainly break the end mill. Reduce pass depth."
        )
    elif ratio > max_stepdown_factor:
        warnings.append(
            f"Pass depth ({pass_depth:.3f} mm) is {ratio * 100:.0f}% of tool diameter ({tool_diameter:.3f} mm). "
            f"Recommended maximum is {max_stepdown_factor * 100:.0f}%. "
            f"Consider reducing pass depth to avoid tool breakage."
        )

    return warnings


def validate_feed_rates(
    feed_rate: float,
    plunge_rate: float
) -> List[str]:
    """
    Validate feed rate and plunge rate relationship.

    Plunge rate typically should not exceed feed rate.

    Args:
        feed_rate: Cutting feed rate (mm/min)
        plunge_rate: Plunge feed rate (mm/min)

    Returns:
        List of warning messages
    """
    warnings = []

    if plunge_rate > feed_rate:
        warnings.append(
            f"Plunge rate ({plunge_rate} mm/min) exceeds feed rate ({feed_rate} mm/min). "
            f"Verify this is intentional for your material and tool."
        )

    return warnings


def get_parameter_warnings(params: ToolParameters, max_stepdown_factor: float = 0.5) -> List[str]:
    """Collect non-blocking advisories for a parameter set."""
    return (
        validate_stepdown(params.pass_depth, params.tool_diameter, max_stepdown_factor)
        + validate_feed_rates(params.feed_rate, params.plunge_rate)
    )
