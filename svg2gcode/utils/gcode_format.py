"""G-code formatting utilities.

Coordinates are millimetres with three decimals. Comments use the `;` form.
"""
import re
from typing import List, Optional

COORDINATE_PRECISION = 3
FEED_PRECISION = 1


def format_coordinate(value: float, precision: int = COORDINATE_PRECISION) -> str:
    """
    Format a coordinate value with fixed decimal places.

    Args:
        value: The coordinate value
        precision: Number of decimal places (default 3)

    Returns:
        Formatted string representation, never "-0.000"
    """
    # Adding 0.0 turns a rounded -0.0 into 0.0
    return f"{round(value, precision) + 0.0:.{precision}f}"


def with_comment(line: str, comment: Optional[str]) -> str:
    if comment:
        return f"{line} ; {comment}"
    return line


def generate_header(
    spindle_speed: int,
    feed_rate: float,
    safety_height: float
) -> List[str]:
    """
    Generate the program header.

    Sets metric units and absolute positioning, starts the spindle, lifts to
    the safety height and sets the cutting feed once.

    Args:
        spindle_speed: Spindle RPM
        feed_rate: Cutting feed (mm/min)
        safety_height: Z height for safe positioning

    Returns:
        List of G-code header lines
    """
    return [
        "; G-code generated from SVG",
        "G21 ; Units in mm",
        "G90 ; Absolute positioning",
        f"M03 S{spindle_speed} ; Spindle on",
        with_comment(generate_rapid_move(z=safety_height), "Safe height"),
        with_comment(generate_feed(feed_rate), "Feed rate"),
    ]


def generate_footer() -> List[str]:
    """
    Generate the program footer.

    Returns to the origin, stops the spindle and ends the program.
    """
    return [
        with_comment(generate_rapid_move(x=0, y=0), "Return home"),
        "M05 ; Spindle off",
        "M30 ; End of program",
    ]


def generate_feed(feed_rate: float) -> str:
    """Generate a standalone feed rate word."""
    return f"F{format_coordinate(feed_rate, FEED_PRECISION)}"


def generate_rapid_move(
    x: Optional[float] = None,
    y: Optional[float] = None,
    z: Optional[float] = None
) -> str:
    """
    Generate a G00 rapid move command.

    Args:
        x: X coordinate (optional)
        y: Y coordinate (optional)
        z: Z coordinate (optional)

    Returns:
        G00 command string
    """
    parts = ["G00"]
    if x is not None:
        parts.append(f"X{format_coordinate(x)}")
    if y is not None:
        parts.append(f"Y{format_coordinate(y)}")
    if z is not None:
        parts.append(f"Z{format_coordinate(z)}")
    return " ".join(parts)


def generate_linear_move(
    x: Optional[float] = None,
    y: Optional[float] = None,
    z: Optional[float] = None,
    feed: Optional[float] = None
) -> str:
    """
    Generate a G01 linear move command.

    Args:
        x: X coordinate (optional)
        y: Y coordinate (optional)
        z: Z coordinate (optional)
        feed: Feed rate (optional)

    Returns:
        G01 command string
    """
    parts = ["G01"]
    if x is not None:
        parts.append(f"X{format_coordinate(x)}")
    if y is not None:
        parts.append(f"Y{format_coordinate(y)}")
    if z is not None:
        parts.append(f"Z{format_coordinate(z)}")
    if feed is not None:
        parts.append(generate_feed(feed))
    return " ".join(parts)


def generate_pass_comment(pass_num: int, num_passes: int, depth: float) -> str:
    """Comment line announcing a depth pass (pass_num is 1-based)."""
    return f"; Pass {pass_num}/{num_passes} - Depth: {format_coordinate(depth)} mm"


def sanitize_project_name(name: str) -> str:
    """
    Clean a name for filesystem use.

    - Replace spaces with underscores
    - Remove special characters except underscores and hyphens
    - Truncate to 50 characters max

    Args:
        name: Original name

    Returns:
        Sanitized name safe for filesystem
    """
    sanitized = name.replace(" ", "_")
    sanitized = re.sub(r'[^a-zA-Z0-9_-]', '', sanitized)
    return sanitized[:50]
