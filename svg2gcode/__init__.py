"""SVG line art to CNC milling G-code."""

__version__ = "0.1.0"

from .models import (
    Point,
    ToolParameters,
    ToolpathSegment,
    GeneratedProgram,
    InvalidParametersError
)
from .file_parser import (
    ParseError,
    DocumentParseError,
    parse_document,
    extract_path_data
)
from .path_parser import (
    PathDataError,
    parse_path_data,
    flatten_commands,
    split_subpaths,
    path_to_subpaths
)
from .gcode_generator import (
    GCodeGenerator,
    GenerationCancelled,
    emit_polyline,
    generate
)

__all__ = [
    # Models
    'Point',
    'ToolParameters',
    'ToolpathSegment',
    'GeneratedProgram',
    'InvalidParametersError',
    # Document parsing
    'ParseError',
    'DocumentParseError',
    'parse_document',
    'extract_path_data',
    # Path data
    'PathDataError',
    'parse_path_data',
    'flatten_commands',
    'split_subpaths',
    'path_to_subpaths',
    # Main generator
    'GCodeGenerator',
    'GenerationCancelled',
    'emit_polyline',
    'generate',
]
