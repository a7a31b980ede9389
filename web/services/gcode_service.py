"""G-code generation service."""
import os
from typing import Any, Dict, List, Optional, Tuple

from flask import current_app

from svg2gcode.gcode_generator import GCodeGenerator
from svg2gcode.models import GeneratedProgram, InvalidParametersError, ToolParameters
from svg2gcode.utils.gcode_format import sanitize_project_name
from svg2gcode.utils.validators import get_parameter_warnings, validate_tool_parameters


class GCodeService:
    """Service for G-code generation and parameter validation."""

    @staticmethod
    def build_parameters(data: Optional[Dict[str, Any]]) -> ToolParameters:
        """
        Build tool parameters from request data over the configured defaults.

        Raises:
            InvalidParametersError: if a value is missing or not a number
        """
        defaults = current_app.config.get('DEFAULT_TOOL_PARAMETERS', {})
        return ToolParameters.from_dict(data or {}, defaults)

    @staticmethod
    def get_validation_warnings(params: ToolParameters) -> List[str]:
        """Non-blocking advisories for a parameter set."""
        factor = current_app.config.get('MAX_STEPDOWN_FACTOR', 0.5)
        return get_parameter_warnings(params, factor)

    @staticmethod
    def validate(data: Optional[Dict[str, Any]]) -> Tuple[List[str], List[str]]:
        """
        Validate request parameters before generating G-code.

        Returns:
            (errors, warnings); warnings are only computed for valid parameters
        """
        try:
            params = GCodeService.build_parameters(data)
        except InvalidParametersError as e:
            return e.errors, []

        errors = validate_tool_parameters(params)
        if errors:
            return errors, []
        return [], GCodeService.get_validation_warnings(params)

    @staticmethod
    def generate(svg: str, data: Optional[Dict[str, Any]]) -> GeneratedProgram:
        """
        Generate a program for an SVG document.

        Parameter advisories are placed ahead of the geometry warnings.

        Raises:
            InvalidParametersError: if the parameters are unusable
            ParseError: if the document or a path cannot be parsed
        """
        params = GCodeService.build_parameters(data)
        result = GCodeGenerator(params).generate(svg)
        result.warnings = GCodeService.get_validation_warnings(params) + result.warnings
        return result

    @staticmethod
    def serialize(result: GeneratedProgram) -> Dict[str, Any]:
        """JSON-ready representation of a generated program."""
        return {
            'gcode': result.program,
            'line_count': len(result.lines),
            'segments': [segment.to_dict() for segment in result.segments],
            'warnings': result.warnings,
        }

    @staticmethod
    def gcode_filename(source_filename: Optional[str]) -> str:
        """Download name for a program: 'Logo v2.svg' -> 'Logo_v2.gcode'."""
        base = os.path.splitext(os.path.basename(source_filename or ''))[0]
        return f"{sanitize_project_name(base) or 'output'}.gcode"
