"""Tests for svg2gcode/models.py module."""
import pytest

from conftest import make_params
from config import Config
from svg2gcode.models import (
    CUT,
    RAPID,
    GeneratedProgram,
    InvalidParametersError,
    Point,
    ToolParameters,
    ToolpathSegment
)


class TestToolParameters:
    """Tests for ToolParameters.from_dict."""

    def test_defaults_only(self):
        """An empty request takes every value from the defaults."""
        params = ToolParameters.from_dict({}, Config.DEFAULT_TOOL_PARAMETERS)
        assert params.to_dict() == Config.DEFAULT_TOOL_PARAMETERS

    def test_camel_case_keys(self):
        """Front-end keys map onto field names and are converted."""
        params = ToolParameters.from_dict(
            {'feedRate': '1200', 'toolDiameter': 6, 'cutMode': 'outside', 'spindleSpeed': '18000.0'},
            Config.DEFAULT_TOOL_PARAMETERS
        )
        assert params.feed_rate == 1200.0
        assert params.tool_diameter == 6.0
        assert params.cut_mode == 'outside'
        assert params.spindle_speed == 18000

    def test_snake_case_keys(self):
        params = ToolParameters.from_dict({'pass_depth': 0.5}, Config.DEFAULT_TOOL_PARAMETERS)
        assert params.pass_depth == 0.5

    def test_blank_values_fall_back(self):
        """Empty form fields keep the default."""
        params = ToolParameters.from_dict(
            {'feedRate': '', 'plungeRate': None}, Config.DEFAULT_TOOL_PARAMETERS
        )
        assert params.feed_rate == Config.DEFAULT_TOOL_PARAMETERS['feed_rate']
        assert params.plunge_rate == Config.DEFAULT_TOOL_PARAMETERS['plunge_rate']

    def test_missing_without_defaults(self):
        with pytest.raises(InvalidParametersError) as exc_info:
            ToolParameters.from_dict({'feedRate': 800})
        assert "Missing parameter 'spindle_speed'" in exc_info.value.errors
        assert len(exc_info.value.errors) == 9

    def test_non_numeric_value(self):
        with pytest.raises(InvalidParametersError) as exc_info:
            ToolParameters.from_dict({'passDepth': 'deep'}, Config.DEFAULT_TOOL_PARAMETERS)
        assert exc_info.value.errors == ["Parameter 'pass_depth' has invalid value 'deep'"]

    def test_infinite_spindle_speed(self):
        """An RPM of 'inf' cannot become an int and is reported."""
        with pytest.raises(InvalidParametersError) as exc_info:
            ToolParameters.from_dict({'spindleSpeed': 'inf'}, Config.DEFAULT_TOOL_PARAMETERS)
        assert exc_info.value.errors == ["Parameter 'spindle_speed' has invalid value 'inf'"]

    def test_error_message_lists_errors(self):
        error = InvalidParametersError(['a is wrong', 'b is wrong'])
        assert "- a is wrong" in str(error)
        assert isinstance(error, ValueError)

    def test_frozen(self, params):
        with pytest.raises(AttributeError):
            params.feed_rate = 1.0

    def test_to_dict_round_trip(self):
        params = make_params(cut_mode='inside', plunge_mode='spiral')
        assert ToolParameters.from_dict(params.to_dict()) == params


class TestToolpathSegment:
    """Tests for ToolpathSegment serialization."""

    def test_to_dict(self):
        segment = ToolpathSegment(Point(0, 0), Point(1.5, -2), CUT)
        assert segment.to_dict() == {'start': [0, 0], 'end': [1.5, -2], 'kind': 'cut'}


class TestGeneratedProgram:
    """Tests for GeneratedProgram."""

    def test_program_text(self):
        result = GeneratedProgram(lines=['G21', 'M30'], segments=[])
        assert result.program == 'G21\nM30'
        assert result.warnings == []

    def test_segment_kinds(self):
        assert (RAPID, CUT) == ('rapid', 'cut')
