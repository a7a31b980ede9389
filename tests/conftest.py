"""Test configuration and fixtures."""
import pytest

from app import create_app
from config import Config
from svg2gcode.models import ToolParameters


class TestConfig:
    """Test configuration."""
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    LOG_LEVEL = 'WARNING'
    MAX_STEPDOWN_FACTOR = 0.5
    DEFAULT_TOOL_PARAMETERS = dict(Config.DEFAULT_TOOL_PARAMETERS)


SQUARE_PATH = 'M 0 0 L 10 0 L 10 10 L 0 10 Z'


def make_svg(*path_data, wrapper=None):
    """Build a minimal SVG document containing the given path strings."""
    paths = ''.join(f'<path d="{d}"/>' for d in path_data)
    if wrapper:
        paths = f'<{wrapper}>{paths}</{wrapper}>'
    return f'<svg xmlns="http://www.w3.org/2000/svg" width="100mm" height="100mm">{paths}</svg>'


def make_params(**overrides):
    """ToolParameters with test defaults, overridden by keyword."""
    values = dict(
        spindle_speed=12000,
        feed_rate=800.0,
        plunge_rate=300.0,
        depth_of_cut=1.0,
        pass_depth=1.0,
        safe_z=5.0,
        tool_diameter=3.0,
        cut_mode='on-line',
        plunge_mode='vertical',
        path_ordering='natural',
    )
    values.update(overrides)
    return ToolParameters(**values)


@pytest.fixture
def app():
    """Create and configure a test application instance."""
    app = create_app(TestConfig)
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    """Create a test client."""
    return app.test_client()


@pytest.fixture
def params():
    """Default on-line tool parameters."""
    return make_params()


@pytest.fixture
def square_svg():
    """SVG with a single closed 10x10 square."""
    return make_svg(SQUARE_PATH)


@pytest.fixture
def square_request(square_svg):
    """JSON body for the API with the square and camelCase parameters."""
    return {
        'svg': square_svg,
        'filename': 'Square Part.svg',
        'params': {
            'spindleSpeed': 12000,
            'feedRate': 800,
            'plungeRate': 300,
            'depthOfCut': 1,
            'passDepth': 1,
            'safeZ': 5,
            'toolDiameter': 3,
            'cutMode': 'on-line',
            'plungeMode': 'vertical',
            'pathOrdering': 'natural',
        }
    }
