import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Flask application configuration."""

    # Flask core
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-key-change-in-production')

    # Uploaded SVG documents are sent inline in the request body
    MAX_CONTENT_LENGTH = int(os.environ.get('MAX_CONTENT_LENGTH', 16 * 1024 * 1024))

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Default tool parameters (millimetres, mm/min, rpm)
    DEFAULT_TOOL_PARAMETERS = {
        'spindle_speed': int(os.environ.get('DEFAULT_SPINDLE_SPEED', 12000)),
        'feed_rate': float(os.environ.get('DEFAULT_FEED_RATE', 800)),
        'plunge_rate': float(os.environ.get('DEFAULT_PLUNGE_RATE', 300)),
        'depth_of_cut': float(os.environ.get('DEFAULT_DEPTH_OF_CUT', 1.0)),
        'pass_depth': float(os.environ.get('DEFAULT_PASS_DEPTH', 1.0)),
        'safe_z': float(os.environ.get('DEFAULT_SAFE_Z', 5.0)),
        'tool_diameter': float(os.environ.get('DEFAULT_TOOL_DIAMETER', 3.175)),
        'cut_mode': os.environ.get('DEFAULT_CUT_MODE', 'on-line'),
        'plunge_mode': os.environ.get('DEFAULT_PLUNGE_MODE', 'vertical'),
        'path_ordering': os.environ.get('DEFAULT_PATH_ORDERING', 'natural'),
    }

    # Warn when pass depth exceeds this fraction of the tool diameter
    MAX_STEPDOWN_FACTOR = float(os.environ.get('MAX_STEPDOWN_FACTOR', 0.5))
