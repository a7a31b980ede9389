"""API routes - JSON endpoints for the front end."""
import io
import logging

from flask import Blueprint, request, send_file

from svg2gcode.file_parser import ParseError
from svg2gcode.models import InvalidParametersError
from web.services.gcode_service import GCodeService
from web.utils.responses import success_response, error_response, validation_response

logger = logging.getLogger(__name__)

api_bp = Blueprint('api', __name__)


def _get_svg(data):
    svg = data.get('svg') if data else None
    if not isinstance(svg, str) or not svg.strip():
        return None
    return svg


@api_bp.route('/generate', methods=['POST'])
def generate_gcode():
    """Generate G-code and preview segments for an SVG document."""
    data = request.get_json(silent=True)
    svg = _get_svg(data)
    if svg is None:
        return error_response('No SVG document provided')

    try:
        result = GCodeService.generate(svg, data.get('params'))
    except InvalidParametersError as e:
        return error_response('Invalid tool parameters', 400, e.errors)
    except ParseError as e:
        return error_response(str(e), 422)

    return success_response(data=GCodeService.serialize(result))


@api_bp.route('/validate', methods=['POST'])
def validate_parameters():
    """Validate tool parameters before generating G-code."""
    data = request.get_json(silent=True) or {}
    errors, warnings = GCodeService.validate(data.get('params'))
    return validation_response(errors, warnings)


@api_bp.route('/download', methods=['POST'])
def download_gcode():
    """Download the generated program as a .gcode file."""
    data = request.get_json(silent=True)
    svg = _get_svg(data)
    if svg is None:
        return error_response('No SVG document provided')

    try:
        result = GCodeService.generate(svg, data.get('params'))
    except InvalidParametersError as e:
        return error_response('Invalid tool parameters', 400, e.errors)
    except ParseError as e:
        return error_response(str(e), 422)

    filename = GCodeService.gcode_filename(data.get('filename'))
    logger.info("Sending %s (%d lines)", filename, len(result.lines))

    buffer = io.BytesIO(result.program.encode('utf-8'))
    buffer.seek(0)

    return send_file(
        buffer,
        mimetype='text/plain',
        as_attachment=True,
        download_name=filename
    )
