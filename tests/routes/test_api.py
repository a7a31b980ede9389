"""Tests for API routes."""
import json

from conftest import make_svg


def post_json(client, url, payload):
    return client.post(url, data=json.dumps(payload), content_type='application/json')


class TestGenerateAPI:
    """Tests for POST /api/generate endpoint."""

    def test_generate(self, client, square_request):
        """Test generating G-code for a square."""
        response = post_json(client, '/api/generate', square_request)

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data['status'] == 'ok'
        gcode = data['data']['gcode']
        assert gcode.startswith('; G-code generated from SVG\nG21 ; Units in mm')
        assert gcode.endswith('M30 ; End of program')
        assert data['data']['line_count'] == len(gcode.split('\n'))
        assert data['data']['segments'][-1]['kind'] == 'rapid'
        assert data['data']['warnings'] == []

    def test_generate_with_defaults(self, client, square_svg):
        """Parameters are optional; configured defaults apply."""
        response = post_json(client, '/api/generate', {'svg': square_svg})

        assert response.status_code == 200
        data = json.loads(response.data)
        assert 'M03 S12000 ; Spindle on' in data['data']['gcode']

    def test_generate_no_svg(self, client):
        """Test missing document returns error."""
        response = post_json(client, '/api/generate', {'params': {}})

        assert response.status_code == 400
        data = json.loads(response.data)
        assert data['status'] == 'error'
        assert data['message'] == 'No SVG document provided'

    def test_generate_no_json(self, client):
        response = client.post('/api/generate', data='not json', content_type='text/plain')
        assert response.status_code == 400

    def test_generate_invalid_parameters(self, client, square_request):
        """Test invalid parameters list every error."""
        square_request['params']['passDepth'] = 0
        square_request['params']['feedRate'] = -5

        response = post_json(client, '/api/generate', square_request)

        assert response.status_code == 400
        data = json.loads(response.data)
        assert data['message'] == 'Invalid tool parameters'
        assert len(data['errors']) == 2

    def test_generate_infinite_depth(self, client, square_request):
        """Test an infinite depth is rejected as a parameter error."""
        square_request['params']['depthOfCut'] = 'inf'

        response = post_json(client, '/api/generate', square_request)

        assert response.status_code == 400
        data = json.loads(response.data)
        assert data['errors'] == ['depth_of_cut must be a finite number (got inf)']

    def test_generate_malformed_path(self, client):
        """Test path data with unknown commands returns 422."""
        response = post_json(client, '/api/generate', {'svg': make_svg('M0 0 L10 10 X5 5')})

        assert response.status_code == 422
        data = json.loads(response.data)
        assert 'Invalid path data' in data['message']

    def test_generate_malformed_svg(self, client):
        """Test unparseable documents return 422."""
        response = post_json(client, '/api/generate', {'svg': '<svg><path d="M 0 0">'})

        assert response.status_code == 422
        data = json.loads(response.data)
        assert data['status'] == 'error'

    def test_generate_warnings(self, client):
        """Test collapsed features are reported as warnings."""
        payload = {
            'svg': make_svg('M 0 0 L 1 0 L 1 1 L 0 1 Z'),
            'params': {'cutMode': 'inside', 'toolDiameter': 10, 'passDepth': 1},
        }
        response = post_json(client, '/api/generate', payload)

        assert response.status_code == 200
        data = json.loads(response.data)
        assert len(data['data']['warnings']) == 1


class TestValidateAPI:
    """Tests for POST /api/validate endpoint."""

    def test_validate_valid_params(self, client, square_request):
        response = post_json(client, '/api/validate', {'params': square_request['params']})

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data['valid'] is True
        assert data['errors'] == []

    def test_validate_invalid_params(self, client):
        response = post_json(client, '/api/validate', {'params': {'cutMode': 'pocket'}})

        data = json.loads(response.data)
        assert data['valid'] is False
        assert 'pocket' in data['errors'][0]

    def test_validate_stepdown_warning(self, client):
        response = post_json(client, '/api/validate', {'params': {'passDepth': 2, 'toolDiameter': 3}})

        data = json.loads(response.data)
        assert data['valid'] is True
        assert len(data['warnings']) == 1


class TestDownloadAPI:
    """Tests for POST /api/download endpoint."""

    def test_download(self, client, square_request):
        """Test downloading the program as a file."""
        response = post_json(client, '/api/download', square_request)

        assert response.status_code == 200
        assert response.mimetype == 'text/plain'
        assert 'attachment' in response.headers['Content-Disposition']
        assert 'Square_Part.gcode' in response.headers['Content-Disposition']
        assert response.data.decode('utf-8').endswith('M30 ; End of program')

    def test_download_default_filename(self, client, square_svg):
        response = post_json(client, '/api/download', {'svg': square_svg})

        assert response.status_code == 200
        assert 'output.gcode' in response.headers['Content-Disposition']

    def test_download_no_svg(self, client):
        response = post_json(client, '/api/download', {})
        assert response.status_code == 400
