# tests/test_app.py
import pytest

from calctrack import create_app
from calctrack.config.settings import TestConfig


def test_health_check_lists_routes(client):
    response = client.get('/')
    assert response.status_code == 200
    assert response.json['status'] == 'healthy'
    assert '/api/stats' in response.json['routes']


def test_unknown_route_has_message_body(client):
    response = client.get('/api/nothing-here')
    assert response.status_code == 404
    assert 'message' in response.json


def test_unknown_storage_backend_is_refused():
    class BrokenConfig(TestConfig):
        STORAGE_BACKEND = 'redis'

    with pytest.raises(ValueError):
        create_app(BrokenConfig)


def test_cors_allows_credentials_for_known_origin(client):
    response = client.get('/api/stats', headers={'Origin': 'http://localhost:5173'})
    assert response.headers.get('Access-Control-Allow-Origin') == 'http://localhost:5173'
    assert response.headers.get('Access-Control-Allow-Credentials') == 'true'
