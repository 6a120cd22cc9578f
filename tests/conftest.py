# tests/conftest.py
import pytest

from calctrack import create_app
from calctrack.config.settings import TestConfig
from calctrack.repositories.factory import EXTENSION_KEY


@pytest.fixture
def app():
    app = create_app(TestConfig)
    yield app


@pytest.fixture
def storage(app):
    return app.extensions[EXTENSION_KEY]


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def other_client(app):
    return app.test_client()


def register(client, username='alice', email=None, password='secret1', **extra):
    payload = {
        'username': username,
        'email': email or f'{username}@example.com',
        'password': password,
    }
    payload.update(extra)
    return client.post('/api/auth/register', json=payload)


@pytest.fixture
def alice(client):
    response = register(client, 'alice', 'a@x.com')
    assert response.status_code == 200
    return response.json['user']


@pytest.fixture
def bob(other_client):
    response = register(other_client, 'bob', 'b@x.com')
    assert response.status_code == 200
    return response.json['user']


BEAM = {
    'type': 'beam_deflection',
    'name': 'Test',
    'inputs': {'length': 2.5, 'load': 1200, 'E': 200e9, 'I': 8.1e-6},
    'results': {'maxDeflection': 0.0038},
}
