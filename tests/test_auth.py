# tests/test_auth.py
from datetime import timedelta
from dataclasses import replace

from calctrack import create_app
from calctrack.config.settings import TestConfig
from conftest import register


def test_register(client):
    response = register(client, 'alice', 'a@x.com', 'secret1')
    assert response.status_code == 200
    user = response.json['user']
    assert user['username'] == 'alice'
    assert user['email'] == 'a@x.com'
    assert user['role'] == 'student'
    assert user['firstName'] is None
    assert 'password' not in user
    assert user['id']


def test_register_sets_session_cookie(client):
    response = register(client)
    set_cookie = response.headers.get('Set-Cookie')
    assert set_cookie.startswith('sessionId=')
    assert 'HttpOnly' in set_cookie
    assert 'Max-Age=604800' in set_cookie
    assert 'Secure' not in set_cookie
    assert client.get_cookie('sessionId') is not None


def test_cookie_is_secure_in_production():
    class ProductionConfig(TestConfig):
        APP_ENV = 'production'

    app = create_app(ProductionConfig)
    response = register(app.test_client())
    assert 'Secure' in response.headers.get('Set-Cookie')


def test_register_stores_hashed_password(client, storage):
    response = register(client, password='secret1')
    stored = storage.get_user(response.json['user']['id'])
    assert stored.password != 'secret1'
    assert stored.password.startswith('$2')


def test_register_with_names_and_role(client):
    response = register(client, firstName='Ada', lastName='Lovelace', role='faculty')
    assert response.status_code == 200
    user = response.json['user']
    assert user['firstName'] == 'Ada'
    assert user['lastName'] == 'Lovelace'
    assert user['role'] == 'faculty'


def test_register_duplicate_username(client, other_client):
    register(client, 'alice', 'a@x.com')
    response = register(other_client, 'alice', 'other@x.com')
    assert response.status_code == 400
    assert response.json['message'] == 'User already exists'


def test_register_duplicate_email(client, other_client):
    register(client, 'alice', 'a@x.com')
    response = register(other_client, 'alice2', 'a@x.com')
    assert response.status_code == 400
    assert response.json['message'] == 'User already exists'


def test_register_rejects_short_password(client):
    response = register(client, password='12345')
    assert response.status_code == 400
    assert response.json['message'] == 'Invalid registration data'
    assert 'password' in response.json['errors']


def test_register_rejects_bad_email_and_role(client):
    response = register(client, email='not-an-email', role='superuser')
    assert response.status_code == 400
    assert set(response.json['errors']) >= {'email', 'role'}


def test_register_requires_json_object(client):
    response = client.post('/api/auth/register', data='username=alice')
    assert response.status_code == 400
    assert response.json['message'] == 'Invalid registration data'


def test_me_returns_registered_user(client, alice):
    response = client.get('/api/auth/me')
    assert response.status_code == 200
    assert response.json['user']['username'] == 'alice'
    assert response.json['user']['id'] == alice['id']
    assert 'password' not in response.json['user']


def test_me_without_cookie(client):
    response = client.get('/api/auth/me')
    assert response.status_code == 401
    assert response.json['message'] == 'Not authenticated'


def test_me_with_unknown_session(client):
    client.set_cookie('sessionId', 'made-up')
    response = client.get('/api/auth/me')
    assert response.status_code == 401
    assert response.json['message'] == 'Invalid session'


def test_login(client, other_client, alice):
    response = other_client.post('/api/auth/login', json={'username': 'alice', 'password': 'secret1'})
    assert response.status_code == 200
    assert response.json['user']['id'] == alice['id']
    assert 'password' not in response.json['user']

    me = other_client.get('/api/auth/me')
    assert me.status_code == 200
    assert me.json['user']['username'] == 'alice'


def test_login_issues_a_new_session(client, alice):
    first = client.get_cookie('sessionId').value
    client.post('/api/auth/login', json={'username': 'alice', 'password': 'secret1'})
    assert client.get_cookie('sessionId').value != first


def test_login_failures_are_indistinguishable(client, other_client, alice):
    wrong_password = other_client.post('/api/auth/login', json={'username': 'alice', 'password': 'nope123'})
    unknown_user = other_client.post('/api/auth/login', json={'username': 'mallory', 'password': 'secret1'})
    assert wrong_password.status_code == 401
    assert unknown_user.status_code == 401
    assert wrong_password.json == unknown_user.json == {'message': 'Invalid credentials'}
    assert other_client.get_cookie('sessionId') is None


def test_login_requires_fields(client):
    response = client.post('/api/auth/login', json={'username': ''})
    assert response.status_code == 400
    assert response.json['message'] == 'Invalid login data'


def test_logout_invalidates_session(client, storage, alice):
    session_id = client.get_cookie('sessionId').value

    response = client.post('/api/auth/logout')
    assert response.status_code == 200
    assert response.json['message'] == 'Logged out successfully'
    assert storage.get_session(session_id) is None
    assert client.get_cookie('sessionId') is None

    client.set_cookie('sessionId', session_id)
    assert client.get('/api/auth/me').status_code == 401


def test_logout_without_session_still_succeeds(client):
    response = client.post('/api/auth/logout')
    assert response.status_code == 200


def test_expired_session_is_rejected(client, storage, alice):
    session_id = client.get_cookie('sessionId').value
    session = storage.sessions[session_id]
    storage.sessions[session_id] = replace(session, expires_at=session.expires_at - timedelta(days=8))

    response = client.get('/api/auth/me')
    assert response.status_code == 401
    assert response.json['message'] == 'Invalid session'
    assert session_id not in storage.sessions


def test_session_of_missing_user_is_rejected(client, storage, alice):
    del storage.users[alice['id']]
    response = client.get('/api/auth/me')
    assert response.status_code == 401
    assert response.json['message'] == 'User not found'
