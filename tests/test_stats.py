# tests/test_stats.py
from dataclasses import replace
from datetime import timedelta

from calctrack.services.stats_service import StatsService
from calctrack.utils.security import utcnow
from conftest import BEAM


def test_stats_requires_session(client):
    assert client.get('/api/stats').status_code == 401


def test_stats_for_new_user(client, alice):
    response = client.get('/api/stats')
    assert response.status_code == 200
    assert response.json == {'totalCalculations': 0, 'savedProjects': 0, 'thisWeek': 0, 'sharedWith': 0}


def test_stats_counts_only_recent_calculations(client, other_client, storage, alice, bob):
    ids = [client.post('/api/calculations', json=BEAM).json['id'] for _ in range(3)]
    client.post('/api/projects', json={'name': 'Bridge'})
    other_client.post('/api/calculations', json=BEAM)

    old = storage.calculations[ids[0]]
    storage.calculations[ids[0]] = replace(old, created_at=utcnow() - timedelta(days=8))

    response = client.get('/api/stats')
    assert response.json == {'totalCalculations': 3, 'savedProjects': 1, 'thisWeek': 2, 'sharedWith': 0}


def test_week_boundary_is_exclusive(storage):
    user = storage.create_user('carol', 'c@x.com', 'hash')
    now = utcnow()
    on_boundary = storage.create_calculation(user_id=user.id, type='t', name='edge', inputs={}, results={})
    storage.calculations[on_boundary.id] = replace(on_boundary, created_at=now - timedelta(days=7))
    storage.create_calculation(user_id=user.id, type='t', name='fresh', inputs={}, results={})

    stats = StatsService(storage).get_stats(user, now=now)
    assert stats['totalCalculations'] == 2
    assert stats['thisWeek'] == 1
