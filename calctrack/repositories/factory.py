# calctrack/repositories/factory.py
from datetime import timedelta

from flask import current_app

from .. import db
from .memory_storage import MemStorage
from .sql_storage import SqlStorage

EXTENSION_KEY = 'calctrack.storage'


def init_storage(app):
    """Build the configured storage backend and attach it to ``app``."""
    backend = app.config.get('STORAGE_BACKEND', 'memory')
    session_ttl = timedelta(days=app.config.get('SESSION_TTL_DAYS', 7))

    if backend == 'memory':
        storage = MemStorage(session_ttl=session_ttl)
    elif backend == 'sql':
        storage = SqlStorage(session_ttl=session_ttl)
        with app.app_context():
            db.create_all()
    else:
        raise ValueError(f"Unknown storage backend: {backend}")

    app.extensions[EXTENSION_KEY] = storage
    return storage


def get_storage():
    return current_app.extensions[EXTENSION_KEY]
