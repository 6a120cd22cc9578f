# calctrack/repositories/storage.py
"""Storage contract shared by the in-memory and SQL backends.

Every operation is atomic on its own; nothing spans several entities in one
transaction. Lookups return ``None`` for missing records, deletes return whether
a record existed. Ownership is not checked here.
"""
from abc import ABC, abstractmethod
from datetime import timedelta

CALCULATION_FIELDS = frozenset({'user_id', 'type', 'name', 'description', 'inputs', 'results', 'material'})
PROJECT_FIELDS = frozenset({'user_id', 'name', 'description', 'calculations', 'status'})

DEFAULT_SESSION_TTL = timedelta(days=7)


class DuplicateUserError(ValueError):
    """Username or email already belongs to another user."""


def check_fields(changes, allowed, kind):
    unknown = set(changes) - allowed
    if unknown:
        raise ValueError(f"Unknown {kind} fields: {', '.join(sorted(unknown))}")
    return changes


class Storage(ABC):
    def __init__(self, session_ttl=DEFAULT_SESSION_TTL):
        self.session_ttl = session_ttl

    # Users
    @abstractmethod
    def get_user(self, user_id):
        pass

    @abstractmethod
    def get_user_by_username(self, username):
        pass

    @abstractmethod
    def get_user_by_email(self, email):
        pass

    @abstractmethod
    def create_user(self, username, email, password, first_name=None, last_name=None, role=None):
        """Store a user whose ``password`` is already hashed."""

    # Calculations
    @abstractmethod
    def get_calculation(self, calculation_id):
        pass

    @abstractmethod
    def get_calculations_by_user(self, user_id):
        pass

    @abstractmethod
    def create_calculation(self, **fields):
        pass

    @abstractmethod
    def update_calculation(self, calculation_id, changes):
        """Shallow-merge ``changes`` and re-stamp ``updated_at``; ``None`` if missing."""

    @abstractmethod
    def delete_calculation(self, calculation_id):
        pass

    # Projects
    @abstractmethod
    def get_project(self, project_id):
        pass

    @abstractmethod
    def get_projects_by_user(self, user_id):
        pass

    @abstractmethod
    def create_project(self, **fields):
        pass

    @abstractmethod
    def update_project(self, project_id, changes):
        pass

    @abstractmethod
    def delete_project(self, project_id):
        pass

    # Sessions
    @abstractmethod
    def create_session(self, user_id):
        pass

    @abstractmethod
    def get_session(self, session_id):
        """Return the live session, dropping it first if it has expired."""

    @abstractmethod
    def delete_session(self, session_id):
        pass
