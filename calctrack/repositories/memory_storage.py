# calctrack/repositories/memory_storage.py
import threading
from dataclasses import replace

from ..core.records import CalculationRecord, ProjectRecord, SessionRecord, UserRecord
from ..utils.logger import setup_logger
from ..utils.security import new_record_id, new_session_id, utcnow
from .storage import (
    CALCULATION_FIELDS,
    DEFAULT_SESSION_TTL,
    PROJECT_FIELDS,
    DuplicateUserError,
    Storage,
    check_fields,
)


class MemStorage(Storage):
    """Storage backed by one dict per entity kind, keyed by id."""

    def __init__(self, session_ttl=DEFAULT_SESSION_TTL):
        super().__init__(session_ttl)
        self.users = {}
        self.calculations = {}
        self.projects = {}
        self.sessions = {}
        self._lock = threading.RLock()
        self.logger = setup_logger()

    def reset(self):
        with self._lock:
            self.users.clear()
            self.calculations.clear()
            self.projects.clear()
            self.sessions.clear()

    @staticmethod
    def _unused_id(table, factory=new_record_id):
        record_id = factory()
        while record_id in table:
            record_id = factory()
        return record_id

    # Users
    def get_user(self, user_id):
        return self.users.get(user_id)

    def get_user_by_username(self, username):
        with self._lock:
            return next((user for user in self.users.values() if user.username == username), None)

    def get_user_by_email(self, email):
        with self._lock:
            return next((user for user in self.users.values() if user.email == email), None)

    def create_user(self, username, email, password, first_name=None, last_name=None, role=None):
        with self._lock:
            if self.get_user_by_username(username) or self.get_user_by_email(email):
                raise DuplicateUserError("User already exists")

            user = UserRecord(
                id=self._unused_id(self.users),
                username=username,
                email=email,
                password=password,
                first_name=first_name,
                last_name=last_name,
                role=role or 'student',
                created_at=utcnow(),
            )
            self.users[user.id] = user
        self.logger.info(f"Repository: Created user {username}")
        return user

    # Calculations
    def get_calculation(self, calculation_id):
        return self.calculations.get(calculation_id)

    def get_calculations_by_user(self, user_id):
        with self._lock:
            return [calc for calc in self.calculations.values() if calc.user_id == user_id]

    def create_calculation(self, **fields):
        check_fields(fields, CALCULATION_FIELDS, 'calculation')
        now = utcnow()
        with self._lock:
            calculation = CalculationRecord(
                id=self._unused_id(self.calculations),
                user_id=fields.get('user_id'),
                type=fields['type'],
                name=fields['name'],
                description=fields.get('description'),
                inputs=fields['inputs'],
                results=fields['results'],
                material=fields.get('material'),
                created_at=now,
                updated_at=now,
            )
            self.calculations[calculation.id] = calculation
        self.logger.info(f"Repository: Created calculation {calculation.id}")
        return calculation

    def update_calculation(self, calculation_id, changes):
        check_fields(changes, CALCULATION_FIELDS, 'calculation')
        with self._lock:
            calculation = self.calculations.get(calculation_id)
            if calculation is None:
                return None
            updated = replace(calculation, **changes, updated_at=utcnow())
            self.calculations[calculation_id] = updated
        return updated

    def delete_calculation(self, calculation_id):
        with self._lock:
            return self.calculations.pop(calculation_id, None) is not None

    # Projects
    def get_project(self, project_id):
        return self.projects.get(project_id)

    def get_projects_by_user(self, user_id):
        with self._lock:
            return [project for project in self.projects.values() if project.user_id == user_id]

    def create_project(self, **fields):
        check_fields(fields, PROJECT_FIELDS, 'project')
        now = utcnow()
        with self._lock:
            project = ProjectRecord(
                id=self._unused_id(self.projects),
                user_id=fields.get('user_id'),
                name=fields['name'],
                description=fields.get('description'),
                calculations=list(fields.get('calculations') or []),
                status=fields.get('status') or 'in_progress',
                created_at=now,
                updated_at=now,
            )
            self.projects[project.id] = project
        self.logger.info(f"Repository: Created project {project.id}")
        return project

    def update_project(self, project_id, changes):
        check_fields(changes, PROJECT_FIELDS, 'project')
        if changes.get('calculations') is not None:
            changes = dict(changes, calculations=list(changes['calculations']))
        with self._lock:
            project = self.projects.get(project_id)
            if project is None:
                return None
            updated = replace(project, **changes, updated_at=utcnow())
            self.projects[project_id] = updated
        return updated

    def delete_project(self, project_id):
        with self._lock:
            return self.projects.pop(project_id, None) is not None

    # Sessions
    def create_session(self, user_id):
        with self._lock:
            session = SessionRecord(
                id=self._unused_id(self.sessions, new_session_id),
                user_id=user_id,
                expires_at=utcnow() + self.session_ttl,
            )
            self.sessions[session.id] = session
        return session

    def get_session(self, session_id):
        with self._lock:
            session = self.sessions.get(session_id)
            if session is None:
                return None
            if session.expires_at <= utcnow():
                del self.sessions[session_id]
                return None
            return session

    def delete_session(self, session_id):
        with self._lock:
            return self.sessions.pop(session_id, None) is not None
