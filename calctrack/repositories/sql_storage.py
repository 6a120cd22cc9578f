# calctrack/repositories/sql_storage.py
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from .. import db
from ..core.database import Calculation, Project, User, UserSession
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


class SqlStorage(Storage):
    """Storage backed by the Flask-SQLAlchemy models, one commit per operation."""

    def __init__(self, session_ttl=DEFAULT_SESSION_TTL):
        super().__init__(session_ttl)
        self.logger = setup_logger()

    def _commit(self, action):
        try:
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            self.logger.error(f"Repository: Failed to {action}: {str(e)}")
            raise

    def _unused_id(self, model, factory=new_record_id):
        record_id = factory()
        while db.session.get(model, record_id) is not None:
            record_id = factory()
        return record_id

    # Users
    def get_user(self, user_id):
        return db.session.get(User, user_id)

    def get_user_by_username(self, username):
        return User.query.filter_by(username=username).first()

    def get_user_by_email(self, email):
        return User.query.filter_by(email=email).first()

    def create_user(self, username, email, password, first_name=None, last_name=None, role=None):
        if self.get_user_by_username(username) or self.get_user_by_email(email):
            raise DuplicateUserError("User already exists")

        user = User(
            id=self._unused_id(User),
            username=username,
            email=email,
            password=password,
            first_name=first_name,
            last_name=last_name,
            role=role or 'student',
            created_at=utcnow(),
        )
        db.session.add(user)
        try:
            db.session.commit()
        except IntegrityError as e:
            # lost a race against a concurrent registration
            db.session.rollback()
            raise DuplicateUserError("User already exists") from e
        except SQLAlchemyError as e:
            db.session.rollback()
            self.logger.error(f"Repository: Failed to create user {username}: {str(e)}")
            raise
        self.logger.info(f"Repository: Created user {username}")
        return user

    # Calculations
    def get_calculation(self, calculation_id):
        return db.session.get(Calculation, calculation_id)

    def get_calculations_by_user(self, user_id):
        return Calculation.query.filter_by(user_id=user_id).all()

    def create_calculation(self, **fields):
        check_fields(fields, CALCULATION_FIELDS, 'calculation')
        now = utcnow()
        calculation = Calculation(id=self._unused_id(Calculation), created_at=now, updated_at=now, **fields)
        db.session.add(calculation)
        self._commit("create calculation")
        self.logger.info(f"Repository: Created calculation {calculation.id}")
        return calculation

    def update_calculation(self, calculation_id, changes):
        check_fields(changes, CALCULATION_FIELDS, 'calculation')
        calculation = self.get_calculation(calculation_id)
        if calculation is None:
            return None
        for name, value in changes.items():
            setattr(calculation, name, value)
        calculation.updated_at = utcnow()
        self._commit(f"update calculation {calculation_id}")
        return calculation

    def delete_calculation(self, calculation_id):
        calculation = self.get_calculation(calculation_id)
        if calculation is None:
            return False
        db.session.delete(calculation)
        self._commit(f"delete calculation {calculation_id}")
        return True

    # Projects
    def get_project(self, project_id):
        return db.session.get(Project, project_id)

    def get_projects_by_user(self, user_id):
        return Project.query.filter_by(user_id=user_id).all()

    def create_project(self, **fields):
        check_fields(fields, PROJECT_FIELDS, 'project')
        now = utcnow()
        project = Project(
            id=self._unused_id(Project),
            user_id=fields.get('user_id'),
            name=fields['name'],
            description=fields.get('description'),
            calculations=list(fields.get('calculations') or []),
            status=fields.get('status') or 'in_progress',
            created_at=now,
            updated_at=now,
        )
        db.session.add(project)
        self._commit("create project")
        self.logger.info(f"Repository: Created project {project.id}")
        return project

    def update_project(self, project_id, changes):
        check_fields(changes, PROJECT_FIELDS, 'project')
        project = self.get_project(project_id)
        if project is None:
            return None
        for name, value in changes.items():
            # JSON columns only notice reassignment, so hand over a fresh list
            setattr(project, name, list(value) if name == 'calculations' and value is not None else value)
        project.updated_at = utcnow()
        self._commit(f"update project {project_id}")
        return project

    def delete_project(self, project_id):
        project = self.get_project(project_id)
        if project is None:
            return False
        db.session.delete(project)
        self._commit(f"delete project {project_id}")
        return True

    # Sessions
    def create_session(self, user_id):
        session = UserSession(
            id=self._unused_id(UserSession, new_session_id),
            user_id=user_id,
            expires_at=utcnow() + self.session_ttl,
        )
        db.session.add(session)
        self._commit("create session")
        return session

    def get_session(self, session_id):
        session = db.session.get(UserSession, session_id)
        if session is None:
            return None
        if session.expires_at <= utcnow():
            db.session.delete(session)
            self._commit("drop expired session")
            return None
        return session

    def delete_session(self, session_id):
        session = db.session.get(UserSession, session_id)
        if session is None:
            return False
        db.session.delete(session)
        self._commit("delete session")
        return True
