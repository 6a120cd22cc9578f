from flask import current_app

from ..repositories.factory import get_storage
from ..repositories.storage import DuplicateUserError
from ..utils.exceptions import AuthenticationError, ValidationError
from ..utils.logger import setup_logger
from ..utils.security import dummy_hash, hash_password, verify_password


class AuthService:
    def __init__(self, storage=None):
        self.storage = storage or get_storage()
        self.logger = setup_logger()

    @staticmethod
    def _rounds():
        return current_app.config.get('BCRYPT_ROUNDS', 12)

    def register(self, username, email, password, first_name=None, last_name=None, role=None):
        """Service: Register a new user and open a session for them"""
        try:
            if self.storage.get_user_by_username(username) or self.storage.get_user_by_email(email):
                raise ValidationError("User already exists")

            hashed_password = hash_password(password, rounds=self._rounds())
            try:
                user = self.storage.create_user(
                    username=username,
                    email=email,
                    password=hashed_password,
                    first_name=first_name,
                    last_name=last_name,
                    role=role,
                )
            except DuplicateUserError as e:
                raise ValidationError("User already exists") from e

            session = self.storage.create_session(user.id)
            self.logger.info(f"User registered: {username}")
            return user, session
        except Exception as e:
            self.logger.error(f"Registration failed: {str(e)}")
            raise

    def login(self, username, password):
        """Service: Check credentials and open a session"""
        user = self.storage.get_user_by_username(username)
        if user is None:
            # same bcrypt cost as a wrong password
            verify_password(password, dummy_hash(self._rounds()))
            self.logger.warning(f"Login failed: unknown user {username}")
            raise AuthenticationError("Invalid credentials")

        if not verify_password(password, user.password):
            self.logger.warning(f"Login failed: wrong password for {username}")
            raise AuthenticationError("Invalid credentials")

        session = self.storage.create_session(user.id)
        self.logger.info(f"User logged in: {username}")
        return user, session

    def logout(self, session_id):
        """Service: Drop the session behind a cookie, if any"""
        if not session_id:
            return False
        deleted = self.storage.delete_session(session_id)
        if deleted:
            self.logger.info("User logged out")
        return deleted

    def get_current_user(self, session_id):
        """Service: Resolve a session cookie value to its user"""
        if not session_id:
            raise AuthenticationError("Not authenticated")

        session = self.storage.get_session(session_id)
        if session is None:
            raise AuthenticationError("Invalid session")

        user = self.storage.get_user(session.user_id)
        if user is None:
            raise AuthenticationError("User not found")
        return user
