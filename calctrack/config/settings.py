# calctrack/config/settings.py
import os
from dotenv import load_dotenv

load_dotenv()


def _get_bool(value, default=False):
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_list(value, default):
    if not value:
        return default
    return [item.strip() for item in value.split(',') if item.strip()]


class Config:
    BASE_DIR = os.path.abspath(os.path.dirname(__file__))
    LOGS_PATH = os.getenv('LOGS_PATH', os.path.join(BASE_DIR, '../../logs'))

    APP_ENV = os.getenv('APP_ENV', 'development')
    SECRET_KEY = os.getenv('SECRET_KEY', 'your-secret-key')
    DEBUG = _get_bool(os.getenv('FLASK_DEBUG'), default=False)
    TESTING = False
    # keep 404 bodies to the plain message
    ERROR_404_HELP = False

    # "memory" keeps everything in process; "sql" persists through SQLAlchemy
    STORAGE_BACKEND = os.getenv('STORAGE_BACKEND', 'memory')

    # MySQL configuration from .env, unless DATABASE_URL is given
    MYSQL_HOST = os.getenv('MYSQL_HOST', 'localhost')
    MYSQL_PORT = os.getenv('MYSQL_PORT', '3306')
    MYSQL_USER = os.getenv('MYSQL_USER', 'root')
    MYSQL_PASSWORD = os.getenv('MYSQL_PASSWORD', '')
    MYSQL_DATABASE = os.getenv('MYSQL_DATABASE', 'calctrack')

    SQLALCHEMY_DATABASE_URI = os.getenv(
        'DATABASE_URL',
        f"mysql+pymysql://{MYSQL_USER}:{MYSQL_PASSWORD}@{MYSQL_HOST}:{MYSQL_PORT}/{MYSQL_DATABASE}"
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    SESSION_COOKIE_NAME_ID = os.getenv('SESSION_COOKIE_NAME_ID', 'sessionId')
    SESSION_TTL_DAYS = int(os.getenv('SESSION_TTL_DAYS', 7))
    SESSION_COOKIE_SAMESITE_POLICY = os.getenv('SESSION_COOKIE_SAMESITE_POLICY', 'Lax')

    BCRYPT_ROUNDS = int(os.getenv('BCRYPT_ROUNDS', 10))

    CORS_ORIGINS = _get_list(os.getenv('CORS_ORIGINS'), ["http://localhost:5173", "http://localhost:3000"])


class TestConfig(Config):
    TESTING = True
    APP_ENV = 'testing'
    STORAGE_BACKEND = 'memory'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    # bcrypt's minimum cost keeps the suite fast
    BCRYPT_ROUNDS = 4
