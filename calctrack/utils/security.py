# calctrack/utils/security.py
"""Password hashing and session token helpers."""
import secrets
import uuid
from datetime import datetime, timezone
from functools import lru_cache

import bcrypt

# bcrypt only looks at the first 72 bytes and newer releases refuse longer input
MAX_PASSWORD_BYTES = 72


def utcnow():
    """Naive UTC timestamp, comparable with values read back from SQL columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def new_record_id():
    return str(uuid.uuid4())


def new_session_id():
    return secrets.token_urlsafe(32)


def hash_password(password, rounds=12):
    hashed = bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt(rounds=rounds))
    return hashed.decode('utf-8')


@lru_cache(maxsize=None)
def dummy_hash(rounds=12):
    """Throwaway hash to compare against when the user does not exist."""
    return hash_password(secrets.token_hex(16), rounds=rounds)


def verify_password(password, hashed_password):
    candidate = password.encode('utf-8')[:MAX_PASSWORD_BYTES]
    try:
        matched = bcrypt.checkpw(candidate, hashed_password.encode('utf-8'))
    except ValueError:
        # malformed stored hash
        return False
    # a longer password was never accepted at registration
    return matched and len(password.encode('utf-8')) <= MAX_PASSWORD_BYTES
