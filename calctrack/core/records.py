# calctrack/core/records.py
"""Plain records held by the in-memory storage backend.

Field names match the SQLAlchemy models in ``database.py`` so the API layer can
render either kind the same way.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Optional

USER_ROLES = ('student', 'faculty', 'admin')
PROJECT_STATUSES = ('in_progress', 'complete', 'archived')


@dataclass(frozen=True)
class UserRecord:
    id: str
    username: str
    email: str
    password: str
    created_at: datetime
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: str = 'student'


@dataclass(frozen=True)
class CalculationRecord:
    id: str
    type: str
    name: str
    inputs: Any
    results: Any
    created_at: datetime
    updated_at: datetime
    user_id: Optional[str] = None
    description: Optional[str] = None
    material: Optional[str] = None


@dataclass(frozen=True)
class ProjectRecord:
    id: str
    name: str
    created_at: datetime
    updated_at: datetime
    user_id: Optional[str] = None
    description: Optional[str] = None
    calculations: List[str] = field(default_factory=list)
    status: str = 'in_progress'


@dataclass(frozen=True)
class SessionRecord:
    id: str
    user_id: str
    expires_at: datetime
