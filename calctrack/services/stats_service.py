# calctrack/services/stats_service.py
from datetime import timedelta

from ..repositories.factory import get_storage
from ..utils.security import utcnow

RECENT_WINDOW = timedelta(days=7)


class StatsService:
    def __init__(self, storage=None):
        self.storage = storage or get_storage()

    def get_stats(self, user, now=None):
        """Service: Dashboard counters for one user, computed on every call"""
        now = now or utcnow()
        calculations = self.storage.get_calculations_by_user(user.id)
        projects = self.storage.get_projects_by_user(user.id)

        since = now - RECENT_WINDOW
        recent = [calc for calc in calculations if calc.created_at and calc.created_at > since]

        return {
            "totalCalculations": len(calculations),
            "savedProjects": len(projects),
            "thisWeek": len(recent),
            # reserved for sharing, which does not exist yet
            "sharedWith": 0,
        }
