from flask_restful import Resource

from ...services.stats_service import StatsService
from ..middleware import session_required


class Stats(Resource):
    method_decorators = [session_required]

    def get(self, current_user):
        """Controller: Dashboard counters for the caller"""
        return StatsService().get_stats(current_user), 200
