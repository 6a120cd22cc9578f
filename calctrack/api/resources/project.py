# calctrack/api/resources/project.py
from flask_restful import Resource, marshal

from ...services.record_service import ProjectService
from ..fields import project_fields
from ..middleware import session_required
from ..parsers import parse_body, project_parser


class ProjectList(Resource):
    method_decorators = [session_required]

    def get(self, current_user):
        """Controller: List the caller's projects"""
        projects = ProjectService().list_for(current_user)
        return marshal(projects, project_fields), 200

    def post(self, current_user):
        """Controller: Create a project owned by the caller"""
        args = parse_body(project_parser(), "Invalid project data")
        project = ProjectService().create_for(current_user, args)
        return marshal(project, project_fields), 200


class ProjectItem(Resource):
    method_decorators = [session_required]

    def get(self, project_id, current_user):
        project = ProjectService().get_owned(current_user, project_id)
        return marshal(project, project_fields), 200

    def put(self, project_id, current_user):
        """Controller: Merge the fields sent into an owned project"""
        changes = parse_body(project_parser(partial=True), "Invalid project data")
        project = ProjectService().update_owned(current_user, project_id, changes)
        return marshal(project, project_fields), 200

    def delete(self, project_id, current_user):
        ProjectService().delete_owned(current_user, project_id)
        return {"message": "Project deleted"}, 200
