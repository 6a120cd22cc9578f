# calctrack/api/resources/auth.py
from flask import make_response
from flask_restful import Resource, marshal

from ...services.auth_service import AuthService
from ..fields import user_fields
from ..middleware import clear_session_cookie, session_cookie_value, session_required, set_session_cookie
from ..parsers import login_parser, parse_body, register_parser


def _signed_in_response(user, session):
    response = make_response({"user": marshal(user, user_fields)}, 200)
    return set_session_cookie(response, session)


class Register(Resource):
    def post(self):
        """Controller: Register a new user and sign them in"""
        args = parse_body(register_parser(), "Invalid registration data")

        auth_service = AuthService()
        user, session = auth_service.register(
            args['username'],
            args['email'],
            args['password'],
            first_name=args.get('first_name'),
            last_name=args.get('last_name'),
            role=args.get('role'),
        )
        return _signed_in_response(user, session)


class Login(Resource):
    def post(self):
        """Controller: Check credentials and set the session cookie"""
        args = parse_body(login_parser(), "Invalid login data")

        auth_service = AuthService()
        user, session = auth_service.login(args['username'], args['password'])
        return _signed_in_response(user, session)


class Logout(Resource):
    def post(self):
        """Controller: End the current session, if there is one"""
        AuthService().logout(session_cookie_value())
        response = make_response({"message": "Logged out successfully"}, 200)
        return clear_session_cookie(response)


class CurrentUser(Resource):
    method_decorators = [session_required]

    def get(self, current_user):
        """Controller: Get current user info"""
        return {"user": marshal(current_user, user_fields)}, 200
