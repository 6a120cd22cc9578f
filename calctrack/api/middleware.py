# calctrack/api/middleware.py
from functools import wraps

from flask import current_app, request

from ..services.auth_service import AuthService


def session_cookie_value():
    return request.cookies.get(current_app.config['SESSION_COOKIE_NAME_ID'])


def _cookie_options():
    config = current_app.config
    return {
        "httponly": True,
        "secure": config['APP_ENV'].lower() == 'production',
        "samesite": config['SESSION_COOKIE_SAMESITE_POLICY'],
        "path": '/',
    }


def set_session_cookie(response, session):
    response.set_cookie(
        current_app.config['SESSION_COOKIE_NAME_ID'],
        session.id,
        max_age=current_app.config['SESSION_TTL_DAYS'] * 24 * 60 * 60,
        **_cookie_options()
    )
    return response


def clear_session_cookie(response):
    response.delete_cookie(current_app.config['SESSION_COOKIE_NAME_ID'], **_cookie_options())
    return response


def session_required(func):
    """Resolve the session cookie and pass the user on as ``current_user``.

    Used through ``Resource.method_decorators``; rejects the request with 401
    when there is no cookie, no live session, or no user behind the session.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        kwargs['current_user'] = AuthService().get_current_user(session_cookie_value())
        return func(*args, **kwargs)
    return wrapper
