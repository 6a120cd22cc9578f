# calctrack/api/parsers.py
"""Request body parsers and the value checks they rely on.

Each check follows the ``flask_restful.inputs`` convention: it takes the value
and the argument name and raises ``ValueError`` with a readable message.
"""
import re

from flask import request
from flask_restful import reqparse
from werkzeug.exceptions import HTTPException

from ..core.records import PROJECT_STATUSES, USER_ROLES
from ..utils.exceptions import ValidationError
from ..utils.security import MAX_PASSWORD_BYTES

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
MIN_PASSWORD_LENGTH = 6


def string(value, name='value'):
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string")
    return value


def non_empty_string(value, name='value'):
    if not string(value, name):
        raise ValueError(f"{name} is required")
    return value


def email(value, name='email'):
    if not isinstance(value, str) or not EMAIL_RE.match(value):
        raise ValueError("Invalid email address")
    return value


def password(value, name='password'):
    string(value, name)
    if len(value) < MIN_PASSWORD_LENGTH:
        raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    if len(value.encode('utf-8')) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    return value


def one_of(choices):
    def check(value, name='value'):
        if value not in choices:
            raise ValueError(f"{name} must be one of: {', '.join(choices)}")
        return value
    return check


def json_value(value, name='value'):
    return value


def id_list(value, name='value'):
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"{name} must be a list of ids")
    return list(value)


def _add(parser, name, partial, required=False, nullable=True, **kwargs):
    if partial:
        # absent fields stay absent so updates merge only what was sent
        parser.add_argument(name, location='json', required=False, store_missing=False,
                            nullable=nullable, **kwargs)
    else:
        parser.add_argument(name, location='json', required=required, nullable=nullable, **kwargs)


def register_parser():
    parser = reqparse.RequestParser(bundle_errors=True)
    parser.add_argument('username', type=non_empty_string, location='json', required=True, nullable=False)
    parser.add_argument('email', type=email, location='json', required=True, nullable=False)
    parser.add_argument('password', type=password, location='json', required=True, nullable=False)
    parser.add_argument('firstName', dest='first_name', type=string, location='json')
    parser.add_argument('lastName', dest='last_name', type=string, location='json')
    parser.add_argument('role', type=one_of(USER_ROLES), location='json')
    return parser


def login_parser():
    parser = reqparse.RequestParser(bundle_errors=True)
    parser.add_argument('username', type=non_empty_string, location='json', required=True, nullable=False)
    parser.add_argument('password', type=non_empty_string, location='json', required=True, nullable=False)
    return parser


def calculation_parser(partial=False):
    parser = reqparse.RequestParser(bundle_errors=True)
    _add(parser, 'type', partial, required=True, nullable=False, type=non_empty_string)
    _add(parser, 'name', partial, required=True, nullable=False, type=non_empty_string)
    _add(parser, 'description', partial, type=string)
    _add(parser, 'inputs', partial, required=True, nullable=False, type=json_value)
    _add(parser, 'results', partial, required=True, nullable=False, type=json_value)
    _add(parser, 'material', partial, type=string)
    return parser


def project_parser(partial=False):
    parser = reqparse.RequestParser(bundle_errors=True)
    _add(parser, 'name', partial, required=True, nullable=False, type=non_empty_string)
    _add(parser, 'description', partial, type=string)
    _add(parser, 'calculations', partial, nullable=False, type=id_list)
    _add(parser, 'status', partial, nullable=False, type=one_of(PROJECT_STATUSES))
    return parser


def parse_body(parser, message):
    """Run ``parser`` over the JSON body, turning any failure into a 400 with ``message``."""
    if not isinstance(request.get_json(silent=True), dict):
        raise ValidationError(message, errors={"body": "Expected a JSON object"})
    try:
        args = parser.parse_args()
    except HTTPException as e:
        data = getattr(e, 'data', None) or {}
        errors = data.get('message') if isinstance(data.get('message'), dict) else None
        raise ValidationError(message, errors=errors) from e
    return dict(args)
