# calctrack/api/fields.py
# Response shapes. The password hash is left out of user_fields on purpose.
from flask_restful import fields

user_fields = {
    'id': fields.String,
    'username': fields.String,
    'email': fields.String,
    'firstName': fields.String(attribute='first_name'),
    'lastName': fields.String(attribute='last_name'),
    'role': fields.String,
    'createdAt': fields.DateTime(dt_format='iso8601', attribute='created_at'),
}

calculation_fields = {
    'id': fields.String,
    'userId': fields.String(attribute='user_id'),
    'type': fields.String,
    'name': fields.String,
    'description': fields.String,
    'inputs': fields.Raw,
    'results': fields.Raw,
    'material': fields.String,
    'createdAt': fields.DateTime(dt_format='iso8601', attribute='created_at'),
    'updatedAt': fields.DateTime(dt_format='iso8601', attribute='updated_at'),
}

project_fields = {
    'id': fields.String,
    'userId': fields.String(attribute='user_id'),
    'name': fields.String,
    'description': fields.String,
    'calculations': fields.List(fields.String),
    'status': fields.String,
    'createdAt': fields.DateTime(dt_format='iso8601', attribute='created_at'),
    'updatedAt': fields.DateTime(dt_format='iso8601', attribute='updated_at'),
}
