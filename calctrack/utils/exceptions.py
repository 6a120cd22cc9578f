# calctrack/utils/exceptions.py
from flask import jsonify
from werkzeug.exceptions import HTTPException

from .logger import setup_logger


class APIError(HTTPException):
    """Error with a short message that is rendered as ``{"message": ...}``.

    Subclasses ``HTTPException`` so Flask-RESTful keeps the status code and
    uses ``data`` as the response body.
    """
    code = 400

    def __init__(self, message, status_code=None, errors=None):
        super().__init__(description=message)
        self.message = message
        if status_code is not None:
            self.code = status_code
        self.errors = errors
        self.data = self.to_dict()

    @property
    def status_code(self):
        return self.code

    def to_dict(self):
        body = {"message": self.message}
        if self.errors:
            body["errors"] = self.errors
        return body


class ValidationError(APIError):
    code = 400


class AuthenticationError(APIError):
    code = 401


class NotFoundError(APIError):
    code = 404


def handle_api_error(error):
    if isinstance(error, APIError):
        return jsonify(error.to_dict()), error.code
    if isinstance(error, HTTPException):
        return jsonify({"message": error.description}), error.code

    setup_logger().exception(f"Unhandled error: {error}")
    return jsonify({"message": "Internal server error"}), 500
