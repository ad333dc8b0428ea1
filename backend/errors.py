# backend/errors.py

import logging

from flask import jsonify, request
from pydantic import ValidationError as SchemaValidationError
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from models import db


logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base class for errors that map straight onto an HTTP status."""

    status_code = 500

    def __init__(self, message, details=None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self):
        body = {"msg": self.message}
        if self.details is not None:
            body["error"] = self.details
        return body


class ValidationError(ApiError):
    status_code = 400


class DuplicateResource(ApiError):
    status_code = 400


class NotFound(ApiError):
    status_code = 404


class AuthError(ApiError):
    status_code = 401


class Forbidden(ApiError):
    status_code = 403


class InternalError(ApiError):
    status_code = 500

    def to_dict(self):
        return {"error": self.message}


def load_payload(schema, message):
    """Parse the JSON body into ``schema`` or raise ValidationError(400)."""
    try:
        body = request.get_json(silent=True)
        return schema(**(body if isinstance(body, dict) else {}))
    except SchemaValidationError as e:
        raise ValidationError(message, e.errors(include_url=False, include_input=False)) from e


def register_error_handlers(app):

    @app.errorhandler(ApiError)
    def handle_api_error(e):
        if e.status_code >= 500:
            logger.error("Request %s %s failed: %s", request.method, request.path, e.message)
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(SQLAlchemyError)
    def handle_db_error(e):
        db.session.rollback()
        logger.exception("Database error on %s %s", request.method, request.path)
        return jsonify(InternalError(str(e)).to_dict()), 500

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        if isinstance(e, HTTPException):
            return e
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify(InternalError(str(e)).to_dict()), 500
