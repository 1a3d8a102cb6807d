from flask import jsonify, current_app
from werkzeug.exceptions import HTTPException
from marshmallow import ValidationError
from sqlalchemy.exc import IntegrityError
import logging

from models.schemas.common import first_message
from services.exceptions import DomainError

logger = logging.getLogger(__name__)


def error_response(message: str, status: int, details: dict | None = None):
    payload = {"error": {"message": message}}
    if details:
        payload["error"]["details"] = details
    return jsonify(payload), status


def register_error_handlers(app):
    # Domain errors: BookNotFound, PublisherNotDeleted, InvalidArgument, ...
    @app.errorhandler(DomainError)
    def handle_domain_error(err: DomainError):
        logger.info("%s: %s", err.__class__.__name__, err.message)
        return error_response(err.message, err.status_code)

    # Marshmallow validation errors map to 422 with field-level details
    @app.errorhandler(ValidationError)
    def handle_validation_error(err: ValidationError):
        messages = err.messages if isinstance(err.messages, dict) else {"_schema": err.messages}
        logger.info("Validation failed: %s", messages)
        return jsonify({"message": first_message(messages), "errors": messages}), 422

    # Integrity errors the repositories did not translate (e.g. FK race)
    @app.errorhandler(IntegrityError)
    def handle_integrity_error(err: IntegrityError):
        message = str(getattr(err, "orig", err))
        logger.warning("Integrity error: %s", message)
        details = {"db_error": message} if current_app.debug else None
        return error_response("Integrity error.", 409, details=details)

    # 404 Not Found (unknown routes)
    @app.errorhandler(404)
    def not_found(e):
        return error_response("Resource not found", 404)

    # Werkzeug HTTPExceptions map to their status codes
    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        return error_response(err.description, err.code or 400)

    # 500 Internal Error (catch-all)
    @app.errorhandler(Exception)
    def internal_error(err: Exception):
        logger.exception("Unhandled exception", exc_info=err)
        details = None
        # In dev, include exception details to speed up debugging
        if current_app.debug:
            details = {"type": err.__class__.__name__, "message": str(err)}
        return error_response("An unexpected error occurred", 500, details=details)
