from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, g, jsonify
from werkzeug.exceptions import HTTPException

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)
from ..users.auth import AuthProvider

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = {
    ValidationError: 400,
    AuthenticationError: 401,
    AuthorizationError: 403,
    NotFoundError: 404,
    InvalidStateError: 409,
    ConflictError: 409,
}


def error_body(message: str, status: int, **extra):
    body = {"error": message}
    body.update({k: v for k, v in extra.items() if v is not None})
    return jsonify(body), status


def login_required(auth: AuthProvider):
    """Resolve the caller through the auth provider and expose it as ``g.actor_id``."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            actor_id = auth.current_actor_id()
            if actor_id is None:
                return error_body("Please sign in to continue", 401)
            g.actor_id = actor_id
            return view(*args, **kwargs)

        return wrapper

    return decorator


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        status = next((STATUS_BY_ERROR[cls] for cls in type(e).__mro__ if cls in STATUS_BY_ERROR), 400)
        return error_body(str(e), status, field=getattr(e, "field", None))

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return error_body(e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("Unhandled error")
        return error_body("Internal server error", 500)
