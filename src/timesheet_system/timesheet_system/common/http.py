from __future__ import annotations

from functools import wraps

from flask import jsonify, request, session

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthenticationError, 400),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (PersistenceError, 500),
)


def request_data() -> dict:
    """JSON body if present, else form fields."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def error_response(e: DomainError, *, generic_message: str = "Database error"):
    status = next((code for cls, code in _STATUS_BY_ERROR if isinstance(e, cls)), 500)
    # Store failures keep their detail in the log, not in the response.
    message = generic_message if status == 500 else str(e)
    return jsonify({"success": False, "message": message}), status


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not session.get("is_admin"):
            return jsonify({"success": False, "message": "Admin login required"}), 403
        return view(*args, **kwargs)

    return wrapper
