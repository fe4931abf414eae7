from __future__ import annotations

import logging
from datetime import date, datetime, time
from functools import wraps

from flask import jsonify, request, session
from flask.json.provider import DefaultJSONProvider

from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    MissingActiveShiftError,
    NotFoundError,
    ValidationError,
)
from .datetime_utils import parse_iso_date

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ConflictError, 409),
    (MissingActiveShiftError, 409),
    (ValidationError, 400),
)


class IsoJSONProvider(DefaultJSONProvider):
    """Serialize dates and times as ISO strings instead of HTTP dates."""

    @staticmethod
    def default(o):
        if isinstance(o, (datetime, date)):
            return o.isoformat()
        if isinstance(o, time):
            return o.strftime("%H:%M")
        return DefaultJSONProvider.default(o)


def ok(data=None, *, message: str | None = None, status: int = 200):
    body: dict = {"success": True}
    if message:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return jsonify(body), status


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def status_for(error: DomainError) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status
    return 400


def api_view(view):
    """Turn domain errors into JSON failures; anything else is a logged 500."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except DomainError as e:
            return fail(str(e), status_for(e))
        except Exception:
            logger.exception("Unhandled error in %s %s", request.method, request.path)
            return fail("Internal server error", 500)

    return wrapper


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "employee_id" not in session:
            return fail("Please sign in to continue", 401)
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "employee_id" not in session:
            return fail("Please sign in to continue", 401)
        if session.get("role") != Role.ADMIN.value:
            return fail("You do not have permission", 403)
        return view(*args, **kwargs)

    return wrapper


def current_role() -> Role:
    return Role(session.get("role"))


def current_employee_id() -> int:
    return int(session["employee_id"])


def json_body() -> dict:
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def date_arg(name: str, default: date) -> date:
    value = request.args.get(name)
    return parse_iso_date(value) if value else default


def int_arg(name: str, default: int) -> int:
    value = request.args.get(name, "")
    return int(value) if value.isdigit() else default
