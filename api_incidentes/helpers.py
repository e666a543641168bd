"""
Request helpers shared by the API blueprints.

``load_payload`` parses the JSON body with a pydantic schema and
``api_errors`` turns service exceptions into JSON error responses, so each
route only describes the happy path.
"""

from __future__ import annotations

from functools import wraps
from typing import Any, Optional, Type

from flask import current_app, jsonify, request
from pydantic import BaseModel
from pydantic import ValidationError as SchemaError
from werkzeug.exceptions import HTTPException

from .extensions import db
from .services.errors import NotFoundError, ValidationError

INTERNAL_ERROR_MESSAGE = "Error interno del servidor."


def json_error(message: str, status: int, **extra: Any):
    """Build an ``{"error": ...}`` response tuple."""
    return jsonify({"error": message, **extra}), status


def load_payload(schema: Type[BaseModel]):
    """Validate the request JSON body against ``schema``.

    A missing or malformed body reaches pydantic as ``None`` and is rejected
    like any other shape error.
    """
    return schema.model_validate(request.get_json(silent=True))


def api_errors(not_found_message: Optional[str] = None):
    """Map service exceptions of a view to status codes.

    - ``NotFoundError``  -> 404 with ``not_found_message`` (or the
      exception text when no fixed message is given);
    - schema errors     -> 400 with pydantic details;
    - ``ValidationError`` -> 400 with the rule that failed;
    - anything else     -> 500; the cause is logged, never returned.
    """

    def decorator(view):
        @wraps(view)
        def decorated_function(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except HTTPException:
                raise
            except NotFoundError as exc:
                return json_error(not_found_message or str(exc), 404)
            except SchemaError as exc:
                details = exc.errors(include_url=False, include_context=False)
                return json_error("Validation failed", 400, details=details)
            except ValidationError as exc:
                return json_error(str(exc), 400)
            except Exception:
                db.session.rollback()
                current_app.logger.exception("Unexpected error in %s %s", request.method, request.path)
                return json_error(INTERNAL_ERROR_MESSAGE, 500)

        return decorated_function

    return decorator
