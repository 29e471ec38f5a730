"""Error types and the JSON error envelope used by every API response.

Shape:
{
  "success": false,
  "error": {"code": "string", "message": "string", "details": {}}
}
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from flask import Flask, jsonify
from pydantic import BaseModel, Field, ValidationError
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class DashboardError(Exception):
    code = "dashboard_error"
    http_status = 400

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class RunConflictError(DashboardError):
    """A run was requested while one is already in progress."""
    code = "run_conflict"
    http_status = 409


class ErrorDetail(BaseModel):
    code: str
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)


class ErrorEnvelope(BaseModel):
    success: bool = False
    error: ErrorDetail


def error_response(code: str, message: str, status: int, details: Optional[Dict[str, Any]] = None):
    envelope = ErrorEnvelope(error=ErrorDetail(code=code, message=message, details=details or {}))
    return jsonify(envelope.model_dump(mode="json")), status


def validation_details(exc: ValidationError) -> Dict[str, Any]:
    """Violated constraints as plain JSON: where, what, and which rule."""
    return {
        "errors": [
            {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
            for err in exc.errors()
        ]
    }


# -----------------------
# handlers
# -----------------------
def _handle_validation_error(exc: ValidationError):
    return error_response("validation_error", "Request validation failed", 400, validation_details(exc))


def _handle_dashboard_error(exc: DashboardError):
    return error_response(exc.code, exc.message, exc.http_status, exc.details)


def _handle_http_exception(exc: HTTPException):
    return error_response("http_error", exc.description or exc.name, exc.code or 500)


def _handle_unexpected(exc: Exception):
    logger.exception("Unhandled error while serving request")
    return error_response("internal_error", "Internal server error", 500)


def register_error_handlers(app: Flask) -> None:
    app.register_error_handler(ValidationError, _handle_validation_error)
    app.register_error_handler(DashboardError, _handle_dashboard_error)
    app.register_error_handler(HTTPException, _handle_http_exception)
    app.register_error_handler(Exception, _handle_unexpected)
