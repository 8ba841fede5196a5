from __future__ import annotations

from typing import Any, Dict, Tuple, Type

from flask import jsonify, request

from ..core.exceptions import (
    AlreadyMarkedError,
    AlreadyRegisteredError,
    AuthenticationError,
    DomainError,
    DuplicateKeyError,
    NotFoundError,
    RecordRejectedError,
    SessionExpiredError,
    StorageError,
    StorageUnavailableError,
    ValidationError,
)

STATUS_BY_ERROR: Dict[Type[BaseException], int] = {
    ValidationError: 400,
    AuthenticationError: 401,
    NotFoundError: 404,
    AlreadyRegisteredError: 409,
    AlreadyMarkedError: 409,
    SessionExpiredError: 410,
    DomainError: 400,
    DuplicateKeyError: 409,
    RecordRejectedError: 400,
    StorageUnavailableError: 503,
    StorageError: 500,
}


def status_for(exc: BaseException) -> int:
    """Most specific mapped status along the exception's MRO."""
    for klass in type(exc).__mro__:
        if klass in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[klass]
    return 500


def error_kind(exc: BaseException) -> str:
    name = type(exc).__name__
    return name[: -len("Error")] if name.endswith("Error") and name != "Error" else name


def error_response(exc: BaseException) -> Tuple[Any, int]:
    return jsonify({"success": False, "error": error_kind(exc), "message": str(exc)}), status_for(exc)


def json_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if data is None:
        data = request.form.to_dict()
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data
