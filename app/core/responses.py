"""
Response envelope helpers.

Every endpoint answers with the same shape:
    success:    {"success": true, "message"?, "data"?, "pagination"?, ...}
    failure:    {"success": false, "message", "errors"?, "error"?}
"""

from typing import Any, List, Optional

from fastapi.responses import JSONResponse

from app.schemas.schemas import ErrorResponse

_UNSET = object()


def envelope(
    data: Any = _UNSET,
    message: Optional[str] = None,
    pagination: Optional[dict] = None,
    **extra: Any,
) -> dict:
    """Build a success envelope. Extra keyword args become top-level keys (e.g. `job`)."""
    body = {"success": True}
    if message is not None:
        body["message"] = message
    if data is not _UNSET:
        body["data"] = data
    body.update(extra)
    if pagination is not None:
        body["pagination"] = pagination
    return body


def error_response(
    status_code: int,
    message: str,
    errors: Optional[List[str]] = None,
    error: Optional[str] = None,
    **extra: Any,
) -> JSONResponse:
    body = ErrorResponse(message=message, errors=errors, error=error).model_dump(exclude_none=True)
    body.update(extra)
    return JSONResponse(status_code=status_code, content=body)
