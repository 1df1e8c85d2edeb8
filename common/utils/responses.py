"""
Standard API response helpers.

Every response body carries a top-level ``message`` field; errors add a
machine-readable ``code`` and optional ``details``.

Example:
    from common.utils import error_response, message_response

    return JSONResponse(
        status_code=404,
        content=error_response("Profile not found", code="PROFILE_NOT_FOUND"),
    )
"""

from typing import Any, Optional, Dict


def message_response(message: str, **extra: Any) -> Dict[str, Any]:
    """
    Create a success body with a message and any extra top-level fields.

    Args:
        message: Human-readable success message
        **extra: Additional fields (e.g. ``profileKey`` or ``profile``)

    Returns:
        Dictionary with the extra fields and ``message``
    """
    response: Dict[str, Any] = dict(extra)
    response["message"] = message
    return response


def error_response(
    message: str,
    code: Optional[str] = None,
    details: Optional[Any] = None,
) -> Dict[str, Any]:
    """
    Create a standard error body.

    Args:
        message: Human-readable error message
        code: Machine-readable error code (e.g., "PROFILE_NOT_FOUND")
        details: Additional error details

    Returns:
        Dictionary with message and optional code/details
    """
    error: Dict[str, Any] = {"message": message}

    if code:
        error["code"] = code

    if details is not None:
        error["details"] = details

    return error
