"""
Utilities module - Common helpers for API responses and exceptions.
"""

from common.utils.responses import message_response, error_response
from common.utils.exceptions import (
    APIException,
    BadRequestException,
    NotFoundException,
    InternalServerException,
)
from common.utils.handlers import register_exception_handlers

__all__ = [
    "message_response",
    "error_response",
    "APIException",
    "BadRequestException",
    "NotFoundException",
    "InternalServerException",
    "register_exception_handlers",
]
