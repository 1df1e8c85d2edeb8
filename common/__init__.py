"""
Common library for reusable infrastructure components.

- database: Async MongoDB connection manager (Motor)
- utils: Standard responses, exceptions, exception handlers
- config: Base settings class
"""

from common.database import MongoDB
from common.utils import (
    message_response,
    error_response,
    APIException,
    BadRequestException,
    NotFoundException,
    InternalServerException,
    register_exception_handlers,
)
from common.config import BaseAppSettings

__all__ = [
    # Database
    "MongoDB",
    # Utils
    "message_response",
    "error_response",
    "APIException",
    "BadRequestException",
    "NotFoundException",
    "InternalServerException",
    "register_exception_handlers",
    # Config
    "BaseAppSettings",
]
