"""Error handling infrastructure."""

from .context import ExceptionContext
from .exception_handler import (
    ErrorResponse,
    ExceptionHandler,
    get_exception_handler,
    handle_exceptions,
)

__all__ = [
    "ExceptionContext",
    "ErrorResponse",
    "ExceptionHandler",
    "get_exception_handler",
    "handle_exceptions",
]
