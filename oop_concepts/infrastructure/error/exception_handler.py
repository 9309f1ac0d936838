"""Map exceptions to error responses and log them consistently."""
import functools
from typing import Any, Callable, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from oop_concepts.domain.base.exceptions import (
    ConfigurationError,
    DomainException,
    EntityNotFoundError,
    RestrictedFieldError,
    ValidationError,
)
from oop_concepts.infrastructure.error.context import ExceptionContext
from oop_concepts.infrastructure.logging.logger import get_logger


class ErrorResponse:
    """Serializable description of a handled error."""

    def __init__(self, error_code: str, message: str,
                 details: Optional[Dict[str, Any]] = None, exit_code: int = 1):
        self.error_code = error_code
        self.message = message
        self.details = details or {}
        self.exit_code = exit_code

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ExceptionHandler:
    """Turns exceptions into ``ErrorResponse`` objects."""

    # Most specific classes first
    _CATEGORY_MAP = (
        (EntityNotFoundError, "NOT_FOUND"),
        (RestrictedFieldError, "RESTRICTED_FIELD"),
        (ConfigurationError, "CONFIGURATION_ERROR"),
        (ValidationError, "VALIDATION_ERROR"),
        (DomainException, "DOMAIN_ERROR"),
    )

    def __init__(self):
        self.logger = get_logger(__name__)

    def categorize(self, exc: BaseException) -> str:
        for exc_type, category in self._CATEGORY_MAP:
            if isinstance(exc, exc_type):
                return category
        if isinstance(exc, PydanticValidationError):
            return "VALIDATION_ERROR"
        return "INTERNAL_ERROR"

    def build_response(self, exc: BaseException) -> ErrorResponse:
        """Build the error response for ``exc`` without logging it."""
        category = self.categorize(exc)
        if isinstance(exc, DomainException):
            details = dict(exc.details)
            details.setdefault("error_code", exc.error_code)
            return ErrorResponse(category, exc.message, details)
        if isinstance(exc, PydanticValidationError):
            return ErrorResponse(
                category, str(exc), {"errors": exc.errors(include_url=False)}
            )
        return ErrorResponse(category, f"Unexpected error: {exc}")

    def handle(self, exc: BaseException,
               context: Optional[ExceptionContext] = None) -> ErrorResponse:
        """Log ``exc`` and build the matching error response."""
        response = self.build_response(exc)
        log_context = context.to_dict() if context else {}

        if isinstance(exc, (DomainException, PydanticValidationError)):
            self.logger.warning(
                "Handled error",
                category=response.error_code,
                error=response.message,
                **log_context,
            )
        else:
            self.logger.error(
                "Unexpected error", error=str(exc), exc_info=exc, **log_context
            )
        return response


_exception_handler: Optional[ExceptionHandler] = None


def get_exception_handler() -> ExceptionHandler:
    """Return the shared exception handler."""
    global _exception_handler
    if _exception_handler is None:
        _exception_handler = ExceptionHandler()
    return _exception_handler


def handle_exceptions(operation: str, layer: str = "application",
                      handler: Optional[ExceptionHandler] = None) -> Callable:
    """
    Decorator that logs exceptions with context before re-raising them.

    Args:
        operation: Name of the operation, recorded in the log context
        layer: Architectural layer of the decorated callable
        handler: Exception handler to use (defaults to the shared one)
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                (handler or get_exception_handler()).handle(
                    e, ExceptionContext(operation, layer)
                )
                raise

        return wrapper

    return decorator
