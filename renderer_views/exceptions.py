"""Custom exceptions for Renderer Views with proper HTTP status codes."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error responses."""

    # Generic errors
    VIEW_ERROR = "VIEW_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Resolution errors
    VIEW_NOT_FOUND = "VIEW_NOT_FOUND"

    # Rendering errors
    MODEL_CONFLICT = "MODEL_CONFLICT"

    # Configuration errors
    CONFIG_ERROR = "CONFIG_ERROR"
    CONFIG_MISSING = "CONFIG_MISSING"


class ViewException(Exception):
    """Base exception for view errors with HTTP status code support.

    All custom exceptions should inherit from this class to ensure
    consistent error handling across the application.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VIEW_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize view exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class ConfigurationException(ViewException):
    """Configuration errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class ContextBindingMissingException(ConfigurationException):
    """The template application context is not registered with the host application."""

    def __init__(
        self,
        message: str = "No template application context found",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(
            message,
            code=ErrorCode.CONFIG_MISSING,
            status_code=500,
            details=details,
        )


class ViewNotFoundException(ViewException):
    """No resolver or definition could supply the requested view."""

    def __init__(self, view_name: str, details: dict[str, Any] | None = None):
        self.view_name = view_name
        super().__init__(
            f"View not found: {view_name}",
            code=ErrorCode.VIEW_NOT_FOUND,
            status_code=404,
            details=details,
        )


class ModelAttributeConflictException(ViewException):
    """A request, session or helper attribute would overwrite a model attribute."""

    def __init__(self, attribute: str, source: str):
        self.attribute = attribute
        self.source = source
        super().__init__(
            f"Cannot expose {source} attribute '{attribute}' because of an existing model object of the same name",
            code=ErrorCode.MODEL_CONFLICT,
            status_code=500,
            details={"attribute": attribute, "source": source},
        )
