"""
Base exception classes for the Product Delete service
"""

from typing import Any, Dict, Optional


class ProductDeleteException(Exception):
    """Base exception for all Product Delete errors"""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/API responses"""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "cause": str(self.cause) if self.cause else None,
            "exception_type": self.__class__.__name__,
        }


class ValidationError(ProductDeleteException):
    """Base exception for validation errors"""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        error_code: str = "VALIDATION_ERROR",
        **kwargs
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            details={"field": field, "value": value},
            **kwargs
        )
        self.field = field
        self.value = value


class InvalidLimitError(ValidationError):
    """Raised when a delete limit is not a positive integer"""

    def __init__(self, value: Any, message: Optional[str] = None, **kwargs):
        super().__init__(
            message=message or f"limit must be a positive integer, got {value!r}",
            field="limit",
            value=value,
            error_code="INVALID_LIMIT",
            **kwargs
        )
