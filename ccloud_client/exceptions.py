"""Custom exception classes for the Confluent Cloud client."""

from typing import Optional, Dict, Any, Iterable
from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for different types of failures."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # HTTP round trip errors
    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    UNEXPECTED_STATUS = "UNEXPECTED_STATUS"
    DECODE_ERROR = "DECODE_ERROR"


class CCloudError(Exception):
    """Base exception class for the Confluent Cloud client."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            error_code: Specific error code for the failure
            details: Additional context about the error
            cause: The underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary."""
        result = {
            'error': self.error_code.value,
            'message': self.message,
            'details': self.details
        }

        if self.cause:
            result['cause'] = str(self.cause)

        return result

    def __str__(self) -> str:
        """String representation of the exception."""
        base_str = f"{self.error_code.value}: {self.message}"

        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            base_str += f" ({details_str})"

        if self.cause:
            base_str += f" [caused by: {self.cause}]"

        return base_str


class ConfigurationError(CCloudError):
    """Exception for configuration-related errors."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        details = {}
        if config_key:
            details['config_key'] = config_key

        super().__init__(
            message=message,
            error_code=ErrorCode.CONFIGURATION_ERROR,
            details=details
        )


class TransportError(CCloudError):
    """Exception for network failures before a response was received."""

    def __init__(self, message: str, method: Optional[str] = None, url: Optional[str] = None,
                 cause: Optional[Exception] = None):
        details = {}
        if method:
            details['method'] = method
        if url:
            details['url'] = url

        super().__init__(
            message=message,
            error_code=ErrorCode.TRANSPORT_ERROR,
            details=details,
            cause=cause
        )


class UnexpectedStatusError(CCloudError):
    """Exception for a response whose status code is not the documented one."""

    def __init__(
        self,
        operation: str,
        status_code: int,
        reason: Optional[str] = None,
        expected: Iterable[int] = (),
        body: Optional[str] = None
    ):
        self.operation = operation
        self.status_code = status_code
        self.status = f"{status_code} {reason}".strip() if reason else str(status_code)
        self.expected = tuple(sorted(expected))
        self.body = body

        super().__init__(
            message=f"failed to {operation}: {self.status}",
            error_code=ErrorCode.UNEXPECTED_STATUS,
            details={
                'status_code': status_code,
                'expected': list(self.expected)
            }
        )


class DecodeError(CCloudError):
    """Exception for a response body that does not match the expected shape."""

    def __init__(self, message: str, operation: Optional[str] = None, cause: Optional[Exception] = None):
        details = {}
        if operation:
            details['operation'] = operation

        super().__init__(
            message=message,
            error_code=ErrorCode.DECODE_ERROR,
            details=details,
            cause=cause
        )


def format_error_response(error: Exception, include_traceback: bool = False) -> Dict[str, Any]:
    """Format an exception into a standardized error response."""
    if isinstance(error, CCloudError):
        response = error.to_dict()
    else:
        response = {
            'error': ErrorCode.INTERNAL_ERROR.value,
            'message': str(error),
            'details': {}
        }

    if include_traceback:
        import traceback
        response['traceback'] = traceback.format_exc()

    return response
