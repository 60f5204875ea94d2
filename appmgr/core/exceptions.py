"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
Any ApplicationError that escapes a command handler is reported as
``Error: <message>`` and ends the invocation with exit status 1.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ValidationError(ApplicationError):
    """Raised when command arguments fail validation."""

    def __init__(self, message: str = "Validation failed") -> None:
        super().__init__(message, code="VAL_VALIDATION_ERROR")


class ExternalServiceError(ApplicationError):
    """Raised when an external service call fails."""

    def __init__(self, message: str = "External service error") -> None:
        super().__init__(message, code="SYS_EXTERNAL_SERVICE_ERROR")


class ProcessLaunchError(ExternalServiceError):
    """Raised when an external program cannot be started."""

    def __init__(self, message: str = "Could not start process") -> None:
        super().__init__(message)
        self.code = "SYS_PROCESS_LAUNCH_ERROR"
