"""Exceptions raised by quicktypegen."""

from typing import Optional


class QuickTypeError(Exception):
    """
    Base exception for type generation failures.

    Attributes:
        message: Human-readable error description
        context: Optional context about where the error occurred
        cause: Optional underlying exception that caused this error
    """

    def __init__(self, message: str, context: Optional[str] = None,
                 cause: Optional[BaseException] = None) -> None:
        self.message = message
        self.context = context
        self.cause = cause
        full_message = message
        if context:
            full_message = f"{message} (context: {context})"
        super().__init__(full_message)


class InvalidInputError(QuickTypeError):
    """Raised when the value handed to generate() is not a usable JSON value."""


class InferenceError(QuickTypeError):
    """Raised when type inference or rendering fails unexpectedly."""

    def __init__(self, cause: BaseException, context: Optional[str] = None) -> None:
        super().__init__(f"Failed to generate types: {cause}", context=context, cause=cause)


class ApiError(QuickTypeError):
    """
    Raised by the HTTP client when a JSON body cannot be retrieved.

    Attributes:
        code: Machine-readable error code (e.g. 'TIMEOUT', 'HTTP_ERROR')
        status: HTTP-like status code describing the failure
    """

    def __init__(self, message: str, code: str, status: int,
                 cause: Optional[BaseException] = None) -> None:
        self.code = code
        self.status = status
        super().__init__(message, cause=cause)
