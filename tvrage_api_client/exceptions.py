"""Exceptions raised by the TVRage API client."""

from typing import Optional


class TVRageError(Exception):
    """Base exception for all TVRage API errors.

    Attributes:
        operation: The feed the failure happened on (e.g. 'showinfo.php'), if known
        status_code: HTTP status of the response, if one was received
    """

    def __init__(self, message: str, operation: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.status_code = status_code

    def __str__(self) -> str:
        if self.operation:
            return f"[{self.operation}] {self.message}"
        return self.message


class ConfigurationError(TVRageError):
    """Raised when the client is constructed without a usable API key."""

    pass


class TransportError(TVRageError):
    """Raised when the HTTP request fails or returns a non-2xx status."""

    pass


class ParseError(TVRageError):
    """Raised when a response is not well-formed XML or lacks a required element."""

    def __init__(self, message: str, raw_text: str = "", operation: Optional[str] = None,
                 status_code: Optional[int] = None):
        super().__init__(message, operation=operation, status_code=status_code)
        self.raw_text = raw_text


class UnknownOperationError(TVRageError):
    """Raised when a URL is requested for an operation the service does not have."""

    pass
