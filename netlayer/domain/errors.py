"""Typed failures reported by the request executor."""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar


class ErrorKind(str, Enum):
    """Classification of a failed request."""

    NETWORK_UNREACHABLE = "NETWORK_UNREACHABLE"
    INVALID_URL = "INVALID_URL"
    SERVER_ERROR = "SERVER_ERROR"
    TIMEOUT = "TIMEOUT"
    DECODE_FAILURE = "DECODE_FAILURE"
    APPLICATION_ERROR = "APPLICATION_ERROR"
    UNKNOWN = "UNKNOWN"


class SessionErrorCode(str, Enum):
    """Application error codes that signal an expired session."""

    SESSION_EXPIRED = "0000252"
    SESSION_EXPIRED_LEGACY = "101"


class NetworkError(Exception):
    """Base class for every failure the executor can report."""

    kind: ClassVar[ErrorKind] = ErrorKind.UNKNOWN

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r})"


class NetworkUnreachableError(NetworkError):
    """The reachability probe reported no connectivity."""

    kind = ErrorKind.NETWORK_UNREACHABLE

    def __init__(self, message: str = "Please check your connectivity") -> None:
        super().__init__(message)


class InvalidURLError(NetworkError):
    """The descriptor URL could not be parsed as an absolute http(s) URL."""

    kind = ErrorKind.INVALID_URL

    def __init__(self, url: str, message: str = "Invalid Url") -> None:
        super().__init__(message)
        self.url = url

    def __repr__(self) -> str:
        return f"InvalidURLError(url={self.url!r})"


class ServerError(NetworkError):
    """The server reply was not a usable HTTP response."""

    kind = ErrorKind.SERVER_ERROR

    def __init__(self, code: int = 0, message: str = "Server error") -> None:
        super().__init__(message)
        self.code = code

    def __repr__(self) -> str:
        return f"ServerError(code={self.code}, message={self.message!r})"


class RequestTimeoutError(NetworkError):
    """The transport timed out before a response arrived."""

    kind = ErrorKind.TIMEOUT


class DecodeFailureError(NetworkError):
    """The response body did not match the requested type."""

    kind = ErrorKind.DECODE_FAILURE

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class ApplicationError(NetworkError):
    """
    An otherwise successful response carried an application error.

    The code is kept as the string the server sent so that zero-padded codes
    such as ``"0000252"`` survive.
    """

    kind = ErrorKind.APPLICATION_ERROR

    def __init__(self, code: str | None, message: str) -> None:
        super().__init__(message)
        self.code = code

    @property
    def is_session_expired(self) -> bool:
        return self.code in {c.value for c in SessionErrorCode}

    def __repr__(self) -> str:
        return f"ApplicationError(code={self.code!r}, message={self.message!r})"


class UnknownNetworkError(NetworkError):
    """Any other transport failure; the message describes the cause."""

    kind = ErrorKind.UNKNOWN


__all__ = [
    "ApplicationError",
    "DecodeFailureError",
    "ErrorKind",
    "InvalidURLError",
    "NetworkError",
    "NetworkUnreachableError",
    "RequestTimeoutError",
    "ServerError",
    "SessionErrorCode",
    "UnknownNetworkError",
]
