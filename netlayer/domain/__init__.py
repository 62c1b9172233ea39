"""Domain types shared across netlayer."""

from .errors import (
    ApplicationError,
    DecodeFailureError,
    ErrorKind,
    InvalidURLError,
    NetworkError,
    NetworkUnreachableError,
    RequestTimeoutError,
    ServerError,
    SessionErrorCode,
    UnknownNetworkError,
)

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
