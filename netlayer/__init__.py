"""Minimal asynchronous HTTP request layer with typed results."""

from .config import Settings, settings
from .domain import (
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
from .models import (
    ExecutorConfig,
    HTTPMethod,
    RequestDescriptor,
    RequestResult,
    ResponseEnvelope,
)
from .services import (
    ReachabilityMonitor,
    ReachabilityProbe,
    RequestExecutor,
    StaticReachability,
)

__version__ = "0.1.0"

__all__ = [
    "ApplicationError",
    "DecodeFailureError",
    "ErrorKind",
    "ExecutorConfig",
    "HTTPMethod",
    "InvalidURLError",
    "NetworkError",
    "NetworkUnreachableError",
    "ReachabilityMonitor",
    "ReachabilityProbe",
    "RequestDescriptor",
    "RequestExecutor",
    "RequestResult",
    "RequestTimeoutError",
    "ResponseEnvelope",
    "ServerError",
    "SessionErrorCode",
    "Settings",
    "StaticReachability",
    "UnknownNetworkError",
    "settings",
    "__version__",
]
