"""Pydantic models for netlayer."""

from .envelope import ResponseEnvelope
from .request import ExecutorConfig, HTTPMethod, RequestDescriptor
from .result import RequestResult

__all__ = [
    "ExecutorConfig",
    "HTTPMethod",
    "RequestDescriptor",
    "RequestResult",
    "ResponseEnvelope",
]
