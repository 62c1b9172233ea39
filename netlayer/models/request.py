"""Request descriptor and executor configuration models."""

from __future__ import annotations

from enum import Enum
import json
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class HTTPMethod(str, Enum):
    """HTTP verbs accepted by the executor."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


class RequestDescriptor(BaseModel):
    """Caller-supplied description of one HTTP request."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., description="Absolute http(s) URL to call")
    method: HTTPMethod = Field(default=HTTPMethod.GET, description="HTTP method")
    headers: dict[str, str] = Field(
        default_factory=dict, description="Request headers sent as-is",
    )
    body: Optional[bytes] = Field(default=None, description="Raw request body")
    timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="Per-request timeout in seconds; overrides the executor default",
    )

    @classmethod
    def json_request(
        cls,
        url: str,
        payload: Any,
        *,
        method: HTTPMethod = HTTPMethod.POST,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> "RequestDescriptor":
        """Build a descriptor whose body is ``payload`` serialised as JSON."""

        merged = {"Content-Type": "application/json"}
        merged.update(headers or {})
        return cls(
            url=url,
            method=method,
            headers=merged,
            body=json.dumps(payload).encode("utf-8"),
            timeout=timeout,
        )

    def effective_timeout(self, default: float) -> float:
        return self.timeout or default


class ExecutorConfig(BaseModel):
    """Settings captured by a RequestExecutor at construction."""

    model_config = ConfigDict(frozen=True)

    default_timeout: float = Field(
        ..., gt=0, description="Timeout in seconds when a descriptor sets none",
    )
    log_response_bodies: bool = Field(
        default=False, description="Pretty-print JSON response bodies at DEBUG level",
    )


__all__ = ["ExecutorConfig", "HTTPMethod", "RequestDescriptor"]
