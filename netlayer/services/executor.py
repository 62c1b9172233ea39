"""Asynchronous request executor with typed decoding and error mapping."""

from __future__ import annotations

import asyncio
from functools import lru_cache
import json
import logging
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from netlayer.config import settings
from netlayer.domain.errors import (
    ApplicationError,
    DecodeFailureError,
    InvalidURLError,
    NetworkError,
    NetworkUnreachableError,
    RequestTimeoutError,
    ServerError,
    UnknownNetworkError,
)
from netlayer.models.envelope import ResponseEnvelope
from netlayer.models.request import ExecutorConfig, RequestDescriptor
from netlayer.models.result import RequestResult
from netlayer.services.reachability import ReachabilityProbe, StaticReachability

logger = logging.getLogger("netlayer.executor")

T = TypeVar("T")

_ALLOWED_SCHEMES = {"http", "https"}


@lru_cache(maxsize=128)
def _cached_adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def _adapter_for(response_type: Any) -> TypeAdapter[Any]:
    try:
        return _cached_adapter(response_type)
    except TypeError:
        # Unhashable annotations cannot be cached.
        return TypeAdapter(response_type)


def parse_url(raw: str) -> httpx.URL | None:
    """Return ``raw`` as an absolute http(s) URL, or None if it is not one."""

    if not raw or raw != raw.strip():
        return None
    try:
        url = httpx.URL(raw)
    except (httpx.InvalidURL, TypeError, ValueError):
        return None
    if url.scheme not in _ALLOWED_SCHEMES or not url.host:
        return None
    return url


def _pretty_json(body: bytes) -> str | None:
    try:
        return json.dumps(json.loads(body), indent=2, ensure_ascii=False)
    except ValueError:
        return None


class RequestExecutor:
    """Turn a RequestDescriptor into exactly one typed result.

    Every call checks reachability, validates the URL, performs one HTTP
    exchange and decodes the JSON body into the caller's type. Failures are
    classified into :class:`~netlayer.domain.errors.NetworkError` subclasses
    and returned inside the :class:`RequestResult`; ``execute`` never raises
    for a failed request. Results resolve on the event loop that awaited
    ``execute``. Nothing is retried.
    """

    def __init__(
        self,
        default_timeout: float | None = None,
        *,
        reachability: ReachabilityProbe | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        log_response_bodies: bool | None = None,
    ) -> None:
        self.config = ExecutorConfig(
            default_timeout=(
                settings.default_timeout if default_timeout is None else default_timeout
            ),
            log_response_bodies=(
                settings.log_response_bodies
                if log_response_bodies is None
                else log_response_bodies
            ),
        )
        self.reachability = reachability or StaticReachability(True)
        self.transport = transport

    async def execute(
        self, descriptor: RequestDescriptor, response_type: type[T]
    ) -> RequestResult[T]:
        """Perform ``descriptor`` and decode the body into ``response_type``.

        Raises :class:`pydantic.errors.PydanticSchemaGenerationError` before
        any request is sent when pydantic cannot build a schema for
        ``response_type``; that is a programming error, not a request failure.
        """

        adapter = _adapter_for(response_type)
        timeout = descriptor.effective_timeout(self.config.default_timeout)

        if not self.reachability.is_reachable():
            return self._fail(descriptor, NetworkUnreachableError())

        url = parse_url(descriptor.url)
        if url is None:
            return self._fail(descriptor, InvalidURLError(descriptor.url))

        try:
            async with httpx.AsyncClient(
                timeout=timeout, transport=self.transport
            ) as client:
                response = await client.request(
                    descriptor.method.value,
                    url,
                    headers=descriptor.headers,
                    content=descriptor.body,
                )
        except httpx.TimeoutException as exc:
            return self._fail(
                descriptor, RequestTimeoutError(str(exc) or "Request timed out")
            )
        except httpx.RemoteProtocolError as exc:
            logger.debug("Malformed HTTP response from %s: %s", url, exc)
            return self._fail(descriptor, ServerError(0, "Server error"))
        except httpx.RequestError as exc:
            return self._fail(
                descriptor, UnknownNetworkError(str(exc) or type(exc).__name__)
            )
        except Exception as exc:
            logger.exception("Unexpected transport failure for %s", url)
            return self._fail(descriptor, UnknownNetworkError(str(exc) or type(exc).__name__))

        return self._decode(descriptor, response, response_type, adapter)

    def submit(
        self, descriptor: RequestDescriptor, response_type: type[T]
    ) -> asyncio.Task[RequestResult[T]]:
        """Schedule :meth:`execute` on the running loop and return its task.

        Cancelling the task cancels the in-flight transport call.
        """

        return asyncio.create_task(self.execute(descriptor, response_type))

    def _decode(
        self,
        descriptor: RequestDescriptor,
        response: httpx.Response,
        response_type: type[T],
        adapter: TypeAdapter[Any],
    ) -> RequestResult[T]:
        body = response.content

        if self.config.log_response_bodies and logger.isEnabledFor(logging.DEBUG):
            pretty = _pretty_json(body)
            if pretty is not None:
                logger.debug("Response from %s:\n%s", descriptor.url, pretty)

        # An envelope that fails to decode is not an application error; the
        # body is still decoded into the requested type below.
        try:
            envelope = ResponseEnvelope.model_validate_json(body)
        except ValidationError:
            envelope = None
        if envelope is not None and envelope.has_error:
            return self._fail(
                descriptor, ApplicationError(envelope.error_code, envelope.error_msg or "")
            )

        try:
            value = adapter.validate_json(body)
        except ValidationError as exc:
            if not response.is_success:
                return self._fail(
                    descriptor,
                    ServerError(
                        response.status_code, response.reason_phrase or "Server error"
                    ),
                )
            return self._fail(
                descriptor,
                DecodeFailureError(
                    f"Response does not match {getattr(response_type, '__name__', response_type)}",
                    errors=exc.errors(include_url=False),
                ),
            )

        return RequestResult.success(value)

    def _fail(self, descriptor: RequestDescriptor, error: NetworkError) -> RequestResult[Any]:
        logger.warning(
            "%s %s failed with %s: %s",
            descriptor.method.value,
            descriptor.url,
            error.kind.value,
            error.message,
        )
        return RequestResult.failure(error)


__all__ = ["RequestExecutor", "parse_url"]
