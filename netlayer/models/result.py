"""Single-outcome container returned by the executor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from netlayer.domain.errors import NetworkError

T = TypeVar("T")

_UNSET: Any = object()


@dataclass(frozen=True)
class RequestResult(Generic[T]):
    """Either a decoded value or a classified error; exactly one is set.

    ``None`` is a legitimate decoded value, so a success is recognised by an
    explicit ``value`` rather than by it being non-None. A failed result
    reports ``value`` as None.
    """

    value: Optional[T] = _UNSET
    error: Optional[NetworkError] = None

    def __post_init__(self) -> None:
        has_value = self.value is not _UNSET
        if has_value == (self.error is not None):
            raise ValueError("RequestResult needs exactly one of value or error")
        if not has_value:
            object.__setattr__(self, "value", None)

    @classmethod
    def success(cls, value: T) -> "RequestResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: NetworkError) -> "RequestResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the decoded value or raise the classified error."""

        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


__all__ = ["RequestResult"]
