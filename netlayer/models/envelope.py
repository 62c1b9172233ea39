"""Generic response body shape used to spot embedded application errors."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ResponseEnvelope(BaseModel):
    """Error fields that an API may embed in an HTTP 200 payload."""

    model_config = ConfigDict(
        extra="ignore", populate_by_name=True, coerce_numbers_to_str=True
    )

    error_code: Optional[str] = Field(
        default=None, alias="errorCode", description="Application error code",
    )
    error_msg: Optional[str] = Field(
        default=None, alias="errorMsg", description="Application error message",
    )

    @property
    def has_error(self) -> bool:
        return bool(self.error_msg)


__all__ = ["ResponseEnvelope"]
