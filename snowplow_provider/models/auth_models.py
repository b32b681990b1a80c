"""Models for the console token exchange and error envelope."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TokenResponse(BaseModel):
    """Body of the ``credentials/v2|v3/token`` endpoints."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    access_token: str = Field(default="", alias="accessToken")


class ErrorResponse(BaseModel):
    """Envelope returned with non-200 console responses."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    message: Optional[str] = None
    trace_id: Optional[str] = Field(default=None, alias="traceId")
