"""Pydantic models for Relay Auth SDK.

Request descriptors handed to the transport and the payloads decoded
from the auth backend.
"""

from __future__ import annotations

import json
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

JSON_CONTENT_TYPE = "application/json"


class AuthRequest(BaseModel):
    """Transport-agnostic description of a single auth call."""

    model_config = ConfigDict(frozen=True)

    method: Literal["GET", "POST", "PUT"]
    url: str
    headers: dict[str, str] = Field(
        default_factory=lambda: {"Content-Type": JSON_CONTENT_TYPE}
    )
    body: str | None = None
    # "include" sends the transport's session cookies along with the request
    credentials: Literal["include", "omit"] = "include"


class LoginRequest(BaseModel):
    """Credentials posted to the login endpoint."""

    model_config = ConfigDict(frozen=True)

    username: str
    project_id: str

    def to_json(self) -> str:
        """Serialize as compact JSON with ``username`` first."""
        return json.dumps(
            {"username": self.username, "project_id": self.project_id},
            separators=(",", ":"),
        )


class BootstrapResponse(BaseModel):
    """Deployment configuration returned before any session exists.

    Passed through as decoded; no field is type-checked.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    project_id: Any = None


class TokenResponse(BaseModel):
    """Login/refresh payload carrying the session JWT."""

    model_config = ConfigDict(frozen=True, extra="allow")

    jwt_token: str


class ErrorEntry(BaseModel):
    """A single entry of a failed response's ``errors`` array."""

    model_config = ConfigDict(frozen=True, extra="allow")

    detail: str
    code: str | int


class ErrorResponse(BaseModel):
    """Failure body shape: ``{"errors": [{"detail": ..., "code": ...}]}``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    errors: list[ErrorEntry]
