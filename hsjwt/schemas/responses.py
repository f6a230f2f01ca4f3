from __future__ import annotations

from pydantic import BaseModel


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int


class HealthResponse(BaseModel):
    ok: bool
    env: str
    algorithm: str


__all__ = [
    "HealthResponse",
    "TokenResponse",
]
