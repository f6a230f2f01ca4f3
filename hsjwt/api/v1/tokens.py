from __future__ import annotations

import json
from typing import Any

from fastapi import APIRouter, HTTPException, Query, Request, status

from hsjwt.api.dependencies import BearerClaims, TokenServiceDep, unauthorized
from hsjwt.schemas.responses import TokenResponse
from hsjwt.services.auth import TokenAuthError

router = APIRouter(prefix="/api/tokens", tags=["tokens"])


def _decode_bytes(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return data.decode("latin-1")


async def _extract_token(request: Request) -> str:
    """Токен принимается JSON-строкой, объектом ``{"token": ...}`` или текстом."""

    body = await request.body()
    if not body:
        return ""

    text = _decode_bytes(body).strip()
    try:
        payload = json.loads(text)
    except json.JSONDecodeError:
        return text

    if isinstance(payload, str):
        return payload.strip()
    if isinstance(payload, dict):
        value = payload.get("token")
        if isinstance(value, str):
            return value.strip()
    return ""


@router.get("", response_model=TokenResponse)
async def issue_token(
    service: TokenServiceDep,
    sub: str = Query("anonymous", min_length=1),
) -> TokenResponse:
    token, claims = service.issue(sub)
    return TokenResponse(
        access_token=token,
        expires_in=max(0, int(claims.exp - claims.iat)),
    )


@router.post("/verify")
async def verify_token(request: Request, service: TokenServiceDep) -> dict[str, Any]:
    token = await _extract_token(request)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Token is required"
        )

    try:
        return service.authenticate(token)
    except TokenAuthError as exc:
        raise unauthorized(str(exc)) from exc


@router.get("/claims")
async def current_claims(claims: BearerClaims) -> dict[str, Any]:
    return claims


__all__ = ["router"]
