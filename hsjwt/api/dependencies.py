from __future__ import annotations

from typing import Annotated, Any, Optional

from fastapi import Depends, Header, HTTPException, status

from hsjwt.services.auth import TokenAuthError, TokenService
from hsjwt.settings import Settings, get_settings

AuthHeader = Annotated[
    Optional[str], Header(alias="Authorization", convert_underscores=False)
]
SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_token_service(settings: SettingsDep) -> TokenService:
    return TokenService(
        secret=settings.token_secret,
        algorithm=settings.token_algorithm,
        ttl_seconds=settings.token_ttl_seconds,
        leeway_seconds=settings.token_leeway_seconds,
        issuer=settings.token_issuer,
    )


TokenServiceDep = Annotated[TokenService, Depends(get_token_service)]


def unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def require_bearer_token(
    service: TokenServiceDep,
    authorization: AuthHeader = None,
) -> dict[str, Any]:
    if not authorization:
        raise unauthorized("Missing authorization header")

    try:
        return service.verify_bearer(authorization)
    except TokenAuthError as exc:
        raise unauthorized(str(exc)) from exc


BearerClaims = Annotated[dict[str, Any], Depends(require_bearer_token)]


__all__ = [
    "AuthHeader",
    "BearerClaims",
    "SettingsDep",
    "TokenServiceDep",
    "get_token_service",
    "require_bearer_token",
    "unauthorized",
]
