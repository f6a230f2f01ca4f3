from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field
from typing import Any, Optional

from loguru import logger

from hsjwt.core.signing import SecretKey
from hsjwt.core.tokens import Clock, encode, unverified_claims, verify
from hsjwt.schemas.claims import Claims, ClaimValue
from hsjwt.schemas.enums import Algorithm, VerificationResult


class TokenAuthError(Exception):
    """Токен отклонён; ``result`` различает истёкший и недействительный токен."""

    def __init__(self, message: str, result: VerificationResult) -> None:
        super().__init__(message)
        self.result = result

    @property
    def expired(self) -> bool:
        return self.result is VerificationResult.expired


@dataclass
class TokenService:
    """Выпуск и проверка токенов с общими параметрами приложения."""

    secret: SecretKey = field(repr=False)
    algorithm: Algorithm = Algorithm.HS256
    ttl_seconds: int = 3600
    leeway_seconds: int = 0
    issuer: Optional[str] = None
    clock: Clock = time.time

    def issue(self, subject: str, **extra: ClaimValue) -> tuple[str, Claims]:
        issued_at = int(self.clock())
        payload: dict[str, Any] = dict(extra)
        payload.update(
            sub=subject,
            iat=issued_at,
            exp=issued_at + max(1, int(self.ttl_seconds)),
            jti=uuid.uuid4().hex,
        )
        if self.issuer:
            payload["iss"] = self.issuer

        claims = Claims.from_payload(payload)
        token = encode(claims, self.secret, self.algorithm)
        logger.bind(component="token_service").info(
            "Token issued", jti=claims.jti, alg=self.algorithm.value
        )
        return token, claims

    def authenticate(self, token: str) -> dict[str, Any]:
        result = verify(
            token,
            self.secret,
            self.algorithm,
            self.leeway_seconds,
            clock=self.clock,
        )
        if result is VerificationResult.expired:
            raise TokenAuthError("Token has expired", result)
        if not result.is_valid:
            raise TokenAuthError("Invalid token", result)
        return unverified_claims(token)

    def verify_bearer(self, authorization_header: str) -> dict[str, Any]:
        scheme, _, token = authorization_header.partition(" ")
        token_value = token.strip()
        if scheme.lower() != "bearer" or not token_value:
            raise TokenAuthError("Invalid authorization scheme", VerificationResult.invalid)

        return self.authenticate(token_value)


__all__ = ["TokenAuthError", "TokenService"]
