"""Вычисление HMAC-подписи для сегментов токена."""

from __future__ import annotations

import hashlib
import hmac
from typing import Union

from hsjwt.core.errors import SigningError
from hsjwt.schemas.enums import Algorithm

SecretKey = Union[str, bytes, bytearray]

_DIGESTS = {
    256: hashlib.sha256,
    384: hashlib.sha384,
    512: hashlib.sha512,
}


def resolve_algorithm(value: Union[Algorithm, str]) -> Algorithm:
    if isinstance(value, Algorithm):
        return value
    try:
        return Algorithm(value)
    except ValueError as exc:
        raise SigningError(f"Unsupported algorithm: {value!r}") from exc


def coerce_secret(secret: SecretKey) -> bytes:
    """Return raw key material; text secrets are taken as UTF-8."""

    if isinstance(secret, str):
        return secret.encode("utf-8")
    if isinstance(secret, (bytes, bytearray)):
        return bytes(secret)
    raise SigningError(f"Secret key must be str or bytes, got {type(secret).__name__}")


def sign(message: bytes, secret: bytes, width: int) -> bytes:
    """Return the HMAC digest of ``message`` for the given hash width.

    Короткие и пустые ключи допустимы: минимальная длина не навязывается.
    """

    digestmod = _DIGESTS.get(width)
    if digestmod is None:
        raise SigningError(f"Unsupported hash width: {width}")

    try:
        return hmac.new(secret, message, digestmod).digest()
    except TypeError as exc:
        raise SigningError("Secret key material is not usable for HMAC") from exc


__all__ = [
    "SecretKey",
    "coerce_secret",
    "resolve_algorithm",
    "sign",
]
