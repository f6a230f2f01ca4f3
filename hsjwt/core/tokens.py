"""Компактные токены вида ``header.payload.signature`` с HMAC-подписью."""

from __future__ import annotations

import hmac
import time
import warnings
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any, Callable, Union

from loguru import logger

from hsjwt.core.base64url import b64url_decode, b64url_encode
from hsjwt.core.errors import DecodeError, ParseError, StructuralError
from hsjwt.core.serialization import deserialize, serialize
from hsjwt.core.signing import SecretKey, coerce_secret, resolve_algorithm, sign
from hsjwt.schemas.claims import Claims
from hsjwt.schemas.enums import Algorithm, VerificationResult

TOKEN_TYPE = "JWT"

Clock = Callable[[], float]
Payload = Union[Claims, Mapping[str, Any]]

_log = logger.bind(component="tokens")


@dataclass(frozen=True)
class Header:
    alg: str
    typ: str = TOKEN_TYPE


def _signature(signing_input: str, secret: bytes, algorithm: Algorithm) -> str:
    digest = sign(signing_input.encode("ascii"), secret, algorithm.width)
    return b64url_encode(digest)


def _split(token: str) -> tuple[str, str, str]:
    if not isinstance(token, str):
        raise StructuralError("Token must be a string")
    if not token.isascii():
        raise StructuralError("Token must be ASCII text")

    segments = token.split(".")
    if len(segments) != 3 or not all(segments):
        raise StructuralError("Token must consist of three non-empty segments")

    header_segment, payload_segment, signature_segment = segments
    return header_segment, payload_segment, signature_segment


def _decode_payload(segment: str) -> dict[str, Any]:
    payload = deserialize(b64url_decode(segment))
    if not isinstance(payload, dict):
        raise ParseError("Token payload must be a JSON object")
    return payload


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def encode(
    payload: Payload,
    secret: SecretKey,
    algorithm: Union[Algorithm, str] = Algorithm.HS256,
) -> str:
    alg = resolve_algorithm(algorithm)
    key = coerce_secret(secret)
    claims = Claims.from_payload(payload)

    header_segment = b64url_encode(serialize(asdict(Header(alg=alg.value))))
    payload_segment = b64url_encode(serialize(claims.to_dict()))
    signing_input = f"{header_segment}.{payload_segment}"
    return f"{signing_input}.{_signature(signing_input, key, alg)}"


def verify(
    token: str,
    secret: SecretKey,
    algorithm: Union[Algorithm, str] = Algorithm.HS256,
    leeway: float = 0,
    *,
    clock: Clock = time.time,
) -> VerificationResult:
    """Classify ``token`` as valid, invalid or expired.

    Expiration is checked on the decoded payload before the signature is
    recomputed, so an expired token reports ``expired`` regardless of its
    signature. The signature is recomputed over the raw segment text, never
    over a re-serialized payload. Malformed input never raises; an unknown
    ``algorithm`` or an unusable ``secret`` raises :class:`SigningError`.
    """

    alg = resolve_algorithm(algorithm)
    key = coerce_secret(secret)

    try:
        header_segment, payload_segment, signature_segment = _split(token)
        payload = _decode_payload(payload_segment)
    except DecodeError as exc:
        _log.debug("Token rejected: {}", exc)
        return VerificationResult.invalid

    expires_at = payload.get("exp")
    if _is_number(expires_at) and expires_at < clock() - leeway:
        _log.debug("Token rejected: expired at {}", expires_at)
        return VerificationResult.expired

    expected = _signature(f"{header_segment}.{payload_segment}", key, alg)
    if not hmac.compare_digest(expected.encode("ascii"), signature_segment.encode("ascii")):
        _log.debug("Token rejected: signature mismatch")
        return VerificationResult.invalid

    return VerificationResult.valid


def unverified_claims(token: str) -> dict[str, Any]:
    """Decode the payload segment without checking the signature.

    Only meaningful after :func:`verify` returned ``valid`` for the same token.
    """

    _, payload_segment, _ = _split(token)
    return _decode_payload(payload_segment)


def legacy_encode(payload: Payload, secret: SecretKey) -> str:
    warnings.warn(
        "legacy_encode() is deprecated; use encode(payload, secret, Algorithm.HS512).",
        DeprecationWarning,
        stacklevel=2,
    )
    return encode(payload, secret, Algorithm.HS512)


def legacy_verify(token: str, secret: SecretKey) -> bool:
    warnings.warn(
        "legacy_verify() is deprecated; use verify(token, secret, Algorithm.HS512).",
        DeprecationWarning,
        stacklevel=2,
    )
    return verify(token, secret, Algorithm.HS512).is_valid


__all__ = [
    "Clock",
    "Header",
    "Payload",
    "TOKEN_TYPE",
    "encode",
    "legacy_encode",
    "legacy_verify",
    "unverified_claims",
    "verify",
]
