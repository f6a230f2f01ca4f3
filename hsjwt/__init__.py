"""HMAC-signed compact tokens (``header.payload.signature``)."""

from hsjwt.core.errors import (
    DecodeError,
    ParseError,
    SerializationError,
    SigningError,
    StructuralError,
    TokenError,
)
from hsjwt.core.tokens import (
    encode,
    legacy_encode,
    legacy_verify,
    unverified_claims,
    verify,
)
from hsjwt.schemas.claims import Claims
from hsjwt.schemas.enums import Algorithm, VerificationResult

__all__ = [
    "Algorithm",
    "Claims",
    "DecodeError",
    "ParseError",
    "SerializationError",
    "SigningError",
    "StructuralError",
    "TokenError",
    "VerificationResult",
    "encode",
    "legacy_encode",
    "legacy_verify",
    "unverified_claims",
    "verify",
]
