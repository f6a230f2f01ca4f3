"""Pydantic models and enumerations for token claims and API responses."""

from hsjwt.schemas.claims import ClaimValue, Claims
from hsjwt.schemas.enums import Algorithm, VerificationResult
from hsjwt.schemas.responses import HealthResponse, TokenResponse

__all__ = [
    "Algorithm",
    "ClaimValue",
    "Claims",
    "HealthResponse",
    "TokenResponse",
    "VerificationResult",
]
