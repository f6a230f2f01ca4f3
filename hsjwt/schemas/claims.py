from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    ValidationError,
    model_validator,
)

from hsjwt.core.errors import SerializationError

NumericClaim = Union[StrictInt, StrictFloat]
ClaimValue = Union[StrictStr, StrictInt, StrictFloat, StrictBool, list[StrictStr], None]


def _is_claim_value(value: Any) -> bool:
    if value is None or isinstance(value, (str, bool, int, float)):
        return True
    if isinstance(value, list):
        return all(isinstance(item, str) for item in value)
    return False


class Claims(BaseModel):
    """Набор утверждений токена.

    Зарезервированные claims типизированы, остальные хранятся в ``model_extra``
    и ограничены текстом, числами, булевыми значениями и списками строк.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    iss: Optional[StrictStr] = None
    sub: Optional[StrictStr] = None
    aud: Union[StrictStr, list[StrictStr], None] = None
    exp: Optional[NumericClaim] = None
    nbf: Optional[NumericClaim] = None
    iat: Optional[NumericClaim] = None
    jti: Optional[StrictStr] = None

    @model_validator(mode="after")
    def _check_extension_claims(self) -> "Claims":
        for name, value in (self.model_extra or {}).items():
            if not _is_claim_value(value):
                raise ValueError(
                    f"Claim {name!r} has unsupported type {type(value).__name__}"
                )
        return self

    @classmethod
    def from_payload(cls, payload: Union["Claims", Mapping[str, Any]]) -> "Claims":
        if isinstance(payload, cls):
            return payload
        if not isinstance(payload, Mapping):
            raise SerializationError(
                f"Payload must be a mapping of claims, got {type(payload).__name__}"
            )
        try:
            return cls.model_validate(dict(payload))
        except ValidationError as exc:
            raise SerializationError(f"Payload contains unsupported claims: {exc}") from exc

    def to_dict(self) -> dict[str, ClaimValue]:
        """Claims exactly as the caller set them, extension claims included."""
        extra = self.model_extra or {}
        return {
            name: value
            for name, value in self.model_dump().items()
            if name in self.model_fields_set or name in extra
        }


__all__ = ["ClaimValue", "Claims", "NumericClaim"]
