from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

sys.path.append(str(Path(__file__).resolve().parents[2]))

from hsjwt import (
    Algorithm,
    Claims,
    SerializationError,
    SigningError,
    VerificationResult,
    encode,
    legacy_encode,
    legacy_verify,
    unverified_claims,
    verify,
)
from hsjwt.core.base64url import b64url_decode, b64url_encode
from hsjwt.core.errors import ParseError, StructuralError
from hsjwt.core.serialization import deserialize, serialize
from hsjwt.core.signing import sign

NOW = 1_700_000_000
SECRET = "test-secret"

# https://jwt.io default HS256 example
JWT_IO_TOKEN = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"
    ".eyJzdWIiOiIxMjM0NTY3ODkwIiwibmFtZSI6IkpvaG4gRG9lIiwiaWF0IjoxNTE2MjM5MDIyfQ"
    ".SflKxwRJSMeKKF2QT4fwpMeJf36POk6yJV_adQssw5c"
)


def _clock() -> float:
    return NOW


def _forge(payload: Any, secret: str = SECRET) -> str:
    """Sign an arbitrary JSON payload, bypassing claim validation."""
    return _raw(serialize(payload), secret)


def _raw(payload: bytes, secret: str = SECRET) -> str:
    """Sign raw payload bytes that need not be valid JSON."""
    header = b64url_encode(serialize({"alg": "HS256", "typ": "JWT"}))
    body = b64url_encode(payload)
    signature = b64url_encode(sign(f"{header}.{body}".encode("ascii"), secret.encode(), 256))
    return f"{header}.{body}.{signature}"


def _fresh_payload() -> dict[str, Any]:
    return {"iss": "test-issuer", "sub": "alice", "exp": NOW + 3600}


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_round_trip_is_valid(algorithm: Algorithm) -> None:
    token = encode(_fresh_payload(), SECRET, algorithm)

    assert token.count(".") == 2
    assert verify(token, SECRET, algorithm, clock=_clock) is VerificationResult.valid


def test_header_segment_is_compact_json() -> None:
    token = encode(_fresh_payload(), SECRET)
    assert token.split(".")[0] == "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"

    token = encode(_fresh_payload(), SECRET, "HS512")
    header = deserialize(b64url_decode(token.split(".")[0]))
    assert header == {"alg": "HS512", "typ": "JWT"}


def test_verifies_token_from_other_implementation() -> None:
    assert verify(JWT_IO_TOKEN, "your-256-bit-secret") is VerificationResult.valid
    assert verify(JWT_IO_TOKEN, "not-the-secret") is VerificationResult.invalid


def test_encode_is_deterministic() -> None:
    first = encode(_fresh_payload(), SECRET, Algorithm.HS384)
    second = encode(_fresh_payload(), SECRET, Algorithm.HS384)
    assert first == second


def test_claims_keep_their_key_set() -> None:
    payload = {"sub": "alice", "roles": ["admin", "ops"], "active": False, "note": None}
    token = encode(payload, SECRET)

    assert unverified_claims(token) == payload
    assert payload == {"sub": "alice", "roles": ["admin", "ops"], "active": False, "note": None}


def test_encode_accepts_claims_model() -> None:
    claims = Claims(sub="bob", exp=NOW + 60, plan="pro")
    token = encode(claims, SECRET)

    assert unverified_claims(token) == {"sub": "bob", "exp": NOW + 60, "plan": "pro"}
    assert verify(token, SECRET, clock=_clock) is VerificationResult.valid


@pytest.mark.parametrize(
    "payload",
    [
        {"nested": {"a": 1}},
        {"tags": [1, 2]},
        {"exp": "tomorrow"},
        {"exp": True},
        {"sub": 42},
        {"ratio": float("nan")},
        ["not", "a", "mapping"],
    ],
)
def test_encode_rejects_unsupported_payloads(payload: Any) -> None:
    with pytest.raises(SerializationError):
        encode(payload, SECRET)


def test_encode_rejects_unknown_algorithm() -> None:
    with pytest.raises(SigningError):
        encode(_fresh_payload(), SECRET, "HS1024")


def test_wrong_secret_is_invalid() -> None:
    token = encode(_fresh_payload(), SECRET)
    assert verify(token, "wrong-secret", clock=_clock) is VerificationResult.invalid


@pytest.mark.parametrize("other", [Algorithm.HS384, Algorithm.HS512])
def test_algorithm_mismatch_is_invalid(other: Algorithm) -> None:
    token = encode(_fresh_payload(), SECRET, Algorithm.HS256)
    assert verify(token, SECRET, other, clock=_clock) is VerificationResult.invalid


def test_any_tampered_character_is_rejected() -> None:
    token = encode(_fresh_payload(), SECRET)
    header, payload, _ = token.split(".")
    payload_range = range(len(header) + 1, len(header) + 1 + len(payload))

    for index, char in enumerate(token):
        if char == ".":
            continue
        replacement = "A" if char != "A" else "B"
        tampered = token[:index] + replacement + token[index + 1 :]
        result = verify(tampered, SECRET, clock=_clock)

        if index in payload_range:
            # an altered payload may still decode with a stale exp
            assert result is not VerificationResult.valid, index
        else:
            assert result is VerificationResult.invalid, index


def test_expired_token() -> None:
    token = encode({"sub": "alice", "exp": NOW - 3600}, SECRET)
    assert verify(token, SECRET, clock=_clock) is VerificationResult.expired


def test_leeway_absorbs_staleness() -> None:
    token = encode({"sub": "alice", "exp": NOW - 3600}, SECRET)
    assert verify(token, SECRET, leeway=7200, clock=_clock) is VerificationResult.valid
    assert verify(token, SECRET, leeway=3599, clock=_clock) is VerificationResult.expired


def test_expiry_boundary_is_still_valid() -> None:
    token = encode({"exp": NOW}, SECRET)
    assert verify(token, SECRET, clock=_clock) is VerificationResult.valid


def test_missing_exp_never_expires() -> None:
    token = encode({"sub": "alice"}, SECRET)
    assert verify(token, SECRET, clock=lambda: 10**12) is VerificationResult.valid


def test_non_numeric_exp_skips_expiry_check() -> None:
    token = _forge({"sub": "alice", "exp": "yesterday"})
    assert verify(token, SECRET, clock=_clock) is VerificationResult.valid

    token = _forge({"sub": "alice", "exp": True})
    assert verify(token, SECRET, clock=_clock) is VerificationResult.valid


def test_expiry_is_reported_before_signature_check() -> None:
    token = encode({"exp": NOW - 1}, SECRET)
    assert verify(token, "wrong-secret", clock=_clock) is VerificationResult.expired


@pytest.mark.parametrize(
    "token",
    [
        "invalid.token.parts",
        "a.b",
        "",
        "a..c",
        "a.b.c.d",
        "é.é.é",
        None,
    ],
)
def test_malformed_tokens_are_invalid(token: Any) -> None:
    assert verify(token, SECRET, clock=_clock) is VerificationResult.invalid


def test_payload_must_be_json_object() -> None:
    assert verify(_forge([1, 2, 3]), SECRET, clock=_clock) is VerificationResult.invalid


def test_verify_fails_loudly_on_misconfiguration() -> None:
    token = encode(_fresh_payload(), SECRET)

    with pytest.raises(SigningError):
        verify(token, SECRET, "none", clock=_clock)
    with pytest.raises(SigningError):
        verify(token, None, clock=_clock)  # type: ignore[arg-type]


def test_bytes_and_text_secrets_are_equivalent() -> None:
    token = encode(_fresh_payload(), "ключ")
    assert verify(token, "ключ".encode("utf-8"), clock=_clock) is VerificationResult.valid


def test_unverified_claims_rejects_malformed_token() -> None:
    with pytest.raises(StructuralError):
        unverified_claims("a.b")


def test_legacy_wrappers_use_hs512_and_warn() -> None:
    payload = {"iss": "test-issuer", "exp": 4_102_444_800}

    with pytest.warns(DeprecationWarning):
        token = legacy_encode(payload, SECRET)
    header = deserialize(b64url_decode(token.split(".")[0]))
    assert header["alg"] == "HS512"

    with pytest.warns(DeprecationWarning):
        assert legacy_verify(token, SECRET) is True
    with pytest.warns(DeprecationWarning):
        assert legacy_verify(token, "wrong-secret") is False


def test_deeply_nested_payload_is_invalid() -> None:
    token = _raw(b"[" * 100_000)

    assert verify(token, SECRET, clock=_clock) is VerificationResult.invalid
    with pytest.raises(ParseError):
        unverified_claims(token)


def test_huge_integer_exp_with_float_leeway() -> None:
    far_future = _raw(b'{"exp":' + b"9" * 400 + b"}")
    assert verify(far_future, SECRET, leeway=30.0, clock=_clock) is VerificationResult.valid

    far_past = _raw(b'{"exp":-' + b"9" * 400 + b"}")
    assert verify(far_past, SECRET, leeway=30.5, clock=_clock) is VerificationResult.expired


def test_non_canonical_payload_segment_is_invalid() -> None:
    token = encode({"sub": "ali"}, SECRET)  # 13 bytes: the last byte stands alone
    header, payload, _ = token.split(".")
    # "fQ" encodes the closing brace; "fR" carries the same byte with stray low bits
    assert payload.endswith("fQ")
    altered = payload[:-1] + "R"
    signing_input = f"{header}.{altered}"
    signature = b64url_encode(sign(signing_input.encode("ascii"), SECRET.encode(), 256))

    assert verify(f"{signing_input}.{signature}", SECRET, clock=_clock) is VerificationResult.invalid
