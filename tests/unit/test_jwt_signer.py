"""Unit tests for JWTTokenSigner."""

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from perioscan.domain.exceptions import InvalidToken
from perioscan.infrastructure.signing.jwt_signer import JWTTokenSigner

from tests.conftest import TEST_SECRET


def test_encode_decode_round_trip() -> None:
    signer = JWTTokenSigner(TEST_SECRET)
    token = signer.encode({"documentId": "d1", "contentHash": "h"})
    claims = signer.decode(token)
    assert claims["documentId"] == "d1"
    assert claims["contentHash"] == "h"


def test_validity_window_is_decades() -> None:
    signer = JWTTokenSigner(TEST_SECRET)
    claims = signer.decode(signer.encode({"x": 1}))
    lifetime = claims["exp"] - claims["iat"]
    assert lifetime >= timedelta(days=365 * 99).total_seconds()


def test_custom_validity_years() -> None:
    signer = JWTTokenSigner(TEST_SECRET, validity_years=1)
    claims = signer.decode(signer.encode({"x": 1}))
    assert claims["exp"] - claims["iat"] < timedelta(days=400).total_seconds()


def test_wrong_secret_raises_invalid_token() -> None:
    token = JWTTokenSigner(TEST_SECRET).encode({"x": 1})
    with pytest.raises(InvalidToken):
        JWTTokenSigner("a-different-secret-0123456789abcdef").decode(token)


def test_expired_token_raises_invalid_token() -> None:
    past = datetime.now(UTC) - timedelta(days=2)
    token = jwt.encode(
        {"x": 1, "iat": past, "exp": past + timedelta(days=1)}, TEST_SECRET, algorithm="HS256"
    )
    with pytest.raises(InvalidToken, match="expired"):
        JWTTokenSigner(TEST_SECRET).decode(token)


def test_token_without_exp_rejected() -> None:
    token = jwt.encode({"x": 1}, TEST_SECRET, algorithm="HS256")
    with pytest.raises(InvalidToken):
        JWTTokenSigner(TEST_SECRET).decode(token)


def test_empty_secret_rejected() -> None:
    with pytest.raises(ValueError, match="secret"):
        JWTTokenSigner("")
