from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from app.config import settings
from app.core.exceptions import InvalidToken, Unauthenticated
from app.core.security import create_access_token, extract_bearer_token, verify_access_token


def test_token_round_trip_carries_identity():
    token = create_access_token({"id": "u1", "email": "a@x.com"})
    user = verify_access_token(token)
    assert user.id == "u1"
    assert user.email == "a@x.com"


def test_default_expiry_is_seven_days():
    now = datetime(2025, 1, 1, tzinfo=timezone.utc)
    token = create_access_token({"id": "u1", "email": "a@x.com"}, now=now)
    claims = jwt.get_unverified_claims(token)
    assert claims["exp"] - claims["iat"] == 7 * 24 * 60 * 60
    assert settings.ACCESS_TOKEN_EXPIRE_MINUTES == 7 * 24 * 60


def test_expired_token_is_rejected():
    token = create_access_token({"id": "u1", "email": "a@x.com"}, expires_delta=timedelta(seconds=-5))
    with pytest.raises(InvalidToken):
        verify_access_token(token)


def test_token_signed_with_other_secret_is_rejected():
    token = jwt.encode({"id": "u1", "email": "a@x.com"}, "another-secret", algorithm="HS256")
    with pytest.raises(InvalidToken):
        verify_access_token(token)


def test_tampered_payload_is_rejected():
    header, _, signature = create_access_token({"id": "u1", "email": "a@x.com"}).split(".")
    forged = create_access_token({"id": "u2", "email": "b@x.com"}).split(".")[1]
    with pytest.raises(InvalidToken):
        verify_access_token(".".join([header, forged, signature]))


@pytest.mark.parametrize("token", ["", "not-a-token", "a.b.c"])
def test_malformed_token_is_rejected(token):
    with pytest.raises(InvalidToken):
        verify_access_token(token)


def test_token_without_identity_claims_is_rejected():
    token = jwt.encode({"id": "u1"}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    with pytest.raises(InvalidToken):
        verify_access_token(token)


def test_extract_bearer_token():
    assert extract_bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"


@pytest.mark.parametrize(
    "header, message",
    [
        (None, "Authorization header is required"),
        ("", "Authorization header is required"),
        ("Token abc", "Invalid authorization header"),
        ("bearer abc", "Invalid authorization header"),
        ("Bearer ", "Invalid authorization header"),
    ],
)
def test_extract_bearer_token_rejects_bad_headers(header, message):
    with pytest.raises(Unauthenticated) as exc:
        extract_bearer_token(header)
    assert exc.value.message == message
    assert exc.value.status_code == 401
