"""
Unit tests for access token verification
"""
import jwt
import pytest
from datetime import datetime, timedelta, timezone

from moodlift.core.jwt import ALGORITHM, create_access_token, decode_token


def test_token_round_trip():
    token = create_access_token("user-42", email="someone@example.com")

    payload = decode_token(token)

    assert payload["sub"] == "user-42"
    assert payload["email"] == "someone@example.com"
    assert payload["role"] == "authenticated"
    assert payload["aud"] == "authenticated"


def test_expired_token_rejected():
    token = create_access_token("user-42", expires_minutes=-1)
    assert decode_token(token) is None


def test_wrong_secret_rejected():
    token = jwt.encode(
        {"sub": "user-42", "aud": "authenticated", "exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
        "some-other-secret-that-is-also-long-enough",
        algorithm=ALGORITHM,
    )
    assert decode_token(token) is None


def test_wrong_audience_rejected(override_settings):
    token = create_access_token("user-42")
    override_settings(supabase={"jwt_audience": "service"})

    assert decode_token(token) is None


def test_garbage_token_rejected():
    assert decode_token("not-a-jwt") is None


def test_missing_secret(override_settings):
    token = create_access_token("user-42")
    override_settings(supabase={"jwt_secret": None})

    assert decode_token(token) is None
    with pytest.raises(RuntimeError):
        create_access_token("user-42")
