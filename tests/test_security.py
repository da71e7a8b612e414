"""Tests for JWT access tokens."""
import uuid
from datetime import timedelta

import jwt

from catalog.core.security import (
    ALGORITHM,
    TOKEN_AUDIENCE,
    TOKEN_ISSUER,
    create_access_token,
    decode_token,
    verify_access_token,
)
from tests.factories import TEST_JWT_SECRET

JWT_DECODE_OPTS = {
    "algorithms": [ALGORITHM],
    "issuer": TOKEN_ISSUER,
    "audience": TOKEN_AUDIENCE,
}


class TestCreateAccessToken:
    def test_creates_valid_jwt(self):
        user_id = str(uuid.uuid4())
        token = create_access_token(user_id, "jane", "user")
        payload = jwt.decode(token, TEST_JWT_SECRET, **JWT_DECODE_OPTS)
        assert payload["sub"] == user_id
        assert payload["username"] == "jane"
        assert payload["role"] == "user"
        assert payload["type"] == "access"

    def test_unique_jti_per_call(self):
        uid = str(uuid.uuid4())
        p1 = decode_token(create_access_token(uid, "jane", "user"))
        p2 = decode_token(create_access_token(uid, "jane", "user"))
        assert p1["jti"] != p2["jti"]


class TestVerifyAccessToken:
    def test_valid_token(self):
        uid = str(uuid.uuid4())
        payload = verify_access_token(create_access_token(uid, "jane", "user"))
        assert payload is not None
        assert payload["sub"] == uid

    def test_expired_token(self):
        token = create_access_token(
            str(uuid.uuid4()), "jane", "user", expires_delta=timedelta(seconds=-10)
        )
        assert verify_access_token(token) is None

    def test_wrong_secret(self):
        token = jwt.encode(
            {"sub": "x", "type": "access", "iss": TOKEN_ISSUER, "aud": TOKEN_AUDIENCE},
            "some-other-secret-that-is-long-enough",
            algorithm=ALGORITHM,
        )
        assert verify_access_token(token) is None

    def test_wrong_type(self):
        token = jwt.encode(
            {"sub": "x", "type": "refresh", "iss": TOKEN_ISSUER, "aud": TOKEN_AUDIENCE},
            TEST_JWT_SECRET,
            algorithm=ALGORITHM,
        )
        assert verify_access_token(token) is None

    def test_garbage(self):
        assert verify_access_token("not.a.token") is None
