"""
Unit tests for token issuing and verification.
"""

import time
from datetime import timedelta

import pytest
from fastapi.security import HTTPAuthorizationCredentials
from jose import jwt

from app.config import Settings
from app.exceptions import InvalidToken, Unauthenticated
from app.models.user import User
from app.utils.hash import hash_password, verify_password
from app.utils.token import (
    create_access_token,
    decode_access_token,
    get_current_user,
    token_claims,
)


@pytest.fixture
def user() -> User:
    return User(
        id="0f8fad5bd9cb469fa16570867728950e",
        first_name="Jane",
        last_name="Doe",
        email="jane@example.com",
        password="unused",
    )


def bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


class TestAccessToken:

    def test_claims_round_trip(self, user, settings):
        payload = decode_access_token(create_access_token(token_claims(user), settings), settings)
        assert payload["id"] == user.id
        assert payload["email"] == "jane@example.com"
        assert payload["firstName"] == "Jane"
        assert payload["lastName"] == "Doe"

    def test_expires_after_24_hours(self, user, settings):
        payload = decode_access_token(create_access_token(token_claims(user), settings), settings)
        assert payload["exp"] - time.time() == pytest.approx(24 * 60 * 60, abs=60)

    def test_expired_token_rejected(self, user, settings):
        token = create_access_token(
            token_claims(user), settings, expires_delta=timedelta(seconds=-10)
        )
        with pytest.raises(InvalidToken):
            decode_access_token(token, settings)

    def test_wrong_signature_rejected(self, user, settings):
        token = jwt.encode(token_claims(user), "another-secret", algorithm="HS256")
        with pytest.raises(InvalidToken):
            decode_access_token(token, settings)

    def test_malformed_token_rejected(self, settings):
        with pytest.raises(InvalidToken):
            decode_access_token("not.a.jwt", settings)

    def test_token_without_identity_rejected(self, settings):
        token = create_access_token({"email": "jane@example.com"}, settings)
        with pytest.raises(InvalidToken):
            decode_access_token(token, settings)

    def test_signing_key_comes_from_the_given_settings(self, user, settings):
        other = settings.model_copy(update={"secret_key": "rotated-secret"})
        token = create_access_token(token_claims(user), other)

        assert decode_access_token(token, other)["id"] == user.id
        assert jwt.decode(token, "rotated-secret", algorithms=["HS256"])["id"] == user.id
        with pytest.raises(InvalidToken):
            decode_access_token(token, settings)


class TestCurrentUser:

    def test_missing_credentials(self, settings):
        with pytest.raises(Unauthenticated):
            get_current_user(None, settings)

    def test_valid_token(self, user, settings):
        token = create_access_token(token_claims(user), settings)
        identity = get_current_user(bearer(token), settings)
        assert identity.id == user.id
        assert identity.first_name == "Jane"

    def test_invalid_token(self, settings):
        with pytest.raises(InvalidToken):
            get_current_user(bearer("garbage"), settings)


class TestPasswordHash:

    def test_hash_verifies(self):
        hashed = hash_password("secret123", rounds=4)
        assert hashed != "secret123"
        assert verify_password("secret123", hashed)
        assert not verify_password("wrong", hashed)

    def test_work_factor_is_encoded_in_hash(self):
        assert hash_password("secret123", rounds=5).startswith("$2b$05$")

    def test_default_work_factor_is_12(self):
        assert Settings.model_fields["bcrypt_rounds"].default == 12

    def test_non_bcrypt_value_does_not_verify(self):
        assert not verify_password("secret123", "plaintext")

    def test_overlong_password_does_not_verify(self):
        hashed = hash_password("secret123", rounds=4)
        assert not verify_password("p" * 80, hashed)
