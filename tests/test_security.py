# File: tests/test_security.py

import pytest
import jwt

from app.core.config import Settings
from app.core.security import (
    create_access_token,
    decode_access_token,
    generate_confirmation_token,
    hash_password,
    verify_password,
)
from app.services.credential_service import CredentialService


def test_password_hash_round_trip():
    hashed = hash_password("secret123")
    assert hashed != "secret123"
    assert verify_password("secret123", hashed)
    assert not verify_password("secret124", hashed)


def test_confirmation_tokens_are_random_hex():
    first, second = generate_confirmation_token(), generate_confirmation_token()
    assert first != second
    assert len(first) == 64
    int(first, 16)


def test_token_signed_with_another_secret_is_rejected():
    token = create_access_token({"sub": "u1", "email": "a@example.com"}, Settings(secret_key="one"))
    with pytest.raises(jwt.InvalidTokenError):
        decode_access_token(token, Settings(secret_key="two"))


def test_token_without_subject_is_rejected():
    settings = Settings(secret_key="one")
    token = create_access_token({"email": "a@example.com"}, settings)
    with pytest.raises(jwt.MissingRequiredClaimError):
        decode_access_token(token, settings)


def test_overlong_password_never_verifies():
    hashed = hash_password("secret123")
    assert not verify_password("x" * 100, hashed)


def test_incomplete_credential_service_cannot_be_built():
    class Incomplete(CredentialService):
        def sign_up(self, db, *, email, password):
            raise AssertionError

    with pytest.raises(TypeError):
        Incomplete()
