"""Unit tests for JWTAuthProvider.

Covers:
- create_token / validate_token round trip for account tokens
- validate_token returning None when payload lacks sub or email
- rejection of malformed subjects, wrong secrets and expired tokens
"""

from uuid import uuid4

import pytest
from jose import jwt as jose_jwt

from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.provider import TokenUser

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_hs256_token(payload: dict, secret: str = "test-secret") -> str:
    """Create an HS256-signed JWT with a given payload."""
    return jose_jwt.encode(payload, secret, algorithm="HS256")


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def hs256_provider() -> JWTAuthProvider:
    """JWTAuthProvider configured for HS256."""
    return JWTAuthProvider(secret_key="test-secret", algorithm="HS256", expire_minutes=30)


# ---------------------------------------------------------------------------
# Tests: round trip
# ---------------------------------------------------------------------------


class TestCreateAndValidate:
    async def test_should_round_trip_account_identity(self, hs256_provider: JWTAuthProvider):
        user = TokenUser(id=uuid4(), email="jane@example.com", name="Jane Doe")

        token = hs256_provider.create_token(user)
        result = await hs256_provider.validate_token(token)

        assert result == user

    async def test_should_allow_missing_name(self, hs256_provider: JWTAuthProvider):
        user_id = uuid4()
        token = _make_hs256_token(
            {"sub": str(user_id), "email": "jane@example.com", "exp": 9999999999}
        )

        result = await hs256_provider.validate_token(token)

        assert result is not None
        assert result.id == user_id
        assert result.name is None

    async def test_should_reject_token_signed_with_other_secret(
        self, hs256_provider: JWTAuthProvider
    ):
        token = _make_hs256_token(
            {"sub": str(uuid4()), "email": "jane@example.com", "exp": 9999999999},
            secret="other-secret",
        )

        assert await hs256_provider.validate_token(token) is None

    async def test_should_reject_expired_token(self, hs256_provider: JWTAuthProvider):
        expired = JWTAuthProvider(secret_key="test-secret", algorithm="HS256", expire_minutes=-1)
        token = expired.create_token(TokenUser(id=uuid4(), email="jane@example.com"))

        assert await hs256_provider.validate_token(token) is None

    async def test_should_reject_garbage(self, hs256_provider: JWTAuthProvider):
        assert await hs256_provider.validate_token("not.a.jwt") is None


# ---------------------------------------------------------------------------
# Tests: validate_token returns None for missing claims
# ---------------------------------------------------------------------------


class TestValidateTokenMissingClaims:
    """validate_token should return None when the decoded payload is missing
    the required 'sub' or 'email' claims."""

    async def test_should_return_none_when_token_has_no_sub_claim(
        self, hs256_provider: JWTAuthProvider
    ):
        """A valid HS256 token that lacks a 'sub' claim should yield None."""
        token = _make_hs256_token({"email": "user@example.com", "exp": 9999999999})

        result = await hs256_provider.validate_token(token)

        assert result is None

    async def test_should_return_none_when_token_has_no_email_claim(
        self, hs256_provider: JWTAuthProvider
    ):
        """A valid HS256 token that lacks an 'email' claim should yield None."""
        token = _make_hs256_token({"sub": str(uuid4()), "exp": 9999999999})

        result = await hs256_provider.validate_token(token)

        assert result is None

    async def test_should_return_none_when_token_has_empty_sub(
        self, hs256_provider: JWTAuthProvider
    ):
        """A token with an empty string 'sub' should yield None."""
        token = _make_hs256_token({"sub": "", "email": "user@example.com", "exp": 9999999999})

        result = await hs256_provider.validate_token(token)

        assert result is None

    async def test_should_return_none_when_sub_is_not_an_account_id(
        self, hs256_provider: JWTAuthProvider
    ):
        """A 'sub' that is not a UUID cannot name an account."""
        token = _make_hs256_token(
            {"sub": "5f8dea1c3602612b8422f2b5", "email": "user@example.com", "exp": 9999999999}
        )

        result = await hs256_provider.validate_token(token)

        assert result is None


# ---------------------------------------------------------------------------
# Tests: __init__
# ---------------------------------------------------------------------------


class TestJWTAuthProviderInit:
    def test_should_store_configuration(self):
        provider = JWTAuthProvider(
            secret_key="my-secret",
            algorithm="HS256",
            expire_minutes=15,
        )

        assert provider._algorithm == "HS256"
        assert provider._secret_key == "my-secret"
        assert provider._expire_minutes == 15
