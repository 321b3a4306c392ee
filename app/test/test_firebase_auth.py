"""
Test Firebase Authentication Service Module

This module tests session resolution, sign-up and sign-in against fake
Firebase handles.

Dependencies:
- pytest: For testing framework
- app.services.auth.firebase_auth: The module being tested
"""

import pytest
from firebase_admin import auth
from app.schemas.auth.user_auth_schemas import SignInRequest, SignUpRequest
from app.services.auth.firebase_auth import get_current_user, sign_in, sign_up, SESSION_DURATION

class TestGetCurrentUser:
    """Test resolving a session cookie to a stored user."""

    @pytest.mark.asyncio
    async def test_no_cookie(self, fake_firebase):
        """Test that a missing cookie resolves to no user without verification."""
        assert await get_current_user(fake_firebase, None) is None
        fake_firebase.verify_session_cookie.assert_not_called()

    @pytest.mark.asyncio
    async def test_invalid_cookie(self, fake_firebase):
        """Test that a rejected cookie resolves to no user."""
        fake_firebase.verify_session_cookie.side_effect = auth.InvalidSessionCookieError("bad cookie")
        assert await get_current_user(fake_firebase, "tampered") is None

    @pytest.mark.asyncio
    async def test_missing_user_record(self, fake_firebase):
        """Test that a valid cookie without a user document resolves to no user."""
        assert await get_current_user(fake_firebase, "cookie") is None

    @pytest.mark.asyncio
    async def test_resolves_stored_user(self, fake_firebase, fake_db):
        """Test that a valid cookie resolves to the stored user."""
        fake_db.seed("users", "user-1", {"name": "Ada", "email": "ada@example.com"})

        user = await get_current_user(fake_firebase, "cookie")

        assert user.id == "user-1"
        assert user.name == "Ada"
        fake_firebase.verify_session_cookie.assert_called_once_with("cookie", check_revoked=True)

class TestSignUp:
    """Test creating user records."""

    @pytest.mark.asyncio
    async def test_creates_user_record(self, fake_firebase, fake_db):
        """Test that sign-up writes the user document."""
        result = await sign_up(fake_firebase, SignUpRequest(uid="user-9", name="Grace", email="grace@example.com"))

        assert result.success is True
        assert fake_db.documents["users"]["user-9"] == {"name": "Grace", "email": "grace@example.com"}

    @pytest.mark.asyncio
    async def test_existing_user(self, fake_firebase, fake_db):
        """Test that signing up twice is refused without writing."""
        fake_db.seed("users", "user-9", {"name": "Grace", "email": "grace@example.com"})

        result = await sign_up(fake_firebase, SignUpRequest(uid="user-9", name="Grace", email="grace@example.com"))

        assert result.success is False
        assert result.message == "User already exists. Please sign in."
        assert fake_db.writes == []

class TestSignIn:
    """Test exchanging ID tokens for session cookies."""

    def test_unknown_email(self, fake_firebase):
        """Test that an unknown email is told to create an account."""
        fake_firebase.get_user_by_email.side_effect = auth.UserNotFoundError("no user")

        result, cookie = sign_in(fake_firebase, SignInRequest(email="nobody@example.com", idToken="token"))

        assert result.success is False
        assert result.message == "User does not exist. Create an account."
        assert cookie is None
        fake_firebase.create_session_cookie.assert_not_called()

    def test_creates_session_cookie(self, fake_firebase):
        """Test that a valid token is exchanged for a session cookie."""
        result, cookie = sign_in(fake_firebase, SignInRequest(email="ada@example.com", idToken="token"))

        assert result.success is True
        assert cookie == "session-cookie-value"
        fake_firebase.verify_id_token.assert_called_once_with("token")
        fake_firebase.create_session_cookie.assert_called_once_with("token", expires_in=SESSION_DURATION)

    def test_token_for_another_email(self, fake_firebase):
        """Test that a token issued to a different email does not sign in."""
        fake_firebase.verify_id_token.return_value = {"uid": "user-2", "email": "grace@example.com"}

        result, cookie = sign_in(fake_firebase, SignInRequest(email="ada@example.com", idToken="token"))

        assert result.success is False
        assert result.message == "Failed to log into account. Please try again."
        assert cookie is None
        fake_firebase.create_session_cookie.assert_not_called()

    def test_rejected_token(self, fake_firebase):
        """Test that a rejected token fails sign-in."""
        fake_firebase.create_session_cookie.side_effect = auth.InvalidIdTokenError("expired")

        result, cookie = sign_in(fake_firebase, SignInRequest(email="ada@example.com", idToken="token"))

        assert result.success is False
        assert cookie is None
