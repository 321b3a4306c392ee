"""Firebase Authentication Service Module

This module provides session-based authentication on top of Firebase Auth.
Users sign in on the client, exchange their Firebase ID token for a session
cookie, and every later request is resolved back to a user record stored in
the `users` collection.

The module contains functions for session cookie verification, user
registration and sign-in. It serves as the primary interface for Firebase
authentication in the application's auth service layer.

Dependencies:
- firebase_admin: For session cookies and user lookups.
- loguru: For logging operations.
- app.core.firebase_client: For the shared Firebase handles.
- app.schemas.auth.user_auth_schemas: For user authentication data models.
"""

from datetime import timedelta
from typing import Optional, Tuple

from firebase_admin import auth
from firebase_admin.exceptions import FirebaseError
from loguru import logger

from app.core.firebase_client import FirebaseClient
from app.schemas.auth.user_auth_schemas import User, SignUpRequest, SignInRequest, AuthResult

USERS_COLLECTION = "users"
SESSION_COOKIE_NAME = "session"
SESSION_DURATION = timedelta(days=7)


async def get_current_user(firebase: FirebaseClient, session_cookie: Optional[str]) -> Optional[User]:
    """Resolve the user behind a session cookie.

    Args:
        firebase (FirebaseClient): Shared Firebase handles
        session_cookie (str, optional): Value of the session cookie

    Returns:
        User | None: The stored user, or None if the cookie is missing, invalid,
        revoked, or belongs to a user without a profile document
    """
    if not session_cookie:
        return None

    try:
        decoded_claims = firebase.verify_session_cookie(session_cookie, check_revoked=True)
    except (ValueError, FirebaseError) as e:
        logger.warning(f"Session cookie rejected: {e}")
        return None

    uid = decoded_claims["uid"]
    snapshot = await firebase.db.collection(USERS_COLLECTION).document(uid).get()
    if not snapshot.exists:
        logger.warning(f"No user record for uid {uid}")
        return None

    return User(**{**snapshot.to_dict(), "id": snapshot.id})


async def sign_up(firebase: FirebaseClient, params: SignUpRequest) -> AuthResult:
    """Create the user record for an account registered on the client.

    Args:
        firebase (FirebaseClient): Shared Firebase handles
        params (SignUpRequest): Firebase UID, display name and email

    Returns:
        AuthResult: Success or a message explaining why the account was not created
    """
    user_ref = firebase.db.collection(USERS_COLLECTION).document(params.uid)
    snapshot = await user_ref.get()
    if snapshot.exists:
        return AuthResult(success=False, message="User already exists. Please sign in.")

    await user_ref.set({"name": params.name, "email": params.email})
    logger.info(f"Created user record for uid {params.uid}")
    return AuthResult(success=True, message="Account created successfully. Please sign in.")


def sign_in(firebase: FirebaseClient, params: SignInRequest) -> Tuple[AuthResult, Optional[str]]:
    """Exchange a Firebase ID token for a session cookie.

    The token must verify and carry the same email the user signed in with.

    Args:
        firebase (FirebaseClient): Shared Firebase handles
        params (SignInRequest): Email and Firebase ID token

    Returns:
        tuple: (AuthResult, session cookie) where the cookie is None on failure
    """
    try:
        firebase.get_user_by_email(params.email)
    except auth.UserNotFoundError:
        return AuthResult(success=False, message="User does not exist. Create an account."), None

    try:
        claims = firebase.verify_id_token(params.id_token)
        if claims.get("email") != params.email:
            logger.warning(f"ID token email does not match sign-in email {params.email}")
            return AuthResult(success=False, message="Failed to log into account. Please try again."), None
        session_cookie = firebase.create_session_cookie(params.id_token, expires_in=SESSION_DURATION)
    except (ValueError, FirebaseError) as e:
        logger.error(f"Failed to create session cookie for {params.email}: {e}")
        return AuthResult(success=False, message="Failed to log into account. Please try again."), None

    logger.info(f"User {params.email} signed in")
    return AuthResult(success=True, message="Signed in successfully."), session_cookie
