"""Authentication Routes Module

This module defines FastAPI routes for session-based authentication with
Firebase. The client signs the user in with the Firebase web SDK and posts the
resulting ID token here; the server exchanges it for an HTTP-only session
cookie that later requests are resolved against.

Dependencies:
- fastapi: For API routing and dependency injection.
- loguru: For logging operations.
- app.core.route_limiters: For rate limiting middleware.
- app.core.dependencies: For the shared Firebase handles and session user.
- app.services.auth.firebase_auth: For Firebase authentication services.
- app.schemas.auth.user_auth_schemas: For user authentication data models.
"""

from fastapi import APIRouter, Depends, Request, Response
from loguru import logger
from app.core.config import session_cookie_secure
from app.core.dependencies import get_firebase, require_user
from app.core.firebase_client import FirebaseClient
from app.core.route_limiters import limiter
from app.errors.exceptions import InternalServerError
from app.schemas.auth.user_auth_schemas import User, SignUpRequest, SignInRequest, AuthResult
from app.services.auth.firebase_auth import sign_up, sign_in, SESSION_COOKIE_NAME, SESSION_DURATION

router = APIRouter(
    prefix="/auth",
    tags=["auth"],
    responses={404: {"description": "Not found"}}
)

@router.post("/sign-up", response_model=AuthResult)
@limiter.limit("5/minute")  # Custom limit for this endpoint
async def sign_up_route(request: Request, params: SignUpRequest, firebase: FirebaseClient = Depends(get_firebase)):
    """Create the user record for a newly registered Firebase account.

    Args:
        request (Request): FastAPI request object for rate limiting
        params (SignUpRequest): Firebase UID, name and email
        firebase (FirebaseClient): Shared Firebase handles

    Returns:
        AuthResult: Success flag and message

    Rate Limit:
        5 requests per minute per client
    """
    try:
        return await sign_up(firebase, params)
    except Exception as e:
        logger.exception("Unhandled exception in sign-up endpoint")
        raise InternalServerError("Failed to create an account.") from e

@router.post("/sign-in", response_model=AuthResult)
@limiter.limit("10/minute")  # Custom limit for this endpoint
async def sign_in_route(request: Request, response: Response, params: SignInRequest, firebase: FirebaseClient = Depends(get_firebase)):
    """Exchange a Firebase ID token for a session cookie.

    Sets an HTTP-only `session` cookie valid for one week on success.

    Args:
        request (Request): FastAPI request object for rate limiting
        response (Response): Response the cookie is attached to
        params (SignInRequest): Email and Firebase ID token
        firebase (FirebaseClient): Shared Firebase handles

    Returns:
        AuthResult: Success flag and message

    Rate Limit:
        10 requests per minute per client
    """
    result, session_cookie = sign_in(firebase, params)
    if session_cookie:
        response.set_cookie(
            key=SESSION_COOKIE_NAME,
            value=session_cookie,
            max_age=int(SESSION_DURATION.total_seconds()),
            httponly=True,
            secure=session_cookie_secure(),
            samesite="lax",
            path="/"
        )
    return result

@router.post("/sign-out", response_model=AuthResult)
async def sign_out_route(response: Response):
    response.delete_cookie(key=SESSION_COOKIE_NAME, path="/")
    return AuthResult(success=True, message="Signed out.")

@router.get("/me", response_model=User)
@limiter.limit("30/minute")  # Custom limit for this endpoint
async def current_user_route(request: Request, user: User = Depends(require_user)):
    """Return the signed-in user.

    Raises:
        Unauthorized: 401 if the session cookie is missing, invalid or revoked
    """
    return user
