"""
Description:
FastAPI dependencies that hand the shared service handles to route handlers.

The handles are created in the application lifespan and stored on app.state;
tests replace these dependencies through app.dependency_overrides.

Dependencies:
- fastapi: For dependency injection and cookie extraction.
"""
from functools import partial
from typing import Optional
from fastapi import Cookie, Depends, Request
from app.core.firebase_client import FirebaseClient
from app.errors.exceptions import Unauthorized
from app.schemas.auth.user_auth_schemas import User
from app.services.auth.firebase_auth import get_current_user
from app.services.feedback_generation import FeedbackGenerationService


def get_firebase(request: Request) -> FirebaseClient:
    return request.app.state.firebase


def get_db(firebase: FirebaseClient = Depends(get_firebase)):
    return firebase.db


def get_feedback_generator(request: Request) -> FeedbackGenerationService:
    return request.app.state.feedback_generator


async def get_optional_user(session: Optional[str] = Cookie(None), firebase: FirebaseClient = Depends(get_firebase)) -> Optional[User]:
    return await get_current_user(firebase, session)


def get_user_resolver(session: Optional[str] = Cookie(None), firebase: FirebaseClient = Depends(get_firebase)):
    """Session lookup deferred to the caller, which awaits it inside its own error handling."""
    return partial(get_current_user, firebase, session)


async def require_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    if user is None:
        raise Unauthorized("Not signed in")
    return user
