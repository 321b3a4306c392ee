"""
Interview Actions Module

This module implements the request-scoped interview operations: creating an
interview for the signed-in user and the read-only queries over the
`interviews` collection.

create_interview never raises: any failure is logged and returned in a failure
envelope. The current user may be passed already resolved or as a coroutine
function, which is then awaited inside that error handling. The getters are
direct pass-throughs to Firestore and let errors propagate to the caller.
Absence is signalled with None or an empty list.

Dependencies:
- google-cloud-firestore (via firebase_admin): For async document access and query filters.
- loguru: For logging operations.
- app.schemas.interview: For interview records and envelopes.
"""

from typing import Awaitable, Callable, List, Optional, Union

from google.cloud.firestore_v1.base_query import BaseQuery, FieldFilter
from loguru import logger

from app.helper.timestamps import utc_timestamp
from app.schemas.auth.user_auth_schemas import User
from app.schemas.interview import Interview, InterviewCreate, CreateInterviewResult

INTERVIEWS_COLLECTION = "interviews"
DEFAULT_LATEST_LIMIT = 20

UserResolver = Callable[[], Awaitable[Optional[User]]]


def _to_interview(snapshot) -> Interview:
    return Interview(**{**snapshot.to_dict(), "id": snapshot.id})


async def create_interview(db, current_user: Union[Optional[User], UserResolver], interview_data: InterviewCreate) -> CreateInterviewResult:
    """Create an interview owned by the current user.

    Args:
        db: Async Firestore client
        current_user (User | UserResolver, optional): Session user, None when signed
            out, or a coroutine function returning it
        interview_data (InterviewCreate): Partial interview fields

    Returns:
        CreateInterviewResult: `{success: True, id}` or `{success: False, error}`
    """
    try:
        if callable(current_user):
            current_user = await current_user()

        if current_user is None or not current_user.id:
            raise PermissionError("User not authenticated")

        payload = {
            **interview_data.model_dump(exclude_unset=True, exclude_none=True),
            "userId": current_user.id,
            "createdAt": utc_timestamp(),
        }

        _, doc_ref = await db.collection(INTERVIEWS_COLLECTION).add(payload)
        logger.info(f"Created interview {doc_ref.id} for user {current_user.id}")
        return CreateInterviewResult(success=True, id=doc_ref.id)
    except Exception as e:
        logger.error(f"Error creating interview: {e}")
        return CreateInterviewResult.failure(str(e) or "Unknown error")


async def get_interview_by_id(db, interview_id: str) -> Optional[Interview]:
    snapshot = await db.collection(INTERVIEWS_COLLECTION).document(interview_id).get()
    return _to_interview(snapshot) if snapshot.exists else None


async def get_latest_interviews(db, user_id: str, limit: int = DEFAULT_LATEST_LIMIT) -> List[Interview]:
    """Finalized interviews from other users, newest first, capped at `limit`."""
    snapshots = await (
        db.collection(INTERVIEWS_COLLECTION)
        .order_by("createdAt", direction=BaseQuery.DESCENDING)
        .where(filter=FieldFilter("finalized", "==", True))
        .where(filter=FieldFilter("userId", "!=", user_id))
        .limit(limit)
        .get()
    )
    return [_to_interview(snapshot) for snapshot in snapshots]


async def get_interviews_by_user_id(db, user_id: Optional[str]) -> List[Interview]:
    """All interviews owned by `user_id`, newest first.

    A missing user id short-circuits to an empty list without querying the store.
    """
    if not user_id:
        logger.warning("get_interviews_by_user_id called without a userId")
        return []

    snapshots = await (
        db.collection(INTERVIEWS_COLLECTION)
        .where(filter=FieldFilter("userId", "==", user_id))
        .order_by("createdAt", direction=BaseQuery.DESCENDING)
        .get()
    )
    logger.info(f"Found {len(snapshots)} interviews for userId: {user_id}")
    return [_to_interview(snapshot) for snapshot in snapshots]
