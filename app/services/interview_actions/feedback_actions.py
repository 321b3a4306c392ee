"""
Feedback Actions Module

This module creates interview feedback from a transcript and reads it back.

create_feedback sends the formatted transcript to the generation service,
stores the normalized assessment in the `feedback` collection and returns an
envelope. When a feedback id is supplied the existing document is overwritten
in place; otherwise Firestore assigns a new id. There is no retry on a failed
generation call.

Dependencies:
- google-cloud-firestore (via firebase_admin): For async document access and query filters.
- loguru: For logging operations.
- app.services.feedback_generation: For the structured generation call.
"""

from typing import List, Optional

from google.cloud.firestore_v1.base_query import FieldFilter
from loguru import logger

from app.helper.timestamps import utc_timestamp
from app.schemas.interview import Feedback, TranscriptEntry, CreateFeedbackResult
from app.services.feedback_generation import FeedbackGenerationService

FEEDBACK_COLLECTION = "feedback"


async def create_feedback(
    db,
    generator: FeedbackGenerationService,
    interview_id: str,
    user_id: str,
    transcript: List[TranscriptEntry],
    feedback_id: Optional[str] = None
) -> CreateFeedbackResult:
    """Generate and store feedback for an interview transcript.

    Args:
        db: Async Firestore client
        generator (FeedbackGenerationService): Structured generation client
        interview_id (str): Parent interview identifier
        user_id (str): Owner of the feedback
        transcript (List[TranscriptEntry]): Interview turns in order
        feedback_id (str, optional): Existing document to overwrite

    Returns:
        CreateFeedbackResult: `{success: True, feedbackId}` or `{success: False, error}`
    """
    try:
        assessment = await generator.assess_transcript(transcript)

        feedback = Feedback(
            interviewId=interview_id,
            userId=user_id,
            createdAt=utc_timestamp(),
            **assessment.model_dump()
        )

        collection = db.collection(FEEDBACK_COLLECTION)
        doc_ref = collection.document(feedback_id) if feedback_id else collection.document()
        await doc_ref.set(feedback.model_dump(exclude={"id"}))

        logger.info(f"Saved feedback {doc_ref.id} for interview {interview_id}")
        return CreateFeedbackResult(success=True, feedbackId=doc_ref.id)
    except Exception as e:
        logger.error(f"Error saving feedback: {e}")
        return CreateFeedbackResult.failure(str(e) or "Unknown error")


async def get_feedback_by_interview_id(db, interview_id: str, user_id: str) -> Optional[Feedback]:
    snapshots = await (
        db.collection(FEEDBACK_COLLECTION)
        .where(filter=FieldFilter("interviewId", "==", interview_id))
        .where(filter=FieldFilter("userId", "==", user_id))
        .limit(1)
        .get()
    )
    if not snapshots:
        return None

    snapshot = snapshots[0]
    return Feedback(**{**snapshot.to_dict(), "id": snapshot.id})
