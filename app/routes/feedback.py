"""
Interview Feedback API Routes

Description:
This module defines FastAPI routes for generating feedback from an interview
transcript and for reading stored feedback.

Arguments:
- payload: An instance of CreateFeedbackRequest with the interview, user and transcript.

Returns:
- An envelope with the stored feedback id, or the stored Feedback record (null when absent).

Dependencies:
- fastapi: For creating the FastAPI application and defining routes.
- app.core.dependencies: For the Firestore client and generation service.
- app.services.interview_actions: For the feedback operations.
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query, Request
from app.core.dependencies import get_db, get_feedback_generator
from app.core.route_limiters import limiter
from app.schemas.interview import Feedback, CreateFeedbackRequest, CreateFeedbackResult
from app.services.feedback_generation import FeedbackGenerationService
from app.services.interview_actions import create_feedback, get_feedback_by_interview_id

router = APIRouter(
    prefix="/api/feedback",
    tags=["interview-feedback"],
    responses={404: {"description": "Not found"}}
)


@router.post("", response_model=CreateFeedbackResult, response_model_exclude_none=True)
@limiter.limit("5/minute")
async def create_feedback_route(
    request: Request,
    payload: CreateFeedbackRequest,
    db=Depends(get_db),
    generator: FeedbackGenerationService = Depends(get_feedback_generator)
):
    """
    Generate feedback for a finished interview and store it.
    """
    return await create_feedback(
        db,
        generator,
        interview_id=payload.interviewId,
        user_id=payload.userId,
        transcript=payload.transcript,
        feedback_id=payload.feedbackId
    )


@router.get("", response_model=Optional[Feedback])
@limiter.limit("30/minute")
async def feedback_route(
    request: Request,
    interview_id: str = Query(..., alias="interviewId"),
    user_id: str = Query(..., alias="userId"),
    db=Depends(get_db)
):
    return await get_feedback_by_interview_id(db, interview_id, user_id)
