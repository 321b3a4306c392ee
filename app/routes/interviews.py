"""
Interview API Routes

Description:
This module defines FastAPI routes for creating interviews and querying them.

Creation returns an envelope ({success, id} or {success, error}) and never
fails at the HTTP level for service errors. Queries return records directly;
an unknown interview id is reported as 404.

Dependencies:
- fastapi: For API routing and dependency injection.
- app.core.route_limiters: For rate limiting middleware.
- app.core.dependencies: For the shared Firestore client and session user.
- app.services.interview_actions: For the interview operations.
- loguru: For logging information about the requests.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Request
from loguru import logger
from app.core.dependencies import get_db, get_user_resolver
from app.core.route_limiters import limiter
from app.errors.exceptions import InterviewNotFound
from app.schemas.interview import Interview, InterviewCreate, CreateInterviewResult
from app.services.interview_actions import (
    create_interview,
    get_interview_by_id,
    get_latest_interviews,
    get_interviews_by_user_id,
    DEFAULT_LATEST_LIMIT
)

router = APIRouter(
    prefix="/api/interviews",
    tags=["interviews"],
    responses={404: {"description": "Not found"}}
)


@router.post("", response_model=CreateInterviewResult, response_model_exclude_none=True)
@limiter.limit("10/minute")
async def create_interview_route(
    request: Request,
    interview_data: InterviewCreate,
    resolve_user=Depends(get_user_resolver),
    db=Depends(get_db)
):
    """
    Create an interview owned by the signed-in user.
    """
    return await create_interview(db, resolve_user, interview_data)


@router.get("/latest", response_model=List[Interview])
@limiter.limit("30/minute")
async def latest_interviews_route(
    request: Request,
    user_id: str = Query(..., alias="userId"),
    limit: int = Query(DEFAULT_LATEST_LIMIT, ge=1, le=100),
    db=Depends(get_db)
):
    """
    Finalized interviews from other users, newest first.
    """
    return await get_latest_interviews(db, user_id, limit)


@router.get("", response_model=List[Interview])
@limiter.limit("30/minute")
async def user_interviews_route(request: Request, user_id: Optional[str] = Query(None, alias="userId"), db=Depends(get_db)):
    return await get_interviews_by_user_id(db, user_id)


@router.get("/{interview_id}", response_model=Interview)
@limiter.limit("30/minute")
async def interview_route(request: Request, interview_id: str, db=Depends(get_db)):
    interview = await get_interview_by_id(db, interview_id)
    if interview is None:
        logger.info(f"Interview {interview_id} not found")
        raise InterviewNotFound(interview_id)
    return interview
