"""
Health check endpoint for the application.

Description:
This module defines a FastAPI route for checking the health status of the
service and whether its Firebase and generation handles were initialized.

Arguments:
- request: An instance of Request, required for rate limiting.

Returns:
- A JSON response such as {"status": "ok", "firebase": true, "generation": true}.
  Status is "degraded" when either handle is missing.

Dependencies:
- fastapi: For creating the FastAPI application and defining routes.
- app.core.route_limiters: For rate limiting functionality.
- app.schemas.health_response: For defining the response model.
- loguru: For logging information about the health check endpoint.
"""
from fastapi import APIRouter, Request
from app.core.route_limiters import limiter
from app.schemas.health_response import HealthResponse
from loguru import logger

router = APIRouter(
    prefix="/api",
    tags=["health"],
    responses={404: {"description": "Not found"}}
)

@router.get("/health", response_model=HealthResponse)
@limiter.limit("10/minute")  # Custom limit for this endpoint
async def health(request: Request):
    """
    Request parameter is required for rate limiting.
    """
    firebase_ready = getattr(request.app.state, "firebase", None) is not None
    generation_ready = getattr(request.app.state, "feedback_generator", None) is not None
    status = "ok" if firebase_ready and generation_ready else "degraded"
    logger.info(f"Health check endpoint called: {status}")
    return HealthResponse(status=status, firebase=firebase_ready, generation=generation_ready)
