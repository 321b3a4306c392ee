from dotenv import load_dotenv
from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from contextlib import asynccontextmanager
from slowapi import _rate_limit_exceeded_handler
from slowapi.middleware import SlowAPIMiddleware
# Rate Limiter
from app.core.route_limiters import limiter
# Routers
from app.routes.health import router as health_router
from app.routes.interviews import router as interviews_router
from app.routes.feedback import router as feedback_router
from app.routes.auth import router as auth_router
from app.routes.sign_in_page import router as sign_in_page_router
# CORS Middleware
from app.core.cors_middleware import add_cors_middleware
# Logger
from loguru import logger
# Service handles
from app.core.config import get_firebase_admin_settings, get_generation_settings
from app.core.firebase_client import FirebaseClient
from app.core.ai_client_manager import AIClientManager
from app.services.feedback_generation import FeedbackGenerationService
# Error Handling
from fastapi.exceptions import RequestValidationError
from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from starlette.status import HTTP_422_UNPROCESSABLE_ENTITY
from firebase_admin.exceptions import FirebaseError
from google.api_core.exceptions import GoogleAPICallError

from app.errors.handlers import http_exception_handler, generic_exception_handler, upstream_error_handler

# Load environment variables
load_dotenv()

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events."""
    # Startup
    try:
        firebase = FirebaseClient(**get_firebase_admin_settings())
        firebase.initialize()

        generation_settings = get_generation_settings()
        ai_clients = AIClientManager(**generation_settings)

        app.state.firebase = firebase
        app.state.ai_clients = ai_clients
        app.state.feedback_generator = FeedbackGenerationService(
            ai_clients.get_feedback_client(),
            model=ai_clients.model
        )
        logger.info("Application startup completed successfully")
    except Exception as e:
        logger.error(f"Error during application startup: {e}")
        raise
    
    yield
    
    # Shutdown
    await app.state.ai_clients.aclose()
    app.state.firebase.close()
    logger.info("Application shutdown")

# Initialize FastAPI app
app = FastAPI(
    title="IntelliHire API",
    description="Mock interview service: interviews, AI feedback and Firebase sign-in",
    version="0.1.0",
    lifespan=lifespan
)
# Add CORS middleware
add_cors_middleware(app)    

# Centralized error handlers
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(FirebaseError, upstream_error_handler)
app.add_exception_handler(GoogleAPICallError, upstream_error_handler)
app.add_exception_handler(Exception, generic_exception_handler)

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": jsonable_encoder(exc.errors())},
    )

# Add rate limiter to the app
try:
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)
except Exception as e:
    logger.error(f"Error adding rate limiter: {e}")

# Include routers
app.include_router(health_router)
app.include_router(interviews_router)
app.include_router(feedback_router)
app.include_router(auth_router)
app.include_router(sign_in_page_router)
