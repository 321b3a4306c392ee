from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR, HTTP_502_BAD_GATEWAY

def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
    )

def generic_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled exception on {request.url.path}")
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An unexpected error occurred."},
    )
def upstream_error_handler(request: Request, exc: Exception):
    """
    Handle errors raised by the Firebase admin SDK or the Firestore client.

    The document store and auth service are upstream dependencies, so their
    failures are reported as a bad gateway rather than an internal error.

    Args:
        request: FastAPI request instance
        exc: FirebaseError from firebase_admin or GoogleAPICallError from google-cloud-firestore

    Returns:
        JSONResponse with 502 status and the upstream error code
    """
    code = getattr(exc, "code", None)
    logger.error(f"Upstream error on {request.url.path}: {code} {exc}")
    return JSONResponse(
        status_code=HTTP_502_BAD_GATEWAY,
        content={
            "error": "Upstream service error",
            "code": str(code) if code is not None else None,
            "message": "The authentication or document service failed to complete the request"
        }
    )
