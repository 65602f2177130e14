"""
Consolidated middleware for the TabSplit API
"""

import time
import logging
from datetime import datetime, timezone
from uuid import uuid4
from decimal import Decimal

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.exceptions import ServiceError, StorageUnavailableError

logger = logging.getLogger("tabsplit.middleware")


# ============================================================================
# Helper Functions
# ============================================================================


def make_serializable(obj):
    """Convert objects to JSON-serializable format"""
    if isinstance(obj, Decimal):
        return float(obj)
    elif isinstance(obj, dict):
        return {k: make_serializable(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [make_serializable(item) for item in obj]
    elif isinstance(obj, Exception):
        return str(obj)
    return obj


def describe_validation_errors(errors) -> str:
    """Build one readable message naming every missing or invalid body/query field"""
    missing, invalid = [], []
    for err in errors:
        # loc looks like ("body", "quantity") or ("query", "id")
        field = ".".join(str(part) for part in err.get("loc", ())[1:]) or "body"
        if err.get("type") == "missing":
            missing.append(field)
        else:
            invalid.append(f"{field} ({err.get('msg', 'invalid')})")

    parts = []
    if missing:
        parts.append("Missing required field(s): " + ", ".join(missing))
    if invalid:
        parts.append("Invalid field(s): " + ", ".join(invalid))
    return "; ".join(parts) or "Request validation failed"


def _error_body(message: str, code: str, **extra) -> dict:
    body = {
        "success": False,
        "error": message,
        "code": code,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    body.update(extra)
    return body


# ============================================================================
# Request Logging Middleware
# ============================================================================


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all HTTP requests and responses"""

    async def dispatch(self, request: Request, call_next):
        # Generate unique request ID
        request_id = str(uuid4())
        request.state.request_id = request_id

        logger.info(
            f"request_started request_id={request_id} method={request.method} "
            f"path={request.url.path}"
        )

        start_time = time.time()

        try:
            response: Response = await call_next(request)
            process_time = time.time() - start_time

            logger.info(
                f"request_completed request_id={request_id} method={request.method} "
                f"path={request.url.path} status_code={response.status_code} "
                f"process_time={process_time:.4f}s"
            )

            # Add custom headers
            response.headers["X-Request-ID"] = request_id
            response.headers["X-Process-Time"] = f"{process_time:.4f}"

            return response

        except Exception as exc:
            process_time = time.time() - start_time
            logger.error(
                f"request_failed request_id={request_id} method={request.method} "
                f"path={request.url.path} error={exc} process_time={process_time:.4f}s",
                exc_info=True,
            )
            raise


# ============================================================================
# Error Handlers
# ============================================================================


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle Pydantic validation errors of request bodies and query parameters"""
    logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(
            describe_validation_errors(exc.errors()),
            "VALIDATION_ERROR",
            details=make_serializable(exc.errors()),
        ),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions"""
    logger.warning(f"HTTP {exc.status_code} on {request.url.path}: {exc.detail}")

    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(str(exc.detail), f"HTTP_{exc.status_code}"),
    )


async def service_exception_handler(request: Request, exc: ServiceError):
    """Handle every domain error raised by the service layer"""
    if exc.http_status >= 500:
        logger.error(f"Service error on {request.url.path}: {exc.code} {exc}")
    else:
        logger.warning(f"Service error on {request.url.path}: {exc.code} {exc}")

    return JSONResponse(
        status_code=exc.http_status,
        content=_error_body(
            exc.message,
            exc.code,
            **({"details": make_serializable(dict(exc.details))} if exc.details else {}),
        ),
    )


async def storage_exception_handler(request: Request, exc: SQLAlchemyError):
    """Database failures outside the repositories (e.g. on commit); no detail leaks"""
    logger.exception(f"Storage error on {request.url.path}: {exc.__class__.__name__}")
    unavailable = StorageUnavailableError()

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(unavailable.message, unavailable.code),
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.exception(f"Unexpected error on {request.url.path}: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("An unexpected error occurred", "INTERNAL_SERVER_ERROR"),
    )
