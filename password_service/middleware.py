"""
Service Middleware
Response hardening, body size limits, error masking and request auditing
"""
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from fastapi import status
import os
import logging

from .audit import log_audit_event

logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Add security headers to every response
    Responses may carry generated passwords, so nothing is cacheable
    """

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        response.headers["Cache-Control"] = "no-store"
        response.headers["Pragma"] = "no-cache"
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "no-referrer"

        # HSTS - only in production with HTTPS
        if os.getenv("ENVIRONMENT") == "production":
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"

        # JSON only; the interactive docs are served from the same origin
        response.headers["Content-Security-Policy"] = "default-src 'self'; frame-ancestors 'none';"

        return response


class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    """
    Reject request bodies larger than the configured limit
    Validation payloads are a few hundred bytes at most
    """

    def __init__(self, app, max_request_size: int = 64 * 1024):
        super().__init__(app)
        self.max_request_size = max_request_size

    async def dispatch(self, request: Request, call_next):
        if request.method in ["POST", "PUT", "PATCH"]:
            content_length = request.headers.get("content-length")
            if content_length and content_length.isdigit() and int(content_length) > self.max_request_size:
                return JSONResponse(
                    status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                    content={
                        "detail": f"Request body too large. Maximum size: {self.max_request_size // 1024}KB"
                    }
                )

        return await call_next(request)


class SecureErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Keep internal error details out of responses
    The full traceback goes to the log instead
    """

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as e:
            logger.error(
                f"Unhandled exception: {type(e).__name__}",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "client_ip": request.client.host if request.client else "unknown"
                },
                exc_info=True
            )

            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "detail": "An internal error occurred. Please try again later.",
                    "error_id": type(e).__name__,
                }
            )


class AuditLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log method, path and status of every request
    Bodies are never read here since they contain passwords
    """

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        log_audit_event(
            action=f"{request.method} {request.url.path}",
            success=response.status_code < 400,
            details={"status_code": response.status_code},
            request=request
        )

        return response
