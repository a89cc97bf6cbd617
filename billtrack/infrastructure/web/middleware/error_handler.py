"""
Global error handler middleware for the FastAPI application.
Catches and formats all exceptions consistently.
"""

import logging
import traceback
from typing import Any, Dict

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from fastapi import status

from billtrack.config import settings
from billtrack.domain.models.base import DomainException

logger = logging.getLogger(__name__)


DOMAIN_ERROR_STATUS = {
    "ENTITY_NOT_FOUND": (status.HTTP_404_NOT_FOUND, "Not Found"),
    "VALIDATION_ERROR": (status.HTTP_422_UNPROCESSABLE_ENTITY, "Validation Error"),
    "BUSINESS_RULE_VIOLATION": (status.HTTP_409_CONFLICT, "Conflict"),
}


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Middleware to handle all uncaught exceptions and format error responses.
    """

    async def dispatch(self, request: Request, call_next):
        """
        Process the request and handle any exceptions.
        """
        try:
            response = await call_next(request)
            return response
        except Exception as exc:
            return await self.handle_exception(request, exc)

    async def handle_exception(self, request: Request, exc: Exception) -> JSONResponse:
        """
        Handle different types of exceptions and return appropriate responses.
        """
        error_response = self.format_error_response(exc)

        if error_response["status_code"] >= 500:
            logger.error(
                f"Unhandled exception: {type(exc).__name__}: {str(exc)}",
                exc_info=True,
                extra={
                    "request_path": request.url.path,
                    "request_method": request.method,
                }
            )
        else:
            logger.info(f"{request.method} {request.url.path} -> {error_response['status_code']}: {str(exc)}")

        # In development, add more debug information
        if settings.debug:
            error_response["debug"] = {
                "exception_type": type(exc).__name__,
                "traceback": traceback.format_exc().split("\n")
            }

        return JSONResponse(
            status_code=error_response["status_code"],
            content=error_response
        )

    def format_error_response(self, exc: Exception) -> Dict[str, Any]:
        """
        Format exception into a consistent error response structure.
        """
        if isinstance(exc, DomainException):
            status_code, error = DOMAIN_ERROR_STATUS.get(
                exc.code, (status.HTTP_400_BAD_REQUEST, "Bad Request")
            )
            return {
                "error": error,
                "message": exc.message,
                "status_code": status_code,
                "code": exc.code,
            }

        if isinstance(exc, ValueError):
            return {
                "error": "Bad Request",
                "message": str(exc),
                "status_code": status.HTTP_400_BAD_REQUEST,
                "code": "BAD_REQUEST",
            }

        return {
            "error": "Internal Server Error",
            "message": "An unexpected error occurred",
            "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR,
            "code": "INTERNAL_ERROR",
        }
