"""
Error handlers for SkillSync

Every error leaves the API as {"success": false, "error": "<message>"}
with a non-2xx status.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from skillsync.core.exceptions import InterviewError

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message},
        headers=headers,
    )


async def interview_error_handler(request: Request, exc: InterviewError):
    return error_response(exc.status_code, exc.message)


async def http_exception_handler(request: Request, exc: HTTPException):
    return error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Collapse pydantic errors into one readable message."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else error.get("msg", ""))
    return error_response(HTTP_400_BAD_REQUEST, "; ".join(messages) or "Invalid request")


async def generic_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(HTTP_500_INTERNAL_SERVER_ERROR, "Server error")


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the envelope handlers to an application."""
    app.add_exception_handler(InterviewError, interview_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
