"""Centralized translation of exceptions into problem detail responses."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .models.problems import ProblemDetail

logger = logging.getLogger(__name__)

PROBLEM_MEDIA_TYPE: str = "application/problem+json"
RESERVED_PROBLEM_FIELDS = frozenset({"type", "title", "status", "detail", "instance"})


class ProblemError(Exception):
    """Application error rendered as an RFC 7807 problem detail."""

    def __init__(
        self,
        status: int,
        title: str,
        detail: str,
        type: str = "about:blank",
        extra: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(detail)
        self.status = status
        self.title = title
        self.detail = detail
        self.type = type
        # Core members always come from the arguments above.
        self.extra = {
            key: value
            for key, value in (extra or {}).items()
            if key not in RESERVED_PROBLEM_FIELDS
        }


def _instance(request: Request) -> str:
    url = request.url
    return f"{url.path}?{url.query}" if url.query else url.path


def _reason(status: int) -> str:
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return "Error"


def problem_response(
    request: Request,
    status: int,
    title: str,
    detail: str,
    *,
    type: str = "about:blank",
    headers: Optional[Dict[str, str]] = None,
    **extra: Any,
) -> JSONResponse:
    """Build a problem detail response and log it by severity."""

    problem = ProblemDetail(
        type=type,
        title=title,
        status=status,
        detail=detail,
        instance=_instance(request),
        **extra,
    )
    if status >= 500:
        logger.error("%s %s failed with %s: %s", request.method, problem.instance, status, detail)
    else:
        logger.info("%s %s rejected with %s: %s", request.method, problem.instance, status, detail)
    return JSONResponse(
        status_code=status,
        content=jsonable_encoder(problem, exclude_none=True),
        media_type=PROBLEM_MEDIA_TYPE,
        headers=headers,
    )


async def handle_problem_error(request: Request, exc: ProblemError) -> JSONResponse:
    return problem_response(
        request, exc.status, exc.title, exc.detail, type=exc.type, **exc.extra
    )


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors: List[Dict[str, Any]] = [
        {
            "loc": list(error.get("loc", ())),
            "msg": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in exc.errors()
    ]
    return problem_response(
        request,
        400,
        "Validation Error",
        "Request validation failed",
        errors=errors,
    )


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    detail: Any = exc.detail
    if isinstance(detail, dict):
        detail = detail.get("error") or detail.get("detail") or _reason(exc.status_code)
    if exc.status_code == 404 and detail == _reason(404):
        detail = f"No resource found at {request.url.path}"
    return problem_response(
        request,
        exc.status_code,
        _reason(exc.status_code),
        str(detail),
        headers=getattr(exc, "headers", None),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error while serving %s %s", request.method, request.url.path)
    return problem_response(
        request, 500, "Internal Server Error", "An unexpected error occurred"
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the problem detail handlers on ``app``."""

    app.add_exception_handler(ProblemError, handle_problem_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)


__all__ = [
    "PROBLEM_MEDIA_TYPE",
    "ProblemError",
    "problem_response",
    "register_exception_handlers",
]
