from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from lp_analytics.domain.exceptions import DomainError

logger = logging.getLogger(__name__)


def error_response(status_code: int, errors: list[dict], headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"errors": errors}, headers=headers)


async def http_exception_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    detail = exc.detail
    if isinstance(detail, list):
        errors = [item if isinstance(item, dict) else {"message": str(item)} for item in detail]
    else:
        errors = [{"message": str(detail)}]
    return error_response(exc.status_code, errors, headers=getattr(exc, "headers", None))


async def validation_exception_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"message": str(item.get("msg", "")), "loc": [str(part) for part in item.get("loc", ())]}
        for item in exc.errors()
    ]
    return error_response(422, errors)


async def domain_exception_handler(_request: Request, exc: DomainError) -> JSONResponse:
    return error_response(400, [{"message": str(exc)}])


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("api: unhandled_error method=%s path=%s", request.method, request.url.path)
    return error_response(500, [{"message": str(exc) or exc.__class__.__name__}])


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(DomainError, domain_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
