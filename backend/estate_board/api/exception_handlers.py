# backend/estate_board/api/exception_handlers.py
"""Application-wide exception handlers."""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..utils.logging import api_logger


def _issues(exc: RequestValidationError) -> list:
    return [
        {
            "loc": [str(part) for part in error.get("loc", ())],
            "msg": error.get("msg", ""),
            "type": error.get("type", "")
        }
        for error in exc.errors()
    ]


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    issues = _issues(exc)
    api_logger.warning("Request validation failed", extra={
        "path": request.url.path,
        "issue_count": len(issues)
    })
    return JSONResponse(status_code=400, content={"detail": issues})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    api_logger.error("Unhandled error", extra={
        "path": request.url.path,
        "method": request.method,
        "error_type": type(exc).__name__
    }, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "internal_error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
