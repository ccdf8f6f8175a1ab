"""
Error taxonomy and the centralized error normalizer.

Feature code raises `ApiError` subclasses; each carries the HTTP `status`
and the client-facing `msg`. Nothing below the router builds responses.

`setup_exception_handlers` registers the handler chain with FastAPI:

1. ApiError              -> {msg} with its status
2. RequestValidationError -> 400 "Invalid request body!"
3. Starlette 404          -> 404 "Invalid path!" (other HTTP errors keep their status)
4. anything else          -> 500 "Something went wrong!" (logged with traceback)
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INVALID_PATH_MSG = "Invalid path!"
INVALID_BODY_MSG = "Invalid request body!"
FALLBACK_MSG = "Something went wrong!"


class ApiError(Exception):
    status: int = 500
    msg: str = FALLBACK_MSG

    def __init__(self, msg: str | None = None) -> None:
        if msg is not None:
            self.msg = msg
        super().__init__(self.msg)

    def to_dict(self) -> dict:
        return {"status": self.status, "msg": self.msg}


class InvalidIdentifier(ApiError):
    status = 400
    msg = "Invalid ID! ID must be a number."

    @classmethod
    def for_entity(cls, entity: str) -> "InvalidIdentifier":
        return cls(f"Invalid ID! {entity} ID must be a number.")


class InvalidSortField(ApiError):
    status = 400

    def __init__(self, allowed: tuple[str, ...] | list[str]) -> None:
        super().__init__(f"Invalid sort_by! Must be one of: {', '.join(allowed)}.")


class InvalidSortDirection(ApiError):
    status = 400

    def __init__(self, allowed: tuple[str, ...] | list[str]) -> None:
        super().__init__(f"Invalid order! Must be one of: {', '.join(allowed)}.")


class ArticleNotFound(ApiError):
    status = 404
    msg = "Article not found!"


class UserNotFound(ApiError):
    status = 404
    msg = "User not found!"


class CommentNotFound(ApiError):
    status = 404
    msg = "Comment not found!"


class MissingCommentBody(ApiError):
    status = 400
    msg = "Comment body is required!"


class MissingVoteDelta(ApiError):
    status = 400
    msg = "inc_votes is required!"


class InvalidVoteDelta(ApiError):
    status = 400
    msg = "inc_votes must be an integer!"


class MalformedRequestBody(ApiError):
    status = 400
    msg = INVALID_BODY_MSG


class UnhandledFault(ApiError):
    status = 500
    msg = FALLBACK_MSG


def _error_response(status_code: int, msg: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"msg": msg})


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    logger.info(
        "api_error method=%s path=%s status=%s error=%s",
        request.method,
        request.url.path,
        exc.status,
        type(exc).__name__,
    )
    return _error_response(exc.status, exc.msg)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("malformed_body method=%s path=%s errors=%s", request.method, request.url.path, len(exc.errors()))
    return await api_error_handler(request, MalformedRequestBody())


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404:
        return _error_response(404, INVALID_PATH_MSG)
    return JSONResponse(
        status_code=exc.status_code,
        content={"msg": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def fallback_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "unhandled_error method=%s path=%s error_type=%s",
        request.method,
        request.url.path,
        type(exc).__name__,
    )
    fault = UnhandledFault()
    return _error_response(fault.status, fault.msg)


def setup_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, fallback_error_handler)
