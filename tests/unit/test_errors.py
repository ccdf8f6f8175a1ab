"""
Unit tests for the error taxonomy and the exception handler chain.
"""

import json
from unittest.mock import Mock, patch

import pytest
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from core import errors


@pytest.fixture
def mock_request():
    request = Mock(spec=Request)
    request.method = "GET"
    request.url.path = "/api/articles/1"
    return request


def _body(response) -> dict:
    return json.loads(response.body.decode())


@pytest.mark.parametrize(
    "error, status, msg",
    [
        (errors.ArticleNotFound(), 404, "Article not found!"),
        (errors.UserNotFound(), 404, "User not found!"),
        (errors.CommentNotFound(), 404, "Comment not found!"),
        (errors.MissingCommentBody(), 400, "Comment body is required!"),
        (errors.MissingVoteDelta(), 400, "inc_votes is required!"),
        (errors.InvalidVoteDelta(), 400, "inc_votes must be an integer!"),
        (errors.InvalidIdentifier.for_entity("Article"), 400, "Invalid ID! Article ID must be a number."),
        (errors.InvalidSortDirection(("asc", "desc")), 400, "Invalid order! Must be one of: asc, desc."),
    ],
)
@pytest.mark.asyncio
async def test_api_errors_map_one_to_one(mock_request, error, status, msg):
    response = await errors.api_error_handler(mock_request, error)

    assert response.status_code == status
    assert _body(response) == {"msg": msg}
    assert error.to_dict() == {"status": status, "msg": msg}


@pytest.mark.asyncio
async def test_request_validation_error_is_a_bad_body(mock_request):
    exc = RequestValidationError([{"type": "json_invalid", "loc": ("body", 1), "msg": "JSON decode error"}])

    response = await errors.request_validation_handler(mock_request, exc)

    assert response.status_code == 400
    assert _body(response) == {"msg": "Invalid request body!"}


@pytest.mark.asyncio
async def test_unrouted_404_is_an_invalid_path(mock_request):
    response = await errors.http_error_handler(mock_request, StarletteHTTPException(status_code=404))

    assert response.status_code == 404
    assert _body(response) == {"msg": "Invalid path!"}


@pytest.mark.asyncio
async def test_other_framework_errors_keep_their_status(mock_request):
    exc = StarletteHTTPException(status_code=405, detail="Method Not Allowed")

    response = await errors.http_error_handler(mock_request, exc)

    assert response.status_code == 405
    assert _body(response) == {"msg": "Method Not Allowed"}


@pytest.mark.asyncio
async def test_fallback_hides_details_and_logs(mock_request):
    exc = ConnectionError("db host 10.0.0.5 refused connection")

    with patch("core.errors.logger") as mock_logger:
        response = await errors.fallback_error_handler(mock_request, exc)

    mock_logger.exception.assert_called_once()
    assert response.status_code == 500
    assert _body(response) == {"msg": "Something went wrong!"}
    assert "10.0.0.5" not in response.body.decode()


def test_setup_registers_the_chain():
    app = FastAPI()
    errors.setup_exception_handlers(app)

    for exc_type in (errors.ApiError, RequestValidationError, StarletteHTTPException, Exception):
        assert exc_type in app.exception_handlers
