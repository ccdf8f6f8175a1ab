"""
Comment business logic.

Posting a comment has two independent preconditions (the article exists,
the author exists). Both lookups run concurrently, but the error that is
surfaced is fixed: article problems are reported before user problems,
and the body is only checked once both entities are known to exist.
"""

from __future__ import annotations

import asyncio
import logging

from articles import service as article_service
from core import db
from core.errors import CommentNotFound, MissingCommentBody
from core.validation import parse_id
from users import service as user_service

from . import repository, schemas

logger = logging.getLogger(__name__)


async def check_comment_preconditions(raw_article_id: str, username: str | None) -> tuple[dict, dict]:
    """
    Return `(article, user)` or raise the article's error, then the user's.
    """
    # Format errors are known before touching the store.
    article_service.article_id_from_path(raw_article_id)

    results = await asyncio.gather(
        article_service.get_article(raw_article_id),
        user_service.get_user(username),
        return_exceptions=True,
    )
    for result in results:
        if isinstance(result, BaseException):
            raise result

    article, user = results
    return article, user


async def create_comment(raw_article_id: str, payload: schemas.NewCommentRequest) -> dict:
    article, user = await check_comment_preconditions(raw_article_id, payload.username)
    if not payload.body:
        raise MissingCommentBody()

    comment = await repository.insert_comment(
        article_id=int(article["article_id"]),
        author=str(user["username"]),
        body=payload.body,
    )
    logger.info(
        "comment_created comment_id=%s article_id=%s author=%s",
        comment["comment_id"],
        comment["article_id"],
        comment["author"],
    )
    return comment


async def delete_comment(raw_comment_id: str) -> None:
    comment_id = parse_id(raw_comment_id, entity="Comment")
    if comment_id > db.MAX_INT4:
        raise CommentNotFound()

    deleted = await repository.delete_comment(comment_id)
    if not deleted:
        raise CommentNotFound()
    logger.info("comment_deleted comment_id=%s", comment_id)
