"""
Article business logic.

Every function takes raw request values, validates them, and raises an
`ApiError` subclass on failure; routers only shape the success response.
"""

from __future__ import annotations

import logging
from typing import Any

from core import db
from core.errors import ArticleNotFound, InvalidVoteDelta
from core.validation import parse_id, parse_vote_delta

from . import repository

logger = logging.getLogger(__name__)


def article_id_from_path(raw_article_id: str) -> int:
    return parse_id(raw_article_id, entity="Article")


async def get_article(raw_article_id: str) -> dict:
    article_id = article_id_from_path(raw_article_id)
    # Out of serial range: well-formed, but no row can have it.
    if article_id > db.MAX_INT4:
        raise ArticleNotFound()

    article = await repository.get_article(article_id)
    if article is None:
        raise ArticleNotFound()
    return article


async def list_articles(
    *,
    topic: str | None = None,
    sort_by: str | None = None,
    order: str | None = None,
) -> list[dict[str, Any]]:
    return await repository.list_articles(topic=topic, sort_by=sort_by, order=order)


async def list_article_comments(raw_article_id: str) -> list[dict[str, Any]]:
    article = await get_article(raw_article_id)
    return await repository.list_article_comments(int(article["article_id"]))


async def amend_votes(raw_article_id: str, inc_votes: Any) -> dict:
    """
    Add `inc_votes` (may be negative) to an article's vote count.

    Existence is checked before the delta so a missing article always wins.
    Votes are not clamped at zero.
    """
    article = await get_article(raw_article_id)
    delta = parse_vote_delta(inc_votes)
    if not db.MIN_INT4 <= delta <= db.MAX_INT4:
        raise InvalidVoteDelta()

    article_id = int(article["article_id"])
    updated = await repository.increment_votes(article_id, delta)
    if updated is None:
        # Deleted between the lookup and the update.
        raise ArticleNotFound()

    logger.info("article_votes_amended article_id=%s delta=%s votes=%s", article_id, delta, updated["votes"])
    return updated
