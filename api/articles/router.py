"""
Article API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Body, Query

from . import schemas, service

router = APIRouter()


@router.get("/api/articles")
async def get_articles(
    topic: str | None = Query(default=None),
    sort_by: str | None = Query(default=None),
    order: str | None = Query(default=None),
) -> dict:
    articles = await service.list_articles(topic=topic, sort_by=sort_by, order=order)
    return {"articles": articles}


@router.get("/api/articles/{article_id}")
async def get_article(article_id: str) -> dict:
    article = await service.get_article(article_id)
    return {"article": article}


@router.get("/api/articles/{article_id}/comments")
async def get_article_comments(article_id: str) -> dict:
    comments = await service.list_article_comments(article_id)
    return {"comments": comments}


@router.patch("/api/articles/{article_id}")
async def patch_article(
    article_id: str,
    request: schemas.VoteUpdateRequest | None = Body(default=None),
) -> dict:
    inc_votes = request.inc_votes if request is not None else None
    article = await service.amend_votes(article_id, inc_votes)
    return {"article": article}
