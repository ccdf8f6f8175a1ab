"""
Comment API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Body, Response, status

from . import schemas, service

router = APIRouter()


@router.post("/api/articles/{article_id}/comments", status_code=status.HTTP_201_CREATED)
async def post_comment(
    article_id: str,
    request: schemas.NewCommentRequest | None = Body(default=None),
) -> dict:
    comment = await service.create_comment(article_id, request or schemas.NewCommentRequest())
    return {"comment": comment}


@router.delete("/api/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(comment_id: str) -> Response:
    await service.delete_comment(comment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
