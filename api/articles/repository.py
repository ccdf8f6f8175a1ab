"""
Article persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db

from . import queries


async def get_article(article_id: int) -> dict | None:
    return await db.fetch_one(
        """
        SELECT
          a.article_id,
          a.title,
          a.topic,
          a.author,
          a.body,
          a.created_at,
          a.votes,
          a.article_img_url,
          COUNT(c.comment_id)::int AS comment_count
        FROM articles a
        LEFT JOIN comments c ON c.article_id = a.article_id
        WHERE a.article_id = $1
        GROUP BY a.article_id
        """,
        article_id,
    )


async def list_articles(
    *,
    topic: str | None = None,
    sort_by: str | None = None,
    order: str | None = None,
) -> list[dict[str, Any]]:
    sql, args = queries.build_articles_query(topic=topic, sort_by=sort_by, order=order)
    return await db.fetch_all(sql, *args)


async def list_article_comments(article_id: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT comment_id, votes, created_at, author, body, article_id
        FROM comments
        WHERE article_id = $1
        ORDER BY created_at DESC, comment_id DESC
        """,
        article_id,
    )


async def increment_votes(article_id: int, delta: int) -> dict | None:
    # Single UPDATE so concurrent increments are serialized by Postgres.
    return await db.fetch_one(
        """
        UPDATE articles
        SET votes = votes + $2
        WHERE article_id = $1
        RETURNING article_id, title, topic, author, body, created_at, votes, article_img_url
        """,
        article_id,
        delta,
    )
