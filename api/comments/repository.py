"""
Comment persistence (raw SQL).
"""

from __future__ import annotations

from core import db


async def insert_comment(*, article_id: int, author: str, body: str) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO comments (article_id, author, body)
        VALUES ($1, $2, $3)
        RETURNING comment_id, votes, created_at, author, body, article_id
        """,
        article_id,
        author,
        body,
    )
    if row is None:
        raise RuntimeError("Failed to insert comment.")
    return row


async def delete_comment(comment_id: int) -> int:
    return await db.execute(
        """
        DELETE FROM comments
        WHERE comment_id = $1
        """,
        comment_id,
    )
