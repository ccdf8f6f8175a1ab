"""
Topic persistence (raw SQL). Topics are read-only here.
"""

from __future__ import annotations

from core import db


async def list_topics() -> list[dict]:
    return await db.fetch_all(
        """
        SELECT slug, description
        FROM topics
        ORDER BY slug ASC
        """
    )
