"""
(Re)create the schema and load the bundled dataset.

Usage:
    DATABASE_URL=postgresql://... python -m seeds.run_seed
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import asyncpg

from core import db, logging_config

from . import data

SCHEMA_FILE = Path(__file__).with_name("schema.sql")

logger = logging.getLogger(__name__)


async def seed(conn: asyncpg.Connection) -> None:
    async with conn.transaction():
        await conn.execute(SCHEMA_FILE.read_text(encoding="utf-8"))
        await conn.executemany(
            "INSERT INTO topics (slug, description) VALUES ($1, $2)",
            [(t["slug"], t["description"]) for t in data.TOPICS],
        )
        await conn.executemany(
            "INSERT INTO users (username, name, avatar_url) VALUES ($1, $2, $3)",
            [(u["username"], u["name"], u["avatar_url"]) for u in data.USERS],
        )
        await conn.executemany(
            """
            INSERT INTO articles (title, topic, author, body, created_at, votes, article_img_url)
            VALUES ($1, $2, $3, $4, $5, $6, $7)
            """,
            [
                (a["title"], a["topic"], a["author"], a["body"], a["created_at"], a["votes"], a["article_img_url"])
                for a in data.ARTICLES
            ],
        )
        await conn.executemany(
            """
            INSERT INTO comments (article_id, author, body, votes, created_at)
            VALUES ($1, $2, $3, $4, $5)
            """,
            [(c["article_id"], c["author"], c["body"], c["votes"], c["created_at"]) for c in data.COMMENTS],
        )
    logger.info(
        "seed_complete topics=%s users=%s articles=%s comments=%s",
        len(data.TOPICS),
        len(data.USERS),
        len(data.ARTICLES),
        len(data.COMMENTS),
    )


async def run(dsn: str | None = None) -> None:
    conn = await asyncpg.connect(dsn=dsn or db.database_url())
    try:
        await seed(conn)
    finally:
        await conn.close()


if __name__ == "__main__":
    logging_config.configure_logging()
    asyncio.run(run())
