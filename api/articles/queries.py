"""
Article listing query builder.

Only the topic filter travels as a bound parameter. ORDER BY column and
direction cannot be parameterized in SQL, so they are picked from the
allow-lists below and nothing else ever reaches the query text.
"""

from __future__ import annotations

from typing import Any

from core.errors import InvalidSortDirection, InvalidSortField

SORTABLE_COLUMNS: tuple[str, ...] = ("author", "title", "topic", "created_at", "votes")
SORT_ORDERS: tuple[str, ...] = ("asc", "desc")

DEFAULT_SORT_BY = "created_at"
DEFAULT_ORDER = "desc"

ARTICLE_SUMMARY_COLUMNS = """
          a.article_id,
          a.title,
          a.topic,
          a.author,
          a.created_at,
          a.votes,
          a.article_img_url,
          COUNT(c.comment_id)::int AS comment_count
"""


def resolve_sort_by(sort_by: str | None) -> str:
    if sort_by is None:
        return DEFAULT_SORT_BY
    if sort_by not in SORTABLE_COLUMNS:
        raise InvalidSortField(SORTABLE_COLUMNS)
    return sort_by


def resolve_order(order: str | None) -> str:
    if order is None:
        return DEFAULT_ORDER
    normalized = order.lower()
    if normalized not in SORT_ORDERS:
        raise InvalidSortDirection(SORT_ORDERS)
    return normalized


def build_articles_query(
    *,
    topic: str | None = None,
    sort_by: str | None = None,
    order: str | None = None,
) -> tuple[str, list[Any]]:
    """
    Return `(sql, args)` for the article listing.

    `body` is never selected; `comment_count` is computed per read.
    """
    column = resolve_sort_by(sort_by)
    direction = resolve_order(order).upper()

    args: list[Any] = []
    where = ""
    if topic is not None:
        args.append(topic)
        where = f"WHERE a.topic = ${len(args)}"

    # article_id breaks ties so equal sort keys come back in a stable order.
    sql = f"""
        SELECT{ARTICLE_SUMMARY_COLUMNS}
        FROM articles a
        LEFT JOIN comments c ON c.article_id = a.article_id
        {where}
        GROUP BY a.article_id
        ORDER BY a.{column} {direction}, a.article_id {direction}
        """
    return sql, args
