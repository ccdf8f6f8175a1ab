from __future__ import annotations

import copy
from datetime import datetime, timezone
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from articles import queries
from articles import repository as articles_repository
from comments import repository as comments_repository
from seeds import data
from topics import repository as topics_repository
from users import repository as users_repository


class FakeStore:
    """In-memory stand-in for the Postgres repositories, loaded from the seed dataset."""

    def __init__(self) -> None:
        self.topics = copy.deepcopy(data.TOPICS)
        self.users = copy.deepcopy(data.USERS)
        self.articles = [
            {"article_id": i, **article} for i, article in enumerate(copy.deepcopy(data.ARTICLES), start=1)
        ]
        self.comments = [
            {"comment_id": i, **comment} for i, comment in enumerate(copy.deepcopy(data.COMMENTS), start=1)
        ]
        self.calls: list[str] = []

    def _comment_count(self, article_id: int) -> int:
        return sum(1 for c in self.comments if c["article_id"] == article_id)

    def _find_article(self, article_id: int) -> dict | None:
        return next((a for a in self.articles if a["article_id"] == article_id), None)

    async def get_article(self, article_id: int) -> dict | None:
        self.calls.append("get_article")
        article = self._find_article(article_id)
        if article is None:
            return None
        return {**article, "comment_count": self._comment_count(article_id)}

    async def list_articles(self, *, topic=None, sort_by=None, order=None) -> list[dict]:
        column = queries.resolve_sort_by(sort_by)
        descending = queries.resolve_order(order) == "desc"
        rows = [a for a in self.articles if topic is None or a["topic"] == topic]
        rows = sorted(rows, key=lambda a: (a[column], a["article_id"]), reverse=descending)
        return [
            {**{k: v for k, v in a.items() if k != "body"}, "comment_count": self._comment_count(a["article_id"])}
            for a in rows
        ]

    async def list_article_comments(self, article_id: int) -> list[dict]:
        rows = [dict(c) for c in self.comments if c["article_id"] == article_id]
        return sorted(rows, key=lambda c: (c["created_at"], c["comment_id"]), reverse=True)

    async def increment_votes(self, article_id: int, delta: int) -> dict | None:
        article = self._find_article(article_id)
        if article is None:
            return None
        article["votes"] += delta
        return dict(article)

    async def get_user_by_username(self, username: str | None) -> dict | None:
        self.calls.append("get_user")
        user = next((u for u in self.users if u["username"] == username), None)
        return dict(user) if user is not None else None

    async def list_users(self) -> list[dict]:
        return sorted((dict(u) for u in self.users), key=lambda u: u["username"])

    async def list_topics(self) -> list[dict]:
        return sorted((dict(t) for t in self.topics), key=lambda t: t["slug"])

    async def insert_comment(self, *, article_id: int, author: str, body: str) -> dict:
        comment = {
            "comment_id": max((c["comment_id"] for c in self.comments), default=0) + 1,
            "article_id": article_id,
            "author": author,
            "body": body,
            "votes": 0,
            "created_at": datetime.now(timezone.utc),
        }
        self.comments.append(comment)
        return dict(comment)

    async def delete_comment(self, comment_id: int) -> int:
        before = len(self.comments)
        self.comments = [c for c in self.comments if c["comment_id"] != comment_id]
        return before - len(self.comments)


@pytest.fixture
def fake_store(monkeypatch: pytest.MonkeyPatch) -> FakeStore:
    store = FakeStore()
    monkeypatch.setattr(articles_repository, "get_article", store.get_article)
    monkeypatch.setattr(articles_repository, "list_articles", store.list_articles)
    monkeypatch.setattr(articles_repository, "list_article_comments", store.list_article_comments)
    monkeypatch.setattr(articles_repository, "increment_votes", store.increment_votes)
    monkeypatch.setattr(users_repository, "get_user_by_username", store.get_user_by_username)
    monkeypatch.setattr(users_repository, "list_users", store.list_users)
    monkeypatch.setattr(topics_repository, "list_topics", store.list_topics)
    monkeypatch.setattr(comments_repository, "insert_comment", store.insert_comment)
    monkeypatch.setattr(comments_repository, "delete_comment", store.delete_comment)
    return store


@pytest_asyncio.fixture
async def client(fake_store: FakeStore) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client against the app with every repository backed by `fake_store`."""
    from main import app

    # Unhandled errors must come back as 500 responses, not propagate into the test.
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
