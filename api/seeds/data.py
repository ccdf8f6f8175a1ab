"""
Bundled dataset.

Articles and comments are listed in insertion order, so the n-th entry gets
id n on a freshly created schema.
"""

from __future__ import annotations

from datetime import datetime, timezone


def _ts(year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> datetime:
    return datetime(year, month, day, hour, minute, tzinfo=timezone.utc)


DEFAULT_IMG = "https://images.pexels.com/photos/158651/news-newsletter-newspaper-information-158651.jpeg?w=700&h=700"

TOPICS: list[dict] = [
    {"slug": "mitch", "description": "The man, the Mitch, the legend"},
    {"slug": "cats", "description": "Not dogs"},
    {"slug": "paper", "description": "what books are made of"},
]

USERS: list[dict] = [
    {
        "username": "butter_bridge",
        "name": "jonny",
        "avatar_url": "https://www.healthytherapies.com/wp-content/uploads/2016/06/Lime3.jpg",
    },
    {
        "username": "icellusedkars",
        "name": "sam",
        "avatar_url": "https://avatars2.githubusercontent.com/u/24604688?s=460&v=4",
    },
    {
        "username": "rogersop",
        "name": "paul",
        "avatar_url": "https://avatars2.githubusercontent.com/u/24394918?s=400&v=4",
    },
    {
        "username": "lurker",
        "name": "do_nothing",
        "avatar_url": "https://www.golenbock.com/wp-content/uploads/2015/01/placeholder-user.png",
    },
]

ARTICLES: list[dict] = [
    {
        "title": "Living in the shadow of a great man",
        "topic": "mitch",
        "author": "butter_bridge",
        "body": "I find this existence challenging",
        "created_at": _ts(2020, 7, 9, 20, 11),
        "votes": 100,
        "article_img_url": DEFAULT_IMG,
    },
    {
        "title": "Sony Vaio; or, The Laptop",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "Call me Mitchell. Some years ago I had a laptop.",
        "created_at": _ts(2020, 10, 16, 5, 3),
        "votes": 0,
        "article_img_url": DEFAULT_IMG,
    },
    {
        "title": "Eight pug gifs that remind me of mitch",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "some gifs",
        "created_at": _ts(2020, 11, 3, 9, 12),
        "votes": 3,
        "article_img_url": DEFAULT_IMG,
    },
    {
        "title": "Student SUES Mitch!",
        "topic": "mitch",
        "author": "rogersop",
        "body": "We all love Mitch and his wonderful, unique typing style.",
        "created_at": _ts(2020, 5, 6, 1, 14),
        "votes": -2,
        "article_img_url": DEFAULT_IMG,
    },
    {
        "title": "UNCOVERED: catspiracy to bring down democracy",
        "topic": "cats",
        "author": "rogersop",
        "body": "Bastet walks amongst us, and the cats are taking arms!",
        "created_at": _ts(2020, 8, 3, 13, 14),
        "votes": 7,
        "article_img_url": DEFAULT_IMG,
    },
    {
        "title": "A",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "Delicious tin of cat food",
        "created_at": _ts(2020, 10, 18, 1, 0),
        "votes": 12,
        "article_img_url": DEFAULT_IMG,
    },
]

COMMENTS: list[dict] = [
    {
        "article_id": 1,
        "author": "icellusedkars",
        "body": "I hate streaming noses",
        "votes": 0,
        "created_at": _ts(2020, 11, 3, 21, 0),
    },
    {
        "article_id": 1,
        "author": "butter_bridge",
        "body": "Replacing the quiet elegance of the dark suit and tie with the casual indifference of these muted earth tones is a form of fashion suicide.",
        "votes": 14,
        "created_at": _ts(2020, 10, 31, 3, 3),
    },
    {
        "article_id": 1,
        "author": "icellusedkars",
        "body": "Lobster pot",
        "votes": 0,
        "created_at": _ts(2020, 5, 15, 20, 19),
    },
    {
        "article_id": 1,
        "author": "icellusedkars",
        "body": "Delicious crackerbreads",
        "votes": 0,
        "created_at": _ts(2020, 4, 14, 20, 19),
    },
    {
        "article_id": 1,
        "author": "butter_bridge",
        "body": "This morning, I showered for nine minutes.",
        "votes": 16,
        "created_at": _ts(2020, 7, 21, 0, 20),
    },
    {
        "article_id": 3,
        "author": "icellusedkars",
        "body": "Ambidextrous marsupial",
        "votes": 0,
        "created_at": _ts(2020, 9, 19, 23, 10),
    },
    {
        "article_id": 3,
        "author": "rogersop",
        "body": "git push origin master",
        "votes": 0,
        "created_at": _ts(2020, 6, 20, 7, 24),
    },
    {
        "article_id": 5,
        "author": "butter_bridge",
        "body": "The beautiful thing about treasure is that it exists.",
        "votes": 11,
        "created_at": _ts(2020, 6, 9, 5, 0),
    },
    {
        "article_id": 5,
        "author": "icellusedkars",
        "body": "What do you see? I have no idea where this will lead us.",
        "votes": 16,
        "created_at": _ts(2020, 6, 9, 10, 0),
    },
    {
        "article_id": 6,
        "author": "lurker",
        "body": "I carry a log, yes. Is it funny to you? It is not to me.",
        "votes": -100,
        "created_at": _ts(2020, 3, 1, 1, 13),
    },
]
