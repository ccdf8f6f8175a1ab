"""
User lookups.
"""

from __future__ import annotations

from core.errors import UserNotFound

from . import repository


async def get_user(username: str | None) -> dict:
    if not username:
        raise UserNotFound()
    user = await repository.get_user_by_username(username)
    if user is None:
        raise UserNotFound()
    return user


async def list_users() -> list[dict]:
    return await repository.list_users()
