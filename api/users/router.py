"""
User API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter

from . import service

router = APIRouter()


@router.get("/api/users")
async def get_users() -> dict:
    return {"users": await service.list_users()}


@router.get("/api/users/{username}")
async def get_user(username: str) -> dict:
    return {"user": await service.get_user(username)}
