"""
Topic API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter

from . import repository

router = APIRouter()


@router.get("/api/topics")
async def get_topics() -> dict:
    return {"topics": await repository.list_topics()}
