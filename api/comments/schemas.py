"""
Comment API schemas (request models).
"""

from __future__ import annotations

from pydantic import BaseModel


class NewCommentRequest(BaseModel):
    # Both optional: absence is reported as UserNotFound / MissingCommentBody.
    username: str | None = None
    body: str | None = None
