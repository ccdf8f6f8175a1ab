"""
Article API schemas (request models).

Fields are optional on purpose: a missing value is a domain error with its
own message, not a framework validation error.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class VoteUpdateRequest(BaseModel):
    # int or a signed-digit string; checked by core.validation.parse_vote_delta
    inc_votes: Any = None
