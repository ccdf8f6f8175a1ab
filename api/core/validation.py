"""
Path/body identifier validation.

These are pure checks; whether an id actually exists is the repository's job.
"""

from __future__ import annotations

import re
from typing import Any

from .errors import InvalidIdentifier, InvalidVoteDelta, MissingVoteDelta

ID_PATTERN = re.compile(r"[0-9]+")
VOTE_DELTA_PATTERN = re.compile(r"[-+]?[0-9]+")


def is_valid_id(raw: str | None) -> bool:
    return raw is not None and ID_PATTERN.fullmatch(raw) is not None


def parse_id(raw: str | None, *, entity: str = "Article") -> int:
    """
    Return `raw` as an int, or raise InvalidIdentifier.

    Leading zeros are accepted ("007" -> 7); signs, whitespace and decimals are not.
    """
    if not is_valid_id(raw):
        raise InvalidIdentifier.for_entity(entity)
    return int(raw)


def parse_vote_delta(raw: Any) -> int:
    # bool is an int subclass; `true` is not a vote delta.
    if raw is None:
        raise MissingVoteDelta()
    if isinstance(raw, bool):
        raise InvalidVoteDelta()
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and VOTE_DELTA_PATTERN.fullmatch(raw):
        return int(raw)
    raise InvalidVoteDelta()
