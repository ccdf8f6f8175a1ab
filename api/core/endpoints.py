"""
Static description of the public endpoints, served at `GET /api/`.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path

ENDPOINTS_FILE = Path(__file__).with_name("endpoints.json")


@lru_cache(maxsize=1)
def load_endpoints() -> dict:
    return json.loads(ENDPOINTS_FILE.read_text(encoding="utf-8"))
