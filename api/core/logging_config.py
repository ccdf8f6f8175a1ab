"""
Logging setup for the API process.

Modules log through `logging.getLogger(__name__)`; this only decides where
records go and how they look.
"""

from __future__ import annotations

import logging

from . import config

SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"
DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"

_configured = False


def _format_for(name: str) -> str:
    if name == "simple":
        return SIMPLE_FORMAT
    return DETAILED_FORMAT


def configure_logging(level: str | None = None) -> None:
    """
    Install a single stream handler on the root logger.

    Safe to call more than once; only the level is updated on later calls.
    """
    global _configured
    root = logging.getLogger()
    root.setLevel((level or config.log_level()).upper())
    if _configured:
        return None

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_format_for(config.log_format())))
    root.addHandler(handler)
    # asyncpg is chatty at DEBUG.
    logging.getLogger("asyncpg").setLevel(logging.WARNING)
    _configured = True
