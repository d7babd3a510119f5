"""Helpers for configuring consistent project logging output."""

from __future__ import annotations

import logging
import os
from typing import Optional

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_CONFIGURED = False


def _resolve_level(level: str | int | None) -> int:
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    try:
        return int(level)
    except (TypeError, ValueError):
        normalized = str(level).strip().upper()
        resolved = logging.getLevelName(normalized)
        return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: Optional[str | int] = None, *, force: bool = False) -> int:
    """Initialise root logging handlers and return the level in effect.

    The level comes from ``level`` or else ``RHYMES_LOG_LEVEL``. Repeated
    calls are no-ops unless ``force`` is set, so the UI and the CLI can both
    call this at start-up.
    """

    global _CONFIGURED

    resolved_level = _resolve_level(
        level if level is not None else os.environ.get("RHYMES_LOG_LEVEL")
    )
    if _CONFIGURED and not force:
        return logging.getLogger("rhyme_scout").getEffectiveLevel()

    logging.basicConfig(level=resolved_level, format=_DEFAULT_FORMAT, force=force)
    logging.getLogger("rhyme_scout").setLevel(resolved_level)
    _CONFIGURED = True
    return resolved_level


__all__ = ["configure_logging"]
