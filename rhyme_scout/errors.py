"""Exception types raised by Rhyme Scout."""

from __future__ import annotations

from typing import Optional


class RhymeScoutError(Exception):
    """Base class for errors raised by the package."""


class DatamuseError(RhymeScoutError):
    """The word-relations API could not be reached or returned bad data."""

    def __init__(self, message: str, *, status_code: Optional[int] = None, query: Optional[dict] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.query = dict(query or {})


__all__ = ["DatamuseError", "RhymeScoutError"]
