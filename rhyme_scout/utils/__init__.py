"""Utility helpers shared across the :mod:`rhyme_scout` package."""

from __future__ import annotations

from .logging_config import configure_logging
from .observability import (
    StructuredLoggerAdapter,
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)
from .syllables import estimate_syllable_count, resolve_syllable_count

__all__ = [
    "StructuredLoggerAdapter",
    "add_span_attributes",
    "configure_logging",
    "create_counter",
    "create_histogram",
    "estimate_syllable_count",
    "get_logger",
    "record_exception",
    "resolve_syllable_count",
    "start_span",
]
