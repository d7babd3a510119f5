"""Search service fanning queries out to the word-relations API."""

from __future__ import annotations

import threading
from collections import deque
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from typing import Any, Dict, Generator, Iterable, List, Optional, Protocol

from rhyme_scout.core.categories import RelationCategory, parse_categories
from rhyme_scout.core.models import RhymeWord, SearchResults
from rhyme_scout.core.strength import score_rhyme
from rhyme_scout.core.stress import estimate_stress
from rhyme_scout.errors import DatamuseError

from ...utils.observability import (
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)
from .result_formatter import RhymeResultFormatter


class WordRelationsClient(Protocol):
    def fetch(self, category: RelationCategory, word: str, max_results: int = 100) -> List[Dict[str, Any]]:
        ...


class SearchHistory:
    """Most-recent-first list of distinct searched words."""

    def __init__(self, max_size: int = 10) -> None:
        self.max_size = max(1, int(max_size))
        self._items: deque[str] = deque(maxlen=self.max_size)
        self._lock = threading.Lock()

    def record(self, word: str) -> None:
        with self._lock:
            if word in self._items:
                self._items.remove(word)
            self._items.appendleft(word)

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def items(self) -> List[str]:
        with self._lock:
            return list(self._items)

    def __len__(self) -> int:
        return len(self.items())


def _coerce_syllables(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        count = int(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return count if count > 0 else None


def _coerce_score(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


class RhymeSearchService:
    """Fetch candidate words per category and annotate them."""

    def __init__(
        self,
        client: WordRelationsClient,
        *,
        max_results: int = 100,
        history_size: int = 10,
        max_concurrent_searches: Optional[int] = None,
        search_timeout: Optional[float] = None,
        formatter: Optional[RhymeResultFormatter] = None,
    ) -> None:
        self.client = client
        self.max_results = max(1, int(max_results))
        self.formatter = formatter or RhymeResultFormatter()
        self._history = SearchHistory(history_size)

        self._logger = get_logger(__name__).bind(
            component="rhyme_search_service",
            client=type(client).__name__,
        )

        self._metric_request_total = create_counter(
            "rhyme_scout_search_requests_total",
            "Total rhyme search requests received.",
        )
        self._metric_request_failures = create_counter(
            "rhyme_scout_search_failures_total",
            "Total rhyme search requests that raised an exception.",
        )
        self._metric_request_duration = create_histogram(
            "rhyme_scout_search_seconds",
            "Latency of rhyme search requests.",
        )
        self._metric_upstream_errors = create_counter(
            "rhyme_scout_upstream_errors_total",
            "Word-relations API calls that failed, by category.",
            label_names=("category",),
        )

        self._search_timeout: Optional[float] = None
        if search_timeout is not None and float(search_timeout) >= 0:
            self._search_timeout = float(search_timeout)

        self._search_semaphore: Optional[threading.BoundedSemaphore] = None
        if max_concurrent_searches is not None and int(max_concurrent_searches) > 0:
            self._search_semaphore = threading.BoundedSemaphore(int(max_concurrent_searches))

        self._logger.info(
            "Rhyme search service initialised",
            context={
                "max_results": self.max_results,
                "history_size": self._history.max_size,
                "max_concurrent_searches": max_concurrent_searches,
            },
        )

    # History ---------------------------------------------------------------
    @property
    def history(self) -> List[str]:
        return self._history.items()

    def clear_history(self) -> None:
        self._history.clear()

    # Annotation ------------------------------------------------------------
    def annotate(self, word: str, entry: Dict[str, Any], category: RelationCategory) -> RhymeWord:
        """Attach stress and, for rhyme-like categories, strength to ``entry``."""

        candidate = str(entry.get("word", ""))
        num_syllables = _coerce_syllables(entry.get("numSyllables"))
        score = _coerce_score(entry.get("score"))
        estimate = estimate_stress(candidate, num_syllables)

        strength: Optional[int] = None
        if category.is_scored:
            strength = score_rhyme(word, candidate, category.damp(score))

        tags = entry.get("tags")
        return RhymeWord(
            word=candidate,
            score=score,
            num_syllables=num_syllables,
            category=category,
            stress_pattern=estimate.pattern,
            syllable_breakdown=list(estimate.breakdown),
            rhyme_strength=strength,
            tags=[str(tag) for tag in tags] if isinstance(tags, list) else [],
        )

    # Search ----------------------------------------------------------------
    @contextmanager
    def _search_slot(self) -> Generator[None, None, None]:
        """Bound concurrent searches when a semaphore has been configured."""

        semaphore = self._search_semaphore
        if semaphore is None:
            yield
            return

        if self._search_timeout is None:
            acquired = semaphore.acquire()
        else:
            acquired = semaphore.acquire(timeout=self._search_timeout)
        if not acquired:
            raise TimeoutError("Search capacity exhausted; please retry later")

        try:
            yield
        finally:
            semaphore.release()

    def _fetch_category(self, word: str, category: RelationCategory, limit: int) -> List[RhymeWord]:
        try:
            entries = self.client.fetch(category, word, limit)
        except DatamuseError as exc:
            self._metric_upstream_errors.labels(category=category.value).inc()
            self._logger.warning(
                "Word relations unavailable",
                context={"category": category.value, "word": word, "error": str(exc)},
            )
            return []
        return [self.annotate(word, entry, category) for entry in entries]

    def search(
        self,
        word: str,
        categories: Optional[Iterable["str | RelationCategory"]] = None,
        syllables: Optional[int] = None,
        max_results: Optional[int] = None,
    ) -> SearchResults:
        """Search every requested category for ``word`` and annotate the hits."""

        query = (word or "").strip()
        selected = parse_categories(categories)
        limit = self.max_results if max_results is None else max(1, int(max_results))
        request_context: Dict[str, Any] = {
            "word": query,
            "categories": [category.value for category in selected],
            "syllables": syllables,
            "limit": limit,
        }

        if not query:
            self._logger.debug("Ignoring blank search request")
            return SearchResults(word="")

        self._metric_request_total.inc()
        self._logger.info("Search request received", context=request_context)

        with start_span("search.request", request_context) as request_span:
            try:
                with self._metric_request_duration.time():
                    with self._search_slot():
                        with ThreadPoolExecutor(max_workers=len(selected)) as executor:
                            futures = {
                                category: executor.submit(self._fetch_category, query, category, limit)
                                for category in selected
                            }
                            groups = {category: future.result() for category, future in futures.items()}
            except Exception as exc:
                failure_context = dict(request_context)
                failure_context["error"] = str(exc)
                self._metric_request_failures.inc()
                self._logger.error("Search request failed", context=failure_context)
                record_exception(request_span, exc)
                raise

            results = SearchResults(word=query, groups=groups)
            if syllables is not None:
                results = results.filter_by_syllables(syllables)
            self._history.record(query)

            counts = {category.value: len(entries) for category, entries in results.iter_groups()}
            self._logger.info(
                "Search request completed",
                context={"result_counts": counts, "word": query},
            )
            add_span_attributes(
                request_span,
                {"search.success": True, "result.total": results.total},
            )
            return results

    def format_results(self, results: SearchResults, show_strength: bool = True) -> str:
        return self.formatter.format_results(results, show_strength=show_strength)


__all__ = ["RhymeSearchService", "SearchHistory", "WordRelationsClient"]
