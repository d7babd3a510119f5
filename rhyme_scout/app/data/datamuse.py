"""HTTP client for the Datamuse word-relations API."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests

from rhyme_scout.config import DEFAULT_DATAMUSE_URL
from rhyme_scout.core.categories import RelationCategory
from rhyme_scout.errors import DatamuseError
from rhyme_scout.utils.observability import get_logger

Entry = Dict[str, Any]


class DatamuseClient:
    """Thin wrapper around ``GET /words`` returning raw result dictionaries."""

    def __init__(
        self,
        base_url: str = DEFAULT_DATAMUSE_URL,
        *,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()
        self._logger = get_logger(__name__).bind(component="datamuse_client")

    @property
    def words_url(self) -> str:
        return f"{self.base_url}/words"

    def build_params(self, category: RelationCategory, word: str, max_results: int) -> Dict[str, Any]:
        # md=s asks for numSyllables on every entry
        return {category.query_param: word, "max": int(max_results), "md": "s"}

    def fetch(self, category: RelationCategory, word: str, max_results: int = 100) -> List[Entry]:
        """Return the API entries for ``word`` in ``category``.

        Raises :class:`DatamuseError` for transport failures, non-2xx
        responses and payloads that are not a JSON list.
        """

        params = self.build_params(category, word, max_results)
        self._logger.debug("Requesting word relations", context={"params": params})

        try:
            response = self._session.get(self.words_url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = getattr(exc.response, "status_code", None)
            raise DatamuseError(
                f"Datamuse returned HTTP {status} for {category.value} '{word}'",
                status_code=status,
                query=params,
            ) from exc
        except requests.RequestException as exc:
            raise DatamuseError(
                f"Datamuse request failed for {category.value} '{word}': {exc}",
                query=params,
            ) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise DatamuseError("Datamuse returned invalid JSON", query=params) from exc

        if not isinstance(payload, list):
            raise DatamuseError("Datamuse returned an unexpected payload", query=params)

        entries = [item for item in payload if isinstance(item, dict) and item.get("word")]
        self._logger.debug(
            "Received word relations",
            context={"category": category.value, "word": word, "count": len(entries)},
        )
        return entries

    def close(self) -> None:
        self._session.close()


__all__ = ["DatamuseClient", "Entry"]
