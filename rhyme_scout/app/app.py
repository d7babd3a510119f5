"""Application wiring for the Rhyme Scout project."""

from __future__ import annotations

from typing import Any, Iterable, Optional

from rhyme_scout.config import Settings
from rhyme_scout.core.categories import RelationCategory
from rhyme_scout.core.models import SearchResults
from rhyme_scout.utils.logging_config import configure_logging
from rhyme_scout.utils.observability import get_logger

from .data.datamuse import DatamuseClient
from .services.search_service import RhymeSearchService, WordRelationsClient


class RhymeScoutApp:
    """High-level application facade bundling dependencies."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        client: Optional[WordRelationsClient] = None,
        search_service: Optional[RhymeSearchService] = None,
    ) -> None:
        self.settings = settings or Settings.from_env()
        self._logger = get_logger(__name__).bind(component="app_facade")

        self.client = client or DatamuseClient(
            self.settings.datamuse_url,
            timeout=self.settings.request_timeout,
        )
        self.search_service = search_service or RhymeSearchService(
            self.client,
            max_results=self.settings.max_results,
            history_size=self.settings.history_size,
            max_concurrent_searches=self.settings.max_concurrent_searches,
            search_timeout=self.settings.request_timeout,
        )

        self._logger.info(
            "Application dependencies wired",
            context={
                "datamuse_url": self.settings.datamuse_url,
                "client": type(self.client).__name__,
            },
        )

    # Public API ------------------------------------------------------------
    def search(
        self,
        word: str,
        categories: Optional[Iterable["str | RelationCategory"]] = None,
        syllables: Optional[int] = None,
        max_results: Optional[int] = None,
    ) -> SearchResults:
        return self.search_service.search(
            word,
            categories=categories,
            syllables=syllables,
            max_results=max_results,
        )

    def format_results(self, results: SearchResults, show_strength: bool = True) -> str:
        return self.search_service.format_results(results, show_strength=show_strength)

    def create_gradio_interface(self) -> Any:
        from .ui.gradio import create_interface

        return create_interface(self.search_service)


def main() -> None:
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    app = RhymeScoutApp(settings)
    interface = app.create_gradio_interface()
    interface.launch(
        server_name="0.0.0.0",
        server_port=settings.server_port,
        share=settings.share,
    )


__all__ = ["RhymeScoutApp", "main"]
