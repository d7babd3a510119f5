from .result_formatter import RhymeResultFormatter, group_by_syllables
from .search_service import RhymeSearchService, SearchHistory

__all__ = ["RhymeResultFormatter", "RhymeSearchService", "SearchHistory", "group_by_syllables"]
