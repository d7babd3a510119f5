import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from rhyme_scout.app.services.search_service import RhymeSearchService
from rhyme_scout.core.categories import RelationCategory


class FakeRelationsClient:
    """Client stub serving canned API entries per category."""

    def __init__(self, responses: Optional[Dict[RelationCategory, Any]] = None) -> None:
        self.responses = dict(responses or {})
        self.calls: List[tuple] = []

    def fetch(self, category: RelationCategory, word: str, max_results: int = 100) -> List[Dict[str, Any]]:
        self.calls.append((category, word, max_results))
        response = self.responses.get(category, [])
        if isinstance(response, BaseException):
            raise response
        return [dict(entry) for entry in response]


CAT_RESPONSES = {
    RelationCategory.RHYME: [
        {"word": "hat", "score": 900, "numSyllables": 1},
        {"word": "acrobat", "score": 700, "numSyllables": 3},
    ],
    RelationCategory.NEAR_RHYME: [
        {"word": "cab", "score": 1000, "numSyllables": 1},
    ],
    RelationCategory.SOUND_ALIKE: [
        {"word": "cut", "score": 1000, "numSyllables": 1},
    ],
    RelationCategory.RELATED: [
        {"word": "feline", "score": 30000, "numSyllables": 2, "tags": ["n"]},
    ],
}


@pytest.fixture
def fake_client() -> FakeRelationsClient:
    return FakeRelationsClient(CAT_RESPONSES)


@pytest.fixture
def search_service(fake_client: FakeRelationsClient) -> RhymeSearchService:
    return RhymeSearchService(fake_client, max_results=50, history_size=3)
