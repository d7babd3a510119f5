from rhyme_scout.core.categories import RelationCategory
from rhyme_scout.core.models import RhymeWord, SearchResults


def _results() -> SearchResults:
    return SearchResults(
        word="cat",
        groups={
            RelationCategory.RELATED: [RhymeWord("feline", num_syllables=2, stress_pattern="ˈ-")],
            RelationCategory.RHYME: [
                RhymeWord("hat", num_syllables=1, stress_pattern="ˈ", rhyme_strength=100),
                RhymeWord("acrobat", num_syllables=3, stress_pattern="ˈ--", rhyme_strength=70),
            ],
        },
    )


def test_total_and_category_lookup():
    results = _results()

    assert results.total == 3
    assert [entry.word for entry in results.for_category("perfect")] == ["hat", "acrobat"]
    assert results.for_category(RelationCategory.SOUND_ALIKE) == []


def test_iter_groups_follows_category_order():
    categories = [category for category, _ in _results().iter_groups()]
    assert categories == [RelationCategory.RHYME, RelationCategory.RELATED]


def test_syllable_counts_are_sorted_and_distinct():
    assert _results().syllable_counts() == [1, 2, 3]


def test_filter_by_syllables_returns_a_copy():
    results = _results()
    filtered = results.filter_by_syllables(1)

    assert filtered is not results
    assert [entry.word for entry in filtered.for_category("rhyme")] == ["hat"]
    assert filtered.for_category("related") == []
    assert results.total == 3
    assert results.filter_by_syllables(None) is results


def test_rhyme_word_stress_display():
    assert RhymeWord("orange", stress_pattern="ˈ-").stress_display == "STR-un"


def test_as_dict_is_json_ready():
    payload = _results().as_dict()

    assert list(payload["results"]) == ["rhyme", "related"]
    assert payload["results"]["rhyme"][0] == {
        "word": "hat",
        "score": 0.0,
        "num_syllables": 1,
        "category": None,
        "stress_pattern": "ˈ",
        "syllable_breakdown": [],
        "rhyme_strength": 100,
        "tags": [],
    }
