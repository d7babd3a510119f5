import pytest

from rhyme_scout.core.categories import ALL_CATEGORIES, RelationCategory, parse_categories


def test_query_params_match_word_relations_api():
    assert [category.query_param for category in ALL_CATEGORIES] == ["rel_rhy", "rel_nry", "sl", "ml"]


def test_damping_and_scoring():
    assert RelationCategory.RHYME.damp(900) == pytest.approx(900.0)
    assert RelationCategory.NEAR_RHYME.damp(1000) == pytest.approx(900.0)
    assert RelationCategory.SOUND_ALIKE.damp(1000) == pytest.approx(800.0)
    assert RelationCategory.SOUND_ALIKE.damp(None) == 0.0
    assert RelationCategory.RELATED.damp(30000) is None
    assert not RelationCategory.RELATED.is_scored
    assert all(category.is_scored for category in ALL_CATEGORIES[:3])


@pytest.mark.parametrize(
    "value,expected",
    [
        ("rhyme", RelationCategory.RHYME),
        ("Perfect", RelationCategory.RHYME),
        ("near-rhyme", RelationCategory.NEAR_RHYME),
        ("near", RelationCategory.NEAR_RHYME),
        ("sounds like", RelationCategory.SOUND_ALIKE),
        (" related ", RelationCategory.RELATED),
        (RelationCategory.RELATED, RelationCategory.RELATED),
    ],
)
def test_parse_accepts_aliases(value, expected):
    assert RelationCategory.parse(value) is expected


def test_parse_rejects_unknown_names():
    with pytest.raises(ValueError):
        RelationCategory.parse("antonym")


def test_parse_categories_defaults_to_everything():
    assert parse_categories(None) == list(ALL_CATEGORIES)
    assert parse_categories([]) == list(ALL_CATEGORIES)


def test_parse_categories_keeps_display_order_and_drops_repeats():
    assert parse_categories(["related", "rhyme", "perfect"]) == [
        RelationCategory.RHYME,
        RelationCategory.RELATED,
    ]


def test_headings_are_human_readable():
    assert RelationCategory.SOUND_ALIKE.heading == "Sound-Alikes"
    assert RelationCategory.RHYME.heading == "Perfect Rhymes"
