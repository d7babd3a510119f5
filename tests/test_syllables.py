import pytest

from rhyme_scout.utils.syllables import estimate_syllable_count, resolve_syllable_count


@pytest.mark.parametrize(
    "word,expected",
    [
        ("cat", 1),
        ("banana", 3),
        ("make", 1),
        ("happy", 2),
        ("rhythm", 1),
        ("beautiful", 2),
        ("moonlight", 1),
    ],
)
def test_estimate_syllable_count_heuristics(word, expected):
    assert estimate_syllable_count(word) == expected


@pytest.mark.parametrize("word", ["", "q", "boat", "queue", "eye", "brr"])
def test_estimate_syllable_count_never_below_one(word):
    assert estimate_syllable_count(word) == 1


def test_estimate_syllable_count_is_case_insensitive():
    assert estimate_syllable_count("BANANA") == estimate_syllable_count("banana")


@pytest.mark.parametrize(
    "known,expected",
    [
        (5, 5),
        ("4", 4),
        (None, 3),
        (0, 3),
        (-2, 3),
        ("x", 3),
        (True, 3),
    ],
)
def test_resolve_syllable_count_trusts_only_positive_counts(known, expected):
    assert resolve_syllable_count("banana", known) == expected


def test_estimate_syllable_count_module_location():
    assert estimate_syllable_count.__module__ == "rhyme_scout.utils.syllables"


@pytest.mark.parametrize("known", [float("inf"), float("-inf"), float("nan")])
def test_resolve_syllable_count_ignores_non_finite_counts(known):
    assert resolve_syllable_count("banana", known) == 3
