import pytest

from rhyme_scout.core.strength import (
    RhymeStrengthBreakdown,
    api_contribution,
    consonant_contribution,
    score_rhyme,
    score_rhyme_breakdown,
    strength_label,
    suffix_contribution,
    vowel_contribution,
)


def test_cat_hat_breakdown_caps_at_one_hundred():
    breakdown = score_rhyme_breakdown("cat", "hat", 900)

    assert breakdown == RhymeStrengthBreakdown(api=67, suffix=27, vowel=15, consonant=10, total=100)
    assert breakdown.raw == 119
    assert not breakdown.exact_match


@pytest.mark.parametrize(
    "original,candidate,score,expected",
    [
        ("cat", "hat", 900, 100),
        ("cat", "bat", 0, 90),
        ("cat", "dog", 0, 40),
        ("time", "rhyme", 0, 75),
        ("nation", "station", 0, 100),
        ("cat", "", 0, 40),
        ("cat", "dog", -5000, 0),
    ],
)
def test_score_rhyme_examples(original, candidate, score, expected):
    assert score_rhyme(original, candidate, score) == expected


def test_identical_words_short_circuit_to_perfect():
    breakdown = score_rhyme_breakdown("Cat", "cAT", 0)

    assert breakdown.total == 100
    assert breakdown.exact_match
    assert score_rhyme("", "") == 100


def test_scoring_ignores_case():
    assert score_rhyme_breakdown("CAT", "Hat", 900) == score_rhyme_breakdown("cat", "hat", 900)


@pytest.mark.parametrize(
    "pair",
    [("cat", "hat"), ("nation", "station"), ("time", "rhyme"), ("orange", "door hinge"), ("a", "zzz")],
)
@pytest.mark.parametrize("score", [None, 0, 120, 900, 4000])
def test_score_is_symmetric_bounded_and_a_multiple_of_five(pair, score):
    forward = score_rhyme(pair[0], pair[1], score)

    assert forward == score_rhyme(pair[1], pair[0], score)
    assert 0 <= forward <= 100
    assert forward % 5 == 0


@pytest.mark.parametrize(
    "score,expected",
    [(None, 40), (0, 40), (50, 42), (500, 55), (900, 67), (1000, 70), (5000, 70)],
)
def test_api_contribution_is_capped(score, expected):
    assert api_contribution(score) == expected


def test_suffix_contribution_scales_by_shorter_word():
    assert suffix_contribution("cat", "hat") == 27
    assert suffix_contribution("time", "rhyme") == 20
    assert suffix_contribution("", "hat") == 0


def test_vowel_contribution_checks_last_two_groups():
    assert vowel_contribution("nation", "station") == 20
    assert vowel_contribution("time", "rhyme") == 15
    assert vowel_contribution("cat", "dog") == 0
    assert vowel_contribution("brr", "cat") == 0


def test_consonant_contribution_requires_matching_non_empty_tails():
    assert consonant_contribution("cat", "hat") == 10
    assert consonant_contribution("time", "rhyme") == 0
    assert consonant_contribution("cat", "cad") == 0


@pytest.mark.parametrize(
    "strength,label",
    [(100, "Strong"), (80, "Strong"), (75, "Good"), (60, "Good"), (55, "Medium"), (45, "Medium"), (40, "Weak"), (0, "Weak")],
)
def test_strength_label_thresholds(strength, label):
    assert strength_label(strength) == label


@pytest.mark.parametrize(
    "score,expected",
    [(float("inf"), 70), (float("-inf"), -100), (float("nan"), 40), ("n/a", 40)],
)
def test_api_contribution_survives_non_finite_scores(score, expected):
    assert api_contribution(score) == expected


def test_non_finite_scores_still_produce_a_strength():
    assert score_rhyme("cat", "hat", float("inf")) == 100
    assert score_rhyme("cat", "hat", float("-inf")) == 0
    assert score_rhyme("cat", "dog", float("nan")) == 40


def _growing_endings(word):
    """Same-length candidates sharing 0..len-1 trailing letters with ``word``."""

    return ["q" * (len(word) - shared) + word[len(word) - shared :] for shared in range(len(word))]


@pytest.mark.parametrize("word", ["banana", "station", "cat", "beautiful"])
@pytest.mark.parametrize("score", [0, 900])
def test_longer_shared_ending_never_lowers_strength(word, score):
    candidates = _growing_endings(word)
    suffixes = [suffix_contribution(word, candidate) for candidate in candidates]
    strengths = [score_rhyme(word, candidate, score) for candidate in candidates]

    assert suffixes == sorted(suffixes)
    assert len(set(suffixes)) == len(suffixes)
    assert strengths == sorted(strengths)
