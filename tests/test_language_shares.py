import pytest

from repo_stats_card.services.language_shares import (
    compute_language_shares,
    top_languages,
)


@pytest.mark.parametrize(
    "languages",
    [
        {"Go": 80, "TypeScript": 20},
        {"A": 1, "B": 1, "C": 1},
        {"Python": 123_456, "Shell": 789, "Dockerfile": 12, "Makefile": 3},
        {f"lang{i}": i + 1 for i in range(40)},
        {"Only": 5},
    ],
)
def test_percentages_sum_to_100_and_stay_in_range(languages):
    shares = compute_language_shares(languages)
    total = sum(languages.values())

    assert sum(s.percentage for s in shares) == pytest.approx(100.0, abs=0.1)
    for share in shares:
        assert 0 <= share.percentage <= 100
        assert share.percentage == pytest.approx(100 * share.bytes / total, abs=0.1)


def test_empty_mapping_yields_no_entries():
    assert compute_language_shares({}) == []


def test_zero_total_yields_no_entries():
    assert compute_language_shares({"Go": 0, "C": 0}) == []


def test_sorted_by_descending_bytes_stable_on_ties():
    shares = compute_language_shares({"Go": 10, "Rust": 30, "C": 10, "Zig": 10})
    assert [s.language for s in shares] == ["Rust", "Go", "C", "Zig"]


def test_one_decimal_place_and_colors():
    shares = compute_language_shares({"A": 1, "B": 1, "C": 1})
    assert [s.percentage for s in shares] == [33.4, 33.3, 33.3]

    shares = compute_language_shares({"Go": 80, "Brainfuck": 20})
    assert shares[0].color == "#00add8"
    assert shares[1].color == "#8b949e"


def test_top_languages_limit():
    languages = {"a": 1, "b": 6, "c": 3, "d": 5, "e": 4, "f": 2}
    assert list(top_languages(languages, 5)) == ["b", "d", "e", "c", "f"]
    assert list(top_languages(languages, None)) == ["b", "d", "e", "c", "f", "a"]
    assert list(top_languages(languages, 0)) == ["b", "d", "e", "c", "f", "a"]
