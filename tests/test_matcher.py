import pytest

from promptcontext.errors import PatternBuildError
from promptcontext.matcher import Match, PatternMatcher, build_matcher, find


def test_find_empty_patterns_returns_none() -> None:
    assert find([], "anything at all") is None


def test_find_no_match_returns_none() -> None:
    assert find(["day", "week"], "hello world") is None


def test_find_reports_offsets_and_index() -> None:
    assert find(["day", "week"], "two weeks") == Match(pattern_index=1, start=4, end=8)


def test_find_prefers_leftmost_position_over_pattern_order() -> None:
    found = find(["world", "hello"], "hello world")

    assert found == Match(pattern_index=1, start=0, end=5)


def test_find_breaks_ties_by_pattern_order_not_length() -> None:
    assert find(["1", "10"], "10 days") == Match(pattern_index=0, start=0, end=1)
    assert find(["10", "1"], "10 days") == Match(pattern_index=0, start=0, end=2)


def test_find_shorter_earlier_pattern_wins_at_same_position() -> None:
    assert find(["ab", "abc"], "xabc") == Match(pattern_index=0, start=1, end=3)
    assert find(["abc", "ab"], "xabc") == Match(pattern_index=0, start=1, end=4)


def test_find_duplicate_patterns_resolve_to_first() -> None:
    assert find(["day", "week", "day"], "one day") == Match(
        pattern_index=0, start=4, end=7
    )


def test_find_matches_inside_words() -> None:
    found = find(["compar", "change"], "Detect changes")

    assert found == Match(pattern_index=1, start=7, end=13)


def test_find_treats_patterns_as_literals() -> None:
    assert find(["a.b"], "axb") is None
    assert find(["(x", "a.b"], "see a.b (x") == Match(pattern_index=1, start=4, end=7)


def test_find_handles_non_ascii_text() -> None:
    assert find(["fünf"], "nur fünf") == Match(pattern_index=0, start=4, end=8)


def test_find_is_case_sensitive_by_default() -> None:
    assert find(["build"], "Build a report") is None


def test_find_case_insensitive() -> None:
    found = find(["build"], "Build a report", case_sensitive=False)

    assert found == Match(pattern_index=0, start=0, end=5)


@pytest.mark.parametrize("patterns", [["day", ""], ["day", 5], [["day"]]])
def test_find_rejects_invalid_patterns(patterns) -> None:
    with pytest.raises(PatternBuildError):
        find(patterns, "day")


def test_build_matcher_reuses_compiled_matcher() -> None:
    first = build_matcher(("alpha", "beta"))
    second = build_matcher(("alpha", "beta"))

    assert first is second
    assert build_matcher(("alpha", "beta"), False) is not first


def test_pattern_matcher_without_patterns_never_matches() -> None:
    assert PatternMatcher([]).find("anything") is None
