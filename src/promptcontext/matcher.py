"""Leftmost-first multi-pattern matching over literal strings.

Patterns are compiled into a single regular expression alternation with one
capturing group per pattern. Python's ``re`` engine scans the haystack left to
right and, at each position, tries the alternatives in order, which is exactly
leftmost-first semantics: the earliest start position wins and ties at that
position go to the pattern listed first, regardless of length.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from functools import lru_cache

from promptcontext.errors import PatternBuildError

logger = logging.getLogger(__name__)

_MATCHER_CACHE_SIZE = 256


@dataclass(frozen=True)
class Match:
    """A single pattern hit.

    Attributes:
        pattern_index: Position of the matching pattern in the input list.
        start: Offset of the first matched character in the haystack.
        end: Offset one past the last matched character.
    """

    pattern_index: int
    start: int
    end: int


class PatternMatcher:
    """Compiled matcher for an ordered list of literal patterns."""

    def __init__(self, patterns: Sequence[str], case_sensitive: bool = True) -> None:
        self.patterns = tuple(patterns)
        self.case_sensitive = case_sensitive
        self._regex = _compile(self.patterns, case_sensitive) if self.patterns else None

    def find(self, haystack: str) -> Match | None:
        """Return the leftmost-first match in ``haystack``, if any."""
        if self._regex is None:
            return None

        found = self._regex.search(haystack)
        if found is None:
            return None

        # Exactly one group participates in an alternation of flat groups.
        return Match(
            pattern_index=found.lastindex - 1,
            start=found.start(),
            end=found.end(),
        )


def _compile(patterns: tuple[str, ...], case_sensitive: bool) -> re.Pattern[str]:
    for index, pattern in enumerate(patterns):
        if not isinstance(pattern, str):
            raise PatternBuildError(
                f"Pattern {index} must be a string (got {type(pattern).__name__})"
            )
        if not pattern:
            raise PatternBuildError(f"Pattern {index} is empty")

    alternation = "|".join(f"({re.escape(pattern)})" for pattern in patterns)
    flags = 0 if case_sensitive else re.IGNORECASE
    try:
        return re.compile(alternation, flags)
    except re.error as e:
        raise PatternBuildError(f"Failed to build pattern matcher: {e}") from e


@lru_cache(maxsize=_MATCHER_CACHE_SIZE)
def build_matcher(
    patterns: tuple[str, ...],
    case_sensitive: bool = True,
) -> PatternMatcher:
    """Build (or reuse) a matcher for ``patterns``.

    Args:
        patterns: Ordered patterns; order decides priority at a shared position.
        case_sensitive: Whether matching distinguishes letter case.

    Returns:
        PatternMatcher for the patterns.

    Raises:
        PatternBuildError: If a pattern is empty or not a string.
    """
    logger.debug(
        "Building matcher for %d patterns (case_sensitive=%s)",
        len(patterns),
        case_sensitive,
    )
    return PatternMatcher(patterns, case_sensitive=case_sensitive)


def find(
    patterns: Sequence[str],
    haystack: str,
    case_sensitive: bool = True,
) -> Match | None:
    """Find the leftmost-first match of any pattern in ``haystack``.

    Args:
        patterns: Ordered patterns. An empty sequence never matches.
        haystack: Text to search.
        case_sensitive: Whether matching distinguishes letter case.

    Returns:
        The match, or None when no pattern occurs in the haystack.

    Raises:
        PatternBuildError: If the matcher cannot be built from the patterns.
    """
    if not patterns:
        return None

    try:
        key = tuple(patterns)
        hash(key)
    except TypeError as e:
        raise PatternBuildError(f"Patterns must be hashable strings: {e}") from e

    return build_matcher(key, case_sensitive).find(haystack)
