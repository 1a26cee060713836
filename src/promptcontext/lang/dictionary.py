"""Per-language pattern dictionaries.

Each supported language is a module holding delimited resource messages
(category id -> one string of patterns). Messages are split into ordered
pattern tuples the first time a language is requested and cached for the
life of the process. Dictionaries are immutable, so they can be shared across
threads without locking.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType, ModuleType

from promptcontext.errors import (
    AmountParsingError,
    InvalidPatternConfigurationError,
    UnsupportedLanguageError,
)
from promptcontext.lang import de, en

logger = logging.getLogger(__name__)

_LANGUAGE_MODULES: Mapping[str, ModuleType] = {
    "en": en,
    "de": de,
}

_WORDS_SUFFIX = "-words"
_PHRASE_DELIMITER = "|"
_DIGITS_RE = re.compile(r"[0-9]+")

AMOUNT_NUM = "amount_num"
AMOUNT_TEXT = "amount_text"
REQUIRED_CATEGORIES = (
    "object",
    "document",
    "description",
    "comparison",
    "last",
    "new",
    "all",
    "period",
    AMOUNT_NUM,
)


@dataclass(frozen=True)
class LanguageDictionary:
    """Ordered pattern lists for one language.

    Attributes:
        language: Language tag, e.g. ``"en"``.
        entries: Category name -> ordered patterns. Order is match priority.
        messages: Localised message templates by message id.
        key_names: Display names for generic keys.
        period_names: Display names for periods.
    """

    language: str
    entries: Mapping[str, tuple[str, ...]]
    messages: Mapping[str, str] = field(default_factory=dict)
    key_names: Mapping[str, str] = field(default_factory=dict)
    period_names: Mapping[str, str] = field(default_factory=dict)

    def __contains__(self, category: object) -> bool:
        if not isinstance(category, str):
            return False
        return normalize_category(category) in self.entries

    @property
    def categories(self) -> tuple[str, ...]:
        return tuple(self.entries)

    def get(self, category: str) -> tuple[str, ...] | None:
        """Return the patterns for ``category``, or None if it is absent."""
        return self.entries.get(normalize_category(category))

    def require(self, category: str) -> tuple[str, ...]:
        """Return the patterns for ``category``.

        Raises:
            InvalidPatternConfigurationError: If the category is absent.
        """
        patterns = self.get(category)
        if patterns is None:
            raise InvalidPatternConfigurationError(normalize_category(category))
        return patterns


def normalize_category(category: str) -> str:
    """Strip the resource-style ``-words`` suffix from a category id."""
    if category.endswith(_WORDS_SUFFIX):
        return category[: -len(_WORDS_SUFFIX)]
    return category


def split_patterns(message: str) -> tuple[str, ...]:
    """Split a delimited resource message into ordered patterns.

    Messages containing ``|`` are split on it so that patterns may contain
    spaces; otherwise the message is split on whitespace.

    Examples:
        >>> split_patterns("day week  month")
        ('day', 'week', 'month')
        >>> split_patterns("last week | this month")
        ('last week', 'this month')
    """
    if _PHRASE_DELIMITER in message:
        parts = (part.strip() for part in message.split(_PHRASE_DELIMITER))
        return tuple(part for part in parts if part)
    return tuple(message.split())


def build_dictionary(
    language: str,
    words: Mapping[str, str],
    amounts: Iterable[tuple[str, int]] = (),
    messages: Mapping[str, str] | None = None,
    key_names: Mapping[str, str] | None = None,
    period_names: Mapping[str, str] | None = None,
) -> LanguageDictionary:
    """Assemble a dictionary from resource messages and an amount table.

    The ``amount_text`` and ``amount_num`` entries are both derived from
    ``amounts`` so the spelled-out and numeric forms stay co-indexed. Explicit
    ``amount_*`` messages in ``words`` take precedence.

    Args:
        language: Language tag.
        words: Category id -> delimited pattern message.
        amounts: Ordered ``(text_form, value)`` pairs.
        messages: Localised message templates.
        key_names: Display names for generic keys.
        period_names: Display names for periods.

    Returns:
        Immutable LanguageDictionary.
    """
    entries: dict[str, tuple[str, ...]] = {}

    amounts = tuple(amounts)
    if amounts:
        entries[AMOUNT_TEXT] = tuple(text for text, _ in amounts)
        entries[AMOUNT_NUM] = tuple(str(value) for _, value in amounts)

    for category, message in words.items():
        entries[normalize_category(category)] = split_patterns(message)

    return LanguageDictionary(
        language=language,
        entries=MappingProxyType(entries),
        messages=MappingProxyType(dict(messages or {})),
        key_names=MappingProxyType(dict(key_names or {})),
        period_names=MappingProxyType(dict(period_names or {})),
    )


def supported_languages() -> tuple[str, ...]:
    """Return the sorted tags of all curated languages."""
    return tuple(sorted(_LANGUAGE_MODULES))


def get_dictionary(language: str) -> LanguageDictionary:
    """Return the dictionary for ``language``.

    Args:
        language: Language tag, e.g. ``"en"``.

    Returns:
        Shared, read-only LanguageDictionary.

    Raises:
        UnsupportedLanguageError: If the language is not curated.
    """
    if language not in _LANGUAGE_MODULES:
        raise UnsupportedLanguageError(language)
    return _load_dictionary(language)


@lru_cache(maxsize=None)
def _load_dictionary(language: str) -> LanguageDictionary:
    module = _LANGUAGE_MODULES[language]
    dictionary = build_dictionary(
        language,
        words=module.WORDS,
        amounts=getattr(module, "AMOUNTS", ()),
        messages=getattr(module, "MESSAGES", None),
        key_names=getattr(module, "KEY_NAMES", None),
        period_names=getattr(module, "PERIOD_NAMES", None),
    )
    logger.debug(
        "Loaded %s dictionary with categories: %s",
        language,
        ", ".join(dictionary.categories),
    )
    return dictionary


def parse_amount_values(patterns: Iterable[str]) -> tuple[int, ...]:
    """Convert numeric amount patterns to integers.

    Raises:
        AmountParsingError: If a pattern is not a literal non-negative integer.
    """
    values = []
    for pattern in patterns:
        if not _DIGITS_RE.fullmatch(pattern):
            raise AmountParsingError(pattern)
        values.append(int(pattern))
    return tuple(values)


def validate_dictionary(dictionary: LanguageDictionary) -> None:
    """Check that a dictionary is usable by the context parser.

    Raises:
        InvalidPatternConfigurationError: If a required category is missing.
        AmountParsingError: If a numeric amount pattern is not an integer.
    """
    for category in REQUIRED_CATEGORIES:
        dictionary.require(category)
    parse_amount_values(dictionary.require(AMOUNT_NUM))


def validate_languages() -> None:
    """Validate the dictionary of every supported language."""
    for language in supported_languages():
        validate_dictionary(get_dictionary(language))
