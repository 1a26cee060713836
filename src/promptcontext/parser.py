"""Rule-based extraction of prompt context from free text.

The parser walks every ``GenericKey`` in order. ``PERIOD`` and ``AMOUNT`` have
dedicated handlers; every other key is a plain presence check against the
dictionary category of the same name. All handlers share the same matcher.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from functools import partial
from typing import TYPE_CHECKING

from promptcontext.context import GenericKey, Period, PromptContext
from promptcontext.lang import (
    AMOUNT_NUM,
    AMOUNT_TEXT,
    LanguageDictionary,
    get_dictionary,
    parse_amount_values,
    validate_languages,
)
from promptcontext.matcher import Match, find

if TYPE_CHECKING:
    from promptcontext.config import Config

logger = logging.getLogger(__name__)

DictionaryProvider = Callable[[str], LanguageDictionary]
MatchFinder = Callable[[Sequence[str], str], Match | None]


class _ContextBuilder:
    """Mutable accumulator for a single parse call."""

    def __init__(self) -> None:
        self.keys: list[GenericKey] = []
        self.period: Period | None = None
        self.amount: int | None = None

    def add_key(self, key: GenericKey) -> None:
        if key not in self.keys:
            self.keys.append(key)

    def set_period(self, period: Period) -> None:
        if self.period is None:
            self.period = period

    def set_amount(self, amount: int) -> None:
        if self.amount is None:
            self.amount = amount

    def build(self) -> PromptContext:
        return PromptContext(
            keys=tuple(self.keys),
            period=self.period,
            amount=self.amount,
        )


def _parse_generic_key(
    key: GenericKey,
    text: str,
    dictionary: LanguageDictionary,
    context: _ContextBuilder,
    find_match: MatchFinder,
) -> None:
    patterns = dictionary.get(key.value)
    if patterns is None:
        return

    found = find_match(patterns, text)
    if found is not None:
        logger.debug("Matched %s on %r", key.value, patterns[found.pattern_index])
        context.add_key(key)


def _parse_period(
    key: GenericKey,
    text: str,
    dictionary: LanguageDictionary,
    context: _ContextBuilder,
    find_match: MatchFinder,
) -> None:
    patterns = dictionary.get(key.value)
    if patterns is None:
        return

    found = find_match(patterns, text)
    if found is None:
        return

    period = Period.nth(found.pattern_index)
    if period is None:
        logger.debug(
            "Period pattern index %d has no matching period", found.pattern_index
        )
        return

    logger.debug("Resolved period %s", period.value)
    context.set_period(period)
    context.add_key(key)


def _parse_amount(
    key: GenericKey,
    text: str,
    dictionary: LanguageDictionary,
    context: _ContextBuilder,
    find_match: MatchFinder,
) -> None:
    num_patterns = dictionary.require(AMOUNT_NUM)
    values = parse_amount_values(num_patterns)

    # Digits win over spelled-out numbers.
    found = find_match(num_patterns, text)
    if found is not None:
        amount = values[found.pattern_index]
        logger.debug("Resolved numeric amount %d", amount)
        context.set_amount(amount)
        return

    text_patterns = dictionary.get(AMOUNT_TEXT)
    if text_patterns is None:
        return

    found = find_match(text_patterns, text)
    if found is None:
        return

    index = found.pattern_index
    amount = values[index] if index < len(values) else index + 1
    logger.debug("Resolved spelled-out amount %d", amount)
    context.set_amount(amount)


_CATEGORY_HANDLERS = {
    GenericKey.PERIOD: _parse_period,
    GenericKey.AMOUNT: _parse_amount,
}


class ContextParser:
    """Extracts a PromptContext from a user prompt without calling a model.

    Parsers hold no per-call state and may be shared between threads.
    """

    def __init__(
        self,
        case_sensitive: bool = True,
        provider: DictionaryProvider | None = None,
        validate: bool = False,
    ) -> None:
        """Initialize the parser.

        Args:
            case_sensitive: Whether keyword matching distinguishes letter case.
            provider: Dictionary lookup by language tag. Defaults to the
                curated dictionaries.
            validate: Validate every curated dictionary up front instead of
                on first use.

        Raises:
            InvalidPatternConfigurationError: If ``validate`` is set and a
                required category is missing.
            AmountParsingError: If ``validate`` is set and a numeric amount
                pattern is not an integer.
        """
        self.case_sensitive = case_sensitive
        self._provider = provider or get_dictionary
        self._find_match: MatchFinder = partial(find, case_sensitive=case_sensitive)
        if validate:
            validate_languages()

    @classmethod
    def from_config(cls, config: Config) -> ContextParser:
        """Create a parser from the application config."""

        return cls(case_sensitive=config.case_sensitive)

    def parse(self, language: str, text: str) -> PromptContext:
        """Extract context from a prompt.

        Args:
            language: Language tag of the prompt, e.g. ``"en"``.
            text: Free-text prompt.

        Returns:
            PromptContext with the detected keys, period and amount.

        Raises:
            UnsupportedLanguageError: If ``language`` has no dictionary.
            InvalidPatternConfigurationError: If ``amount_num`` is missing.
            AmountParsingError: If a numeric amount pattern is not an integer.
            PatternBuildError: If a matcher cannot be built.
        """
        dictionary = self._provider(language)
        context = _ContextBuilder()

        for key in GenericKey:
            handler = _CATEGORY_HANDLERS.get(key, _parse_generic_key)
            handler(key, text, dictionary, context, self._find_match)

        result = context.build()
        logger.debug("Parsed %s prompt into %s", language, result.to_dict())
        return result


_default_parser = ContextParser()


def parse(language: str, text: str) -> PromptContext:
    """Extract context from a prompt using the shared default parser."""
    return _default_parser.parse(language, text)
