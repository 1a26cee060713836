"""Curated per-language dictionaries for prompt context extraction."""

from promptcontext.lang.dictionary import (
    AMOUNT_NUM,
    AMOUNT_TEXT,
    REQUIRED_CATEGORIES,
    LanguageDictionary,
    build_dictionary,
    get_dictionary,
    parse_amount_values,
    split_patterns,
    supported_languages,
    validate_dictionary,
    validate_languages,
)

__all__ = [
    "AMOUNT_NUM",
    "AMOUNT_TEXT",
    "REQUIRED_CATEGORIES",
    "LanguageDictionary",
    "build_dictionary",
    "get_dictionary",
    "parse_amount_values",
    "split_patterns",
    "supported_languages",
    "validate_dictionary",
    "validate_languages",
]
