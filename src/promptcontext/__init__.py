"""Rule-based extraction of structured context from user prompts."""

from promptcontext.context import GenericKey, Period, PromptContext
from promptcontext.errors import (
    AmountParsingError,
    InvalidPatternConfigurationError,
    ParserError,
    PatternBuildError,
    UnsupportedLanguageError,
)
from promptcontext.lang import get_dictionary, supported_languages
from promptcontext.matcher import Match, find
from promptcontext.parser import ContextParser, parse
from promptcontext.prompts import build_context_hint

__all__ = [
    "AmountParsingError",
    "ContextParser",
    "GenericKey",
    "InvalidPatternConfigurationError",
    "Match",
    "ParserError",
    "PatternBuildError",
    "Period",
    "PromptContext",
    "UnsupportedLanguageError",
    "build_context_hint",
    "find",
    "get_dictionary",
    "parse",
    "supported_languages",
]
