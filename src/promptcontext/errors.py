"""Exceptions raised while extracting prompt context."""


class ParserError(ValueError):
    """Base class for prompt context extraction failures."""


class UnsupportedLanguageError(ParserError):
    """Raised when no dictionary exists for the requested language."""

    def __init__(self, language: str) -> None:
        super().__init__(f"Unsupported language: {language}")
        self.language = language


class InvalidPatternConfigurationError(ParserError):
    """Raised when a required dictionary category is missing."""

    def __init__(self, category: str) -> None:
        super().__init__(f"Invalid pattern configuration for key: {category}")
        self.category = category


class AmountParsingError(ParserError):
    """Raised when a numeric amount pattern is not a non-negative integer."""

    def __init__(self, pattern: str) -> None:
        super().__init__(f"Failed to parse amount number: {pattern!r}")
        self.pattern = pattern


class PatternBuildError(ParserError):
    """Raised when a pattern matcher cannot be built from its patterns."""
