"""Shared pytest fixtures for prompt-context tests."""

import logging

import pytest

from promptcontext.lang import LanguageDictionary, build_dictionary
from promptcontext.parser import ContextParser

_ENV_VARS = ("PROMPT_CONTEXT_LANGUAGE", "PROMPT_CONTEXT_CASE_SENSITIVE", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Undo CLI logging setup so caplog sees package records in every test."""
    yield
    package_logger = logging.getLogger("promptcontext")
    for handler in list(package_logger.handlers):
        if getattr(handler, "_prompt_context_cli_handler", False):
            package_logger.removeHandler(handler)
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove configuration variables, restoring them after the test.

    Variables set later by load_dotenv are removed on teardown as well.
    """
    for name in _ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


@pytest.fixture
def parser() -> ContextParser:
    """Provide a case-sensitive parser over the curated dictionaries."""
    return ContextParser()


@pytest.fixture
def parser_for():
    """Provide a factory for parsers backed by a single custom dictionary.

    Example:
        def test_something(parser_for):
            parser = parser_for({"amount_num": "1 2", "new": "new"})
            context = parser.parse("xx", "new 2")
    """

    def _create_parser(
        words: dict[str, str],
        case_sensitive: bool = True,
    ) -> ContextParser:
        dictionary = build_dictionary("xx", words=words)

        def _provider(language: str) -> LanguageDictionary:
            return dictionary

        return ContextParser(case_sensitive=case_sensitive, provider=_provider)

    return _create_parser
