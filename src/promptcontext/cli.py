"""Command-line prompt context extractor.

Usage:
    python -m promptcontext --lang en "Detect changes during last two weeks"
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from promptcontext.config import Config
from promptcontext.errors import ParserError
from promptcontext.lang import supported_languages, validate_languages
from promptcontext.parser import ContextParser
from promptcontext.prompts import build_context_hint

logger = logging.getLogger("promptcontext")
LOGGER_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_CLI_HANDLER_TAG = "_prompt_context_cli_handler"


def configure_cli_logging(verbose: bool, level: str = "INFO") -> logging.Logger:
    """Route ``promptcontext`` log records to stderr for a CLI run.

    Extraction results are printed on stdout, so parser and dictionary
    records (debug traces of matched keywords, resolved periods and amounts)
    must go to a separate stream to keep ``--json`` output parseable.
    Records stop at the package logger and never reach handlers installed by
    an embedding application.

    Args:
        verbose: Show debug traces regardless of ``level``.
        level: Level name from ``Config.log_level``.

    Returns:
        The ``promptcontext`` package logger.
    """
    log_level = logging.DEBUG if verbose else getattr(logging, level)
    _remove_cli_handlers()

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(log_level)
    stderr_handler.setFormatter(logging.Formatter(LOGGER_FORMAT))
    setattr(stderr_handler, _CLI_HANDLER_TAG, True)

    logger.setLevel(log_level)
    logger.propagate = False
    logger.addHandler(stderr_handler)
    return logger


def _remove_cli_handlers() -> None:
    for handler in list(logger.handlers):
        if getattr(handler, _CLI_HANDLER_TAG, False):
            logger.removeHandler(handler)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prompt-context",
        description="Extract keywords, time period and amount from a prompt",
    )
    parser.add_argument(
        "text",
        nargs="+",
        help="Prompt text to analyse",
    )
    parser.add_argument(
        "--lang",
        choices=supported_languages(),
        help="Language of the prompt (default: PROMPT_CONTEXT_LANGUAGE or 'en')",
    )
    parser.add_argument(
        "--ignore-case",
        action="store_true",
        help="Match keywords case-insensitively",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the extracted context as JSON",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for the prompt context extractor."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    try:
        config = Config.from_env()
    except ValueError as e:
        parser.error(str(e))

    configure_cli_logging(verbose=args.verbose, level=config.log_level)

    language = args.lang or config.default_language
    case_sensitive = config.case_sensitive and not args.ignore_case
    text = " ".join(args.text)

    try:
        validate_languages()
        context = ContextParser(case_sensitive=case_sensitive).parse(language, text)
    except ParserError as e:
        logger.error("Failed to extract context: %s", e)
        parser.error(str(e))

    if args.json:
        print(json.dumps(context.to_dict()))
    else:
        print(build_context_hint(context, language))
