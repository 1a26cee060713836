"""Configuration management for prompt-context.

Loads settings from environment variables with sensible defaults.
Supports .env files via python-dotenv.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from promptcontext.lang import supported_languages

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Config:
    """Application configuration loaded from environment variables."""

    default_language: str = "en"
    case_sensitive: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "Config":
        """Load configuration from environment variables.

        Args:
            env_file: Optional path to .env file. If None, searches for .env
                     in current directory and parent directories.

        Returns:
            Config instance with values from environment.

        Raises:
            ValueError: If an environment variable has an invalid value.
        """
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        default_language = os.getenv("PROMPT_CONTEXT_LANGUAGE", "en").strip()
        if default_language not in supported_languages():
            raise ValueError(
                f"Invalid PROMPT_CONTEXT_LANGUAGE: {default_language}. "
                f"Must be one of {supported_languages()}"
            )

        case_sensitive = _parse_bool(
            "PROMPT_CONTEXT_CASE_SENSITIVE",
            os.getenv("PROMPT_CONTEXT_CASE_SENSITIVE", "true"),
        )

        log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if log_level not in valid_levels:
            raise ValueError(
                f"Invalid LOG_LEVEL: {log_level}. Must be one of {valid_levels}"
            )

        return cls(
            default_language=default_language,
            case_sensitive=case_sensitive,
            log_level=log_level,
        )


def _parse_bool(name: str, raw_value: str) -> bool:
    value = raw_value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean (got {raw_value!r})")
