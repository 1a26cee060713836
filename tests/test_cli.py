import json
import logging

import pytest

from promptcontext.cli import configure_cli_logging, main


def test_main_prints_json(clean_env, capsys) -> None:
    main(["--json", "Show", "three", "reports"])

    output = json.loads(capsys.readouterr().out)
    assert output == {"keys": ["document"], "period": None, "amount": 3}


def test_main_prints_hint(clean_env, capsys) -> None:
    main(["Detect changes during last two weeks"])

    assert capsys.readouterr().out.strip() == (
        "The request mentions: comparison, last, period. "
        "Time period: week. Amount: 2."
    )


def test_main_ignore_case(clean_env, capsys) -> None:
    main(["--json", "--ignore-case", "LAST WEEK"])

    output = json.loads(capsys.readouterr().out)
    assert output == {"keys": ["last", "period"], "period": "week", "amount": None}


def test_main_case_insensitive_from_env(clean_env, capsys) -> None:
    clean_env.setenv("PROMPT_CONTEXT_CASE_SENSITIVE", "false")

    main(["--json", "LAST WEEK"])

    assert json.loads(capsys.readouterr().out)["period"] == "week"


def test_main_german(clean_env, capsys) -> None:
    main(["--lang", "de", "--json", "Zeige alle Berichte der letzten drei Monate"])

    output = json.loads(capsys.readouterr().out)
    assert output["period"] == "month"
    assert output["amount"] == 3


def test_main_language_from_env(clean_env, capsys) -> None:
    clean_env.setenv("PROMPT_CONTEXT_LANGUAGE", "de")

    main(["letzte Woche"])

    assert capsys.readouterr().out.strip() == (
        "Die Anfrage erwähnt: letzte, Zeitraum. Zeitraum: Woche."
    )


def test_main_rejects_unsupported_language(clean_env, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--lang", "fr", "bonjour"])

    assert exc_info.value.code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_main_reports_configuration_errors(clean_env, capsys) -> None:
    clean_env.setenv("PROMPT_CONTEXT_LANGUAGE", "fr")

    with pytest.raises(SystemExit) as exc_info:
        main(["bonjour"])

    assert exc_info.value.code == 2
    assert "PROMPT_CONTEXT_LANGUAGE" in capsys.readouterr().err


def test_configure_cli_logging_idempotent_and_root_safe() -> None:
    """Package logging setup should be idempotent and avoid root pollution."""
    root_logger = logging.getLogger()
    root_handlers_before = tuple(root_logger.handlers)
    root_level_before = root_logger.level

    package_logger = configure_cli_logging(verbose=False)
    configure_cli_logging(verbose=True)

    tagged_handlers = [
        handler
        for handler in package_logger.handlers
        if getattr(handler, "_prompt_context_cli_handler", False)
    ]
    assert package_logger.name == "promptcontext"
    assert len(tagged_handlers) == 1
    assert package_logger.level == logging.DEBUG
    assert package_logger.propagate is False
    assert tuple(root_logger.handlers) == root_handlers_before
    assert root_logger.level == root_level_before


def test_configure_cli_logging_uses_configured_level() -> None:
    package_logger = configure_cli_logging(verbose=False, level="WARNING")

    assert package_logger.level == logging.WARNING


def test_main_verbose_keeps_json_on_stdout(clean_env, capsys) -> None:
    main(["--json", "--verbose", "Show three reports"])

    captured = capsys.readouterr()
    assert json.loads(captured.out) == {
        "keys": ["document"],
        "period": None,
        "amount": 3,
    }
    assert "Resolved spelled-out amount 3" in captured.err
