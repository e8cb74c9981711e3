from __future__ import annotations

import json

from infrastructure.logging.console_logger import ConsoleLogger
from infrastructure.logging.log_setup import setup_console_logging


def _payload(line: str, event: str) -> dict:
    assert line.startswith(f"{event} ")
    return json.loads(line.replace(f"{event} ", "", 1))


def test_console_logger_emits_type_field_on_stderr(capsys) -> None:
    setup_console_logging(level="INFO")
    logger = ConsoleLogger()

    logger.info("last_body.written", bytes=12)

    captured = capsys.readouterr()
    assert captured.out == ""
    payload = _payload(captured.err.strip(), "last_body.written")
    assert payload["type"] == "last_body.written"
    assert payload["bytes"] == 12


def test_console_logger_bind_merges_fields(capsys) -> None:
    setup_console_logging(level="INFO")
    logger = ConsoleLogger().bind(request_id="r1")

    logger.error("last_body.decompress_failed", entry_index=3)

    payload = _payload(capsys.readouterr().err.strip(), "last_body.decompress_failed")
    assert payload["request_id"] == "r1"
    assert payload["entry_index"] == 3


def test_console_logger_respects_level(capsys) -> None:
    setup_console_logging(level="INFO")

    ConsoleLogger().debug("last_body.skipped", entries=0)

    assert capsys.readouterr().err == ""


def test_console_logger_serializes_tuples_and_braces(capsys) -> None:
    setup_console_logging(level="DEBUG")

    ConsoleLogger().debug("last_body.response", headers=[("x-json", "{}")])

    payload = _payload(capsys.readouterr().err.strip(), "last_body.response")
    assert payload["headers"] == [["x-json", "{}"]]
