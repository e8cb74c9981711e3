#!/usr/bin/env python3
"""
Write the body of the last HTTP response of a run

Usage:
  python scripts/last_body.py render --result-file <path> [--include] [--color] [--output <path>]
  python scripts/last_body.py fetch --url <url> [--method <method>] [-H "Name: value"] [--include] [--output <path>]

Examples:
  python scripts/last_body.py render --result-file reports/run.json --include
  python scripts/last_body.py reports/run.yaml
  python scripts/last_body.py fetch --url https://example.com --include --output -

Settings can also come from the environment (or a .env file):
  WEBPOST_INCLUDE_HEADERS, WEBPOST_COLOR, WEBPOST_OUTPUT, WEBPOST_BASE_URL, WEBPOST_LOG_LEVEL, NO_COLOR
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Dict, List, Optional

import requests

from application.exceptions import RunnerError
from application.ports.output import OutputPort
from application.services.last_body_writer import LastBodyWriter
from application.services.output_error_builder import OutputErrorBuilder
from domain.exceptions import ValidationError
from domain.run_result import RunResult
from infrastructure.config.output_settings import OutputSettings
from infrastructure.http.requests_adapter import RequestsCallRecorder
from infrastructure.logging.console_logger import ConsoleLogger
from infrastructure.logging.log_setup import setup_console_logging
from infrastructure.output.outputs import Output, StdoutOutput
from infrastructure.output.stdout import Stdout
from infrastructure.result.base_loader import RunResultLoadError
from infrastructure.result.loader_registry import RunResultLoaderRegistry
from infrastructure.url.base_url_resolver import BaseUrlResolver

COMMANDS = {"render", "fetch"}


def _add_output_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-i", "--include", action=argparse.BooleanOptionalAction, default=None,
                        help="Write status line and headers before the body")
    parser.add_argument("--color", action=argparse.BooleanOptionalAction, default=None,
                        help="Colorize status line and header names")
    parser.add_argument("-o", "--output", type=str, help="Destination file, '-' for stdout")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Last response body writer")
    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser("render", help="Write last body of a run result report")
    render_parser.add_argument("--result-file", type=str, required=True)
    _add_output_flags(render_parser)

    fetch_parser = subparsers.add_parser("fetch", help="Send one request and write its body")
    fetch_parser.add_argument("--url", type=str, required=True)
    fetch_parser.add_argument("--method", type=str, default="GET")
    fetch_parser.add_argument("-H", "--header", action="append", default=[], dest="headers")
    fetch_parser.add_argument("--timeout-sec", type=int, default=20)
    _add_output_flags(fetch_parser)

    return parser


def _parse_headers(raw_headers: List[str]) -> Dict[str, str]:
    # one value per header name
    headers: Dict[str, str] = {}
    seen = set()
    for raw in raw_headers:
        name, sep, value = raw.partition(":")
        name = name.strip()
        if not sep or not name:
            raise ValueError(f"Invalid header: {raw}")
        if name.lower() in seen:
            raise ValueError(f"Duplicate header: {name}")
        seen.add(name.lower())
        headers[name] = value.strip()
    return headers


def _load_run_result(path: str) -> RunResult:
    result_path = Path(path)
    loader = RunResultLoaderRegistry().get_loader(result_path)
    return loader.load_from_file(result_path)


def _fetch_run_result(args: argparse.Namespace, settings: OutputSettings) -> RunResult:
    url = BaseUrlResolver(settings.base_url).resolve_url(args.url)
    recorder = RequestsCallRecorder(timeout_sec=args.timeout_sec)
    entry = recorder.record(args.method, url, headers=_parse_headers(args.headers))
    return RunResult(entries=[entry], time_in_ms=entry.time_in_ms, success=True)


def _resolve_output(args: argparse.Namespace, settings: OutputSettings) -> Optional[OutputPort]:
    path = args.output if args.output is not None else settings.output
    if path is None:
        return None
    return Output.from_path(path)


def _write(run_result: RunResult, args: argparse.Namespace, settings: OutputSettings) -> int:
    include_headers = settings.include_headers if args.include is None else args.include
    color = settings.color if args.color is None else args.color

    writer = LastBodyWriter(default_output=StdoutOutput(), logger=ConsoleLogger())
    writer.write_last_body(
        run_result,
        include_headers=include_headers,
        color=color,
        output=_resolve_output(args, settings),
        stdout=Stdout(),
    )
    return 0


def _error(message: str) -> None:
    print(f"ERROR: {message}", file=sys.stderr)


def main() -> None:
    parser = _build_parser()
    argv = sys.argv[1:]
    if argv and argv[0] not in COMMANDS and not argv[0].startswith("-"):
        argv = ["render", "--result-file", argv[0]] + argv[1:]
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        settings = OutputSettings.from_env()
        setup_console_logging(level=settings.log_level)

        if args.command == "render":
            run_result = _load_run_result(args.result_file)
        elif args.command == "fetch":
            run_result = _fetch_run_result(args, settings)
        else:
            raise ValueError(f"Unknown command: {args.command}")
        exit_code = _write(run_result, args, settings)
    except RunnerError as exc:
        detail = OutputErrorBuilder().build_from_runner_error(exc)
        _error(f"{detail.message} (at {detail.location or '<unknown>'})")
        sys.exit(1)
    except (RunResultLoadError, ValidationError, ValueError) as exc:
        _error(str(exc))
        sys.exit(1)
    except requests.RequestException as exc:
        _error(f"Request failed: {exc}")
        sys.exit(1)
    except OSError as exc:
        _error(f"Unable to write output: {exc}")
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
