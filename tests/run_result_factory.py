"""
Run results used across the test-suite.

`three_step_run()` mirrors a run against foo.com, bar.com and baz.com where
only the last response carries headers and a body.
"""
from __future__ import annotations

from typing import List, Tuple

from domain.http import Call, HeaderList, HttpVersion, Request, Response
from domain.run_result import EntryResult, RunResult

SCENARIO_HEADERS: List[Tuple[str, str]] = [
    ("x-foo", "xxx"),
    ("x-bar", "yyy0"),
    ("x-bar", "yyy1"),
    ("x-bar", "yyy2"),
    ("x-baz", "zzz"),
]
SCENARIO_BODY = b'{"say": "Hello World!"}'


def call(url: str, response: Response | None = None) -> Call:
    return Call(
        request=Request(method="GET", url=url),
        response=response or Response(),
    )


def entry(index: int, calls: List[Call], compressed: bool = False) -> EntryResult:
    return EntryResult(entry_index=index, calls=calls, compressed=compressed)


def three_step_run() -> RunResult:
    last_response = Response(
        version=HttpVersion.HTTP_3,
        status=204,
        headers=HeaderList.from_pairs(SCENARIO_HEADERS),
        body=SCENARIO_BODY,
    )
    return RunResult(
        entries=[
            entry(1, [call("https://foo.com")]),
            entry(2, [call("https://bar.com")]),
            entry(3, [call("https://baz.com", last_response)]),
        ],
        time_in_ms=100,
        success=True,
    )


def single_response_run(response: Response, compressed: bool = False) -> RunResult:
    return RunResult(entries=[entry(1, [call("https://example.com", response)], compressed=compressed)])
