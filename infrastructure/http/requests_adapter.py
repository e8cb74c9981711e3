# infrastructure/http/requests_adapter.py
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Tuple

import requests

from application.services.content_decoder import ContentDecoder
from domain.http import Call, HeaderList, HttpVersion, Request, Response
from domain.run_result import EntryResult

_RAW_VERSIONS = {
    10: HttpVersion.HTTP_1_0,
    11: HttpVersion.HTTP_1_1,
    20: HttpVersion.HTTP_2,
    30: HttpVersion.HTTP_3,
}


def _header_pairs(resp: requests.Response) -> Iterable[Tuple[str, str]]:
    # urllib3 keeps repeated headers apart, requests folds them with ", "
    raw_headers = getattr(getattr(resp, "raw", None), "headers", None)
    if raw_headers is not None and hasattr(raw_headers, "iteritems"):
        return list(raw_headers.iteritems())
    return list(resp.headers.items())


def _http_version(resp: requests.Response) -> HttpVersion:
    raw_version = getattr(getattr(resp, "raw", None), "version", None)
    return _RAW_VERSIONS.get(raw_version, HttpVersion.HTTP_1_1)


def _request_body(body: Any) -> bytes:
    if body is None:
        return b""
    if isinstance(body, bytes):
        return body
    if isinstance(body, str):
        return body.encode("utf-8")
    # generators / file objects are not replayable
    return b""


def _to_request(resp: requests.Response) -> Request:
    prepared = resp.request
    if prepared is None:
        return Request(method="GET", url=str(resp.url or ""))
    return Request(
        method=prepared.method or "GET",
        url=str(prepared.url or ""),
        headers=HeaderList.from_pairs((prepared.headers or {}).items()),
        body=_request_body(prepared.body),
    )


def _to_response(resp: requests.Response, body: bytes) -> Response:
    elapsed = getattr(resp, "elapsed", None)
    return Response(
        version=_http_version(resp),
        status=resp.status_code,
        headers=HeaderList.from_pairs(_header_pairs(resp)),
        body=body,
        duration_ms=round(elapsed.total_seconds() * 1000) if elapsed is not None else 0,
        url=str(resp.url or ""),
    )


def entry_from_response(
    resp: requests.Response,
    entry_index: int = 1,
    wire_body: Optional[bytes] = None,
) -> EntryResult:
    """
    Build an entry from a final response and its redirect history.

    `wire_body` is the final body as received, before any Content-Encoding
    was reversed. When given, the entry is flagged compressed if the response
    declares an encoding other than identity. Without it the decoded
    `resp.content` is stored as-is.
    """
    calls: List[Call] = []
    for hop in resp.history or []:
        calls.append(Call(request=_to_request(hop), response=_to_response(hop, hop.content or b"")))

    if wire_body is not None:
        final = _to_response(resp, wire_body)
        compressed = any(e != "identity" for e in final.headers.content_encodings())
    else:
        final = _to_response(resp, resp.content or b"")
        compressed = False
    calls.append(Call(request=_to_request(resp), response=final))

    return EntryResult(
        entry_index=entry_index,
        calls=calls,
        time_in_ms=sum(c.response.duration_ms for c in calls),
        compressed=compressed,
    )


class RequestsCallRecorder:
    """
    Sends one request and records it, redirects included, as an entry.

    Unless the caller sets Accept-Encoding, only encodings ContentDecoder
    can reverse are advertised.
    """

    def __init__(
        self,
        base_headers: Optional[Dict[str, str]] = None,
        timeout_sec: int = 20,
        decoder: Optional[ContentDecoder] = None,
    ):
        self._session = requests.Session()
        self._base_headers = base_headers or {}
        self._timeout = timeout_sec
        self._decoder = decoder or ContentDecoder()

    def record(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        entry_index: int = 1,
    ) -> EntryResult:
        merged = dict(self._base_headers)
        if headers:
            merged.update(headers)
        if not any(name.lower() == "accept-encoding" for name in merged):
            merged["Accept-Encoding"] = self._decoder.accept_encoding()

        resp = self._session.request(
            method=method.upper(),
            url=url,
            headers=merged,
            timeout=self._timeout,
            allow_redirects=True,
            stream=True,
        )
        try:
            wire_body = resp.raw.read(decode_content=False)
        finally:
            resp.close()
        return entry_from_response(resp, entry_index=entry_index, wire_body=wire_body)
