# infrastructure/result/report_models.py
"""
pydantic schema of a run-result report (JSON or YAML).

Bodies are given either as UTF-8 text (`body`) or as base64 (`body_base64`),
the latter being required for bodies that are still compressed.
"""
from __future__ import annotations

import base64
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, Field, model_validator

from domain.http import Call, HeaderList, HttpVersion, Request, Response
from domain.run_result import EntryResult, RunResult
from domain.source_info import Pos, SourceInfo


class HeaderModel(BaseModel):
    name: str
    value: str


HeaderInput = Union[HeaderModel, Tuple[str, str]]


def _to_header_list(items: List[HeaderInput]) -> HeaderList:
    pairs = []
    for item in items:
        if isinstance(item, HeaderModel):
            pairs.append((item.name, item.value))
        else:
            pairs.append((item[0], item[1]))
    return HeaderList.from_pairs(pairs)


class _BodyModel(BaseModel):
    body: Optional[str] = None
    body_base64: Optional[str] = None

    @model_validator(mode="after")
    def _single_body_source(self) -> "_BodyModel":
        if self.body is not None and self.body_base64 is not None:
            raise ValueError("body and body_base64 are mutually exclusive")
        return self

    def body_bytes(self) -> bytes:
        if self.body_base64 is not None:
            return base64.b64decode(self.body_base64, validate=True)
        return (self.body or "").encode("utf-8")


class RequestModel(_BodyModel):
    method: str = "GET"
    url: str = ""
    headers: List[HeaderInput] = Field(default_factory=list)

    def to_domain(self) -> Request:
        return Request(
            method=self.method,
            url=self.url,
            headers=_to_header_list(self.headers),
            body=self.body_bytes(),
        )


class ResponseModel(_BodyModel):
    version: str = "HTTP/1.1"
    status: int = 200
    headers: List[HeaderInput] = Field(default_factory=list)
    duration_ms: int = 0
    url: str = ""
    certificate: Optional[Dict[str, Any]] = None

    def to_domain(self) -> Response:
        return Response(
            version=HttpVersion.parse(self.version),
            status=self.status,
            headers=_to_header_list(self.headers),
            body=self.body_bytes(),
            duration_ms=self.duration_ms,
            url=self.url,
            certificate=self.certificate,
        )


class CallModel(BaseModel):
    request: RequestModel
    response: ResponseModel

    def to_domain(self) -> Call:
        return Call(request=self.request.to_domain(), response=self.response.to_domain())


class PosModel(BaseModel):
    line: int
    column: int


class SourceInfoModel(BaseModel):
    start: PosModel
    end: PosModel

    def to_domain(self) -> SourceInfo:
        return SourceInfo(
            start=Pos(self.start.line, self.start.column),
            end=Pos(self.end.line, self.end.column),
        )


class EntryModel(BaseModel):
    entry_index: int
    calls: List[CallModel] = Field(default_factory=list)
    source_info: Optional[SourceInfoModel] = None
    errors: List[str] = Field(default_factory=list)
    time_in_ms: int = 0
    compressed: bool = False

    def to_domain(self) -> EntryResult:
        return EntryResult(
            entry_index=self.entry_index,
            calls=[c.to_domain() for c in self.calls],
            source_info=self.source_info.to_domain() if self.source_info else None,
            errors=list(self.errors),
            time_in_ms=self.time_in_ms,
            compressed=self.compressed,
        )


class RunResultReport(BaseModel):
    entries: List[EntryModel] = Field(default_factory=list)
    time_in_ms: int = 0
    success: bool = True
    timestamp: int = 0
    cookies: List[Dict[str, Any]] = Field(default_factory=list)

    def to_domain(self) -> RunResult:
        return RunResult(
            entries=[e.to_domain() for e in self.entries],
            time_in_ms=self.time_in_ms,
            success=self.success,
            timestamp=self.timestamp,
            cookies=list(self.cookies),
        )
