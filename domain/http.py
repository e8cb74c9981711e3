# domain/http.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from domain.exceptions import ValidationError


class HttpVersion(str, Enum):
    HTTP_1_0 = "HTTP/1.0"
    HTTP_1_1 = "HTTP/1.1"
    HTTP_2 = "HTTP/2"
    HTTP_3 = "HTTP/3"

    @classmethod
    def parse(cls, label: str) -> "HttpVersion":
        normalized = (label or "").strip().upper()
        if not normalized.startswith("HTTP/"):
            normalized = f"HTTP/{normalized}"
        # "HTTP/2.0" and "HTTP/3.0" are accepted as aliases
        if normalized in ("HTTP/2.0", "HTTP/3.0"):
            normalized = normalized[:-2]
        for version in cls:
            if version.value == normalized:
                return version
        raise ValidationError(f"Unknown HTTP version: {label}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Header:
    name: str
    value: str

    def __str__(self) -> str:
        return f"{self.name}: {self.value}"


@dataclass(frozen=True)
class HeaderList:
    """
    Ordered multi-map of HTTP headers.

    Names may repeat; insertion order is kept as-is and repeated names are
    never merged.
    """
    items: Tuple[Header, ...] = ()

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]]) -> "HeaderList":
        return cls(tuple(Header(name=k, value=v) for k, v in pairs))

    def push(self, name: str, value: str) -> "HeaderList":
        return HeaderList(self.items + (Header(name=name, value=value),))

    def __iter__(self) -> Iterator[Header]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def get_all(self, name: str) -> List[str]:
        key = name.lower()
        return [h.value for h in self.items if h.name.lower() == key]

    def content_encodings(self) -> List[str]:
        encodings: List[str] = []
        for value in self.get_all("Content-Encoding"):
            for token in value.split(","):
                token = token.strip().lower()
                if token:
                    encodings.append(token)
        return encodings


@dataclass(frozen=True)
class Request:
    method: str
    url: str
    headers: HeaderList = field(default_factory=HeaderList)
    body: bytes = b""


@dataclass(frozen=True)
class Response:
    version: HttpVersion = HttpVersion.HTTP_1_1
    status: int = 200
    headers: HeaderList = field(default_factory=HeaderList)
    body: bytes = b""
    duration_ms: int = 0
    url: str = ""
    certificate: Optional[Dict[str, Any]] = None

    def __post_init__(self) -> None:
        if not 100 <= self.status <= 999:
            raise ValidationError(f"Invalid HTTP status: {self.status}")

    @property
    def status_line(self) -> str:
        return f"{self.version} {self.status}"


@dataclass(frozen=True)
class Call:
    request: Request
    response: Response
