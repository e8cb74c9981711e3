# application/services/redactor.py
from __future__ import annotations

from typing import Any, Iterable, List, Tuple

from domain.http import HeaderList

SENSITIVE_HEADERS = {"authorization", "proxy-authorization", "cookie", "set-cookie", "x-api-key"}


def mask_value(name: str, value: Any) -> Any:
    if name.lower() in SENSITIVE_HEADERS and value is not None:
        return "********"
    return value


def mask_pairs(pairs: Iterable[Tuple[str, str]]) -> List[Tuple[str, Any]]:
    return [(k, mask_value(k, v)) for k, v in pairs]


def mask_headers(headers: HeaderList) -> List[Tuple[str, Any]]:
    return mask_pairs((h.name, h.value) for h in headers)
