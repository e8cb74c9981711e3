# domain/run_result.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from domain.http import Call
from domain.source_info import SourceInfo


@dataclass(frozen=True)
class EntryResult:
    """
    Result of one executed step.

    `compressed` is set when the body of the last call's response is still
    encoded as sent on the wire (Content-Encoding not yet reversed).
    """
    entry_index: int
    calls: List[Call] = field(default_factory=list)
    source_info: Optional[SourceInfo] = None
    errors: List[str] = field(default_factory=list)
    time_in_ms: int = 0
    compressed: bool = False


@dataclass(frozen=True)
class RunResult:
    entries: List[EntryResult] = field(default_factory=list)
    time_in_ms: int = 0
    success: bool = True
    timestamp: int = 0
    cookies: List[Dict[str, Any]] = field(default_factory=list)
