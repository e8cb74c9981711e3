# application/services/last_response_locator.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from domain.http import Call
from domain.run_result import EntryResult, RunResult


@dataclass(frozen=True)
class LastCall:
    entry: EntryResult
    call: Call


class LastResponseLocator:
    def locate(self, run_result: RunResult) -> Optional[LastCall]:
        """Last call of the last entry, or None when either list is empty."""
        if not run_result.entries:
            return None
        entry = run_result.entries[-1]
        if not entry.calls:
            return None
        return LastCall(entry=entry, call=entry.calls[-1])
