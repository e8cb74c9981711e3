# application/services/output_error_builder.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from application.exceptions import DecompressionError, RunnerError


@dataclass(frozen=True)
class OutputErrorDetail:
    code: str
    message: str
    location: Optional[str]
    fatal: bool


class OutputErrorBuilder:
    def build_from_runner_error(self, error: RunnerError) -> OutputErrorDetail:
        code = "decompression_error" if isinstance(error.inner, DecompressionError) else "runner_error"
        return OutputErrorDetail(
            code=code,
            message=str(error.inner),
            location=str(error.source_info) if error.source_info is not None else None,
            fatal=error.fatal,
        )

    def build_from_exception(self, message: str) -> OutputErrorDetail:
        return OutputErrorDetail(
            code="exception",
            message=message,
            location=None,
            fatal=True,
        )
