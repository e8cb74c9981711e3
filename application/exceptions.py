# application/exceptions.py
from __future__ import annotations

from typing import Optional

from domain.source_info import SourceInfo


class DecompressionError(Exception):
    """Content-Encoding of a stored body could not be reversed."""

    def __init__(self, encoding: str, cause: Optional[BaseException] = None):
        self.encoding = encoding
        self.cause = cause
        if cause is None:
            message = f"Unsupported content encoding: {encoding}"
        else:
            message = f"Could not uncompress response with {encoding}: {cause}"
        super().__init__(message)


class RunnerError(Exception):
    """
    Reportable error shared by every test-execution failure.

    `source_info` is None when no position in the script is meaningful,
    e.g. for failures raised while writing output after the run.
    """

    def __init__(
        self,
        source_info: Optional[SourceInfo],
        inner: Exception,
        fatal: bool = False,
    ):
        self.source_info = source_info
        self.inner = inner
        self.fatal = fatal
        super().__init__(str(inner))

    @property
    def location(self) -> str:
        return str(self.source_info) if self.source_info is not None else "<unknown>"

    def __str__(self) -> str:
        return f"{self.inner} (at {self.location})"
