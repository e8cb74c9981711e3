# application/ports/output.py
from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Protocol


class WriteMode(str, Enum):
    IMMEDIATE = "immediate"
    BUFFERED = "buffered"


class StdoutPort(Protocol):
    """Caller-owned handle on the standard output stream."""

    def write_all(self, content: bytes, mode: Optional[WriteMode] = None) -> None:
        ...


class OutputPort(ABC):
    @abstractmethod
    def write(
        self,
        content: bytes,
        stdout: StdoutPort,
        mode: Optional[WriteMode] = None,
    ) -> None:
        ...

    @abstractmethod
    def describe(self) -> str:
        ...
