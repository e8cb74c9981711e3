# domain/source_info.py
from __future__ import annotations

from dataclasses import dataclass

from domain.exceptions import ValidationError


@dataclass(frozen=True)
class Pos:
    line: int
    column: int

    def __post_init__(self) -> None:
        if self.line < 1 or self.column < 1:
            raise ValidationError(f"Position must be 1-based: {self.line}:{self.column}")

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class SourceInfo:
    start: Pos
    end: Pos

    def __str__(self) -> str:
        return str(self.start)
