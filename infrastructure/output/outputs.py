# infrastructure/output/outputs.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from application.ports.output import OutputPort, StdoutPort, WriteMode

STDOUT_PATH = "-"


@dataclass(frozen=True)
class StdoutOutput(OutputPort):
    def write(
        self,
        content: bytes,
        stdout: StdoutPort,
        mode: Optional[WriteMode] = None,
    ) -> None:
        stdout.write_all(content, mode)

    def describe(self) -> str:
        return "stdout"


@dataclass(frozen=True)
class FileOutput(OutputPort):
    path: Path

    def write(
        self,
        content: bytes,
        stdout: StdoutPort,
        mode: Optional[WriteMode] = None,
    ) -> None:
        # OSError is left to the caller
        with self.path.open("wb") as f:
            f.write(content)

    def describe(self) -> str:
        return str(self.path)


class Output:
    @staticmethod
    def from_path(path: str) -> OutputPort:
        if path == STDOUT_PATH:
            return StdoutOutput()
        return FileOutput(Path(path))
