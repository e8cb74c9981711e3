# infrastructure/output/__init__.py
from infrastructure.output.outputs import FileOutput, Output, StdoutOutput
from infrastructure.output.stdout import Stdout

__all__ = [
    "FileOutput",
    "Output",
    "Stdout",
    "StdoutOutput",
]
