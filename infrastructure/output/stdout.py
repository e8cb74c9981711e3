# infrastructure/output/stdout.py
from __future__ import annotations

import sys
from typing import Optional

from application.ports.output import WriteMode


class Stdout:
    """
    Handle on the process standard output.

    In BUFFERED mode bytes are kept in memory and can be read back with
    `buffer()`; in IMMEDIATE mode they go straight to `sys.stdout`.
    """

    def __init__(self, mode: WriteMode = WriteMode.IMMEDIATE):
        self._mode = mode
        self._buffer = bytearray()

    @property
    def mode(self) -> WriteMode:
        return self._mode

    def write_all(self, content: bytes, mode: Optional[WriteMode] = None) -> None:
        effective = mode or self._mode
        if effective == WriteMode.BUFFERED:
            self._buffer += content
            return
        stream = sys.stdout.buffer
        stream.write(content)
        stream.flush()

    def buffer(self) -> bytes:
        return bytes(self._buffer)
