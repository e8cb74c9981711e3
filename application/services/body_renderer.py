# application/services/body_renderer.py
from __future__ import annotations

from typing import Optional

from application.exceptions import DecompressionError, RunnerError
from application.services.content_decoder import ContentDecoder
from application.services.header_renderer import HeaderRenderer
from domain.http import Call
from domain.run_result import EntryResult


class BodyRenderer:
    def __init__(
        self,
        header_renderer: Optional[HeaderRenderer] = None,
        decoder: Optional[ContentDecoder] = None,
    ):
        self._headers = header_renderer or HeaderRenderer()
        self._decoder = decoder or ContentDecoder()

    def render(self, entry: EntryResult, call: Call, include_headers: bool, color: bool) -> bytes:
        """
        Bytes to emit for the given call: optional status line and headers
        followed by a blank line, then the body.

        Raises:
            RunnerError: the body is flagged compressed and can't be decoded.
                No position applies to an output-time failure, so the error
                carries no source info.
        """
        response = call.response
        output = bytearray()

        if include_headers:
            text = self._headers.render(response, color)
            text += "\n"
            output += text.encode("utf-8")

        if entry.compressed:
            try:
                output += self._decoder.decode(response)
            except DecompressionError as e:
                raise RunnerError(source_info=None, inner=e, fatal=False) from e
        else:
            output += response.body

        return bytes(output)
