# application/services/last_body_writer.py
from __future__ import annotations

from typing import Optional

from application.exceptions import RunnerError
from application.ports.logger import LoggerPort
from application.ports.output import OutputPort, StdoutPort
from application.services.body_renderer import BodyRenderer
from application.services.last_response_locator import LastResponseLocator
from application.services.redactor import mask_headers
from domain.run_result import RunResult


class LastBodyWriter:
    """
    Writes the body of the last response of a run, optionally preceded by
    its status line and headers.

    `default_output` receives the bytes when the caller gives no destination.
    """

    def __init__(
        self,
        default_output: OutputPort,
        logger: LoggerPort,
        locator: Optional[LastResponseLocator] = None,
        renderer: Optional[BodyRenderer] = None,
    ):
        self._default_output = default_output
        self._logger = logger
        self._locator = locator or LastResponseLocator()
        self._renderer = renderer or BodyRenderer()

    def write_last_body(
        self,
        run_result: RunResult,
        include_headers: bool,
        color: bool,
        output: Optional[OutputPort],
        stdout: StdoutPort,
    ) -> None:
        last = self._locator.locate(run_result)
        if last is None:
            self._logger.debug("last_body.skipped", entries=len(run_result.entries))
            return

        if last.entry.compressed and not last.call.response.headers.content_encodings():
            self._logger.warning("last_body.compressed_without_encoding", entry_index=last.entry.entry_index)

        try:
            content = self._renderer.render(last.entry, last.call, include_headers, color)
        except RunnerError as e:
            self._logger.error(
                "last_body.decompress_failed",
                entry_index=last.entry.entry_index,
                error=str(e.inner),
            )
            raise

        self._logger.debug(
            "last_body.response",
            entry_index=last.entry.entry_index,
            url=last.call.response.url,
            compressed=last.entry.compressed,
            headers=mask_headers(last.call.response.headers),
        )

        destination = output if output is not None else self._default_output
        destination.write(content, stdout, None)

        self._logger.info(
            "last_body.written",
            entry_index=last.entry.entry_index,
            status=last.call.response.status,
            bytes=len(content),
            destination=destination.describe(),
        )
