from __future__ import annotations

from application.exceptions import DecompressionError, RunnerError
from application.services.output_error_builder import OutputErrorBuilder
from domain.source_info import Pos, SourceInfo


def test_build_from_decompression_error_without_location() -> None:
    # Arrange
    builder = OutputErrorBuilder()
    error = RunnerError(source_info=None, inner=DecompressionError("compress"))

    # Act
    detail = builder.build_from_runner_error(error)

    # Assert
    assert detail.code == "decompression_error"
    assert detail.message == "Unsupported content encoding: compress"
    assert detail.location is None
    assert detail.fatal is False


def test_build_from_runner_error_with_location() -> None:
    # Arrange
    builder = OutputErrorBuilder()
    info = SourceInfo(start=Pos(4, 1), end=Pos(4, 30))
    error = RunnerError(source_info=info, inner=RuntimeError("boom"), fatal=True)

    # Act
    detail = builder.build_from_runner_error(error)

    # Assert
    assert detail.code == "runner_error"
    assert detail.message == "boom"
    assert detail.location == "4:1"
    assert detail.fatal is True


def test_build_from_exception() -> None:
    detail = OutputErrorBuilder().build_from_exception("disk full")

    assert detail.code == "exception"
    assert detail.message == "disk full"
    assert detail.location is None
    assert detail.fatal is True
