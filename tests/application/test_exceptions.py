# tests/application/test_exceptions.py
import zlib

from application.exceptions import DecompressionError, RunnerError
from domain.source_info import Pos, SourceInfo


class TestDecompressionError:
    def test_unsupported_message(self):
        error = DecompressionError("compress")
        assert str(error) == "Unsupported content encoding: compress"

    def test_cause_message(self):
        cause = zlib.error("incorrect header check")
        error = DecompressionError("deflate", cause)
        assert error.cause is cause
        assert str(error) == "Could not uncompress response with deflate: incorrect header check"


class TestRunnerError:
    def test_str_without_location(self):
        error = RunnerError(None, DecompressionError("compress"))
        assert error.location == "<unknown>"
        assert str(error) == "Unsupported content encoding: compress (at <unknown>)"

    def test_str_with_location(self):
        error = RunnerError(SourceInfo(Pos(10, 2), Pos(10, 8)), ValueError("bad"))
        assert error.location == "10:2"
        assert str(error) == "bad (at 10:2)"

    def test_not_fatal_by_default(self):
        assert RunnerError(None, ValueError("x")).fatal is False
