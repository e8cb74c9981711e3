from __future__ import annotations

import gzip
import zlib

import brotli
import pytest
import zstandard

from application.exceptions import DecompressionError
from application.services.content_decoder import ContentDecoder
from domain.http import HeaderList, Response

PLAIN = b"Hello World! " * 20


def _response(body: bytes, *encodings: str) -> Response:
    return Response(
        headers=HeaderList.from_pairs([("Content-Encoding", e) for e in encodings]),
        body=body,
    )


def _raw_deflate(data: bytes) -> bytes:
    compressor = zlib.compressobj(wbits=-zlib.MAX_WBITS)
    return compressor.compress(data) + compressor.flush()


class TestContentDecoder:
    def test_gzip(self):
        assert ContentDecoder().decode(_response(gzip.compress(PLAIN), "gzip")) == PLAIN

    def test_x_gzip_alias(self):
        assert ContentDecoder().decode(_response(gzip.compress(PLAIN), "x-gzip")) == PLAIN

    def test_zlib_wrapped_deflate(self):
        assert ContentDecoder().decode(_response(zlib.compress(PLAIN), "deflate")) == PLAIN

    def test_raw_deflate(self):
        assert ContentDecoder().decode(_response(_raw_deflate(PLAIN), "deflate")) == PLAIN

    def test_identity_keeps_body(self):
        assert ContentDecoder().decode(_response(PLAIN, "identity")) == PLAIN

    def test_no_encoding_keeps_body(self):
        assert ContentDecoder().decode(_response(PLAIN)) == PLAIN

    def test_encodings_are_undone_in_reverse_order(self):
        # deflate applied first, then gzip
        body = gzip.compress(zlib.compress(PLAIN))
        assert ContentDecoder().decode(_response(body, "deflate, gzip")) == PLAIN

    def test_encodings_across_repeated_headers(self):
        body = gzip.compress(zlib.compress(PLAIN))
        assert ContentDecoder().decode(_response(body, "deflate", "gzip")) == PLAIN

    def test_unsupported_encoding(self):
        with pytest.raises(DecompressionError) as excinfo:
            ContentDecoder().decode(_response(PLAIN, "compress"))
        assert excinfo.value.encoding == "compress"
        assert excinfo.value.cause is None
        assert "Unsupported content encoding: compress" in str(excinfo.value)

    def test_corrupt_gzip_keeps_cause(self):
        with pytest.raises(DecompressionError) as excinfo:
            ContentDecoder().decode(_response(b"not gzip at all", "gzip"))
        assert excinfo.value.encoding == "gzip"
        assert excinfo.value.cause is not None
        assert excinfo.value.__cause__ is excinfo.value.cause

    def test_corrupt_deflate(self):
        with pytest.raises(DecompressionError):
            ContentDecoder().decode(_response(b"garbage", "deflate"))

    def test_supported_encodings(self):
        assert ContentDecoder().supported_encodings() == ["br", "deflate", "gzip", "identity", "x-gzip", "zstd"]

    def test_accept_encoding_lists_supported(self):
        assert ContentDecoder().accept_encoding() == "br, deflate, gzip, identity, x-gzip, zstd"

    def test_brotli(self):
        assert ContentDecoder().decode(_response(brotli.compress(PLAIN), "br")) == PLAIN

    def test_zstd(self):
        assert ContentDecoder().decode(_response(zstandard.ZstdCompressor().compress(PLAIN), "zstd")) == PLAIN

    def test_zstd_without_content_size(self):
        body = zstandard.ZstdCompressor(write_content_size=False).compress(PLAIN)
        assert ContentDecoder().decode(_response(body, "zstd")) == PLAIN

    def test_brotli_over_gzip(self):
        body = gzip.compress(brotli.compress(PLAIN))
        assert ContentDecoder().decode(_response(body, "br, gzip")) == PLAIN

    def test_corrupt_brotli(self):
        with pytest.raises(DecompressionError) as excinfo:
            ContentDecoder().decode(_response(b"not brotli", "br"))
        assert excinfo.value.encoding == "br"
        assert excinfo.value.cause is not None

    def test_corrupt_zstd(self):
        with pytest.raises(DecompressionError) as excinfo:
            ContentDecoder().decode(_response(b"not zstd", "zstd"))
        assert excinfo.value.encoding == "zstd"
