# application/services/content_decoder.py
from __future__ import annotations

import gzip
import zlib
from typing import Callable, Dict, List

import brotli
import zstandard

from application.exceptions import DecompressionError
from domain.http import Response


def _gunzip(data: bytes) -> bytes:
    return gzip.decompress(data)


def _inflate(data: bytes) -> bytes:
    # Servers send both zlib-wrapped and raw deflate streams under "deflate"
    try:
        return zlib.decompress(data)
    except zlib.error:
        return zlib.decompress(data, -zlib.MAX_WBITS)


def _unbrotli(data: bytes) -> bytes:
    return brotli.decompress(data)


def _unzstd(data: bytes) -> bytes:
    # streaming frames carry no content size, so go through a decompressobj
    return zstandard.ZstdDecompressor().decompressobj().decompress(data)


def _identity(data: bytes) -> bytes:
    return data


_DECODERS: Dict[str, Callable[[bytes], bytes]] = {
    "gzip": _gunzip,
    "x-gzip": _gunzip,
    "deflate": _inflate,
    "br": _unbrotli,
    "zstd": _unzstd,
    "identity": _identity,
}

_DECODE_ERRORS = (OSError, EOFError, zlib.error, brotli.error, zstandard.ZstdError)


class ContentDecoder:
    def supported_encodings(self) -> List[str]:
        return sorted(_DECODERS)

    def accept_encoding(self) -> str:
        """Accept-Encoding value advertising exactly what `decode` can reverse."""
        return ", ".join(self.supported_encodings())

    def decode(self, response: Response) -> bytes:
        """
        Reverse every Content-Encoding of the response body.

        Encodings are listed in the order they were applied, so they are
        undone last to first. Unknown encodings are rejected before any
        decoding starts.
        """
        encodings = response.headers.content_encodings()
        for encoding in encodings:
            if encoding not in _DECODERS:
                raise DecompressionError(encoding)

        data = response.body
        for encoding in reversed(encodings):
            try:
                data = _DECODERS[encoding](data)
            except _DECODE_ERRORS as e:
                raise DecompressionError(encoding, e) from e
        return data
