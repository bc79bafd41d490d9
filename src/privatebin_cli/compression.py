"""
Payload compression for paste submission.

Pastes are compressed with raw DEFLATE (RFC 1951): no zlib or gzip header, no
preset dictionary, and no length prefix. The final-block marker of the stream
is the only terminator, so any independent inflater can decode it.

## Framing

Viewers shipped with the server inflate a JavaScript "binary string" that was
UTF-8 encoded before base64. To stay decodable by them, the compressed bytes
are mapped one-to-one onto code points U+0000..U+00FF, UTF-8 encoded, and then
base64 encoded::

    base64(utf8(latin1_decode(deflate(data))))
"""

import base64
import zlib
from abc import ABC, abstractmethod

from .types import CompressionError


class Compressor(ABC):
    """Interface for lossless byte-stream compression."""

    @abstractmethod
    def compress(self, data: bytes) -> bytes:
        """Compress a complete payload."""
        ...

    @abstractmethod
    def decompress(self, data: bytes) -> bytes:
        """Inflate a complete payload produced by `compress`."""
        ...


class RawDeflateCompressor(Compressor):
    """Raw DEFLATE compressor backed by zlib."""

    def __init__(self, level: int = 9) -> None:
        if not 0 <= level <= 9:
            raise ValueError(f"Compression level must be between 0 and 9, got {level}")
        self.level = level

    def compress(self, data: bytes) -> bytes:
        deflater = zlib.compressobj(self.level, zlib.DEFLATED, -zlib.MAX_WBITS)
        return deflater.compress(data) + deflater.flush()

    def decompress(self, data: bytes) -> bytes:
        """
        Inflate a raw DEFLATE stream.

        Raises:
            CompressionError: If the stream is malformed or ends before its
                final block.
        """
        inflater = zlib.decompressobj(-zlib.MAX_WBITS)
        try:
            inflated = inflater.decompress(data) + inflater.flush()
        except zlib.error as e:
            raise CompressionError(f"Malformed deflate stream: {e}") from e

        if not inflater.eof:
            raise CompressionError("Truncated deflate stream")

        return inflated


def encode_payload(data: bytes, compressor: Compressor) -> str:
    """
    Compress and frame a payload into the text handed to the cipher.

    Args:
        data: Raw paste content
        compressor: Compressor to apply

    Returns:
        ASCII base64 string
    """
    compressed = compressor.compress(data)
    binary_string = compressed.decode("latin-1")
    return base64.b64encode(binary_string.encode("utf-8")).decode("ascii")


def decode_payload(text: str, compressor: Compressor) -> bytes:
    """
    Reverse `encode_payload`.

    Raises:
        CompressionError: If the framing or the compressed stream is invalid.
    """
    try:
        framed = base64.b64decode(text, validate=True)
        compressed = framed.decode("utf-8").encode("latin-1")
    except ValueError as e:
        raise CompressionError(f"Invalid payload framing: {e}") from e

    return compressor.decompress(compressed)
