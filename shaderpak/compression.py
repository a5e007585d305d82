import zlib

from shaderpak.errors import FormatError

__all__ = ["DEFAULT_COMPRESSLEVEL", "compress", "decompress"]

DEFAULT_COMPRESSLEVEL = 6

# zlib window bits selecting the gzip wrapper instead of the zlib one
GZIP_WBITS = 16 + zlib.MAX_WBITS


def compress(data: bytes, *, level: int = DEFAULT_COMPRESSLEVEL) -> bytes:
    """Compress ``data`` into a single gzip member.

    zlib writes a zero timestamp into the gzip header, so the same input
    always produces the same bytes.
    """
    compressor = zlib.compressobj(level, zlib.DEFLATED, GZIP_WBITS)
    return compressor.compress(data) + compressor.flush()


def decompress(data: bytes) -> bytes:
    decompressor = zlib.decompressobj(GZIP_WBITS)
    try:
        result = decompressor.decompress(data)
    except zlib.error as e:
        raise FormatError("corrupt compressed block") from e
    if not decompressor.eof or decompressor.unused_data:
        raise FormatError("corrupt compressed block")
    return result
