"""Transparent line reader for plain, gzip and BGZF compressed VCF files."""

import gzip
import logging
import os
import struct
import zlib
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO

from Bio import bgzf

from vcf_batcher.errors import BatchIOError, DecompressionError
from vcf_batcher.reader.types import (
    BGZF_EOF,
    BGZF_SUBFIELD_ID,
    BUFFER_SIZE,
    GZIP_FEXTRA,
    GZIP_MAGIC,
    MAGIC_PREFIX_SIZE,
    SourceCompression,
)

logger = logging.getLogger(__name__)

# Errors the decoders raise on corrupt or truncated streams.
_DECODE_ERRORS = (
    gzip.BadGzipFile,
    EOFError,
    zlib.error,
    struct.error,
    ValueError,
    RuntimeError,
)


def detect_compression(input_path: str | Path) -> SourceCompression:
    """
    Inspect the magic prefix of a file to decide how to decode it.

    A gzip member whose extra field starts with the "BC" subfield is BGZF;
    any other gzip member is plain gzip; everything else is plain text.
    """
    try:
        with open(input_path, "rb") as handle:
            prefix = handle.read(MAGIC_PREFIX_SIZE)
    except OSError as exc:
        raise BatchIOError(f"cannot open input: {exc.strerror or exc}", path=input_path) from exc

    if not prefix.startswith(GZIP_MAGIC):
        return SourceCompression.PLAIN
    if len(prefix) >= 14 and prefix[3] & GZIP_FEXTRA and prefix[12:14] == BGZF_SUBFIELD_ID:
        return SourceCompression.BGZF
    return SourceCompression.GZIP


def has_bgzf_eof(input_path: str | Path) -> bool:
    """Check that a BGZF file ends with the empty end-of-file block."""
    try:
        with open(input_path, "rb") as handle:
            size = handle.seek(0, os.SEEK_END)
            if size < len(BGZF_EOF):
                return False
            handle.seek(size - len(BGZF_EOF))
            return handle.read(len(BGZF_EOF)) == BGZF_EOF
    except OSError as exc:
        raise BatchIOError(f"cannot open input: {exc.strerror or exc}", path=input_path) from exc


def _open_stream(input_path: str | Path, compression: SourceCompression) -> BinaryIO:
    if compression is SourceCompression.BGZF:
        return bgzf.BgzfReader(str(input_path), "rb")
    if compression is SourceCompression.GZIP:
        return gzip.open(input_path, "rb")
    return open(input_path, "rb", buffering=BUFFER_SIZE)  # noqa: SIM115


def iter_lines(
    input_path: str | Path,
    compression: SourceCompression | None = None,
) -> Iterator[bytes]:
    """
    Yield the lines of a VCF file in order, without their terminators.

    The file handle stays open only while the generator is being consumed and
    is closed when it is exhausted, fails or is closed by the caller.

    Args:
        input_path: Plain, gzip or BGZF compressed file.
        compression: Pre-detected compression; detected from the file if None.

    Raises:
        BatchIOError: The file cannot be opened or read.
        DecompressionError: The compressed stream is corrupt or truncated.
    """
    if compression is None:
        compression = detect_compression(input_path)
    logger.debug("Reading %s as %s", input_path, compression.value)

    # BgzfReader stops quietly at a block boundary, so a missing EOF block is
    # the only sign of a file cut between blocks.
    if compression is SourceCompression.BGZF and not has_bgzf_eof(input_path):
        raise DecompressionError("truncated bgzf stream: missing end-of-file block", path=input_path)

    try:
        stream = _open_stream(input_path, compression)
    except FileNotFoundError as exc:
        raise BatchIOError("input file does not exist", path=input_path) from exc
    except _DECODE_ERRORS as exc:
        # BgzfReader decodes the first block while opening.
        raise DecompressionError(f"corrupt {compression.value} stream: {exc}", path=input_path) from exc
    except OSError as exc:
        raise BatchIOError(f"cannot open input: {exc.strerror or exc}", path=input_path) from exc

    with stream:
        try:
            for line in stream:
                yield line.rstrip(b"\n\r")
        except _DECODE_ERRORS as exc:
            raise DecompressionError(
                f"corrupt or truncated {compression.value} stream: {exc}", path=input_path
            ) from exc
        except OSError as exc:
            raise BatchIOError(f"cannot read input: {exc.strerror or exc}", path=input_path) from exc
