"""Shared constants and the compression tag for input sources."""

from enum import Enum

# 1MB buffer for efficient I/O.
BUFFER_SIZE = 1024 * 1024

# gzip member magic: ID1, ID2, CM=deflate.
GZIP_MAGIC = b"\x1f\x8b\x08"

# FLG bit signalling an extra field, which BGZF always sets.
GZIP_FEXTRA = 0x04

# BGZF stores the block size in an extra subfield tagged "BC".
BGZF_SUBFIELD_ID = b"BC"

# Empty BGZF block every complete BGZF file ends with.
BGZF_EOF = bytes.fromhex("1f8b08040000000000ff0600424302001b0003000000000000000000")

# Bytes needed to tell BGZF apart from plain gzip.
MAGIC_PREFIX_SIZE = 16


class SourceCompression(Enum):
    """How an input file is encoded on disk, detected once at open time."""

    PLAIN = "plain"
    BGZF = "bgzf"
    GZIP = "gzip"
