"""BGZF block encoding with optional parallel compression."""

import io
import itertools
from collections.abc import Iterable, Iterator
from concurrent.futures import Executor, ProcessPoolExecutor

from Bio import bgzf

# Uncompressed bytes per block, as bgzip uses, so incompressible data still fits in 64KB.
BGZF_BLOCK_SIZE = 0xFF00

# Each worker process receives 8 blocks per task.
PROCESS_POOL_CHUNKSIZE = 8


def compress_block(data: bytes, level: int = 6) -> bytes:
    """
    Encode data as exactly one BGZF block.

    An empty payload produces the standard 28-byte BGZF end-of-file marker.
    """
    if len(data) > BGZF_BLOCK_SIZE:
        raise ValueError(f"block payload of {len(data)} bytes exceeds {BGZF_BLOCK_SIZE}")

    buffer = io.BytesIO()
    writer = bgzf.BgzfWriter(fileobj=buffer, compresslevel=level)
    writer.write(data)
    writer.flush()
    return buffer.getvalue()


def iter_payload_chunks(
    lines: Iterable[bytes],
    block_size: int = BGZF_BLOCK_SIZE,
) -> Iterator[bytes]:
    """Join newline-terminated lines and cut the stream into block-sized chunks."""
    pending = bytearray()
    for line in lines:
        pending += line
        pending += b"\n"
        while len(pending) >= block_size:
            yield bytes(pending[:block_size])
            del pending[:block_size]
    if pending:
        yield bytes(pending)


def compress_blocks(
    chunks: Iterable[bytes],
    level: int,
    executor: Executor | None = None,
) -> Iterator[bytes]:
    """
    Compress chunks into BGZF blocks, yielding them in input order.

    With an executor the chunks are compressed concurrently; Executor.map
    still returns results in submission order, so block order never changes.
    """
    if executor is None:
        return (compress_block(chunk, level) for chunk in chunks)

    levels = itertools.repeat(level)
    if isinstance(executor, ProcessPoolExecutor):
        return executor.map(compress_block, chunks, levels, chunksize=PROCESS_POOL_CHUNKSIZE)
    return executor.map(compress_block, chunks, levels)
