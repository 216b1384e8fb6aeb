"""Output side: one VCF file per batch, plain or BGZF compressed."""

import logging
from collections.abc import Iterator
from concurrent.futures import Executor
from pathlib import Path

from vcf_batcher.batching.types import Batch
from vcf_batcher.config import CompressionLevel
from vcf_batcher.errors import BatchIOError
from vcf_batcher.reader.types import BUFFER_SIZE
from vcf_batcher.writer.bgzf import compress_block, compress_blocks, iter_payload_chunks

logger = logging.getLogger(__name__)

_COMPRESSED_SUFFIXES = (".gz", ".bgz")


def input_base_name(input_path: str | Path) -> str:
    """Strip the directory and the .vcf/.vcf.gz style suffixes from a path."""
    name = Path(input_path).name
    for suffix in _COMPRESSED_SUFFIXES:
        if name.lower().endswith(suffix):
            name = name[: -len(suffix)]
            break
    if name.lower().endswith(".vcf"):
        name = name[: -len(".vcf")]
    return name or "batch"


def iter_batch_lines(batch: Batch) -> Iterator[bytes]:
    """Header lines followed by the batch's records, without terminators."""
    yield from batch.header.lines
    yield from batch.records


class BatchWriter:
    """Writes batches to <output_dir>/<base_name>_<index>.vcf[.gz]."""

    def __init__(
        self,
        output_dir: str | Path,
        base_name: str,
        compression: CompressionLevel | None = None,
        executor: Executor | None = None,
    ):
        self._output_dir = Path(output_dir)
        self._base_name = base_name
        self._compression = compression
        self._executor = executor
        self._prepared = False

    @property
    def output_dir(self) -> Path:
        return self._output_dir

    def prepare(self) -> None:
        """Create the output directory and its parents (idempotent)."""
        if self._prepared:
            return
        try:
            self._output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise BatchIOError(
                f"cannot create output directory: {exc.strerror or exc}", path=self._output_dir
            ) from exc
        self._prepared = True

    def path_for(self, index: int) -> Path:
        file_name = f"{self._base_name}_{index:04d}.vcf"
        if self._compression is not None:
            file_name += ".gz"
        return self._output_dir / file_name

    def write(self, batch: Batch) -> Path:
        """
        Persist one batch and return the path of the closed file.

        Raises:
            BatchIOError: The file cannot be opened or written.
        """
        self.prepare()
        path = self.path_for(batch.index)

        try:
            with open(path, "wb", buffering=BUFFER_SIZE) as handle:
                if self._compression is None:
                    for line in iter_batch_lines(batch):
                        handle.write(line + b"\n")
                else:
                    self._write_bgzf(handle, batch)
        except OSError as exc:
            raise BatchIOError(
                f"cannot write batch file: {exc.strerror or exc}",
                path=path,
                batch_index=batch.index,
            ) from exc

        logger.debug("Wrote %s (%d records)", path.name, len(batch))
        return path

    def _write_bgzf(self, handle, batch: Batch) -> None:
        level = self._compression.value
        chunks = iter_payload_chunks(iter_batch_lines(batch))
        for block in compress_blocks(chunks, level, self._executor):
            handle.write(block)
        handle.write(compress_block(b"", level))
