import logging
import time
from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

from vcf_batcher.batching.accumulate import BatchAccumulator
from vcf_batcher.batching.classify import classify_line
from vcf_batcher.batching.types import Batch, BatchingStats, LineKind
from vcf_batcher.config import BatchingConfig, CompressionLevel
from vcf_batcher.reader.source import detect_compression, iter_lines
from vcf_batcher.runner.execution import (
    VCF_BATCHER_EXECUTOR_ENV,
    create_executor,
    describe_executor,
    get_executor_class,
)
from vcf_batcher.writer.output import BatchWriter, input_base_name

logger = logging.getLogger(__name__)

BatchCallback: TypeAlias = Callable[[Path, Batch], None]


class BatchRun:
    """
    Owns the state of one batching run.

    Nothing here is module-global, so a long-lived host process can call the
    entry point repeatedly.
    """

    def __init__(
        self,
        input_path: str | Path,
        output_dir: str | Path,
        config: BatchingConfig,
        on_batch: BatchCallback | None = None,
    ):
        self.input_path = Path(input_path)
        self.output_dir = Path(output_dir)
        self.config = config
        self.stats = BatchingStats()
        self._on_batch = on_batch
        self._accumulator = BatchAccumulator(config.batch_size)

    def execute(self) -> BatchingStats:
        """
        Stream the input once, writing each batch as soon as it is complete.

        At most one batch of records is held in memory. The first error from
        any stage aborts the run; files already written are left in place.
        """
        total_start = time.perf_counter()
        source_compression = detect_compression(self.input_path)

        output_compression = self.config.compression
        executor_class = get_executor_class() if output_compression is not None else None
        executor_name = describe_executor(executor_class)
        output_desc = "none" if output_compression is None else output_compression.name.lower()

        logger.info(
            f"Starting: file={self.input_path.name}, input={source_compression.value}, "
            f"batch_size={self.config.batch_size}, compression={output_desc}"
        )
        logger.debug(
            "Compression executor=%s, workers=%s (override via %s)",
            executor_name,
            "auto" if self.config.workers is None else self.config.workers,
            VCF_BATCHER_EXECUTOR_ENV,
        )

        executor = create_executor(executor_class, self.config.workers)
        try:
            writer = BatchWriter(
                self.output_dir,
                input_base_name(self.input_path),
                output_compression,
                executor,
            )
            writer.prepare()

            line_number = 0
            for line_number, line in enumerate(iter_lines(self.input_path, source_compression), 1):
                kind = classify_line(line)
                self._count(kind)
                batch = self._accumulator.feed(kind, line, line_number)
                if batch is not None:
                    self._save(writer, batch)

            batch = self._accumulator.finish(line_number or None)
            if batch is not None:
                self._save(writer, batch)
        finally:
            if executor is not None:
                executor.shutdown()

        total_time = time.perf_counter() - total_start
        logger.info(
            "Saved %d batches (%d records) to %s in %.2fs",
            self.stats.batches_written,
            self.stats.records,
            self.output_dir,
            total_time,
        )
        return self.stats

    def _count(self, kind: LineKind) -> None:
        self.stats.lines_read += 1
        if kind is LineKind.DATA_RECORD:
            self.stats.records += 1
        elif kind is LineKind.BLANK:
            self.stats.blank_lines += 1
        else:
            self.stats.header_lines += 1

    def _save(self, writer: BatchWriter, batch: Batch) -> None:
        t_start = time.perf_counter()
        path = writer.write(batch)
        self.stats.batches_written += 1
        self.stats.paths.append(path)

        if len(batch) < self.config.batch_size:
            logger.info("Saving final batch with %d records to %s", len(batch), path.name)
        else:
            logger.info("Saving %s", path.name)
        logger.debug("Batch %d written in %.3fs", batch.index, time.perf_counter() - t_start)

        if self._on_batch is not None:
            self._on_batch(path, batch)


def run(
    input_path: str | Path,
    output_dir: str | Path,
    batch_size: int,
    compression_level: str | CompressionLevel | None = None,
    *,
    workers: int | None = None,
    on_batch: BatchCallback | None = None,
) -> BatchingStats:
    """
    Split a VCF file into batches and return run statistics.

    Configuration is validated before any file is opened.

    Raises:
        ConfigError: batch_size, compression_level or workers is invalid.
        BatchIOError: A file or directory could not be opened, read or written.
        DecompressionError: The compressed input is corrupt or truncated.
        FormatError: The input is not structurally valid VCF.
    """
    config = BatchingConfig.from_values(batch_size, compression_level, workers)
    return BatchRun(input_path, output_dir, config, on_batch=on_batch).execute()


def extract_variants_to_batches(
    input_file_path: str | Path,
    output_directory_path: str | Path,
    batch_size: int,
    compression_level: str | CompressionLevel | None = None,
) -> int:
    """
    Convert a large VCF file into batches of smaller VCF files.

    Every batch holds at most batch_size data records and the full header.
    Files are named <output_directory_path>/<input_base_name>_<NNNN>.vcf[.gz]
    with NNNN counting from 0001.

    Returns:
        Number of batch files written.
    """
    stats = run(input_file_path, output_directory_path, batch_size, compression_level)
    return stats.batches_written
