"""VCF Batcher - Split large VCF files into smaller, independently valid batches."""

from pathlib import Path

from vcf_batcher.config import DEFAULT_BATCH_SIZE, CompressionLevel
from vcf_batcher.errors import (
    BatcherError,
    BatchIOError,
    ConfigError,
    DecompressionError,
    FormatError,
)
from vcf_batcher.runner.orchestrate import extract_variants_to_batches, run


def py_extract_variants_to_batches(
    file_path: str,
    output_path: str | Path,
    batch_size: int,
    compression_level: str | None = None,
) -> None:
    """
    Converts a large VCF file into batches of smaller VCF files containing a fixed number of records.

    Kept under this name for callers of the compiled extension module.

    :param file_path: The VCF file to split into batches.
    :param output_path: The directory where the batches will be saved.
    :param batch_size: The number of records to include in each batch.
    :param compression_level: "Default", "Fast", "Best" or None for uncompressed output.
    """
    extract_variants_to_batches(file_path, output_path, batch_size, compression_level)


__all__ = [
    "DEFAULT_BATCH_SIZE",
    "BatchIOError",
    "BatcherError",
    "CompressionLevel",
    "ConfigError",
    "DecompressionError",
    "FormatError",
    "extract_variants_to_batches",
    "py_extract_variants_to_batches",
    "run",
]
