"""Output side: batch files and BGZF encoding."""

from vcf_batcher.writer.bgzf import compress_block, compress_blocks, iter_payload_chunks
from vcf_batcher.writer.output import BatchWriter, input_base_name

__all__ = [
    "BatchWriter",
    "compress_block",
    "compress_blocks",
    "input_base_name",
    "iter_payload_chunks",
]
