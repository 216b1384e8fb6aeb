"""Input side: compression detection and line streaming."""

from vcf_batcher.reader.source import detect_compression, iter_lines
from vcf_batcher.reader.types import SourceCompression

__all__ = ["SourceCompression", "detect_compression", "iter_lines"]
