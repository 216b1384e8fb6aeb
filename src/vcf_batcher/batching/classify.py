"""Line classification by VCF prefix convention."""

from vcf_batcher.batching.types import COLUMN_HEADER_PREFIX, METADATA_PREFIX, LineKind


def classify_line(line: bytes) -> LineKind:
    """
    Classify one line (without terminator) by its prefix.

    "##" marks metadata, a single "#" marks the column header, blank or
    whitespace-only lines are BLANK, and anything else is a data record.
    """
    if line.startswith(METADATA_PREFIX):
        return LineKind.METADATA
    if line.startswith(COLUMN_HEADER_PREFIX):
        return LineKind.COLUMN_HEADER
    if not line.strip():
        return LineKind.BLANK
    return LineKind.DATA_RECORD
