"""Line classification and batch accumulation."""

from vcf_batcher.batching.accumulate import BatchAccumulator
from vcf_batcher.batching.classify import classify_line
from vcf_batcher.batching.types import (
    AccumulatorState,
    Batch,
    BatchingStats,
    HeaderBlock,
    LineKind,
)

__all__ = [
    "AccumulatorState",
    "Batch",
    "BatchAccumulator",
    "BatchingStats",
    "HeaderBlock",
    "LineKind",
    "classify_line",
]
