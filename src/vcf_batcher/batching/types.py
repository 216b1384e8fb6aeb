"""Shared type definitions for line classification and batching."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TypeAlias

DataRecord: TypeAlias = bytes

METADATA_PREFIX = b"##"
COLUMN_HEADER_PREFIX = b"#"


class LineKind(Enum):
    """Role of a single input line."""

    METADATA = "metadata"
    COLUMN_HEADER = "column_header"
    DATA_RECORD = "data_record"
    BLANK = "blank"


class AccumulatorState(Enum):
    """States of the batch accumulator."""

    COLLECTING_HEADER = "collecting_header"
    COLLECTING_RECORDS = "collecting_records"
    FLUSHING = "flushing"
    DONE = "done"


@dataclass(frozen=True, slots=True)
class HeaderBlock:
    """Metadata lines plus the column-header line, captured once per input."""

    metadata: tuple[bytes, ...]
    column_header: bytes

    @property
    def lines(self) -> Iterator[bytes]:
        yield from self.metadata
        yield self.column_header

    def __len__(self) -> int:
        return len(self.metadata) + 1


@dataclass(frozen=True, slots=True)
class Batch:
    """Up to batch_size consecutive records sharing the input's header block."""

    index: int
    header: HeaderBlock
    records: tuple[DataRecord, ...]
    first_line: int | None = None

    def __len__(self) -> int:
        return len(self.records)


@dataclass
class BatchingStats:
    """Statistics from one batching run."""

    lines_read: int = 0
    header_lines: int = 0
    records: int = 0
    blank_lines: int = 0
    batches_written: int = 0
    paths: list[Path] = field(default_factory=list)
