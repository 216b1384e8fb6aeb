"""Batch accumulator: header capture and fixed-size record grouping."""

from vcf_batcher.batching.types import (
    AccumulatorState,
    Batch,
    DataRecord,
    HeaderBlock,
    LineKind,
)
from vcf_batcher.config import validate_batch_size
from vcf_batcher.errors import FormatError


class BatchAccumulator:
    """
    State machine turning classified lines into batches.

    COLLECTING_HEADER -> COLLECTING_RECORDS -> FLUSHING -> (COLLECTING_RECORDS | DONE)

    The header block is frozen on the first data record and shared by every
    batch. Only the current batch's records are buffered.
    """

    def __init__(self, batch_size: int):
        self._batch_size = validate_batch_size(batch_size)
        self.state = AccumulatorState.COLLECTING_HEADER
        self._metadata: list[bytes] = []
        self._column_header: bytes | None = None
        self._header: HeaderBlock | None = None
        self._records: list[DataRecord] = []
        self._first_line: int | None = None
        self._batch_index = 0
        self._pending_blank: int | None = None

    @property
    def header(self) -> HeaderBlock | None:
        """The frozen header block, or None while still collecting it."""
        return self._header

    @property
    def batches_emitted(self) -> int:
        return self._batch_index

    def feed(self, kind: LineKind, line: bytes, line_number: int) -> Batch | None:
        """
        Consume one classified line.

        Returns a completed batch when the record counter reaches batch_size,
        otherwise None. A blank line is tolerated only as the final line.

        Raises:
            FormatError: The line is out of place for the current state.
        """
        if self.state is AccumulatorState.DONE:
            raise FormatError("line received after the input was finished", line_number)

        if self._pending_blank is not None:
            raise FormatError("blank line is only allowed at the end of the file", self._pending_blank)

        if kind is LineKind.BLANK:
            self._pending_blank = line_number
            return None

        if self.state is AccumulatorState.COLLECTING_HEADER:
            return self._feed_header(kind, line, line_number)
        return self._feed_record(kind, line, line_number)

    def finish(self, line_number: int | None = None) -> Batch | None:
        """
        Flush whatever remains at end of input and move to DONE.

        A header-only input yields one batch with no records so every run
        produces at least one file. Returns None when the last batch was
        already emitted full.

        Raises:
            FormatError: The input never supplied a column-header line.
        """
        if self.state is AccumulatorState.DONE:
            raise FormatError("input was already finished", line_number)

        if self.state is AccumulatorState.COLLECTING_HEADER:
            self._header = self._freeze_header(line_number)

        self.state = AccumulatorState.FLUSHING
        batch = None
        if self._records or self._batch_index == 0:
            batch = self._take_batch()
        self.state = AccumulatorState.DONE
        return batch

    def _feed_header(self, kind: LineKind, line: bytes, line_number: int) -> Batch | None:
        if kind is LineKind.METADATA:
            if self._column_header is not None:
                raise FormatError("metadata line after the column-header line", line_number)
            self._metadata.append(line)
            return None

        if kind is LineKind.COLUMN_HEADER:
            if self._column_header is not None:
                raise FormatError("duplicate column-header line", line_number)
            self._column_header = line
            return None

        # First data record: the header block is complete.
        if self._column_header is None:
            raise FormatError("data record before the column-header line", line_number)
        self._header = self._freeze_header(line_number)
        self.state = AccumulatorState.COLLECTING_RECORDS
        return self._feed_record(kind, line, line_number)

    def _feed_record(self, kind: LineKind, line: bytes, line_number: int) -> Batch | None:
        if kind is not LineKind.DATA_RECORD:
            label = "metadata" if kind is LineKind.METADATA else "column-header"
            raise FormatError(f"{label} line after the first data record", line_number)

        if not self._records:
            self._first_line = line_number
        self._records.append(line)

        if len(self._records) < self._batch_size:
            return None

        self.state = AccumulatorState.FLUSHING
        batch = self._take_batch()
        self.state = AccumulatorState.COLLECTING_RECORDS
        return batch

    def _freeze_header(self, line_number: int | None) -> HeaderBlock:
        if self._column_header is None:
            raise FormatError("missing column-header line (#CHROM ...)", line_number)
        return HeaderBlock(metadata=tuple(self._metadata), column_header=self._column_header)

    def _take_batch(self) -> Batch:
        self._batch_index += 1
        batch = Batch(
            index=self._batch_index,
            header=self._header,
            records=tuple(self._records),
            first_line=self._first_line,
        )
        self._records = []
        self._first_line = None
        return batch
