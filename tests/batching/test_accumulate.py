"""Tests for the batch accumulator state machine."""

import pytest

from vcf_batcher.batching import AccumulatorState, BatchAccumulator, HeaderBlock, classify_line
from vcf_batcher.errors import ConfigError, FormatError

METADATA = [b"##fileformat=VCFv4.2", b"##contig=<ID=1>", b"##source=test"]
COLUMN_HEADER = b"#CHROM\tPOS\tID\tREF\tALT\tQUAL\tFILTER\tINFO"


def records(count: int) -> list[bytes]:
    return [f"1\t{1000 + i}\t.\tA\tG\t100\tPASS\t.".encode() for i in range(count)]


def feed_all(accumulator: BatchAccumulator, lines: list[bytes]) -> list:
    """Feed lines with 1-based numbering and return every emitted batch."""
    batches = []
    line_number = 0
    for line_number, line in enumerate(lines, 1):
        batch = accumulator.feed(classify_line(line), line, line_number)
        if batch is not None:
            batches.append(batch)
    final = accumulator.finish(line_number)
    if final is not None:
        batches.append(final)
    return batches


class TestBatchAccumulator:
    """Test cases for BatchAccumulator."""

    def test_splits_records_into_fixed_size_batches(self) -> None:
        data = records(10)
        batches = feed_all(BatchAccumulator(4), [*METADATA, COLUMN_HEADER, *data])

        assert [len(b) for b in batches] == [4, 4, 2]
        assert [b.index for b in batches] == [1, 2, 3]
        assert [r for b in batches for r in b.records] == data

    def test_header_block_shared_by_every_batch(self) -> None:
        batches = feed_all(BatchAccumulator(3), [*METADATA, COLUMN_HEADER, *records(7)])

        expected = HeaderBlock(metadata=tuple(METADATA), column_header=COLUMN_HEADER)
        assert all(b.header == expected for b in batches)
        assert all(b.header is batches[0].header for b in batches)
        assert list(expected.lines) == [*METADATA, COLUMN_HEADER]
        assert len(expected) == 4

    def test_exact_multiple_has_no_empty_trailing_batch(self) -> None:
        batches = feed_all(BatchAccumulator(5), [COLUMN_HEADER, *records(10)])
        assert [len(b) for b in batches] == [5, 5]

    def test_header_only_input_yields_one_empty_batch(self) -> None:
        batches = feed_all(BatchAccumulator(100), [*METADATA, COLUMN_HEADER])

        assert len(batches) == 1
        assert batches[0].records == ()
        assert batches[0].first_line is None

    def test_first_line_tracks_input_position(self) -> None:
        batches = feed_all(BatchAccumulator(2), [*METADATA, COLUMN_HEADER, *records(3)])
        assert [b.first_line for b in batches] == [5, 7]

    def test_state_transitions(self) -> None:
        accumulator = BatchAccumulator(2)
        assert accumulator.state is AccumulatorState.COLLECTING_HEADER

        accumulator.feed(classify_line(COLUMN_HEADER), COLUMN_HEADER, 1)
        assert accumulator.state is AccumulatorState.COLLECTING_HEADER
        assert accumulator.header is None

        record = records(1)[0]
        accumulator.feed(classify_line(record), record, 2)
        assert accumulator.state is AccumulatorState.COLLECTING_RECORDS
        assert accumulator.header is not None

        accumulator.finish(2)
        assert accumulator.state is AccumulatorState.DONE
        assert accumulator.batches_emitted == 1

    def test_trailing_blank_line_is_tolerated(self) -> None:
        batches = feed_all(BatchAccumulator(10), [COLUMN_HEADER, *records(2), b""])
        assert [len(b) for b in batches] == [2]


class TestBatchAccumulatorErrors:
    """Structural and configuration errors."""

    @pytest.mark.parametrize("batch_size", [0, -1, 2.5, True, "10"])
    def test_invalid_batch_size(self, batch_size) -> None:
        with pytest.raises(ConfigError):
            BatchAccumulator(batch_size)

    def test_data_record_before_column_header(self) -> None:
        lines = [METADATA[0], records(1)[0], COLUMN_HEADER]
        with pytest.raises(FormatError) as excinfo:
            feed_all(BatchAccumulator(4), lines)
        assert excinfo.value.line_number == 2
        assert "line 2" in str(excinfo.value)

    def test_header_after_data_record(self) -> None:
        lines = [COLUMN_HEADER, *records(2), b"##late=metadata"]
        with pytest.raises(FormatError) as excinfo:
            feed_all(BatchAccumulator(4), lines)
        assert excinfo.value.line_number == 4

    def test_duplicate_column_header(self) -> None:
        with pytest.raises(FormatError) as excinfo:
            feed_all(BatchAccumulator(4), [COLUMN_HEADER, COLUMN_HEADER])
        assert excinfo.value.line_number == 2

    def test_metadata_after_column_header(self) -> None:
        with pytest.raises(FormatError) as excinfo:
            feed_all(BatchAccumulator(4), [COLUMN_HEADER, METADATA[0]])
        assert excinfo.value.line_number == 2

    def test_missing_column_header(self) -> None:
        with pytest.raises(FormatError, match="column-header"):
            feed_all(BatchAccumulator(4), METADATA)

    def test_empty_input(self) -> None:
        with pytest.raises(FormatError):
            feed_all(BatchAccumulator(4), [])

    def test_blank_line_inside_file(self) -> None:
        lines = [COLUMN_HEADER, records(1)[0], b"", records(1)[0]]
        with pytest.raises(FormatError) as excinfo:
            feed_all(BatchAccumulator(4), lines)
        assert excinfo.value.line_number == 3

    def test_two_trailing_blank_lines(self) -> None:
        with pytest.raises(FormatError):
            feed_all(BatchAccumulator(4), [COLUMN_HEADER, *records(1), b"", b""])

    def test_feed_after_finish(self) -> None:
        accumulator = BatchAccumulator(4)
        accumulator.feed(classify_line(COLUMN_HEADER), COLUMN_HEADER, 1)
        accumulator.finish(1)
        with pytest.raises(FormatError):
            accumulator.feed(classify_line(COLUMN_HEADER), COLUMN_HEADER, 2)
