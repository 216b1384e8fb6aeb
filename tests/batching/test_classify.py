"""Tests for line classification."""

from vcf_batcher.batching import LineKind, classify_line


def test_metadata_line() -> None:
    assert classify_line(b"##fileformat=VCFv4.2") is LineKind.METADATA
    assert classify_line(b"##") is LineKind.METADATA


def test_column_header_line() -> None:
    line = b"#CHROM\tPOS\tID\tREF\tALT\tQUAL\tFILTER\tINFO\tFORMAT\tNA00001\tNA00002\tNA00003"
    assert classify_line(line) is LineKind.COLUMN_HEADER


def test_data_record_line() -> None:
    line = b"1\t1000\t.\tA\tG\t100\tPASS\t.\tGT\t0|0\t0|0\t0|0"
    assert classify_line(line) is LineKind.DATA_RECORD


def test_blank_lines() -> None:
    assert classify_line(b"") is LineKind.BLANK
    assert classify_line(b"   \t") is LineKind.BLANK


def test_leading_whitespace_is_not_a_header() -> None:
    assert classify_line(b" #CHROM") is LineKind.DATA_RECORD
