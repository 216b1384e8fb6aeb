"""Tests for the command-line interface."""

import gzip
import tempfile
from pathlib import Path

import pytest

from vcf_batcher.cli import create_parser, main

VCF_TEXT = (
    "##fileformat=VCFv4.2\n"
    "#CHROM\tPOS\tID\tREF\tALT\tQUAL\tFILTER\tINFO\n"
    + "".join(f"1\t{1000 + i}\t.\tA\tG\t100\tPASS\t.\n" for i in range(5))
)


class TestParser:
    """Test cases for argument parsing."""

    def test_defaults(self) -> None:
        args = create_parser().parse_args(["in.vcf", "out"])
        assert args.batch_size == 25000
        assert args.compression_level == "none"
        assert args.workers is None
        assert args.progress is False

    def test_short_flags_and_case_insensitive_level(self) -> None:
        args = create_parser().parse_args(["in.vcf", "out", "-b", "10", "-c", "Fast", "-w", "2"])
        assert args.batch_size == 10
        assert args.compression_level == "fast"
        assert args.workers == 2

    def test_rejects_unknown_level(self) -> None:
        with pytest.raises(SystemExit):
            create_parser().parse_args(["in.vcf", "out", "-c", "ultra"])


class TestMain:
    """Test cases for the CLI entry point."""

    def test_writes_batches_and_prints_count(self, capsys) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            tmp_path = Path(tmp_dir)
            input_path = tmp_path / "cohort.vcf"
            input_path.write_text(VCF_TEXT, encoding="utf-8")

            exit_code = main([str(input_path), str(tmp_path / "out"), "-b", "2", "-c", "best", "--progress"])

            assert exit_code == 0
            assert capsys.readouterr().out.strip() == "3"
            names = sorted(p.name for p in (tmp_path / "out").iterdir())
            assert names == ["cohort_0001.vcf.gz", "cohort_0002.vcf.gz", "cohort_0003.vcf.gz"]
            text = gzip.decompress((tmp_path / "out" / names[-1]).read_bytes()).decode()
            assert text.splitlines()[-1] == "1\t1004\t.\tA\tG\t100\tPASS\t."

    def test_zero_batch_size_is_a_usage_error(self) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["in.vcf", "out", "-b", "0"])
        assert excinfo.value.code == 2

    def test_missing_input_returns_error_code(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            tmp_path = Path(tmp_dir)
            assert main([str(tmp_path / "missing.vcf"), str(tmp_path / "out")]) == 1
