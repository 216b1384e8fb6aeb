"""Command-line interface for vcf-batcher."""

import argparse
import logging
import sys
import time

from tqdm import tqdm

from vcf_batcher.config import COMPRESSION_CHOICES, DEFAULT_BATCH_SIZE
from vcf_batcher.errors import BatcherError
from vcf_batcher.runner.orchestrate import run

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="vcf-batcher",
        description="Cut a VCF file into smaller batches for multiprocessing or distributed computing.",
    )

    parser.add_argument(
        "input_path",
        help="Path to the input file (.vcf, .vcf.gz or bgzipped)",
    )

    parser.add_argument(
        "output_path",
        help="Directory to write the batch files to (created if missing)",
    )

    parser.add_argument(
        "-b",
        "--batch-size",
        type=int,
        default=DEFAULT_BATCH_SIZE,
        help=f"Data records per batch, excluding the header (default: {DEFAULT_BATCH_SIZE})",
    )

    parser.add_argument(
        "-c",
        "--compression-level",
        type=str.lower,
        choices=COMPRESSION_CHOICES,
        default="none",
        help="BGZF compression level for the batches (default: none)",
    )

    parser.add_argument(
        "-w",
        "--workers",
        type=int,
        default=None,
        help="Compression worker count (default: executor default)",
    )

    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar on stderr",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Configure logging based on --log-level
    log_level = getattr(logging, args.log_level)
    configure_logging(log_level)

    if args.batch_size < 1:
        parser.error(f"--batch-size must be at least 1, got {args.batch_size}")
    if args.workers is not None and args.workers < 1:
        parser.error(f"--workers must be at least 1, got {args.workers}")

    start = time.perf_counter()
    progress = tqdm(unit=" batches", disable=not args.progress, file=sys.stderr)
    records_done = 0

    def on_batch(path, batch) -> None:
        nonlocal records_done
        records_done += len(batch)
        progress.update(1)
        progress.set_postfix(records=records_done, refresh=False)

    try:
        with progress:
            stats = run(
                args.input_path,
                args.output_path,
                args.batch_size,
                args.compression_level,
                workers=args.workers,
                on_batch=on_batch,
            )
    except BatcherError as exc:
        logger.error("%s", exc)
        return 1

    elapsed = time.perf_counter() - start
    logger.info(
        "Extracted variants into batches of size %d in: %.2f seconds",
        args.batch_size,
        elapsed,
    )
    print(stats.batches_written)
    return 0


if __name__ == "__main__":
    sys.exit(main())
