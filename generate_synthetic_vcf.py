#!/usr/bin/env python3
"""
Synthetic VCF generator for vcf-batcher benchmarks.

Streams a VCF with a configurable number of metadata lines, samples and data
records. With --bgzip the output is BGZF compressed, which exercises the
compressed input path of the batcher.
"""

import argparse
import random
import sys

from Bio import bgzf

# Large buffer for efficient streaming writes
BUFFER_SIZE = 1024 * 1024  # 1MB

BASES = "ACGT"
GENOTYPES = ("0|0", "0|1", "1|0", "1|1", "./.")


def header_lines(num_metadata: int, num_samples: int, contig: str) -> list[str]:
    """
    Build the metadata lines and the #CHROM column header.

    Args:
        num_metadata: Total metadata lines, including the fileformat line.
        num_samples: Number of sample columns.
        contig: Chromosome name used for every record.

    Returns:
        Header lines without terminators.
    """
    lines = [
        "##fileformat=VCFv4.2",
        f"##contig=<ID={contig}>",
        '##FORMAT=<ID=GT,Number=1,Type=String,Description="Genotype">',
    ]
    for i in range(len(lines), num_metadata):
        lines.append(f"##source=generate_synthetic_vcf_{i}")
    lines = lines[: max(num_metadata, 1)]

    samples = "\t".join(f"S{i:05d}" for i in range(num_samples))
    columns = "#CHROM\tPOS\tID\tREF\tALT\tQUAL\tFILTER\tINFO\tFORMAT"
    lines.append(f"{columns}\t{samples}" if samples else columns)
    return lines


def record_line(position: int, contig: str, num_samples: int, rng: random.Random) -> str:
    ref = rng.choice(BASES)
    alt = rng.choice(BASES.replace(ref, ""))
    genotypes = "\t".join(rng.choice(GENOTYPES) for _ in range(num_samples))
    line = f"{contig}\t{position}\t.\t{ref}\t{alt}\t100\tPASS\t.\tGT"
    return f"{line}\t{genotypes}" if genotypes else line


def generate_synthetic_vcf(
    output_path: str,
    num_records: int,
    num_samples: int,
    num_metadata: int,
    contig: str,
    seed: int,
    bgzip: bool = False,
) -> int:
    """
    Write a synthetic VCF file.

    Streams output line-by-line to avoid memory issues.

    Returns:
        Total number of data records written.
    """
    rng = random.Random(seed)

    if bgzip:
        handle = bgzf.BgzfWriter(output_path, "wb")
    else:
        handle = open(output_path, "wb", buffering=BUFFER_SIZE)  # noqa: SIM115

    with handle:
        for line in header_lines(num_metadata, num_samples, contig):
            handle.write(f"{line}\n".encode())

        position = 1
        for r in range(num_records):
            position += rng.randint(1, 200)
            handle.write(f"{record_line(position, contig, num_samples, rng)}\n".encode())

            # Progress indicator every 1M records
            if (r + 1) % 1_000_000 == 0:
                print(f"  Generated {r + 1}/{num_records} records...", file=sys.stderr)

    return num_records


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Generate a synthetic VCF file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # ~1M records with 10 samples
  python generate_synthetic_vcf.py --out data/synthetic.vcf --records 1000000

  # BGZF compressed input for the batcher
  python generate_synthetic_vcf.py --out data/synthetic.vcf.gz --records 1000000 --bgzip
""",
    )

    parser.add_argument("--out", required=True, help="Output file path")
    parser.add_argument(
        "--records",
        type=int,
        default=100000,
        help="Number of data records (default: 100000)",
    )
    parser.add_argument(
        "--samples",
        type=int,
        default=10,
        help="Number of sample columns (default: 10)",
    )
    parser.add_argument(
        "--metadata",
        type=int,
        default=30,
        help="Number of ## metadata lines (default: 30)",
    )
    parser.add_argument("--contig", default="1", help="Contig name (default: 1)")
    parser.add_argument(
        "--seed",
        type=int,
        default=1,
        help="Random seed for reproducibility (default: 1)",
    )
    parser.add_argument("--bgzip", action="store_true", help="Write BGZF compressed output")

    args = parser.parse_args()

    if args.records < 0:
        parser.error("--records must not be negative")
    if args.samples < 0:
        parser.error("--samples must not be negative")

    print(f"Generating {args.records:,} records into {args.out}...", file=sys.stderr)
    total = generate_synthetic_vcf(
        output_path=args.out,
        num_records=args.records,
        num_samples=args.samples,
        num_metadata=args.metadata,
        contig=args.contig,
        seed=args.seed,
        bgzip=args.bgzip,
    )
    print(f"Done! Wrote {total:,} records to {args.out}", file=sys.stderr)


if __name__ == "__main__":
    main()
