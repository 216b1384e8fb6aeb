"""Run orchestration and worker-pool policy."""

from vcf_batcher.runner.orchestrate import BatchRun, extract_variants_to_batches, run

__all__ = ["BatchRun", "extract_variants_to_batches", "run"]
