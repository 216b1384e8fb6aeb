"""Worker-pool policy for BGZF compression."""

import os
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor
from typing import TypeAlias

ExecutorClass: TypeAlias = type[ThreadPoolExecutor] | type[ProcessPoolExecutor] | None

# Environment variable to override executor selection.
VCF_BATCHER_EXECUTOR_ENV = "VCF_BATCHER_EXECUTOR"


def get_executor_class() -> ExecutorClass:
    """
    Select the executor used to compress BGZF blocks.

    Priority:
    1. VCF_BATCHER_EXECUTOR env var override ("threads", "processes", or "serial")
    2. Threads, since zlib releases the GIL while compressing

    "serial" mode compresses in the main thread - useful for debugging with breakpoints.
    """
    executor_override = os.environ.get(VCF_BATCHER_EXECUTOR_ENV, "").lower()

    if executor_override == "processes":
        return ProcessPoolExecutor
    if executor_override == "serial":
        return None
    return ThreadPoolExecutor


_POLICY_NAMES = {
    None: "serial",
    ThreadPoolExecutor: "threads",
    ProcessPoolExecutor: "processes",
}


def describe_executor(executor_class: ExecutorClass) -> str:
    """Name the pool policy, as accepted by VCF_BATCHER_EXECUTOR."""
    return _POLICY_NAMES[executor_class]


def create_executor(executor_class: ExecutorClass, workers: int | None = None) -> Executor | None:
    """Instantiate the selected pool, or None for serial execution."""
    if executor_class is None or workers == 1:
        return None
    return executor_class(max_workers=workers)
