"""Run configuration: batch size, output compression and worker count."""

from dataclasses import dataclass
from enum import Enum

from vcf_batcher.errors import ConfigError

DEFAULT_BATCH_SIZE = 25000


class CompressionLevel(Enum):
    """BGZF output compression tiers, valued by their zlib level."""

    FAST = 1
    DEFAULT = 6
    BEST = 9


# Accepted spellings for parse_compression_level (case-insensitive).
COMPRESSION_CHOICES = ("none", "default", "fast", "best")


def parse_compression_level(value: str | CompressionLevel | None) -> CompressionLevel | None:
    """
    Normalise a user-supplied compression level.

    None and "none" both mean uncompressed output. Unknown names raise
    ConfigError rather than silently disabling compression.
    """
    if value is None or isinstance(value, CompressionLevel):
        return value

    name = str(value).strip().lower()
    if name == "none":
        return None
    if name in COMPRESSION_CHOICES:
        return CompressionLevel[name.upper()]
    raise ConfigError(
        f"unknown compression level {value!r}, expected one of {', '.join(COMPRESSION_CHOICES)}"
    )


def validate_batch_size(batch_size: object) -> int:
    """Return batch_size if it is an integer >= 1, else raise ConfigError."""
    if isinstance(batch_size, bool) or not isinstance(batch_size, int):
        raise ConfigError(f"batch_size must be an integer, got {batch_size!r}")
    if batch_size < 1:
        raise ConfigError(f"batch_size must be at least 1, got {batch_size}")
    return batch_size


@dataclass(frozen=True, slots=True)
class BatchingConfig:
    """Validated settings for one batching run."""

    batch_size: int = DEFAULT_BATCH_SIZE
    compression: CompressionLevel | None = None
    workers: int | None = None

    def __post_init__(self) -> None:
        validate_batch_size(self.batch_size)
        if self.compression is not None and not isinstance(self.compression, CompressionLevel):
            raise ConfigError(f"compression must be a CompressionLevel, got {self.compression!r}")
        if self.workers is not None and (
            isinstance(self.workers, bool) or not isinstance(self.workers, int) or self.workers < 1
        ):
            raise ConfigError(f"workers must be a positive integer, got {self.workers!r}")

    @classmethod
    def from_values(
        cls,
        batch_size: object,
        compression_level: str | CompressionLevel | None = None,
        workers: int | None = None,
    ) -> "BatchingConfig":
        """Build a config from loosely typed caller input."""
        return cls(
            batch_size=batch_size,
            compression=parse_compression_level(compression_level),
            workers=workers,
        )
