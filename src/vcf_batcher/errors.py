"""Error hierarchy raised by the batching engine."""

from pathlib import Path


class BatcherError(Exception):
    """Base class for every error raised by vcf_batcher."""


class BatchIOError(BatcherError, OSError):
    """Opening, reading or writing a file or directory failed."""

    def __init__(
        self,
        message: str,
        path: str | Path | None = None,
        batch_index: int | None = None,
    ):
        super().__init__(message)
        self.path = path
        self.batch_index = batch_index

    def __str__(self) -> str:
        message = self.args[0] if self.args else ""
        if self.batch_index is not None:
            message = f"batch {self.batch_index}: {message}"
        if self.path is not None:
            message = f"{message} ({self.path})"
        return message


class DecompressionError(BatcherError):
    """The input looked compressed but its stream is corrupt or truncated."""

    def __init__(self, message: str, path: str | Path | None = None):
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        message = self.args[0] if self.args else ""
        if self.path is not None:
            return f"{message} ({self.path})"
        return message


class FormatError(BatcherError, ValueError):
    """The input is not a structurally valid VCF file."""

    def __init__(self, message: str, line_number: int | None = None):
        super().__init__(message)
        self.line_number = line_number

    def __str__(self) -> str:
        message = self.args[0] if self.args else ""
        if self.line_number is not None:
            return f"line {self.line_number}: {message}"
        return message


class ConfigError(BatcherError, ValueError):
    """Invalid run configuration, detected before any file is opened."""
