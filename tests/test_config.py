"""Tests for run configuration."""

import pytest

from vcf_batcher import config
from vcf_batcher.config import BatchingConfig, CompressionLevel, parse_compression_level
from vcf_batcher.errors import ConfigError


class TestBatchingConfig:
    """Test cases for BatchingConfig."""

    def test_from_values_validates_batch_size_once(self, monkeypatch) -> None:
        calls = []
        original = config.validate_batch_size

        def counting(value):
            calls.append(value)
            return original(value)

        monkeypatch.setattr(config, "validate_batch_size", counting)
        settings = BatchingConfig.from_values(10, "fast")

        assert calls == [10]
        assert settings.batch_size == 10
        assert settings.compression is CompressionLevel.FAST

    @pytest.mark.parametrize("batch_size", [0, -5, "7", None])
    def test_from_values_rejects_bad_batch_size(self, batch_size) -> None:
        with pytest.raises(ConfigError):
            BatchingConfig.from_values(batch_size)

    def test_rejects_bad_workers(self) -> None:
        with pytest.raises(ConfigError):
            BatchingConfig(batch_size=1, workers=0)


def test_parse_compression_level() -> None:
    assert parse_compression_level(None) is None
    assert parse_compression_level("None") is None
    assert parse_compression_level("BEST") is CompressionLevel.BEST
    assert parse_compression_level(CompressionLevel.DEFAULT) is CompressionLevel.DEFAULT
    with pytest.raises(ConfigError):
        parse_compression_level("ultra")
