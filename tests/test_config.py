"""
Tests for core.config module.

These tests verify AudioConfig / AnalysisConfig validation, derived fields,
and predefined configurations.
"""

import pytest

from core.config import (
    CD_QUALITY_STEREO_CONFIG,
    DEFAULT_ANALYSIS_CONFIG,
    DEFAULT_AUDIO_CONFIG,
    TELEPHONY_CONFIG,
    AnalysisConfig,
    AudioConfig,
)


class TestAudioConfigDerivedFields:
    """Test header fields derived from AudioConfig."""

    def test_default_values(self) -> None:
        config = AudioConfig()
        assert config.sample_size_bytes == 2
        assert config.channels == 1
        assert config.sample_rate_hz == 44100
        assert config.duration_sec == 5.0

    def test_five_second_mono_scenario(self) -> None:
        config = AudioConfig(sample_size_bytes=2, channels=1, sample_rate_hz=44100, duration_sec=5)
        assert config.bits_per_sample == 16
        assert config.sample_count == 220500
        assert config.data_size == 441000

    def test_sample_count_scales_with_channels(self) -> None:
        config = AudioConfig(channels=2, sample_rate_hz=8000, duration_sec=1)
        assert config.sample_count == 16000

    def test_bits_per_sample_is_eight_times_sample_size(self) -> None:
        for size in (1, 2, 3, 4):
            assert AudioConfig(sample_size_bytes=size).bits_per_sample == 8 * size

    def test_byte_rate_and_block_align(self) -> None:
        config = AudioConfig(channels=2, sample_rate_hz=48000)
        assert config.byte_rate == 2 * 48000 * 2
        assert config.block_align == 4

    def test_from_sample_count_round_trips(self) -> None:
        config = AudioConfig.from_sample_count(
            12345, sample_size_bytes=2, channels=1, sample_rate_hz=44100
        )
        assert config.sample_count == 12345
        assert config.duration_sec == pytest.approx(12345 / 44100)

    def test_from_sample_count_negative_raises(self) -> None:
        with pytest.raises(ValueError, match="sample_count must be non-negative"):
            AudioConfig.from_sample_count(
                -1, sample_size_bytes=2, channels=1, sample_rate_hz=44100
            )


class TestSamplesUntilMs:
    """Test time-limit to sample-count conversion."""

    def test_fifty_ms_mono(self) -> None:
        assert DEFAULT_AUDIO_CONFIG.samples_until_ms(50) == 2205

    def test_stereo_counts_interleaved_samples(self) -> None:
        assert CD_QUALITY_STEREO_CONFIG.samples_until_ms(10) == 2 * 441

    def test_clipped_to_sample_count(self) -> None:
        assert TELEPHONY_CONFIG.samples_until_ms(60_000) == TELEPHONY_CONFIG.sample_count

    def test_zero_ms(self) -> None:
        assert DEFAULT_AUDIO_CONFIG.samples_until_ms(0) == 0

    def test_negative_ms_raises(self) -> None:
        with pytest.raises(ValueError, match="time_ms must be non-negative"):
            DEFAULT_AUDIO_CONFIG.samples_until_ms(-1)


class TestAudioConfigValidation:
    """Test AudioConfig parameter validation."""

    def test_invalid_sample_size_raises(self) -> None:
        with pytest.raises(ValueError, match="sample_size_bytes must be one of"):
            AudioConfig(sample_size_bytes=5)

    def test_zero_channels_raises(self) -> None:
        with pytest.raises(ValueError, match="channels must be in"):
            AudioConfig(channels=0)

    def test_too_many_channels_raises(self) -> None:
        with pytest.raises(ValueError, match="channels must be in"):
            AudioConfig(channels=70000)

    def test_zero_sample_rate_raises(self) -> None:
        with pytest.raises(ValueError, match="sample_rate_hz must be in"):
            AudioConfig(sample_rate_hz=0)

    def test_negative_duration_raises(self) -> None:
        with pytest.raises(ValueError, match="duration_sec must be non-negative"):
            AudioConfig(duration_sec=-1.0)

    def test_zero_duration_is_valid(self) -> None:
        assert AudioConfig(duration_sec=0).sample_count == 0


class TestAudioConfigImmutability:
    """Test that AudioConfig is frozen."""

    def test_cannot_modify_sample_rate(self) -> None:
        config = AudioConfig()
        with pytest.raises(AttributeError):
            config.sample_rate_hz = 48000  # type: ignore[misc]

    def test_is_hashable(self) -> None:
        config_set = {AudioConfig(), AudioConfig()}
        assert len(config_set) == 1


class TestAnalysisConfig:
    """Test AnalysisConfig defaults and validation."""

    def test_default_config(self) -> None:
        assert DEFAULT_ANALYSIS_CONFIG.window_ms == 1000
        assert DEFAULT_ANALYSIS_CONFIG.min_frequency_hz == 50.0
        assert DEFAULT_ANALYSIS_CONFIG.workers == 1

    def test_zero_window_raises(self) -> None:
        with pytest.raises(ValueError, match="window_ms must be positive"):
            AnalysisConfig(window_ms=0)

    def test_zero_min_frequency_raises(self) -> None:
        with pytest.raises(ValueError, match="min_frequency_hz must be positive"):
            AnalysisConfig(min_frequency_hz=0.0)

    def test_zero_workers_raises(self) -> None:
        with pytest.raises(ValueError, match="workers must be >= 1"):
            AnalysisConfig(workers=0)


class TestPredefinedConfigs:
    """Test predefined configuration constants."""

    def test_default_audio_config(self) -> None:
        assert DEFAULT_AUDIO_CONFIG.sample_count == 220500

    def test_cd_quality_stereo(self) -> None:
        assert CD_QUALITY_STEREO_CONFIG.channels == 2
        assert CD_QUALITY_STEREO_CONFIG.sample_rate_hz == 44100

    def test_telephony(self) -> None:
        assert TELEPHONY_CONFIG.sample_rate_hz == 8000
        assert TELEPHONY_CONFIG.sample_count == 8000
