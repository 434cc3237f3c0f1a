"""
Tests for core/audio/types.py — frozen dataclass invariants.

Validates:
    - All types are frozen (immutable)
    - Chunks derive their fields from AudioConfig
    - WaveFile enforces len(payload) == data_chunk.size
    - WaveFile.config is rebuilt from the header
"""

import pytest

from core.audio.types import (
    DataChunk,
    FormatChunk,
    Minimum,
    PitchEstimate,
    RiffHeader,
    WaveFile,
)
from core.config import AudioConfig

CONFIG = AudioConfig(channels=2, sample_rate_hz=8000, duration_sec=0.5)

# ---------------------------------------------------------------------------
# Header chunks
# ---------------------------------------------------------------------------


class TestChunksFromConfig:
    def test_riff_chunk_size(self):
        riff = RiffHeader.from_config(CONFIG)
        assert riff.chunk_size == 36 + 16000
        assert riff.tag == b"RIFF"
        assert riff.form_type == b"WAVE"

    def test_format_chunk_fields(self):
        fmt = FormatChunk.from_config(CONFIG)
        assert fmt.tag == b"fmt "
        assert fmt.size == 16
        assert fmt.audio_format == 1
        assert fmt.channels == 2
        assert fmt.sample_rate_hz == 8000
        assert fmt.byte_rate == 32000
        assert fmt.block_align == 4
        assert fmt.bits_per_sample == 16
        assert fmt.sample_size_bytes == 2

    def test_data_chunk_size(self):
        data = DataChunk.from_config(CONFIG)
        assert data.tag == b"data"
        assert data.size == 16000

    def test_riff_is_frozen(self):
        riff = RiffHeader.from_config(CONFIG)
        with pytest.raises((TypeError, AttributeError)):
            riff.chunk_size = 0  # type: ignore[misc]


# ---------------------------------------------------------------------------
# WaveFile
# ---------------------------------------------------------------------------


class TestWaveFile:
    def test_from_config(self):
        wave = WaveFile.from_config(CONFIG, bytes(CONFIG.data_size))
        assert wave.data_chunk.size == len(wave.payload)
        assert wave.config == CONFIG

    def test_payload_length_mismatch_raises(self):
        with pytest.raises(ValueError, match="payload length 10 != data chunk size 16000"):
            WaveFile.from_config(CONFIG, bytes(10))

    def test_is_frozen(self):
        wave = WaveFile.from_config(CONFIG, bytes(CONFIG.data_size))
        with pytest.raises((TypeError, AttributeError)):
            wave.payload = b""  # type: ignore[misc]

    def test_to_bytes_length(self):
        wave = WaveFile.from_config(CONFIG, bytes(CONFIG.data_size))
        assert len(wave.to_bytes()) == 44 + CONFIG.data_size

    def test_samples_decodes_payload(self):
        config = AudioConfig(sample_rate_hz=2, duration_sec=1)
        wave = WaveFile.from_config(config, b"\x01\x00\xff\xff")
        assert wave.samples().tolist() == [1, -1]

    def test_repr_omits_payload(self):
        wave = WaveFile.from_config(CONFIG, bytes(CONFIG.data_size))
        assert "payload" not in repr(wave)


# ---------------------------------------------------------------------------
# Minimum / PitchEstimate
# ---------------------------------------------------------------------------


class TestMinimum:
    def test_creation(self):
        m = Minimum(position=100, value=0.5)
        assert m.position == 100
        assert m.value == 0.5

    def test_equality(self):
        assert Minimum(position=3, value=1.0) == Minimum(position=3, value=1.0)

    def test_is_frozen(self):
        m = Minimum(position=3, value=1.0)
        with pytest.raises((TypeError, AttributeError)):
            m.position = 4  # type: ignore[misc]


class TestPitchEstimate:
    def test_default_minima_empty_tuple(self):
        estimate = PitchEstimate(period_samples=100, frequency_hz=441.0, sample_rate_hz=44100)
        assert estimate.minima == ()

    def test_is_hashable(self):
        estimate = PitchEstimate(
            period_samples=100,
            frequency_hz=441.0,
            sample_rate_hz=44100,
            minima=(Minimum(position=100, value=0.0),),
        )
        assert len({estimate, estimate}) == 1
