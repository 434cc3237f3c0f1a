"""
Shared fixtures for the test suite.

Centralizes reusable test infrastructure (configs, synthetic tones, WAV
files on disk) so individual test files don't repeat setup boilerplate.
"""

from pathlib import Path

import numpy as np
import pytest

from core.audio.samples import pack_samples
from core.audio.synthesis import generate_sine
from core.audio.wav import encode
from core.config import AudioConfig

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

SHORT_MONO_CONFIG = AudioConfig(sample_rate_hz=44100, duration_sec=0.5)
"""16-bit mono, 44.1 kHz, 0.5 s — 22050 samples, fast to analyse."""


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def make_wav_bytes(config: AudioConfig, samples: np.ndarray) -> bytes:
    """Encode ``samples`` under ``config`` into complete WAV bytes."""
    return encode(config, pack_samples(samples))


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def short_config() -> AudioConfig:
    return SHORT_MONO_CONFIG


@pytest.fixture
def sine_441(short_config: AudioConfig) -> np.ndarray:
    """441 Hz at 44.1 kHz: an exact 100-sample period."""
    return generate_sine(short_config, 441.0, amplitude=0.5)


@pytest.fixture
def sine_wav_path(tmp_path: Path, short_config: AudioConfig, sine_441: np.ndarray) -> Path:
    """A 441 Hz mono WAV file on disk."""
    path = tmp_path / "sine_441.wav"
    path.write_bytes(make_wav_bytes(short_config, sine_441))
    return path


@pytest.fixture
def silent_wav_path(tmp_path: Path, short_config: AudioConfig) -> Path:
    """An all-zero mono WAV file on disk."""
    path = tmp_path / "silence.wav"
    silence = np.zeros(short_config.sample_count, dtype=np.int16)
    path.write_bytes(make_wav_bytes(short_config, silence))
    return path
