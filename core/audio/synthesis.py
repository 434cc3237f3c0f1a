"""
core/audio/synthesis.py — Test-tone generation.

Produces i16 sample buffers sized by an AudioConfig, ready for
``pack_samples`` and ``core.audio.wav.encode``.
"""

from __future__ import annotations

import numpy as np

from core.config import AudioConfig

SAMPLE_MAX: int = 32767
"""Full-scale positive i16 value."""

DEFAULT_AMPLITUDE: float = 0.2


def generate_sine(
    config: AudioConfig,
    frequency_hz: float,
    amplitude: float = DEFAULT_AMPLITUDE,
) -> np.ndarray:
    """Generate a sine tone filling ``config.sample_count`` samples.

    Sample ``i`` of each channel is
    ``trunc(SAMPLE_MAX * amplitude * sin(2π * frequency_hz * i / sample_rate_hz))``,
    truncated toward zero. Multi-channel configs repeat each frame across
    channels (interleaved).

    Args:
        config: Target format and duration.
        frequency_hz: Tone frequency. Must be > 0.
        amplitude: Linear gain in [0.0, 1.0] relative to full scale.

    Returns:
        int16 array of length ``config.sample_count``.

    Raises:
        ValueError: If frequency_hz <= 0 or amplitude is outside [0, 1].
    """
    if frequency_hz <= 0:
        raise ValueError(f"frequency_hz must be > 0, got {frequency_hz}")
    if not 0.0 <= amplitude <= 1.0:
        raise ValueError(f"amplitude must be in [0.0, 1.0], got {amplitude}")

    n_frames = config.sample_count // config.channels
    t = np.arange(n_frames, dtype=np.float64) / config.sample_rate_hz
    wave = np.trunc(SAMPLE_MAX * amplitude * np.sin(2.0 * np.pi * frequency_hz * t))
    frames = wave.astype(np.int16)

    if config.channels == 1:
        return frames

    # A fractional duration can leave a partial trailing frame; it stays silent.
    out = np.zeros(config.sample_count, dtype=np.int16)
    interleaved = np.repeat(frames, config.channels)
    out[: len(interleaved)] = interleaved
    return out
