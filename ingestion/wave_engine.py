"""
ingestion/wave_engine.py — High-level orchestrator for the WAV pipeline.

WaveEngine wires the I/O boundary to the pure core:

    .wav file
        │
        ├─ read_wave()          [ingestion/wav_io.py — I/O boundary]
        │       ↓
        ├─ WaveFile.samples()   [core/audio/samples.py — i16 unpacking]
        │       ↓
        └─ estimate_pitch()     [core/audio/pitch.py — AMDF]

    AudioConfig + frequency
        │
        ├─ generate_sine()      [core/audio/synthesis.py]
        │       ↓
        └─ write_samples()      [ingestion/wav_io.py — encode + write]

This module is in `ingestion/` because it coordinates file I/O. It owns
no format or analysis logic.

Usage:
    engine = WaveEngine()
    engine.write_sine("/tmp/a4.wav", frequency_hz=440.0)
    estimate = engine.analyze_pitch("/tmp/a4.wav")
    print(estimate.frequency_hz)
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

import numpy as np

from core.audio.errors import UnsupportedFormatError
from core.audio.pitch import estimate_pitch, max_lag_for
from core.audio.synthesis import DEFAULT_AMPLITUDE, generate_sine
from core.audio.types import PitchEstimate, WaveFile
from core.config import (
    DEFAULT_ANALYSIS_CONFIG,
    DEFAULT_AUDIO_CONFIG,
    AnalysisConfig,
    AudioConfig,
)
from ingestion.wav_io import read_wave, write_samples

logger = logging.getLogger(__name__)


@dataclass
class SampleReport:
    """Decoded samples of a file up to a time limit.

    Attributes:
        path:       File that was read.
        config:     AudioConfig derived from the file header.
        time_ms:    Requested time limit in milliseconds.
        samples:    Interleaved i16 samples covering at most ``time_ms``.
    """

    path: Path
    config: AudioConfig
    time_ms: int
    samples: np.ndarray = field(repr=False)


class WaveEngine:
    """Single integration point between WAV file I/O and the pure core.

    Args:
        analysis: Default analysis parameters for ``analyze_pitch``.
    """

    def __init__(self, analysis: AnalysisConfig = DEFAULT_ANALYSIS_CONFIG) -> None:
        self.analysis = analysis

    def read(self, path: str | Path) -> WaveFile:
        """Read and decode a WAV file."""
        return read_wave(path)

    def read_samples_until(self, path: str | Path, time_ms: int = 1000) -> SampleReport:
        """Decode a file and keep the samples of its first ``time_ms`` milliseconds."""
        wave = read_wave(path)
        config = wave.config
        limit = config.samples_until_ms(time_ms)
        samples = wave.samples()[:limit]
        logger.info(
            "%s: %d ch, %d Hz, %d-bit, %.3f s; %d sample(s) in first %d ms",
            path,
            config.channels,
            config.sample_rate_hz,
            config.bits_per_sample,
            config.duration_sec,
            len(samples),
            time_ms,
        )
        return SampleReport(path=Path(path), config=config, time_ms=time_ms, samples=samples)

    def write_sine(
        self,
        path: str | Path,
        *,
        frequency_hz: float,
        amplitude: float = DEFAULT_AMPLITUDE,
        config: AudioConfig = DEFAULT_AUDIO_CONFIG,
    ) -> Path:
        """Synthesize a sine tone under ``config`` and write it to ``path``."""
        samples = generate_sine(config, frequency_hz, amplitude)
        written = write_samples(path, config, samples)
        logger.info(
            "Wrote %.1f Hz sine (amplitude %.2f, %d samples) to %s",
            frequency_hz,
            amplitude,
            len(samples),
            written,
        )
        return written

    def analyze_pitch(
        self,
        path: str | Path,
        analysis: AnalysisConfig | None = None,
    ) -> PitchEstimate:
        """Estimate the fundamental frequency of a mono WAV file.

        Only the first ``analysis.window_ms`` milliseconds are analysed and
        lags are searched up to ``sample_rate / analysis.min_frequency_hz``.

        Raises:
            UnsupportedFormatError: The file is not mono 16-bit PCM.
            NoPeriodFoundError: No discernible pitch in the window.
        """
        return self.analyze_wave(read_wave(path), analysis, label=str(path))

    def analyze_wave(
        self,
        wave: WaveFile,
        analysis: AnalysisConfig | None = None,
        *,
        label: str = "<memory>",
    ) -> PitchEstimate:
        """Estimate the fundamental frequency of an already-decoded WaveFile.

        Raises:
            UnsupportedFormatError: The file is not mono 16-bit PCM.
            NoPeriodFoundError: No discernible pitch in the window.
        """
        params = analysis or self.analysis
        config = wave.config
        if config.channels != 1:
            raise UnsupportedFormatError(
                f"Pitch analysis requires a mono file, got {config.channels} channels"
            )

        window = wave.samples()[: config.samples_until_ms(params.window_ms)]
        t0 = time.perf_counter()
        estimate = estimate_pitch(
            window,
            config.sample_rate_hz,
            max_lag=max_lag_for(config.sample_rate_hz, params.min_frequency_hz),
            workers=params.workers,
        )
        logger.info(
            "%s: period %d samples, %.2f Hz (%.1f ms)",
            label,
            estimate.period_samples,
            estimate.frequency_hz,
            (time.perf_counter() - t0) * 1000,
        )
        return estimate
