"""
Configuration dataclasses for the WAV codec and the pitch estimator.

These immutable config objects decouple parameter passing from function signatures,
so the same AudioConfig value is shared between encoding, decoding, synthesis and
analysis without any global sample rate or channel count.
"""

from __future__ import annotations

from dataclasses import dataclass

# PCM sample widths the header can describe (8, 16, 24, 32 bits).
VALID_SAMPLE_SIZES: frozenset[int] = frozenset({1, 2, 3, 4})

# Header field upper bounds.
_MAX_U16 = 0xFFFF
_MAX_U32 = 0xFFFFFFFF


@dataclass(frozen=True)
class AudioConfig:
    """
    Format and duration of a linear-PCM WAV file.

    Immutable configuration object from which every header field is derived
    deterministically. ``bits_per_sample`` and ``sample_count`` are computed
    properties so they can never disagree with the stored fields.

    Attributes:
        sample_size_bytes: Bytes per single-channel sample. Defaults to 2 (16-bit).
        channels: Number of interleaved channels. Defaults to 1 (mono).
        sample_rate_hz: Samples per second per channel. Defaults to 44100.
        duration_sec: Length of the audio in seconds. Defaults to 5.0.
            May be fractional for configs rebuilt from a decoded header.

    Example:
        >>> config = AudioConfig(duration_sec=5)
        >>> config.sample_count
        220500
        >>> config.data_size
        441000
    """

    sample_size_bytes: int = 2
    channels: int = 1
    sample_rate_hz: int = 44100
    duration_sec: float = 5.0

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.sample_size_bytes not in VALID_SAMPLE_SIZES:
            raise ValueError(
                f"sample_size_bytes must be one of {sorted(VALID_SAMPLE_SIZES)}, "
                f"got {self.sample_size_bytes}"
            )
        if not 0 < self.channels <= _MAX_U16:
            raise ValueError(f"channels must be in [1, {_MAX_U16}], got {self.channels}")
        if not 0 < self.sample_rate_hz <= _MAX_U32:
            raise ValueError(
                f"sample_rate_hz must be in [1, {_MAX_U32}], got {self.sample_rate_hz}"
            )
        if self.duration_sec < 0:
            raise ValueError(f"duration_sec must be non-negative, got {self.duration_sec}")

    @classmethod
    def from_sample_count(
        cls,
        sample_count: int,
        *,
        sample_size_bytes: int,
        channels: int,
        sample_rate_hz: int,
    ) -> AudioConfig:
        """Rebuild a config from header fields, deriving the duration."""
        if sample_count < 0:
            raise ValueError(f"sample_count must be non-negative, got {sample_count}")
        return cls(
            sample_size_bytes=sample_size_bytes,
            channels=channels,
            sample_rate_hz=sample_rate_hz,
            duration_sec=sample_count / (channels * sample_rate_hz),
        )

    @property
    def bits_per_sample(self) -> int:
        """Bit depth: always ``8 * sample_size_bytes``."""
        return 8 * self.sample_size_bytes

    @property
    def sample_count(self) -> int:
        """Total interleaved samples: ``channels * duration_sec * sample_rate_hz``."""
        return round(self.channels * self.duration_sec * self.sample_rate_hz)

    @property
    def data_size(self) -> int:
        """Size of the sample payload in bytes."""
        return self.sample_count * self.sample_size_bytes

    @property
    def byte_rate(self) -> int:
        return self.channels * self.sample_rate_hz * self.sample_size_bytes

    @property
    def block_align(self) -> int:
        return self.channels * self.sample_size_bytes

    def samples_until_ms(self, time_ms: int) -> int:
        """Number of interleaved samples covering the first ``time_ms`` milliseconds.

        Clipped to ``sample_count`` so callers can slice a payload safely.
        """
        if time_ms < 0:
            raise ValueError(f"time_ms must be non-negative, got {time_ms}")
        frames = self.sample_rate_hz * time_ms // 1000
        return min(self.sample_count, frames * self.channels)


@dataclass(frozen=True)
class AnalysisConfig:
    """
    Parameters for AMDF pitch estimation over a decoded buffer.

    Attributes:
        window_ms: Length of the analysed prefix in milliseconds. AMDF is
            O(window * lags), so this bounds the work per file.
        min_frequency_hz: Lowest fundamental of interest. Sets the largest lag
            searched (``sample_rate / min_frequency_hz``).
        workers: Thread count for the per-lag reduction. 1 runs serially.
    """

    window_ms: int = 1000
    min_frequency_hz: float = 50.0
    workers: int = 1

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.window_ms <= 0:
            raise ValueError(f"window_ms must be positive, got {self.window_ms}")
        if self.min_frequency_hz <= 0:
            raise ValueError(
                f"min_frequency_hz must be positive, got {self.min_frequency_hz}"
            )
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")


# Pre-defined configurations for common use cases

DEFAULT_AUDIO_CONFIG = AudioConfig()
"""16-bit mono at 44.1 kHz, 5 seconds."""

CD_QUALITY_STEREO_CONFIG = AudioConfig(channels=2)
"""16-bit stereo at 44.1 kHz, 5 seconds."""

TELEPHONY_CONFIG = AudioConfig(sample_rate_hz=8000, duration_sec=1.0)
"""16-bit mono at 8 kHz, 1 second."""

DEFAULT_ANALYSIS_CONFIG = AnalysisConfig()
"""Analyse the first second, down to 50 Hz, single-threaded."""
