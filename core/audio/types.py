"""
core/audio/types.py — Frozen data types for the WAV container and pitch analysis.

All types are frozen dataclasses: immutable value objects that can be
safely passed between the codec, the estimator and the I/O layer.

Design principles:
    - No I/O, no state, no side effects.
    - Header chunks are built from an AudioConfig (``from_config``) so every
      derived field (chunk size, byte rate, block align) has one source.
    - WaveFile owns the payload as immutable ``bytes``; its AudioConfig is
      derived from the header, never stored alongside it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from core.config import AudioConfig

RIFF_TAG = b"RIFF"
WAVE_TAG = b"WAVE"
FMT_TAG = b"fmt "
DATA_TAG = b"data"

PCM_FORMAT: int = 1
"""WAVE_FORMAT_PCM — the only audio format supported."""

PCM_FMT_SIZE: int = 16
"""Size of the fmt chunk body for plain PCM."""


@dataclass(frozen=True)
class RiffHeader:
    """RIFF container header (bytes 0-11).

    Invariants:
        tag == b"RIFF"
        form_type == b"WAVE"
        chunk_size == 36 + data bytes
    """

    chunk_size: int
    tag: bytes = RIFF_TAG
    form_type: bytes = WAVE_TAG

    @classmethod
    def from_config(cls, config: AudioConfig) -> RiffHeader:
        return cls(chunk_size=36 + config.data_size)


@dataclass(frozen=True)
class FormatChunk:
    """The ``fmt `` chunk (bytes 12-35) describing the PCM layout."""

    channels: int
    sample_rate_hz: int
    byte_rate: int
    block_align: int
    bits_per_sample: int
    audio_format: int = PCM_FORMAT
    size: int = PCM_FMT_SIZE
    tag: bytes = FMT_TAG

    @classmethod
    def from_config(cls, config: AudioConfig) -> FormatChunk:
        return cls(
            channels=config.channels,
            sample_rate_hz=config.sample_rate_hz,
            byte_rate=config.byte_rate,
            block_align=config.block_align,
            bits_per_sample=config.bits_per_sample,
        )

    @property
    def sample_size_bytes(self) -> int:
        return self.bits_per_sample // 8


@dataclass(frozen=True)
class DataChunk:
    """The ``data`` chunk header (bytes 36-43). ``size`` is the payload length."""

    size: int
    tag: bytes = DATA_TAG

    @classmethod
    def from_config(cls, config: AudioConfig) -> DataChunk:
        return cls(size=config.data_size)


@dataclass(frozen=True)
class WaveFile:
    """A complete mono or interleaved PCM WAV file held in memory.

    Built from an AudioConfig via ``from_config`` or reconstructed by
    ``core.audio.wav.decode``. There is no partial or streaming state.

    Invariants:
        len(payload) == data_chunk.size
    """

    riff: RiffHeader
    fmt: FormatChunk
    data_chunk: DataChunk
    payload: bytes = field(repr=False)

    def __post_init__(self) -> None:
        if len(self.payload) != self.data_chunk.size:
            raise ValueError(
                f"payload length {len(self.payload)} != data chunk size {self.data_chunk.size}"
            )

    @classmethod
    def from_config(cls, config: AudioConfig, payload: bytes) -> WaveFile:
        """Derive all three chunks from ``config`` and attach ``payload``."""
        return cls(
            riff=RiffHeader.from_config(config),
            fmt=FormatChunk.from_config(config),
            data_chunk=DataChunk.from_config(config),
            payload=bytes(payload),
        )

    @property
    def config(self) -> AudioConfig:
        """The AudioConfig described by this file's header."""
        sample_size = self.fmt.sample_size_bytes
        return AudioConfig.from_sample_count(
            self.data_chunk.size // sample_size,
            sample_size_bytes=sample_size,
            channels=self.fmt.channels,
            sample_rate_hz=self.fmt.sample_rate_hz,
        )

    def samples(self) -> np.ndarray:
        """Decode the payload into a signed 16-bit sample array.

        Raises:
            UnsupportedFormatError: The file is not 16-bit PCM.
            MalformedPayloadError: The payload has an odd byte count.
        """
        from core.audio.errors import UnsupportedFormatError
        from core.audio.samples import unpack_samples

        if self.fmt.bits_per_sample != 16:
            raise UnsupportedFormatError(
                f"Sample decoding requires 16-bit PCM, file has {self.fmt.bits_per_sample} bits"
            )
        return unpack_samples(self.payload)

    def to_bytes(self) -> bytes:
        """Serialize header and payload into the on-disk byte layout."""
        from core.audio.wav import pack_header

        return pack_header(self.riff, self.fmt, self.data_chunk) + self.payload


@dataclass(frozen=True)
class Minimum:
    """A local minimum of an AMDF series: a candidate fundamental period.

    Invariants:
        position >= 1  (lag 0 is never a candidate)
    """

    position: int
    """Lag in samples."""

    value: float
    """AMDF magnitude at that lag."""


@dataclass(frozen=True)
class PitchEstimate:
    """Result of AMDF pitch estimation over one buffer.

    Invariants:
        period_samples > 0
        frequency_hz == sample_rate_hz / period_samples
    """

    period_samples: int
    """Lag of the first local minimum."""

    frequency_hz: float
    """Fundamental frequency derived from the period."""

    sample_rate_hz: int
    """Sample rate the period was measured at."""

    minima: tuple[Minimum, ...] = field(default_factory=tuple)
    """All local minima found, in lag order."""
