"""
core/audio — Pure WAV codec and pitch analysis module.

Provides the RIFF/WAVE container codec, i16 sample packing, sine synthesis,
and AMDF fundamental-frequency estimation. All functions are pure: they take
bytes or sample arrays and return structured data. No file I/O — that lives
in ingestion/wav_io.py.

Public API:
    Types:      RiffHeader, FormatChunk, DataChunk, WaveFile, Minimum, PitchEstimate
    Samples:    pack_samples, unpack_samples
    WAV:        encode, decode
    Pitch:      compute_amdf, find_local_minima, estimate_period, to_frequency_hz,
                estimate_pitch
    Synthesis:  generate_sine
"""

from core.audio.errors import (
    AudioError,
    AudioIOError,
    FormatError,
    MalformedPayloadError,
    NoPeriodFoundError,
    SizeMismatchError,
    TruncatedHeaderError,
    TruncatedPayloadError,
    UnsupportedFormatError,
)
from core.audio.pitch import (
    compute_amdf,
    estimate_period,
    estimate_pitch,
    find_local_minima,
    to_frequency_hz,
)
from core.audio.samples import pack_samples, unpack_samples
from core.audio.synthesis import generate_sine
from core.audio.types import (
    DataChunk,
    FormatChunk,
    Minimum,
    PitchEstimate,
    RiffHeader,
    WaveFile,
)
from core.audio.wav import decode, encode

__all__ = [
    "AudioError",
    "AudioIOError",
    "DataChunk",
    "FormatChunk",
    "FormatError",
    "MalformedPayloadError",
    "Minimum",
    "NoPeriodFoundError",
    "PitchEstimate",
    "RiffHeader",
    "SizeMismatchError",
    "TruncatedHeaderError",
    "TruncatedPayloadError",
    "UnsupportedFormatError",
    "WaveFile",
    "compute_amdf",
    "decode",
    "encode",
    "estimate_period",
    "estimate_pitch",
    "find_local_minima",
    "generate_sine",
    "pack_samples",
    "to_frequency_hz",
    "unpack_samples",
]
