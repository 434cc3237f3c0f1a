"""
core/audio/wav.py — RIFF/WAVE container codec for linear PCM.

The header is a fixed 44-byte layout, packed and parsed with a single
little-endian struct format:

    Offset  Size  Field
    0       4     "RIFF"
    4       4     chunk size (36 + data bytes)
    8       4     "WAVE"
    12      4     "fmt "
    16      4     fmt size (16)
    20      2     audio format (1 = PCM)
    22      2     channels
    24      4     sample rate
    28      4     byte rate
    32      2     block align
    34      2     bits per sample
    36      4     "data"
    40      4     data size
    44      N     sample payload

These offsets are a binary contract. New fields must not move them.

Usage:
    from core.audio.wav import decode, encode
    raw = encode(config, pack_samples(samples))
    wave = decode(raw)
"""

from __future__ import annotations

import logging
import struct

from core.audio.errors import (
    FormatError,
    SizeMismatchError,
    TruncatedHeaderError,
    TruncatedPayloadError,
    UnsupportedFormatError,
)
from core.audio.types import (
    DATA_TAG,
    FMT_TAG,
    PCM_FMT_SIZE,
    PCM_FORMAT,
    RIFF_TAG,
    WAVE_TAG,
    DataChunk,
    FormatChunk,
    RiffHeader,
    WaveFile,
)
from core.config import AudioConfig

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_HEADER_STRUCT = struct.Struct("<4sI4s4sIHHIIHH4sI")

HEADER_SIZE: int = _HEADER_STRUCT.size
"""Total header length in bytes (44)."""

_MAX_U32 = 0xFFFFFFFF

# Bytes covered by the RIFF chunk size before any sample data.
_RIFF_HEADER_SPAN = HEADER_SIZE - 8

_VALID_BITS: frozenset[int] = frozenset({8, 16, 24, 32})

# Tag offsets checked on decode, in file order.
_TAG_OFFSETS: tuple[tuple[int, bytes], ...] = (
    (0, RIFF_TAG),
    (8, WAVE_TAG),
    (12, FMT_TAG),
    (36, DATA_TAG),
)


# ---------------------------------------------------------------------------
# Header packing
# ---------------------------------------------------------------------------


def pack_header(riff: RiffHeader, fmt: FormatChunk, data_chunk: DataChunk) -> bytes:
    """Pack the three chunk headers into their 44-byte on-disk form."""
    return _HEADER_STRUCT.pack(
        riff.tag,
        riff.chunk_size,
        riff.form_type,
        fmt.tag,
        fmt.size,
        fmt.audio_format,
        fmt.channels,
        fmt.sample_rate_hz,
        fmt.byte_rate,
        fmt.block_align,
        fmt.bits_per_sample,
        data_chunk.tag,
        data_chunk.size,
    )


def build_header(config: AudioConfig) -> bytes:
    """Return the 44 header bytes derived from ``config``.

    Raises:
        UnsupportedFormatError: The RIFF chunk size would overflow u32.
    """
    if _RIFF_HEADER_SPAN + config.data_size > _MAX_U32:
        raise UnsupportedFormatError(
            f"{config.data_size} bytes of sample data exceed the 4 GiB RIFF limit"
        )
    return pack_header(
        RiffHeader.from_config(config),
        FormatChunk.from_config(config),
        DataChunk.from_config(config),
    )


def parse_header(data: bytes) -> tuple[RiffHeader, FormatChunk, DataChunk]:
    """Parse and validate the fixed 44-byte header at the start of ``data``.

    Raises:
        TruncatedHeaderError: Fewer than 44 bytes.
        FormatError: A chunk tag differs from its ASCII literal.
        UnsupportedFormatError: fmt size != 16, audio format != 1, a zero
            channel count or sample rate, a bit depth outside 8/16/24/32,
            byte_rate or block_align inconsistent with the layout, or a
            RIFF chunk size below 36.
    """
    if len(data) < HEADER_SIZE:
        raise TruncatedHeaderError(HEADER_SIZE, len(data))

    for offset, expected in _TAG_OFFSETS:
        found = bytes(data[offset : offset + 4])
        if found != expected:
            raise FormatError(offset, expected, found)

    (
        _riff_tag,
        chunk_size,
        _wave_tag,
        _fmt_tag,
        fmt_size,
        audio_format,
        channels,
        sample_rate,
        byte_rate,
        block_align,
        bits_per_sample,
        _data_tag,
        data_size,
    ) = _HEADER_STRUCT.unpack_from(data, 0)

    if fmt_size != PCM_FMT_SIZE:
        raise UnsupportedFormatError(f"fmt chunk size must be {PCM_FMT_SIZE}, got {fmt_size}")
    if audio_format != PCM_FORMAT:
        raise UnsupportedFormatError(
            f"Only PCM (format {PCM_FORMAT}) is supported, got format {audio_format}"
        )
    if channels == 0 or sample_rate == 0 or bits_per_sample not in _VALID_BITS:
        raise UnsupportedFormatError(
            f"Invalid PCM layout: channels={channels}, rate={sample_rate}, "
            f"bits={bits_per_sample}"
        )
    expected_align = channels * (bits_per_sample // 8)
    if block_align != expected_align or byte_rate != sample_rate * expected_align:
        raise UnsupportedFormatError(
            f"Inconsistent PCM layout: block_align={block_align}, byte_rate={byte_rate}, "
            f"expected {expected_align} and {sample_rate * expected_align}"
        )
    if chunk_size < _RIFF_HEADER_SPAN:
        raise UnsupportedFormatError(
            f"RIFF chunk size must be at least {_RIFF_HEADER_SPAN}, got {chunk_size}"
        )

    riff = RiffHeader(chunk_size=chunk_size)
    fmt = FormatChunk(
        channels=channels,
        sample_rate_hz=sample_rate,
        byte_rate=byte_rate,
        block_align=block_align,
        bits_per_sample=bits_per_sample,
    )
    return riff, fmt, DataChunk(size=data_size)


# ---------------------------------------------------------------------------
# Encode / decode
# ---------------------------------------------------------------------------


def encode(config: AudioConfig, sample_bytes: bytes) -> bytes:
    """Serialize a header derived from ``config`` followed by ``sample_bytes``.

    Args:
        config: Format and duration. Every header field derives from it.
        sample_bytes: Raw little-endian sample payload, written verbatim.

    Returns:
        ``44 + len(sample_bytes)`` bytes.

    Raises:
        SizeMismatchError: ``len(sample_bytes) != config.data_size``.
    """
    if len(sample_bytes) != config.data_size:
        raise SizeMismatchError(config.data_size, len(sample_bytes))
    return build_header(config) + bytes(sample_bytes)


def decode(data: bytes) -> WaveFile:
    """Reconstruct a WaveFile from its on-disk bytes.

    Reads exactly ``data size`` payload bytes after the header. Any surplus
    (trailing chunks, padding) is ignored.

    Raises:
        TruncatedHeaderError: Fewer than 44 bytes.
        FormatError: A chunk tag mismatch (e.g. a corrupted "RIFF").
        UnsupportedFormatError: Non-PCM or unexpected fmt size.
        TruncatedPayloadError: Fewer payload bytes than declared.
    """
    riff, fmt, data_chunk = parse_header(data)

    available = len(data) - HEADER_SIZE
    if available < data_chunk.size:
        raise TruncatedPayloadError(data_chunk.size, available)
    if available > data_chunk.size:
        logger.debug(
            "Ignoring %d surplus byte(s) after declared data size %d",
            available - data_chunk.size,
            data_chunk.size,
        )

    payload = bytes(data[HEADER_SIZE : HEADER_SIZE + data_chunk.size])
    logger.debug(
        "Decoded WAV: %d ch, %d Hz, %d-bit, %d payload bytes",
        fmt.channels,
        fmt.sample_rate_hz,
        fmt.bits_per_sample,
        data_chunk.size,
    )
    return WaveFile(riff=riff, fmt=fmt, data_chunk=data_chunk, payload=payload)
