"""
core/audio/samples.py — Signed 16-bit sample packing.

Samples are always stored little-endian (dtype ``<i2``) regardless of host
byte order, so the payload is portable and never relies on in-memory layout.
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from core.audio.errors import MalformedPayloadError

SAMPLE_DTYPE = np.dtype("<i2")
"""Little-endian signed 16-bit PCM."""

SAMPLE_WIDTH: int = SAMPLE_DTYPE.itemsize

_I16_MIN: int = -32768
_I16_MAX: int = 32767


def pack_samples(samples: Iterable[int] | np.ndarray) -> bytes:
    """Encode samples as concatenated 2-byte little-endian integers.

    Args:
        samples: Sequence or array of integers in the i16 range.

    Returns:
        ``2 * len(samples)`` bytes, in input order.

    Raises:
        MalformedPayloadError: A value does not fit in a signed 16-bit integer.
    """
    arr = np.asarray(samples if isinstance(samples, np.ndarray) else list(samples))
    if arr.size == 0:
        return b""
    if arr.dtype != SAMPLE_DTYPE:
        if not np.issubdtype(arr.dtype, np.integer):
            raise MalformedPayloadError(f"Samples must be integers, got dtype {arr.dtype}")
        lo, hi = int(arr.min()), int(arr.max())
        if lo < _I16_MIN or hi > _I16_MAX:
            raise MalformedPayloadError(
                f"Sample values must be in [{_I16_MIN}, {_I16_MAX}], got range [{lo}, {hi}]"
            )
    return arr.astype(SAMPLE_DTYPE).tobytes()


def unpack_samples(data: bytes | bytearray | memoryview) -> np.ndarray:
    """Decode 2-byte little-endian integers into a native int16 array.

    Raises:
        MalformedPayloadError: ``data`` has an odd number of bytes.
    """
    if len(data) % SAMPLE_WIDTH:
        raise MalformedPayloadError(
            f"Sample payload must have an even byte count, got {len(data)}"
        )
    return np.frombuffer(data, dtype=SAMPLE_DTYPE).astype(np.int16)
