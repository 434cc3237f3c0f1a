"""
core/audio/errors.py — Typed errors for the WAV codec and pitch estimator.

Every decode, encode and analysis failure is one of these, never a silent
truncation or an IndexError. Structural errors also subclass ValueError so
callers that map bad input to a 4xx response can catch them generically.

NoPeriodFoundError is deliberately NOT a ValueError: it is the expected
outcome for silence, noise, or non-periodic input.
"""

from __future__ import annotations


class AudioError(Exception):
    """Base class for all wavemaker errors."""


class AudioIOError(AudioError, OSError):
    """Open/read/write failure. The original OSError is kept as __cause__."""

    def __init__(self, path: str, reason: str) -> None:
        """Initialize with the offending path and the OS error message."""
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class FormatError(AudioError, ValueError):
    """A chunk tag does not match its expected ASCII literal."""

    def __init__(self, offset: int, expected: bytes, found: bytes) -> None:
        """Initialize with the tag offset and the expected/actual bytes."""
        self.offset = offset
        self.expected = expected
        self.found = found
        super().__init__(f"Expected tag {expected!r} at offset {offset}, found {found!r}")


class UnsupportedFormatError(AudioError, ValueError):
    """Non-PCM audio format or an unexpected fixed-size field."""


class TruncatedError(AudioError, ValueError):
    """Fewer bytes are present than the format requires."""

    def __init__(self, what: str, expected: int, actual: int) -> None:
        """Initialize with a description and the expected/actual byte counts."""
        self.expected = expected
        self.actual = actual
        super().__init__(f"Truncated {what}: expected {expected} bytes, got {actual}")


class TruncatedHeaderError(TruncatedError):
    """The input is shorter than the 44-byte header."""

    def __init__(self, expected: int, actual: int) -> None:
        """Initialize with the header size and the actual input length."""
        super().__init__("header", expected, actual)


class TruncatedPayloadError(TruncatedError):
    """The payload is shorter than the declared data chunk size."""

    def __init__(self, expected: int, actual: int) -> None:
        """Initialize with the declared data size and the bytes available."""
        super().__init__("payload", expected, actual)


class SizeMismatchError(AudioError, ValueError):
    """The sample payload length disagrees with the AudioConfig."""

    def __init__(self, expected: int, actual: int) -> None:
        """Initialize with the configured data size and the payload length."""
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Payload is {actual} bytes but config declares {expected} bytes of sample data"
        )


class MalformedPayloadError(AudioError, ValueError):
    """Sample bytes cannot be interpreted as signed 16-bit samples."""


class NoPeriodFoundError(AudioError):
    """AMDF analysis found no local minimum: no discernible pitch."""
