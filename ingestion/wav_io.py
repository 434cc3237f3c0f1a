"""
ingestion/wav_io.py — File I/O boundary for WAV files.

This is the ONLY module in the wavemaker pipeline that reads or writes files.
Everything downstream (core/audio/wav.py, core/audio/pitch.py) takes bytes
or sample arrays — never file paths.

OS-level failures are re-raised as AudioIOError with the original error
chained, so callers deal with one error taxonomy. Format errors from the
codec propagate unchanged.

Usage:
    from ingestion.wav_io import read_wave, write_wave
    wave = read_wave("/path/to/tone.wav")
    write_wave("/tmp/copy.wav", wave)
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

from core.audio.errors import AudioIOError
from core.audio.samples import pack_samples
from core.audio.types import WaveFile
from core.audio.wav import decode, encode
from core.config import AudioConfig

logger = logging.getLogger(__name__)

WAV_EXTENSIONS: frozenset[str] = frozenset({".wav", ".wave"})


def read_wave(path: str | Path) -> WaveFile:
    """Read and decode a WAV file from disk.

    Args:
        path: Path to a linear-PCM ``.wav`` file.

    Returns:
        The decoded WaveFile.

    Raises:
        FileNotFoundError: File does not exist at the given path.
        AudioIOError: The file could not be opened or read.
        FormatError, UnsupportedFormatError, TruncatedHeaderError,
        TruncatedPayloadError: The file is not a supported WAV file.
    """
    file_path = Path(path)

    if not file_path.exists():
        raise FileNotFoundError(f"WAV file not found: {file_path}")

    try:
        data = file_path.read_bytes()
    except OSError as exc:
        raise AudioIOError(str(file_path), exc.strerror or str(exc)) from exc

    logger.info("Read %d bytes from %s", len(data), file_path)
    return decode(data)


def write_bytes(path: str | Path, data: bytes) -> Path:
    """Write already-encoded WAV bytes to ``path``, replacing any existing file."""
    file_path = Path(path)
    try:
        file_path.write_bytes(data)
    except OSError as exc:
        raise AudioIOError(str(file_path), exc.strerror or str(exc)) from exc

    logger.info("Wrote %d bytes to %s", len(data), file_path)
    return file_path


def write_wave(path: str | Path, wave: WaveFile) -> Path:
    """Serialize ``wave`` and write it to ``path``."""
    return write_bytes(path, wave.to_bytes())


def write_samples(path: str | Path, config: AudioConfig, samples: np.ndarray) -> Path:
    """Pack i16 ``samples``, encode them under ``config`` and write the file.

    Raises:
        SizeMismatchError: ``len(samples) != config.sample_count``.
        MalformedPayloadError: A sample is outside the i16 range.
        AudioIOError: The file could not be written.
    """
    return write_bytes(path, encode(config, pack_samples(samples)))
