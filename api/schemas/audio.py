"""
api/schemas/audio.py — Pydantic request/response schemas for WAV endpoints.

Covers:
    /analyze/header  — HeaderRequest / HeaderResponse
    /analyze/pitch   — PitchRequest / PitchResponse
"""

from pydantic import BaseModel, Field

# ---------------------------------------------------------------------------
# /analyze/header
# ---------------------------------------------------------------------------


class HeaderRequest(BaseModel):
    """Request body for POST /analyze/header."""

    file_path: str = Field(
        ...,
        description="Absolute path to a WAV file on the server filesystem.",
    )


class HeaderResponse(BaseModel):
    """Response body for POST /analyze/header."""

    riff_chunk_size: int = Field(..., ge=36)
    fmt_size: int
    audio_format: int
    channels: int = Field(..., ge=1)
    sample_rate_hz: int = Field(..., gt=0)
    byte_rate: int
    block_align: int
    bits_per_sample: int
    data_size: int = Field(..., ge=0)
    sample_count: int = Field(..., ge=0)
    duration_sec: float = Field(..., ge=0.0)


# ---------------------------------------------------------------------------
# /analyze/pitch
# ---------------------------------------------------------------------------


class PitchRequest(BaseModel):
    """Request body for POST /analyze/pitch."""

    file_path: str = Field(
        ...,
        description="Absolute path to a mono 16-bit WAV file on the server filesystem.",
    )
    window_ms: int = Field(
        default=1000,
        gt=0,
        description="Analyse only the first N milliseconds (default 1000).",
    )
    min_frequency_hz: float = Field(
        default=50.0,
        ge=20.0,
        description="Lowest fundamental to search for. Bounds the lag search.",
    )


class MinimumOut(BaseModel):
    """A local minimum of the AMDF series."""

    position: int = Field(..., ge=1)
    value: float = Field(..., ge=0.0)


class PitchResponse(BaseModel):
    """Response body for POST /analyze/pitch.

    ``voiced`` is False (and period/frequency are None) when the window
    has no discernible pitch.
    """

    voiced: bool
    period_samples: int | None = None
    frequency_hz: float | None = None
    sample_rate_hz: int
    window_ms: int
    minima_count: int = Field(default=0, ge=0)
    minima: list[MinimumOut] = Field(default_factory=list)
