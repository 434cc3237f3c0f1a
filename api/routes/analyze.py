"""
api/routes/analyze.py — WAV inspection and pitch endpoints.

Endpoints:
    POST /analyze/header  — Decoded RIFF/fmt/data header fields
    POST /analyze/pitch   — AMDF fundamental-frequency estimate

Both endpoints accept a file path on the server filesystem and delegate
to WaveEngine in ingestion/wave_engine.py. Analysis work is bounded by
the request window (capped by AnalysisLimits) and the lowest frequency
searched.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.deps import AnalysisLimits, get_analysis_limits, get_wave_engine
from api.schemas.audio import (
    HeaderRequest,
    HeaderResponse,
    MinimumOut,
    PitchRequest,
    PitchResponse,
)
from core.audio.errors import AudioIOError, NoPeriodFoundError
from core.config import AnalysisConfig
from ingestion.wave_engine import WaveEngine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/analyze", tags=["analyze"])


# ---------------------------------------------------------------------------
# POST /analyze/header
# ---------------------------------------------------------------------------


@router.post("/header", response_model=HeaderResponse)
def analyze_header(
    request: HeaderRequest,
    engine: WaveEngine = Depends(get_wave_engine),
) -> HeaderResponse:
    """Decode a WAV file and return its header fields.

    Raises:
        422: File not found, or not a supported PCM WAV file.
        500: The file could not be read.
    """
    try:
        wave = engine.read(request.file_path)
        config = wave.config
    except FileNotFoundError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except AudioIOError as exc:
        logger.error("WAV read failed: %s", exc)
        raise HTTPException(status_code=500, detail=f"WAV read failed: {exc}") from exc

    return HeaderResponse(
        riff_chunk_size=wave.riff.chunk_size,
        fmt_size=wave.fmt.size,
        audio_format=wave.fmt.audio_format,
        channels=wave.fmt.channels,
        sample_rate_hz=wave.fmt.sample_rate_hz,
        byte_rate=wave.fmt.byte_rate,
        block_align=wave.fmt.block_align,
        bits_per_sample=wave.fmt.bits_per_sample,
        data_size=wave.data_chunk.size,
        sample_count=config.sample_count,
        duration_sec=config.duration_sec,
    )


# ---------------------------------------------------------------------------
# POST /analyze/pitch
# ---------------------------------------------------------------------------


@router.post("/pitch", response_model=PitchResponse)
def analyze_pitch(
    request: PitchRequest,
    engine: WaveEngine = Depends(get_wave_engine),
    limits: AnalysisLimits = Depends(get_analysis_limits),
) -> PitchResponse:
    """Estimate the fundamental frequency of a mono 16-bit WAV file.

    Silence, noise, and other non-periodic input return ``voiced=false``
    with HTTP 200: no pitch is an expected outcome, not an error.

    Raises:
        422: Window above the configured limit, file not found, or not a
             supported mono 16-bit PCM WAV file.
        500: The file could not be read.
    """
    if request.window_ms > limits.max_window_ms:
        raise HTTPException(
            status_code=422,
            detail=f"window_ms must be <= {limits.max_window_ms}, got {request.window_ms}",
        )

    analysis = AnalysisConfig(
        window_ms=request.window_ms,
        min_frequency_hz=request.min_frequency_hz,
        workers=limits.workers,
    )
    try:
        wave = engine.read(request.file_path)
        estimate = engine.analyze_wave(wave, analysis, label=request.file_path)
    except NoPeriodFoundError:
        return PitchResponse(
            voiced=False,
            sample_rate_hz=wave.fmt.sample_rate_hz,
            window_ms=request.window_ms,
        )
    except FileNotFoundError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except AudioIOError as exc:
        logger.error("Pitch analysis failed: %s", exc)
        raise HTTPException(status_code=500, detail=f"Pitch analysis failed: {exc}") from exc

    return PitchResponse(
        voiced=True,
        period_samples=estimate.period_samples,
        frequency_hz=estimate.frequency_hz,
        sample_rate_hz=estimate.sample_rate_hz,
        window_ms=request.window_ms,
        minima_count=len(estimate.minima),
        minima=[MinimumOut(position=m.position, value=m.value) for m in estimate.minima],
    )
