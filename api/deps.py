"""
FastAPI dependency providers.

Reads analysis limits from the environment once and provides a shared
WaveEngine singleton so the engine is created once and reused across
requests.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from core.config import AnalysisConfig
from ingestion.wave_engine import WaveEngine

_DEFAULT_MAX_WINDOW_MS = 5000


@dataclass(frozen=True)
class AnalysisLimits:
    """Per-request bounds on analysis work.

    Attributes:
        max_window_ms: Longest window a request may analyse.
        workers: Threads for the AMDF reduction.
    """

    max_window_ms: int = _DEFAULT_MAX_WINDOW_MS
    workers: int = 1


_limits: AnalysisLimits | None = None


def get_analysis_limits() -> AnalysisLimits:
    """
    Return cached ``AnalysisLimits`` read from the environment.

    ``WAVEMAKER_MAX_WINDOW_MS`` and ``WAVEMAKER_AMDF_WORKERS`` are read on
    the first call only.
    """
    global _limits  # noqa: PLW0603
    if _limits is None:
        _limits = AnalysisLimits(
            max_window_ms=int(
                os.environ.get("WAVEMAKER_MAX_WINDOW_MS", str(_DEFAULT_MAX_WINDOW_MS))
            ),
            workers=max(1, int(os.environ.get("WAVEMAKER_AMDF_WORKERS", "1"))),
        )
    return _limits


_engine: WaveEngine | None = None


def get_wave_engine() -> WaveEngine:
    """Return a cached ``WaveEngine`` singleton configured with the env limits."""
    global _engine  # noqa: PLW0603
    if _engine is None:
        limits = get_analysis_limits()
        _engine = WaveEngine(analysis=AnalysisConfig(workers=limits.workers))
    return _engine
