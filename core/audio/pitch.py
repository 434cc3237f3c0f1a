"""
core/audio/pitch.py — Fundamental frequency estimation with AMDF.

The Average Magnitude Difference Function measures how different a signal
is from a lagged copy of itself:

    AMDF(k) = 1/(N-k) * Σ_{n=0}^{N-k-1} |x[n] - x[n+k]|

A periodic signal re-converges with itself at multiples of its period, so
AMDF dips towards zero there. The fundamental period is the first local
minimum (the smallest non-zero lag where the difference signal dips).

Normalizing by the shrinking window (N-k) keeps magnitudes comparable
across lags despite fewer overlapping terms at large lag.

Cost is O(N * lags). Pass ``max_lag`` (see ``max_lag_for``) to bound the
search to the lowest frequency of interest instead of all N-1 lags.

Usage:
    from core.audio.pitch import estimate_pitch
    estimate = estimate_pitch(samples, 44100, max_lag=max_lag_for(44100, 50.0))
    print(estimate.frequency_hz)
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

import numpy as np

from core.audio.errors import NoPeriodFoundError
from core.audio.types import Minimum, PitchEstimate

logger = logging.getLogger(__name__)

# Indices excluded from minimum candidacy at the end of the series.
# Index 0 is always excluded as well (AMDF(0) == 0 is self-difference).
_TAIL_GUARD: int = 2


# ---------------------------------------------------------------------------
# AMDF
# ---------------------------------------------------------------------------


def _amdf_block(x: np.ndarray, start: int, stop: int) -> np.ndarray:
    """AMDF values for lags ``start..stop-1``. ``x`` is read, never written."""
    n = len(x)
    out = np.empty(stop - start, dtype=np.float64)
    for i, k in enumerate(range(start, stop)):
        window = n - k
        out[i] = np.abs(x[:window] - x[k:]).sum() / window
    return out


def compute_amdf(
    samples: Sequence[int] | np.ndarray,
    *,
    max_lag: int | None = None,
    workers: int = 1,
) -> np.ndarray:
    """Compute the AMDF series over a sample buffer.

    Args:
        samples: Mono i16 samples (any integer sequence).
        max_lag: Largest lag to compute. None computes every lag in
            ``[0, N-2]``. Values above N-2 are clipped.
        workers: Threads used for the per-lag reduction. Each lag is
            independent and only reads ``samples``, so the result is the
            same for any worker count.

    Returns:
        float32 array indexed by lag. Length ``min(N-2, max_lag) + 1``, or
        0 for buffers with fewer than 2 samples. ``series[0] == 0``.

    Raises:
        ValueError: If max_lag < 0 or workers < 1.
    """
    if max_lag is not None and max_lag < 0:
        raise ValueError(f"max_lag must be non-negative, got {max_lag}")
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")

    # int64 so i16 differences and their sums never overflow
    x = np.asarray(samples, dtype=np.int64)
    n = len(x)
    if n < 2:
        return np.empty(0, dtype=np.float32)

    last_lag = n - 2 if max_lag is None else min(n - 2, max_lag)
    n_lags = last_lag + 1

    if workers == 1 or n_lags < 2 * workers:
        values = _amdf_block(x, 0, n_lags)
    else:
        bounds = np.linspace(0, n_lags, workers + 1, dtype=int)
        blocks = [(int(a), int(b)) for a, b in zip(bounds[:-1], bounds[1:]) if b > a]
        logger.debug("AMDF: %d lags over %d samples on %d workers", n_lags, n, len(blocks))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            parts = list(pool.map(lambda block: _amdf_block(x, *block), blocks))
        values = np.concatenate(parts)

    return values.astype(np.float32)


# ---------------------------------------------------------------------------
# Peak picking
# ---------------------------------------------------------------------------


def find_local_minima(series: Sequence[float] | np.ndarray) -> list[Minimum]:
    """Find strict local minima of an AMDF series.

    Index ``i`` qualifies iff ``1 <= i <= len(series) - 3`` and
    ``series[i]`` is strictly below both neighbours. Flat runs never
    qualify. Index 0 and the last two indices are never candidates.

    Returns:
        Minima in ascending lag order. Empty when none qualify.
    """
    s = np.asarray(series, dtype=np.float64)
    stop = len(s) - _TAIL_GUARD
    if stop <= 1:
        return []

    mid = s[1:stop]
    mask = (mid < s[: stop - 1]) & (mid < s[2 : stop + 1])
    positions = np.flatnonzero(mask) + 1

    return [Minimum(position=int(p), value=float(s[p])) for p in positions]


def estimate_period(minima: Sequence[Minimum]) -> int:
    """Return the fundamental period in samples: the first minimum's lag.

    Raises:
        NoPeriodFoundError: ``minima`` is empty (silence, noise, or
            non-periodic input).
    """
    if not minima:
        raise NoPeriodFoundError("No local minimum in AMDF series: no discernible pitch")
    return minima[0].position


def to_frequency_hz(period: int, sample_rate_hz: int) -> float:
    """Convert a period in samples to a frequency in Hz.

    Raises:
        ValueError: If period <= 0.
    """
    if period <= 0:
        raise ValueError(f"period must be > 0, got {period}")
    return sample_rate_hz / period


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------


def max_lag_for(sample_rate_hz: int, min_frequency_hz: float) -> int:
    """Largest lag needed to detect ``min_frequency_hz``.

    Adds the tail guard so the period of the lowest frequency is still a
    candidate and not one of the excluded final indices.
    """
    if min_frequency_hz <= 0:
        raise ValueError(f"min_frequency_hz must be > 0, got {min_frequency_hz}")
    return math.ceil(sample_rate_hz / min_frequency_hz) + _TAIL_GUARD


def estimate_pitch(
    samples: Sequence[int] | np.ndarray,
    sample_rate_hz: int,
    *,
    max_lag: int | None = None,
    workers: int = 1,
) -> PitchEstimate:
    """Run AMDF, peak picking, and period→frequency conversion.

    Raises:
        NoPeriodFoundError: The AMDF series has no local minimum.
    """
    series = compute_amdf(samples, max_lag=max_lag, workers=workers)
    minima = find_local_minima(series)
    logger.debug("AMDF: %d lag(s), %d local minima", len(series), len(minima))

    period = estimate_period(minima)
    return PitchEstimate(
        period_samples=period,
        frequency_hz=to_frequency_hz(period, sample_rate_hz),
        sample_rate_hz=sample_rate_hz,
        minima=tuple(minima),
    )
