# simulations/common.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple
import math
import time


DEFAULT_PROBS: Tuple[float, ...] = (0.05, 0.25, 0.5, 0.75, 0.95)


@dataclass(frozen=True)
class ExperimentSpec:
    """
    Parameters of one sampling experiment.
    """
    sample_size: int
    trials: int
    population_size: int

    def __post_init__(self) -> None:
        if self.population_size <= 0:
            raise ValueError("population_size must be > 0")
        if self.sample_size <= 0:
            raise ValueError("sample_size must be > 0")
        if self.sample_size > self.population_size:
            raise ValueError(
                f"sample_size must be <= population_size "
                f"(got {self.sample_size} > {self.population_size})"
            )
        if self.trials < 0:
            raise ValueError("trials must be >= 0")


@dataclass(frozen=True)
class SummaryStats:
    """
    Summary of an accumulator of sample means.
    """
    mean: float
    std: float  # population stddev
    min: float
    max: float
    quantiles: Dict[float, float]


def quantile(values: Sequence[float], p: float) -> float:
    """
    Quantile by linear interpolation between order statistics
    (R's default, type 7):

        h = (n - 1) * p
        q = x[floor(h)] + (h - floor(h)) * (x[floor(h) + 1] - x[floor(h)])
    """
    if not values:
        raise ValueError("values must be non-empty")
    if p < 0.0 or p > 1.0:
        raise ValueError("p must be in [0, 1]")

    xs = sorted(values)
    h = (len(xs) - 1) * p
    lo = int(math.floor(h))
    if lo + 1 >= len(xs):
        return float(xs[-1])
    frac = h - lo
    return xs[lo] + frac * (xs[lo + 1] - xs[lo])


def summarize_means(
    values: Sequence[float],
    probs: Sequence[float] = DEFAULT_PROBS,
) -> SummaryStats:
    """
    Mean, population std, min/max and selected quantiles. Read-only over
    `values`.
    """
    if not values:
        raise ValueError("values must be non-empty")

    n = len(values)
    total = 0.0
    for v in values:
        total += v
    mean = total / n

    var_acc = 0.0
    for v in values:
        d = v - mean
        var_acc += d * d
    std = math.sqrt(var_acc / n)

    qs = {}
    for p in probs:
        qs[p] = quantile(values, p)

    return SummaryStats(
        mean=mean,
        std=std,
        min=min(values),
        max=max(values),
        quantiles=qs,
    )


def histogram(
    values: Sequence[float],
    bins: int,
    value_range: Optional[Tuple[float, float]] = None,
) -> Tuple[List[int], List[float]]:
    """
    Bucket values into `bins` equal-width bins over `value_range`
    (defaults to (min, max)). Bins are half-open except the last, which
    includes its right edge; values outside the range are dropped.

    Returns (counts, edges) with len(edges) == bins + 1.
    """
    if bins <= 0:
        raise ValueError("bins must be > 0")
    if value_range is None:
        if not values:
            raise ValueError("values must be non-empty when value_range is omitted")
        value_range = (min(values), max(values))

    lo, hi = value_range
    if hi <= lo:
        raise ValueError("value_range must have hi > lo")

    width = (hi - lo) / bins
    edges = [lo + i * width for i in range(bins)] + [hi]
    counts = [0] * bins

    for v in values:
        if v < lo or v > hi:
            continue
        idx = int((v - lo) / width)
        if idx >= bins:
            idx = bins - 1
        counts[idx] += 1

    return counts, edges


@dataclass
class ExperimentResult:
    """
    Common return type for all simulation methods.
    """
    method: str
    spec: ExperimentSpec
    means: List[float]
    population_mean: float

    stats: Optional[SummaryStats] = field(init=False)
    runtime_s: Optional[float] = None
    meta: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Sanity: one mean per trial
        if len(self.means) != self.spec.trials:
            raise ValueError(
                f"means length mismatch: expected {self.spec.trials}, got {len(self.means)}"
            )

        self.stats = summarize_means(self.means) if self.means else None


class Timer:
    """
    Wall-clock duration of a trial loop, read from `elapsed_s` once the
    `with` block exits (None while it is still running).
    """
    def __init__(self) -> None:
        self._t0: Optional[float] = None
        self.elapsed_s: Optional[float] = None

    def __enter__(self) -> "Timer":
        self.elapsed_s = None
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.elapsed_s = time.perf_counter() - self._t0


def format_stats_line(r: ExperimentResult) -> str:
    """
    Human-friendly one-liner for printing from the report tool.
    """
    s = r.stats
    if s is None:
        return f"{r.method}: trials=0 (no means drawn)"
    return (
        f"{r.method}: trials={r.spec.trials}, k={r.spec.sample_size}, "
        f"mean={s.mean:.3f} (population {r.population_mean:.3f}), std={s.std:.3f}, "
        f"min={s.min:.1f}, max={s.max:.1f}"
        + (f", runtime={r.runtime_s:.3f}s" if r.runtime_s is not None else "")
    )


def format_quantiles_line(r: ExperimentResult) -> str:
    if r.stats is None:
        return "quantiles: n/a"
    parts = [f"{p * 100:g}%={q:.2f}" for p, q in r.stats.quantiles.items()]
    return "quantiles: " + ", ".join(parts)
