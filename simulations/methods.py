# simulations/methods.py

from __future__ import annotations

import random
from typing import Callable, Dict, List, Sequence

from .common import ExperimentSpec, ExperimentResult, Timer

from sample_means.mean_sampler import MeanSampler, sample_mean


SimFn = Callable[[ExperimentSpec, Sequence[float], int], ExperimentResult]


def simulate_append(spec: ExperimentSpec, population: Sequence[float], seed: int) -> ExperimentResult:
    """
    Grow the accumulator inside the loop: start empty, append one mean per trial.
    """
    rng = random.Random(seed)
    means: List[float] = []

    with Timer() as t:
        for _ in range(spec.trials):
            draw = rng.sample(population, spec.sample_size)
            means.append(sample_mean(draw))

    return ExperimentResult(
        method="append",
        spec=spec,
        means=means,
        population_mean=sample_mean(population),
        runtime_s=t.elapsed_s,
        meta={"accumulator": "append"},
    )


def simulate_preallocated(spec: ExperimentSpec, population: Sequence[float], seed: int) -> ExperimentResult:
    """
    Allocate the accumulator once (trials slots) and fill it by index.

    This is the shape the loop takes when the result length is known before
    iterating, and the one used by the report tool by default.
    """
    rng = random.Random(seed)
    means = [0.0] * spec.trials

    with Timer() as t:
        for i in range(spec.trials):
            draw = rng.sample(population, spec.sample_size)
            means[i] = sample_mean(draw)

    return ExperimentResult(
        method="preallocated",
        spec=spec,
        means=means,
        population_mean=sample_mean(population),
        runtime_s=t.elapsed_s,
        meta={"accumulator": "preallocated"},
    )


def simulate_sampler(spec: ExperimentSpec, population: Sequence[float], seed: int) -> ExperimentResult:
    """
    Delegate the trial loop to MeanSampler.

    MeanSampler seeds its own random.Random the same way, so for a given seed
    this returns exactly the same means as the two hand-written loops.
    """
    sampler = MeanSampler(population, spec.sample_size, seed=seed)

    with Timer() as t:
        means = sampler.draw(spec.trials)

    return ExperimentResult(
        method="sampler",
        spec=spec,
        means=means,
        population_mean=sampler.population_mean(),
        runtime_s=t.elapsed_s,
        meta={"accumulator": "MeanSampler.draw"},
    )


# --- Registry / dispatch -----------------------------------------------------

def get_method(name: str) -> SimFn:
    """
    Look up an accumulator strategy; names are case- and whitespace-insensitive.
    """
    fn = METHODS.get(name.strip().lower())
    if fn is None:
        raise ValueError(
            f"unknown method {name!r}: choose one of {', '.join(sorted(METHODS))}"
        )
    return fn


METHODS: Dict[str, SimFn] = {
    "append": simulate_append,
    "preallocated": simulate_preallocated,
    "sampler": simulate_sampler,
}
