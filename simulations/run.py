# simulations/run.py

from __future__ import annotations

from typing import List, Optional, Sequence

from .common import ExperimentSpec, ExperimentResult
from .log import get_logger
from .methods import METHODS, get_method

from sample_means.heights import HEIGHTS_CM


def run_experiment(
    method: str,
    sample_size: int,
    trials: int,
    population: Optional[Sequence[float]] = None,
    seed: int = 42,
) -> ExperimentResult:
    """
    Run a single sampling experiment and return an ExperimentResult.

    Parameters
    ----------
    method:
        Name of the method ('append', 'preallocated' or 'sampler').
    sample_size:
        Number of elements drawn (without replacement) per trial.
    trials:
        Number of trials; the result holds exactly this many means.
    population:
        Values to sample from. Defaults to HEIGHTS_CM.
    seed:
        RNG seed.

    Returns
    -------
    ExperimentResult
    """
    pop = tuple(HEIGHTS_CM if population is None else population)
    spec = ExperimentSpec(sample_size=sample_size, trials=trials, population_size=len(pop))
    fn = get_method(method)

    log = get_logger(__name__).bind(
        method=method, sample_size=sample_size, trials=trials, seed=seed
    )
    log.debug("experiment_started", population_size=spec.population_size)

    result = fn(spec, pop, seed)

    log.info(
        "experiment_finished",
        mean_of_means=result.stats.mean if result.stats is not None else None,
        population_mean=result.population_mean,
        runtime_s=result.runtime_s,
    )
    return result


def run_all(
    sample_size: int,
    trials: int,
    population: Optional[Sequence[float]] = None,
    seed: int = 42,
) -> List[ExperimentResult]:
    """
    Convenience helper: run every registered method under the same spec and seed.
    """
    return [
        run_experiment(
            method=name,
            sample_size=sample_size,
            trials=trials,
            population=population,
            seed=seed,
        )
        for name in sorted(METHODS)
    ]
