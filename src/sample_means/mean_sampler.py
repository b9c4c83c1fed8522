import random
from typing import List, Optional, Sequence, Tuple


def sample_mean(values: Sequence[float]) -> float:
    """
    Arithmetic mean computed with an explicit loop.
    """
    n = len(values)
    if n == 0:
        raise ValueError("values must be non-empty")

    total = 0
    for v in values:
        total += v
    return total / n


class MeanSampler:
    """
    MeanSampler

    Draws fixed-size samples WITHOUT replacement from a fixed population and
    reports the mean of each draw. Repeating next() T times yields an empirical
    approximation of the sampling distribution of the mean.

    Each instance owns its own random.Random, so two samplers built with the
    same seed produce the same sequence of means and never disturb the global
    random module state.

    Preconditions are checked eagerly:
      - population must be non-empty
      - 0 < sample_size <= len(population)

    Asking for more elements than the population holds is an error, never a
    silent truncation.
    """

    def __init__(
        self,
        population: Sequence[float],
        sample_size: int,
        seed: Optional[int] = None,
    ):
        if len(population) == 0:
            raise ValueError("population must be non-empty")
        if sample_size <= 0:
            raise ValueError("sample_size must be > 0")
        if sample_size > len(population):
            raise ValueError(
                f"sample_size must be <= population size "
                f"(got {sample_size} > {len(population)})"
            )

        self.population: Tuple[float, ...] = tuple(population)
        self.sample_size = sample_size
        self._rng = random.Random(seed)

    # ------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------

    def next(self) -> float:
        """
        Draw one sample without replacement and return its mean.
        """
        draw = self._rng.sample(self.population, self.sample_size)
        return sample_mean(draw)

    def draw(self, trials: int) -> List[float]:
        """
        Run `trials` independent draws; the result always has `trials` entries.
        """
        if trials < 0:
            raise ValueError("trials must be >= 0")

        means = [0.0] * trials
        for i in range(trials):
            means[i] = self.next()
        return means

    # ------------------------------------------------------------
    # Introspection (read-only)
    # ------------------------------------------------------------

    def population_size(self) -> int:
        return len(self.population)

    def population_mean(self) -> float:
        return sample_mean(self.population)
