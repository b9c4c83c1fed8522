# simulations/report.py

from __future__ import annotations

import argparse
import sys
from typing import Optional

import matplotlib.pyplot as plt

from .common import ExperimentResult, format_quantiles_line, format_stats_line, histogram
from .log import configure_logging, get_logger
from .methods import METHODS
from .run import run_experiment


# Defaults reproduce the classroom demo: 10,000 draws of 5 heights out of 10.
DEFAULT_SEED = 42
DEFAULT_TRIALS = 10_000
DEFAULT_SAMPLE_SIZE = 5
DEFAULT_BINS = 30
DEFAULT_METHOD = "preallocated"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

logger = get_logger(__name__)


def plot_histogram(
    result: ExperimentResult,
    bins: int = DEFAULT_BINS,
    output: Optional[str] = None,
):
    """
    Histogram of the sample means with a vertical line at the population mean.

    Saves to `output` when given (and closes the figure), otherwise shows it.
    Returns the figure.
    """
    lo = min(result.means)
    hi = max(result.means)
    if hi <= lo:
        # Every trial gave the same mean (e.g. k == N): widen to one unit around it.
        value_range = (lo - 0.5, hi + 0.5)
    else:
        value_range = (lo, hi)
    counts, edges = histogram(result.means, bins, value_range=value_range)

    fig = plt.figure(figsize=(8, 4))
    plt.hist(edges[:-1], bins=edges, weights=counts)
    plt.axvline(result.population_mean, color="red", linewidth=2)
    plt.title(
        f"Sample means ({result.method}, k={result.spec.sample_size}, "
        f"trials={result.spec.trials})"
    )
    plt.xlabel("Mean height (cm)")
    plt.ylabel("Frequency")
    plt.tight_layout()

    if output:
        fig.savefig(output)
        plt.close(fig)
        logger.info("histogram_saved", path=output)
    else:
        plt.show()
    return fig


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(
        description="Monte Carlo demo of the sampling distribution of the mean."
    )
    parser.add_argument("--method", default=DEFAULT_METHOD, choices=sorted(METHODS),
                        help="how the accumulator is filled")
    parser.add_argument("--sample-size", type=int, default=DEFAULT_SAMPLE_SIZE,
                        help="heights drawn per trial (without replacement)")
    parser.add_argument("--trials", type=int, default=DEFAULT_TRIALS, help="number of trials")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="RNG seed")
    parser.add_argument("--bins", type=int, default=DEFAULT_BINS, help="histogram bins")
    parser.add_argument("--output", help="save the histogram to this file instead of showing it")
    parser.add_argument("--no-plot", action="store_true", help="print stats only")
    parser.add_argument("--log-level", default="WARNING", type=str.upper, choices=LOG_LEVELS,
                        help="DEBUG | INFO | WARNING | ERROR | CRITICAL")
    parser.add_argument("--json-logs", action="store_true", help="emit logs as JSON lines")

    args = parser.parse_args(argv)
    configure_logging(level=args.log_level, format_json=args.json_logs)

    if args.bins <= 0:
        parser.error("--bins must be > 0")

    try:
        result = run_experiment(
            method=args.method,
            sample_size=args.sample_size,
            trials=args.trials,
            seed=args.seed,
        )
    except ValueError as e:
        parser.error(str(e))

    print(format_stats_line(result))
    print(format_quantiles_line(result))

    if not args.no_plot and result.means:
        plot_histogram(result, bins=args.bins, output=args.output)

    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
