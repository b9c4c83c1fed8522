"""Tests for summary statistics, histogram bucketing and result checks"""

import math

import pytest

from simulations.common import (
    ExperimentResult,
    ExperimentSpec,
    Timer,
    format_quantiles_line,
    format_stats_line,
    histogram,
    quantile,
    summarize_means,
)


class TestExperimentSpec:

    def test_valid(self):
        spec = ExperimentSpec(sample_size=5, trials=0, population_size=10)
        assert spec.trials == 0

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"sample_size": 11, "trials": 1, "population_size": 10},
            {"sample_size": 0, "trials": 1, "population_size": 10},
            {"sample_size": 1, "trials": -1, "population_size": 10},
            {"sample_size": 1, "trials": 1, "population_size": 0},
        ],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            ExperimentSpec(**kwargs)


class TestQuantile:

    def test_matches_r_type_7(self):
        xs = [1, 2, 3, 4]
        assert quantile(xs, 0.0) == 1
        assert quantile(xs, 1.0) == 4
        assert quantile(xs, 0.5) == 2.5
        # R: quantile(1:4, 0.05) == 1.15
        assert quantile(xs, 0.05) == pytest.approx(1.15)

    def test_unsorted_input(self):
        assert quantile([4, 1, 3, 2], 0.25) == pytest.approx(1.75)

    def test_single_value(self):
        assert quantile([7.0], 0.95) == 7.0

    def test_invalid(self):
        with pytest.raises(ValueError):
            quantile([], 0.5)
        with pytest.raises(ValueError):
            quantile([1.0], 1.5)


class TestSummarizeMeans:

    def test_basic(self):
        s = summarize_means([1.0, 2.0, 3.0, 4.0])
        assert s.mean == 2.5
        assert s.std == pytest.approx(math.sqrt(1.25))
        assert s.min == 1.0
        assert s.max == 4.0
        assert set(s.quantiles) == {0.05, 0.25, 0.5, 0.75, 0.95}
        assert s.quantiles[0.5] == 2.5

    def test_read_only(self):
        values = [3.0, 1.0, 2.0]
        summarize_means(values)
        assert values == [3.0, 1.0, 2.0]

    def test_empty(self):
        with pytest.raises(ValueError):
            summarize_means([])


class TestHistogram:

    def test_counts_and_edges(self):
        counts, edges = histogram([0.0, 0.5, 1.0, 1.5, 2.0], bins=2)
        assert edges == [0.0, 1.0, 2.0]
        assert counts == [2, 3]

    def test_out_of_range_dropped(self):
        counts, _ = histogram([-1.0, 0.5, 5.0], bins=1, value_range=(0.0, 1.0))
        assert counts == [1]

    def test_total_matches_input(self, heights):
        counts, edges = histogram(heights, bins=5)
        assert sum(counts) == len(heights)
        assert len(edges) == 6

    def test_invalid(self):
        with pytest.raises(ValueError):
            histogram([1.0], bins=0)
        with pytest.raises(ValueError):
            histogram([1.0, 1.0], bins=3)


class TestExperimentResult:

    def test_length_mismatch(self):
        spec = ExperimentSpec(sample_size=2, trials=3, population_size=4)
        with pytest.raises(ValueError, match="length mismatch"):
            ExperimentResult(method="x", spec=spec, means=[1.0], population_mean=1.0)

    def test_zero_trials_has_no_stats(self):
        spec = ExperimentSpec(sample_size=2, trials=0, population_size=4)
        r = ExperimentResult(method="x", spec=spec, means=[], population_mean=1.0)
        assert r.stats is None
        assert "trials=0" in format_stats_line(r)
        assert format_quantiles_line(r) == "quantiles: n/a"

    def test_format_lines(self):
        spec = ExperimentSpec(sample_size=2, trials=2, population_size=4)
        r = ExperimentResult(method="x", spec=spec, means=[1.0, 3.0], population_mean=2.0, runtime_s=0.5)
        line = format_stats_line(r)
        assert line.startswith("x: trials=2")
        assert "mean=2.000" in line
        assert "runtime=0.500s" in line
        assert "50%=2.00" in format_quantiles_line(r)


def test_timer_records_elapsed():
    with Timer() as t:
        pass
    assert t.elapsed_s is not None
    assert t.elapsed_s >= 0.0
