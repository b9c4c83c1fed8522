"""Tests for MeanSampler and sample_mean"""

import pytest

from sample_means.heights import HEIGHTS_CM
from sample_means.mean_sampler import MeanSampler, sample_mean


class TestSampleMean:

    def test_population_mean_is_exact(self):
        assert sample_mean(HEIGHTS_CM) == 175.6

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            sample_mean([])


class TestMeanSamplerValidation:

    def test_sample_larger_than_population_fails(self):
        with pytest.raises(ValueError, match="sample_size"):
            MeanSampler(HEIGHTS_CM, 11)

    def test_zero_sample_size_fails(self):
        with pytest.raises(ValueError):
            MeanSampler(HEIGHTS_CM, 0)

    def test_empty_population_fails(self):
        with pytest.raises(ValueError):
            MeanSampler([], 1)

    def test_negative_trials_fails(self):
        with pytest.raises(ValueError):
            MeanSampler(HEIGHTS_CM, 5, seed=1).draw(-1)


class TestMeanSamplerDraws:

    @pytest.mark.parametrize("trials", [0, 1, 7, 1000])
    def test_draw_length(self, trials):
        assert len(MeanSampler(HEIGHTS_CM, 5, seed=3).draw(trials)) == trials

    def test_same_seed_same_means(self):
        a = MeanSampler(HEIGHTS_CM, 5, seed=42).draw(50)
        b = MeanSampler(HEIGHTS_CM, 5, seed=42).draw(50)
        assert a == b

    def test_full_population_draw_is_population_mean(self):
        sampler = MeanSampler(HEIGHTS_CM, 10, seed=0)
        for m in sampler.draw(20):
            assert m == pytest.approx(175.6)

    def test_each_mean_within_population_bounds(self):
        for m in MeanSampler(HEIGHTS_CM, 3, seed=9).draw(500):
            assert min(HEIGHTS_CM) <= m <= max(HEIGHTS_CM)

    def test_without_replacement(self):
        # Distinct values: a draw with repeats would produce a mean no
        # k-subset can reach.
        population = [1, 10, 100, 1000]
        sampler = MeanSampler(population, 2, seed=5)
        allowed = {(a + b) / 2 for i, a in enumerate(population) for b in population[i + 1:]}
        for m in sampler.draw(200):
            assert m in allowed

    def test_mean_of_means_converges(self):
        sampler = MeanSampler(HEIGHTS_CM, 5, seed=2024)
        means = sampler.draw(10_000)
        # Standard error of the grand mean here is ~0.05
        assert sample_mean(means) == pytest.approx(175.6, abs=0.5)

    def test_introspection(self):
        sampler = MeanSampler(HEIGHTS_CM, 5)
        assert sampler.population_size() == 10
        assert sampler.population_mean() == 175.6
