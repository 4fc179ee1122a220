"""
Tests for Beta Distribution Family

This module tests the four-parameter beta distribution, including modes edge
cases and the gamma-ratio sampler.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math

import numpy as np
import pytest
from scipy.integrate import quad
from scipy.stats import beta

from pysatl_probability.distributions.sampling import default_source
from pysatl_probability.families.builtins.continuous.beta import Beta
from pysatl_probability.families.configuration import configure_families_register
from pysatl_probability.types import FamilyName
from tests.unit.families.builtins.base import BaseDistributionTest


class TestBetaFamily(BaseDistributionTest):
    """Test suite for Beta distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.beta_family = registry.get(FamilyName.BETA)
        self.beta_dist_example = Beta(alpha=2.0, beta=5.0, a=-1.0, b=3.0)
        self.reference = beta(2.0, 5.0, loc=-1.0, scale=4.0)

    def test_creation_through_family(self):
        dist = self.beta_family(alpha=2.0, beta=5.0, a=-1.0, b=3.0)

        assert dist == self.beta_dist_example
        assert dist.parametrization_name == "standard"

    def test_default_bounds(self):
        dist = Beta(alpha=2.0, beta=3.0)

        assert (dist.a, dist.b) == (0.0, 1.0)
        assert (dist.support.infimum, dist.support.supremum) == (0.0, 1.0)

    @pytest.mark.parametrize(
        "params, message",
        [
            ({"alpha": 0.0, "beta": 1.0}, "alpha > 0"),
            ({"alpha": 1.0, "beta": -1.0}, "beta > 0"),
            ({"alpha": 1.0, "beta": 1.0, "a": 2.0, "b": 2.0}, "a < b"),
        ],
    )
    def test_parametrization_constraints(self, params, message):
        with pytest.raises(ValueError, match=message):
            Beta(**params)

    def test_characteristics_match_scipy(self):
        points = np.linspace(-2.0, 4.0, 25)
        dist = self.beta_dist_example

        self.assert_arrays_almost_equal(
            self.evaluate(dist.density, points), self.reference.pdf(points)
        )
        self.assert_arrays_almost_equal(
            self.evaluate(dist.distribution, points), self.reference.cdf(points)
        )
        probabilities = [0.001, 0.1, 0.5, 0.9, 0.999]
        self.assert_arrays_almost_equal(
            self.evaluate(dist.inverse, probabilities), self.reference.ppf(probabilities), 1e-8
        )
        assert abs(dist.entropy() - self.reference.entropy()) < 1e-10

    def test_moments(self):
        mean, var, skew, kurt = self.reference.stats(moments="mvsk")
        dist = self.beta_dist_example

        assert abs(dist.mean() - mean) < self.CALCULATION_PRECISION
        assert abs(dist.variance() - var) < self.CALCULATION_PRECISION
        assert abs(dist.skewness() - skew) < self.CALCULATION_PRECISION
        assert abs(dist.kurtosis() - kurt) < self.CALCULATION_PRECISION

    def test_density_integrates_to_one(self):
        total, _ = quad(self.beta_dist_example.density, -1.0, 3.0)
        assert abs(total - 1.0) < 1e-8

    def test_cdf_limits_and_round_trip(self):
        self.assert_cdf_monotone(self.beta_dist_example, np.linspace(-5.0, 5.0, 101))
        assert self.beta_dist_example.distribution(-1.0) == 0.0
        assert self.beta_dist_example.distribution(3.0) == 1.0
        self.assert_round_trip(self.beta_dist_example, [0.01, 0.3, 0.5, 0.7, 0.99])

    def test_inverse_boundaries(self):
        assert self.beta_dist_example.inverse(0.0) == -1.0
        assert self.beta_dist_example.inverse(1.0) == 3.0
        with pytest.raises(ValueError):
            self.beta_dist_example.inverse(-1e-9)

    def test_median(self):
        assert abs(self.beta_dist_example.median() - self.reference.median()) < 1e-8
        assert Beta(alpha=3.0, beta=3.0, a=-2.0, b=2.0).median() == pytest.approx(0.0, abs=1e-12)

    @pytest.mark.parametrize(
        "alpha, beta_, expected",
        [
            (2.0, 5.0, [0.2]),
            (0.5, 0.5, [0.0, 1.0]),
            (0.5, 2.0, [0.0]),
            (1.0, 3.0, [0.0]),
            (0.5, 1.0, [0.0]),
            (2.0, 0.5, [1.0]),
            (3.0, 1.0, [1.0]),
            (1.0, 0.5, [1.0]),
        ],
    )
    def test_modes(self, alpha, beta_, expected):
        assert Beta(alpha=alpha, beta=beta_).modes() == pytest.approx(expected)

    def test_modes_of_flat_density_raise(self):
        with pytest.raises(ValueError, match="undefined"):
            Beta(alpha=1.0, beta=1.0).modes()

    def test_samples_stay_in_support(self):
        source = default_source(self.SEED)
        values = np.array([self.beta_dist_example.sample(source) for _ in range(5_000)])

        assert np.all((values >= -1.0) & (values <= 3.0))
        sd = math.sqrt(self.beta_dist_example.variance())
        assert abs(values.mean() - self.beta_dist_example.mean()) < 5.0 * sd / math.sqrt(5_000)

    def test_small_shapes_sample_finite_values(self):
        source = default_source(self.SEED)
        dist = Beta(alpha=0.05, beta=0.05)
        values = [dist.sample(source) for _ in range(1_000)]
        assert all(0.0 <= v <= 1.0 for v in values)

    def test_cross_entropy_converges(self):
        dist = self.beta_dist_example
        self.assert_cross_entropy_converges(dist, lambda x: math.log(dist.density(x)), 20_000)
