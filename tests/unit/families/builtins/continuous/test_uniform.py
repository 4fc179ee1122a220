"""
Tests for Uniform Distribution Family

This module tests the continuous uniform distribution family, including its
mean-width parametrization and the absence of modes.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math

import numpy as np
import pytest
from scipy.integrate import quad
from scipy.stats import uniform

from pysatl_probability.distributions.characteristics import GenericCharacteristic
from pysatl_probability.distributions.distribution import Modes
from pysatl_probability.distributions.sampling import default_source
from pysatl_probability.families.builtins.continuous.uniform import Uniform
from pysatl_probability.families.configuration import configure_families_register
from pysatl_probability.types import CharacteristicName, FamilyName
from tests.unit.families.builtins.base import BaseDistributionTest


class TestUniformFamily(BaseDistributionTest):
    """Test suite for Uniform distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.uniform_family = registry.get(FamilyName.CONTINUOUS_UNIFORM)
        self.uniform_dist_example = self.uniform_family(a=-1.0, b=3.0)

    def test_family_properties(self):
        assert self.uniform_family.parametrization_names == ["standard", "meanWidth"]
        assert self.uniform_family.base is Uniform

    def test_mean_width_parametrization(self):
        dist = self.uniform_family(mean=1.0, width=4.0, parametrization_name="meanWidth")

        assert dist == self.uniform_dist_example

    @pytest.mark.parametrize(
        "parametrization_name, params, message",
        [
            ("standard", {"a": 1.0, "b": 1.0}, "a < b"),
            ("standard", {"a": 2.0, "b": 1.0}, "a < b"),
            ("meanWidth", {"mean": 0.0, "width": -1.0}, "width > 0"),
        ],
    )
    def test_parametrization_constraints(self, parametrization_name, params, message):
        with pytest.raises(ValueError, match=message):
            self.uniform_family(parametrization_name=parametrization_name, **params)

    def test_characteristics_match_scipy(self):
        points = np.linspace(-2.0, 4.0, 25)
        reference = uniform(loc=-1.0, scale=4.0)
        dist = self.uniform_dist_example

        self.assert_arrays_almost_equal(self.evaluate(dist.density, points), reference.pdf(points))
        self.assert_arrays_almost_equal(
            self.evaluate(dist.distribution, points), reference.cdf(points)
        )
        probabilities = [0.0, 0.1, 0.5, 0.9, 1.0]
        self.assert_arrays_almost_equal(
            self.evaluate(dist.inverse, probabilities), reference.ppf(probabilities)
        )
        assert abs(dist.entropy() - math.log(4.0)) < 1e-12

    def test_moments(self):
        mean, var, skew, kurt = uniform(loc=-1.0, scale=4.0).stats(moments="mvsk")
        dist = self.uniform_dist_example

        assert abs(dist.mean() - mean) < self.CALCULATION_PRECISION
        assert abs(dist.variance() - var) < self.CALCULATION_PRECISION
        assert abs(dist.skewness() - skew) < self.CALCULATION_PRECISION
        assert abs(dist.kurtosis() - kurt) < self.CALCULATION_PRECISION

    def test_density_integrates_to_one(self):
        total, _ = quad(self.uniform_dist_example.density, -1.0, 3.0)
        assert abs(total - 1.0) < 1e-12

    def test_median_is_midpoint(self):
        assert self.uniform_dist_example.median() == 1.0

    def test_has_no_modes(self):
        assert not isinstance(self.uniform_dist_example, Modes)
        with pytest.raises(TypeError, match="modes"):
            GenericCharacteristic(CharacteristicName.MODES)(self.uniform_dist_example)

    def test_inverse_boundaries(self):
        assert self.uniform_dist_example.inverse(0.0) == -1.0
        assert self.uniform_dist_example.inverse(1.0) == 3.0
        with pytest.raises(ValueError):
            self.uniform_dist_example.inverse(-0.01)
        with pytest.raises(ValueError):
            self.uniform_dist_example.inverse(1.01)

    def test_round_trip(self):
        self.assert_cdf_monotone(self.uniform_dist_example, np.linspace(-3.0, 5.0, 81))
        self.assert_round_trip(self.uniform_dist_example, [0.01, 0.25, 0.5, 0.75, 0.99])

    def test_samples_stay_in_support(self):
        source = default_source(self.SEED)
        values = np.array([self.uniform_dist_example.sample(source) for _ in range(5_000)])

        assert np.all((values >= -1.0) & (values < 3.0))

    def test_cross_entropy_converges(self):
        dist = self.uniform_dist_example
        self.assert_cross_entropy_converges(dist, lambda x: math.log(dist.density(x)), 1_000)
