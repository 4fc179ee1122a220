"""
Tests for Exponential Distribution Family

This module tests the functionality of the exponential distribution family,
including parameterizations, characteristics, and sampling.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math

import numpy as np
import pytest
from scipy.integrate import quad
from scipy.stats import expon

from pysatl_probability.distributions.sampling import default_source, inverse_transform
from pysatl_probability.distributions.support import ContinuousSupport
from pysatl_probability.families.builtins.continuous.exponential import Exponential
from pysatl_probability.families.configuration import configure_families_register
from pysatl_probability.types import FamilyName, UnivariateContinuous
from tests.unit.families.builtins.base import BaseDistributionTest


class TestExponentialFamily(BaseDistributionTest):
    """Test suite for Exponential distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.exponential_family = registry.get(FamilyName.EXPONENTIAL)
        self.exponential_dist_example = self.exponential_family(lambda_=0.5)

    def test_family_properties(self):
        """Test basic properties of exponential family."""
        assert self.exponential_family.name == FamilyName.EXPONENTIAL

        # Check parameterizations
        expected_parametrizations = {"rate", "scale"}
        assert set(self.exponential_family.parametrization_names) == expected_parametrizations
        assert self.exponential_family.base_parametrization_name == "rate"

    def test_rate_parametrization_creation(self):
        """Test creation of distribution with rate parametrization."""
        dist = self.exponential_family(lambda_=0.5)

        assert dist.family_name == FamilyName.EXPONENTIAL
        assert dist.distribution_type == UnivariateContinuous
        assert dist.parameters == {"lambda_": 0.5}
        assert dist.parametrization_name == "rate"

    def test_parametrization_constraints(self):
        """Test parameter constraints validation."""
        # lambda_ must be positive
        with pytest.raises(ValueError, match="lambda_ > 0"):
            self.exponential_family(lambda_=-1.0)

        # beta must be positive
        with pytest.raises(ValueError, match="beta > 0"):
            self.exponential_family(beta=0.0, parametrization_name="scale")

    @pytest.mark.parametrize(
        "parametrization_name, params, expected_lambda",
        [
            ("rate", {"lambda_": 0.5}, 0.5),
            ("scale", {"beta": 2.0}, 0.5),  # lambda = 1/beta = 0.5
        ],
    )
    def test_parametrization_conversions(self, parametrization_name, params, expected_lambda):
        """Test conversions between different parameterizations."""
        base_params = self.exponential_family.to_base(
            self.exponential_family.get_parametrization(parametrization_name)(**params)
        )

        assert abs(base_params.parameters["lambda_"] - expected_lambda) < self.CALCULATION_PRECISION

    def test_moments(self):
        """Test moment calculations."""
        dist = self.exponential_dist_example

        assert abs(dist.mean() - 2.0) < self.CALCULATION_PRECISION
        assert abs(dist.variance() - 4.0) < self.CALCULATION_PRECISION
        assert abs(dist.skewness() - 2.0) < self.CALCULATION_PRECISION
        assert abs(dist.kurtosis() - 6.0) < self.CALCULATION_PRECISION

    @pytest.mark.parametrize(
        "method, test_data, scipy_func",
        [
            ("density", [-1.0, 0.0, 1.0, 2.0, 3.0, 4.0], expon.pdf),
            ("distribution", [-1.0, 0.0, 1.0, 2.0, 3.0, 4.0], expon.cdf),
            ("inverse", [0.001, 0.01, 0.1, 0.25, 0.5, 0.75, 0.9, 0.99, 0.999], expon.ppf),
        ],
    )
    def test_characteristics_match_scipy(self, method, test_data, scipy_func):
        func = getattr(self.exponential_dist_example, method)

        result = self.evaluate(func, test_data)

        self.assert_arrays_almost_equal(result, scipy_func(np.array(test_data), scale=2.0))

    def test_summaries(self):
        dist = self.exponential_dist_example

        assert abs(dist.entropy() - expon(scale=2.0).entropy()) < 1e-12
        assert abs(dist.median() - 2.0 * math.log(2.0)) < self.CALCULATION_PRECISION
        assert dist.modes() == [0.0]

    def test_exponential_support(self):
        """Test that exponential distribution has correct support [0, inf)."""
        dist = self.exponential_dist_example

        assert isinstance(dist.support, ContinuousSupport)
        assert dist.support.left == 0.0
        assert dist.support.right == float("inf")
        assert dist.support.left_closed
        assert not dist.support.right_closed

        assert dist.support.contains(0.0) is True
        assert dist.support.contains(-0.1) is False

    def test_density_integrates_to_one(self):
        total, _ = quad(self.exponential_dist_example.density, 0.0, math.inf)
        assert abs(total - 1.0) < 1e-8

    def test_cdf_monotone_and_round_trip(self):
        self.assert_cdf_monotone(self.exponential_dist_example, np.linspace(-1.0, 200.0, 202))
        assert self.exponential_dist_example.distribution(1e6) == 1.0
        self.assert_round_trip(self.exponential_dist_example, [1e-12, 0.1, 0.5, 0.9, 0.999999])

    def test_inverse_boundaries(self):
        assert self.exponential_dist_example.inverse(0.0) == 0.0
        assert self.exponential_dist_example.inverse(1.0) == math.inf
        with pytest.raises(ValueError, match=r"Probability must be in \[0, 1\]"):
            self.exponential_dist_example.inverse(1.5)

    def test_sample_is_inversion(self):
        dist = self.exponential_dist_example

        assert dist.sample(default_source(11)) == inverse_transform(dist, default_source(11))

    def test_cross_entropy_converges(self):
        dist = self.exponential_dist_example
        self.assert_cross_entropy_converges(dist, lambda x: math.log(dist.density(x)), 20_000)
