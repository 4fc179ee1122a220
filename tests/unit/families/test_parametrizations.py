from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import FrozenInstanceError, dataclass, is_dataclass
from typing import Any

import pytest

from pysatl_probability.distributions.support import ContinuousSupport
from pysatl_probability.families import (
    ParametricDistribution,
    ParametricFamily,
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)
from pysatl_probability.families.builtins import Gamma, Gaussian
from pysatl_probability.types import UnivariateContinuous


@dataclass(frozen=True, slots=True)
class Point(ParametricDistribution):
    """Degenerate distribution used as a family base in tests."""

    family_name = "Point"
    _distribution_type = UnivariateContinuous

    value: float = 0.0

    @constraint(description="value >= 0")
    def check_value_non_negative(self) -> bool:
        return self.value >= 0

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(self.value, self.value)


class TestConstraints:
    def test_constraint_is_a_simple_holder(self) -> None:
        def is_positive(obj: object) -> bool:
            return getattr(obj, "value", 0) > 0

        c = ParametrizationConstraint(description="Value must be positive", check=is_positive)
        assert c.description == "Value must be positive"
        assert c.check is is_positive

    def test_constraint_decorator_marks_function(self) -> None:
        @constraint("Value must be positive")
        def check_positive(self: Any) -> bool:
            return getattr(self, "value", 0) > 0

        assert getattr(check_positive, "__is_constraint", None) is True
        assert getattr(check_positive, "__constraint_description", None) == "Value must be positive"

    def test_constraints_are_collected_in_declaration_order(self) -> None:
        descriptions = [c.description for c in Gamma(k=1.0).constraints]
        assert descriptions == ["k > 0", "theta > 0"]

    def test_inherited_constraints_are_kept(self) -> None:
        @dataclass(frozen=True, slots=True)
        class BoundedPoint(Point):
            @constraint(description="value <= 1")
            def check_value_at_most_one(self) -> bool:
                return self.value <= 1

        assert [c.description for c in BoundedPoint(0.5).constraints] == [
            "value >= 0",
            "value <= 1",
        ]
        with pytest.raises(ValueError, match="value >= 0"):
            BoundedPoint(-1.0)
        with pytest.raises(ValueError, match="value <= 1"):
            BoundedPoint(2.0)

    def test_overridden_constraint_replaces_inherited_one(self) -> None:
        @dataclass(frozen=True, slots=True)
        class AnyPoint(Point):
            @constraint(description="value is finite")
            def check_value_non_negative(self) -> bool:
                return abs(self.value) < float("inf")

        assert AnyPoint(-3.0).value == -3.0

    @pytest.mark.parametrize("wrapper", [staticmethod, classmethod])
    def test_constraint_must_be_instance_method(self, wrapper) -> None:
        with pytest.raises(TypeError, match="must be an instance method"):

            class Broken(Parametrization):
                check = wrapper(constraint("never")(lambda *_: True))

    def test_validation_error_message(self) -> None:
        with pytest.raises(ValueError, match='Constraint "value >= 0" does not hold'):
            Point(-0.5)


class TestParametrization:
    def test_distribution_is_immutable(self) -> None:
        dist = Gaussian(1.0, 2.0)
        with pytest.raises(FrozenInstanceError):
            dist.mu = 3.0  # type: ignore[misc]

    def test_name_and_parameters(self) -> None:
        dist = Gaussian(1.0, 2.0)

        assert dist.name == "meanStd"
        assert dist.parameters == {"mu": 1.0, "sigma": 2.0}
        assert dist.transform_to_base_parametrization() is dist

    def test_parametrization_decorator(self) -> None:
        family = ParametricFamily(
            name="PointFamily",
            distr_type=UnivariateContinuous,
            distr_parametrizations=["standard", "negated"],
            base=Point,
        )

        @parametrization(family=family, name="negated")
        class Negated(Parametrization):
            minus_value: float

            def transform_to_base_parametrization(self) -> Parametrization:
                return Point(-self.minus_value)

        assert is_dataclass(Negated)
        assert Negated.__param_name__ == "negated"
        assert family.get_parametrization("negated") is Negated

        params = Negated(minus_value=-2.0)  # type: ignore[call-arg]
        assert params.name == "negated"
        assert params.parameters == {"minus_value": -2.0}
        assert family.to_base(params) == Point(2.0)

    def test_family_method_decorator(self) -> None:
        family = ParametricFamily(
            name="PointFamily",
            distr_type=UnivariateContinuous,
            distr_parametrizations=["standard", "doubled"],
            base=Point,
        )

        @family.parametrization(name="doubled")
        class Doubled(Parametrization):
            twice_value: float

            def transform_to_base_parametrization(self) -> Parametrization:
                return Point(self.twice_value / 2)

        assert family(parametrization_name="doubled", twice_value=3.0) == Point(1.5)
