"""
Unit tests for control curve evaluation.

Tests verify:
- Zero, full-scale and negative full-scale outputs
- Dead zone suppression and minimum power at the dead-zone edge
- Odd symmetry and monotonicity
- Known values for linear and power curves
- Vectorized evaluation and thread safety
"""

import dataclasses
import math
import warnings
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest
from control_curves import (
    CurveConfig,
    PowerCurveConfig,
    LinearCurve,
    PowerCurve,
    simple_linear,
    simple_power,
    linear,
    power,
)


def assert_curve_value(curve, value, expected, tol=1e-4):
    """Check curve(value) and curve(-value) against expected and -expected."""
    assert np.isclose(curve.get(value), expected, rtol=0, atol=tol), \
        f"get({value}) = {curve.get(value)}, expected {expected}"
    assert np.isclose(curve.get(-value), -expected, rtol=0, atol=tol), \
        f"get({-value}) = {curve.get(-value)}, expected {-expected}"


def assert_exact_value(curve, value, expected):
    assert curve.get(value) == expected, \
        f"get({value}) = {curve.get(value)}, expected exactly {expected}"
    assert curve.get(-value) == -expected, \
        f"get({-value}) = {curve.get(-value)}, expected exactly {-expected}"


def check_anchors(curve):
    """Zero, full scale, dead zone and minimum power anchors hold exactly."""
    assert curve.get(0) == 0
    assert_exact_value(curve, 1, curve.power_multiplier)
    assert_exact_value(curve, curve.dead_zone / 2, 0)
    if curve.dead_zone > 0:
        assert_exact_value(curve, curve.dead_zone, curve.minimum_power)


@pytest.fixture
def tuned_power_curve():
    return (power(5)
            .with_dead_zone(0.05)
            .with_minimum_power(0.12)
            .with_power_multiplier(0.76)
            .build())


@pytest.fixture
def tuned_linear_curve():
    return (linear()
            .with_dead_zone(0.1)
            .with_minimum_power(0.2)
            .with_power_multiplier(0.8)
            .build())


class TestLinearCurve:
    """Tests for LinearCurve"""

    def test_simple_linear_anchors(self):
        """Default linear curve hits 0 and full scale exactly"""
        check_anchors(simple_linear())

    def test_simple_linear_is_identity(self):
        """With defaults the linear curve passes input through"""
        curve = simple_linear()
        assert_exact_value(curve, 0.2, 0.2)
        assert_exact_value(curve, 0.9, 0.9)

    def test_tuned_linear_anchors(self, tuned_linear_curve):
        check_anchors(tuned_linear_curve)

    def test_tuned_linear_known_values(self, tuned_linear_curve):
        """Ramp runs from minimum power at the dead zone to the multiplier"""
        assert_curve_value(tuned_linear_curve, 0.15, 0.23333)
        assert_curve_value(tuned_linear_curve, 0.88, 0.72)

    def test_minimum_power_at_dead_zone_edge(self, tuned_linear_curve):
        assert tuned_linear_curve.get(0.1) == 0.2
        assert tuned_linear_curve.get(-0.1) == -0.2

    def test_inside_dead_zone_is_zero(self, tuned_linear_curve):
        for value in [0.0, 0.01, 0.05, 0.099, -0.099, -0.01]:
            assert tuned_linear_curve.get(value) == 0.0

    def test_extrapolates_beyond_full_scale(self):
        """Inputs outside [-1, 1] are not clamped"""
        curve = simple_linear()
        assert curve.get(2.0) == 2.0
        assert curve.get(-1.5) == -1.5

    def test_falling_curve_extrapolates_through_zero(self):
        """Output sign follows the extrapolated value, not only the input sign"""
        curve = linear().with_minimum_power(0.6).with_power_multiplier(0.4).build()
        assert np.isclose(curve.get(10.0), -1.4)
        assert np.isclose(curve.get(-10.0), 1.4)
        assert np.allclose(curve.evaluate([10.0, -10.0]), [-1.4, 1.4])

    def test_normalization_overflow_returns_infinity(self):
        """Rescaling a near-maximal float past the dead zone overflows to inf"""
        curve = linear().with_dead_zone(0.5).with_minimum_power(0.1).build()

        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert curve.get(1.7e308) == math.inf
            assert curve.get(-1.7e308) == -math.inf
            out = curve.evaluate([1.7e308, -1.7e308])

        assert np.array_equal(out, [np.inf, -np.inf])


class TestPowerCurve:
    """Tests for PowerCurve"""

    def test_simple_power_anchors(self):
        for n in [1, 3, 5, 7]:
            check_anchors(simple_power(n))

    def test_simple_cubic_known_values(self):
        """Cubic curve with defaults is plain x**3"""
        curve = simple_power(3)
        assert_curve_value(curve, 0.3, 0.027)
        assert_curve_value(curve, 0.8, 0.512)
        assert_curve_value(curve, 0.5, 0.125)

    def test_tuned_power_anchors(self, tuned_power_curve):
        check_anchors(tuned_power_curve)

    def test_tuned_power_known_values(self, tuned_power_curve):
        assert_curve_value(tuned_power_curve, 0.24, 0.1202)
        assert_curve_value(tuned_power_curve, 0.77, 0.28)
        assert_curve_value(tuned_power_curve, 0.1, 0.12)
        assert_curve_value(tuned_power_curve, 0.9, 0.487)

    def test_power_one_matches_linear(self):
        """A first-power curve is the same ramp as a linear curve"""
        xs = np.linspace(-1, 1, 101)
        lin = linear().with_dead_zone(0.1).with_minimum_power(0.2).build()
        pow1 = power(1).with_dead_zone(0.1).with_minimum_power(0.2).build()
        assert np.allclose(lin.evaluate(xs), pow1.evaluate(xs))

    def test_power_accessor(self, tuned_power_curve):
        assert tuned_power_curve.power == 5

    def test_extrapolates_beyond_full_scale(self):
        assert simple_power(3).get(2.0) == 8.0

    def test_huge_input_returns_infinity(self):
        """Inputs whose shaped value leaves the float range give signed infinity"""
        curve = power(3).with_minimum_power(0.1).build()

        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert curve.get(1e120) == math.inf
            assert curve.get(-1e120) == -math.inf
            out = curve.evaluate([1e120, -1e120, 0.5])

        assert out[0] == np.inf
        assert out[1] == -np.inf
        assert np.isclose(out[2], curve.get(0.5))

    def test_huge_input_flat_span(self):
        """With equal minimum power and multiplier the output stays flat"""
        curve = power(5).with_minimum_power(0.5).with_power_multiplier(0.5).build()
        assert curve.get(1e100) == 0.5
        assert curve.get(-1e100) == -0.5
        assert np.array_equal(curve.evaluate([1e100, -1e100]), [0.5, -0.5])

    def test_huge_input_falling_span(self):
        """A curve that falls past the dead zone heads to -inf for large input"""
        curve = power(3).with_minimum_power(0.6).with_power_multiplier(0.4).build()
        assert curve.get(1e120) == -math.inf
        assert curve.evaluate([1e120])[0] == -np.inf


class TestCurveProperties:
    """Properties that hold for every valid curve"""

    CURVES = [
        lambda: simple_linear(),
        lambda: simple_power(3),
        lambda: linear().with_dead_zone(0.2).with_minimum_power(0.1).build(),
        lambda: power(5).with_dead_zone(0.05).with_minimum_power(0.12)
                        .with_power_multiplier(0.76).build(),
        lambda: power(7).with_power_multiplier(0.5).build(),
        lambda: linear().with_minimum_power(0.3).build(),
    ]

    @pytest.mark.parametrize("make_curve", CURVES)
    def test_zero_maps_to_zero(self, make_curve):
        curve = make_curve()
        assert curve.get(0) == 0
        assert curve.get(0.0) == 0
        assert curve.get(-0.0) == 0

    @pytest.mark.parametrize("make_curve", CURVES)
    def test_odd_symmetry(self, make_curve):
        curve = make_curve()
        for v in np.linspace(0, 1.2, 121):
            assert np.isclose(curve.get(-v), -curve.get(v), rtol=0, atol=1e-4)

    @pytest.mark.parametrize("make_curve", CURVES)
    def test_monotonic_non_decreasing(self, make_curve):
        curve = make_curve()
        y = [curve.get(v) for v in np.linspace(-1, 1, 2001)]
        assert np.all(np.diff(y) >= -1e-12), "curve should be non-decreasing"

    @pytest.mark.parametrize("make_curve", CURVES)
    def test_output_bounded_by_multiplier(self, make_curve):
        curve = make_curve()
        y = curve.evaluate(np.linspace(-1, 1, 401))
        assert np.all(np.abs(y) <= curve.power_multiplier)

    @pytest.mark.parametrize("make_curve", CURVES)
    def test_evaluate_matches_get(self, make_curve):
        curve = make_curve()
        xs = np.linspace(-1.5, 1.5, 301)
        expected = np.array([curve.get(x) for x in xs])
        assert np.allclose(curve.evaluate(xs), expected, rtol=0, atol=1e-12)

    def test_minimum_power_just_past_dead_zone(self):
        """Output jumps to the minimum power as soon as the dead zone is left"""
        curve = power(3).with_dead_zone(0.1).with_minimum_power(0.25).build()
        assert np.isclose(curve.get(0.1000001), 0.25)
        assert curve.get(0.0999999) == 0.0


class TestEvaluate:
    """Tests for vectorized evaluation"""

    def test_preserves_shape(self):
        curve = simple_power(3)
        grid = np.linspace(-1, 1, 12).reshape(3, 4)
        out = curve.evaluate(grid)
        assert out.shape == (3, 4)

    def test_accepts_lists(self):
        out = simple_linear().evaluate([0.0, 0.5, -0.5])
        assert np.allclose(out, [0.0, 0.5, -0.5])

    def test_dead_zone_entries_are_zero(self):
        curve = linear().with_dead_zone(0.3).with_minimum_power(0.1).build()
        out = curve.evaluate([-0.2, 0.0, 0.1, 0.29])
        assert np.all(out == 0.0)

    def test_call_alias(self):
        curve = simple_power(3)
        assert curve(0.5) == curve.get(0.5)


class TestCurveObject:
    """Immutability, equality and construction of curve objects"""

    def test_accessors(self, tuned_power_curve):
        assert tuned_power_curve.minimum_power == 0.12
        assert tuned_power_curve.dead_zone == 0.05
        assert tuned_power_curve.power_multiplier == 0.76
        assert isinstance(tuned_power_curve.config, PowerCurveConfig)

    def test_config_is_frozen(self, tuned_linear_curve):
        with pytest.raises(dataclasses.FrozenInstanceError):
            tuned_linear_curve.config.dead_zone = 0.5

    def test_accessors_are_read_only(self, tuned_linear_curve):
        with pytest.raises(AttributeError):
            tuned_linear_curve.dead_zone = 0.5

    def test_equality_and_hash(self):
        assert simple_power(3) == simple_power(3)
        assert simple_power(3) != simple_power(5)
        assert simple_linear() != simple_power(1)
        assert len({simple_power(3), simple_power(3), simple_linear()}) == 2

    def test_repr(self, tuned_power_curve):
        text = repr(tuned_power_curve)
        assert text.startswith("PowerCurve(")
        assert "dead_zone=0.05" in text
        assert "power=5" in text

    def test_direct_construction(self):
        curve = LinearCurve(CurveConfig(dead_zone=0.1))
        assert curve.dead_zone == 0.1

    def test_power_curve_requires_power_config(self):
        with pytest.raises(TypeError):
            PowerCurve(CurveConfig())


class TestThreadSafety:
    """A single curve can be evaluated concurrently"""

    def test_concurrent_get_matches_serial(self, tuned_power_curve):
        values = list(np.linspace(-1.2, 1.2, 20001))
        serial = [tuned_power_curve.get(v) for v in values]

        with ThreadPoolExecutor(max_workers=8) as pool:
            chunks = [values[i::8] for i in range(8)]
            results = list(pool.map(lambda c: [tuned_power_curve.get(v) for v in c], chunks))

        concurrent = [None] * len(values)
        for i, chunk in enumerate(results):
            concurrent[i::8] = chunk

        assert concurrent == serial
