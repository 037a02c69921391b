import pytest

from xaio.cubic import Cubic, bezier

THIRD = 1.0 / 3.0
LINEAR_Y = [THIRD, THIRD, 2.0 / 3.0, 2.0 / 3.0]


@pytest.mark.parametrize("a,b", [(0.2, 0.7), (0.0, 1.0), (0.9, 0.1)])
def test_bezier_end_points(a, b):
    assert bezier(a, b, 0.0) == 0.0
    assert bezier(a, b, 1.0) == 1.0


def test_value_at_zero_and_one():
    cubic = Cubic([0.25, 0.5, 0.75, 1.0])
    assert cubic.get_value(0.0) == 0.0
    assert cubic.get_value(1.0) == 1.0


@pytest.mark.parametrize("time", [0.05, 0.2, 0.5, 0.73, 0.95])
def test_bisection_finds_parameter(time):
    # With these control values the output equals the curve parameter,
    # so feeding it back into the x-curve must recover the input time.
    cubic = Cubic(LINEAR_Y)
    value = cubic.get_value(time)
    assert bezier(THIRD, THIRD, value) == pytest.approx(time, abs=1e-4)


def test_monotonic_inside_unit_interval():
    cubic = Cubic(LINEAR_Y)
    values = [cubic.get_value(step / 20) for step in range(1, 20)]
    assert values == sorted(values)
    assert all(0.0 < v < 1.0 for v in values)


def test_linear_extrapolation_before_start():
    cubic = Cubic([0.5, 0.25, 0.75, 1.0])
    assert cubic.get_value(-2.0) == pytest.approx(2 * cubic.get_value(-1.0))
    assert cubic.get_value(-1.0) < 0.0


def test_zero_gradient_before_start():
    cubic = Cubic([0.0, 0.5, 0.0, 1.0])
    assert cubic.get_value(-3.0) == 0.0


def test_linear_extrapolation_after_end():
    cubic = Cubic([0.5, 0.25, 0.5, 0.75])
    first = cubic.get_value(2.0) - 1.0
    second = cubic.get_value(3.0) - 1.0
    assert second == pytest.approx(2 * first)


def test_curves_are_floats():
    cubic = Cubic([0, 1, 0, 1])
    assert cubic.curves == [0.0, 1.0, 0.0, 1.0]