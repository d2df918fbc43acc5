import pytest

from coherentnoise.base import Module
from coherentnoise.errors import InvalidParamError, NoModuleError
from coherentnoise.terrace import Terrace


class _Const(Module):
    SOURCE_MODULE_COUNT = 0

    def __init__(self, value):
        super().__init__()
        self.value = value

    def get_value(self, x, y, z):
        return self.value


def _terrace(source_value, points):
    terrace = Terrace(_Const(source_value))
    for point in points:
        terrace.add_control_point(point)
    return terrace


def test_new_terrace_is_empty_and_not_inverted():
    terrace = Terrace()
    assert terrace.control_point_count == 0
    assert terrace.control_points == ()
    assert terrace.terraces_inverted is False


def test_control_points_are_kept_sorted():
    terrace = _terrace(0.0, [0.5, -0.25, 1.0, -1.0])
    assert terrace.control_points == (-1.0, -0.25, 0.5, 1.0)
    assert terrace.control_point_count == 4


def test_duplicate_control_point_raises():
    terrace = _terrace(0.0, [0.0, 1.0])
    with pytest.raises(InvalidParamError):
        terrace.add_control_point(1.0)
    assert terrace.control_points == (0.0, 1.0)


def test_clear_all_control_points():
    terrace = _terrace(0.0, [0.0, 1.0, 2.0])
    terrace.clear_all_control_points()
    assert terrace.control_points == ()


def test_make_control_points_spans_minus_one_to_one():
    terrace = Terrace()
    terrace.add_control_point(7.0)
    terrace.make_control_points(5)
    assert terrace.control_points == pytest.approx((-1.0, -0.5, 0.0, 0.5, 1.0))


@pytest.mark.parametrize("count", [0, 1, -3])
def test_make_control_points_rejects_too_few(count):
    terrace = Terrace()
    with pytest.raises(InvalidParamError):
        terrace.make_control_points(count)


def test_values_outside_the_points_are_clamped():
    assert _terrace(-5.0, [0.0, 4.0]).get_value(0, 0, 0) == 0.0
    assert _terrace(9.0, [0.0, 4.0]).get_value(0, 0, 0) == 4.0


@pytest.mark.parametrize("point", [0.0, 4.0, 8.0])
def test_value_at_a_control_point_is_that_point(point):
    terrace = _terrace(point, [0.0, 4.0, 8.0])
    assert terrace.get_value(1, 2, 3) == pytest.approx(point)
    terrace.invert_terraces()
    assert terrace.get_value(1, 2, 3) == pytest.approx(point)


def test_midpoint_follows_quadratic_curve():
    terrace = _terrace(2.0, [0.0, 4.0])
    assert terrace.get_value(0, 0, 0) == pytest.approx(1.0)


def test_inverted_midpoint():
    terrace = _terrace(2.0, [0.0, 4.0])
    terrace.invert_terraces()
    assert terrace.terraces_inverted is True
    assert terrace.get_value(0, 0, 0) == pytest.approx(3.0)
    terrace.invert_terraces(False)
    assert terrace.get_value(0, 0, 0) == pytest.approx(1.0)


def test_output_stays_within_surrounding_points():
    points = [-1.0, -0.2, 0.3, 1.0]
    for source_value in (-0.9, -0.5, 0.0, 0.1, 0.6, 0.99):
        value = _terrace(source_value, points).get_value(0, 0, 0)
        assert -1.0 <= value <= 1.0
        below = max(p for p in points if p <= source_value)
        above = min(p for p in points if p > source_value)
        assert below <= value <= above


def test_fewer_than_two_points_raises():
    terrace = _terrace(0.0, [0.5])
    with pytest.raises(InvalidParamError):
        terrace.get_value(0, 0, 0)


def test_missing_source_raises():
    terrace = Terrace()
    terrace.make_control_points(3)
    with pytest.raises(NoModuleError):
        terrace.get_value(0, 0, 0)