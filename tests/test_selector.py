import pytest

from coherentnoise.base import Module
from coherentnoise.errors import InvalidParamError, NoModuleError
from coherentnoise.selector import Select


class _Const(Module):
    SOURCE_MODULE_COUNT = 0

    def __init__(self, value):
        super().__init__()
        self.value = value

    def get_value(self, x, y, z):
        return self.value


def _select(control_value, low=0.0, high=10.0):
    return Select(_Const(low), _Const(high), _Const(control_value))


def test_defaults():
    sel = Select()
    assert sel.lower_bound == -1.0
    assert sel.upper_bound == 1.0
    assert sel.edge_falloff == 0.0


@pytest.mark.parametrize("control", [-0.5, 0.0, 0.9, -1.0, 1.0])
def test_inside_range_picks_second_source(control):
    assert _select(control).get_value(0.0, 0.0, 0.0) == 10.0


@pytest.mark.parametrize("control", [-1.5, 1.01, 100.0])
def test_outside_range_picks_first_source(control):
    assert _select(control).get_value(1.0, 2.0, 3.0) == 0.0


def test_set_bounds_changes_selection():
    sel = _select(5.0)
    assert sel.get_value(0, 0, 0) == 0.0
    sel.set_bounds(4.0, 6.0)
    assert sel.get_value(0, 0, 0) == 10.0
    assert (sel.lower_bound, sel.upper_bound) == (4.0, 6.0)


def test_set_bounds_rejects_inverted_range():
    sel = Select()
    with pytest.raises(InvalidParamError):
        sel.set_bounds(2.0, 1.0)
    with pytest.raises(InvalidParamError):
        sel.set_bounds(1.0, 1.0)


def test_edge_falloff_is_clamped_to_half_the_range():
    sel = Select()
    sel.set_bounds(0.0, 1.0)
    sel.edge_falloff = 2.0
    assert sel.edge_falloff == 0.5
    sel.edge_falloff = 0.1
    assert sel.edge_falloff == 0.1


def test_set_bounds_reclamps_existing_falloff():
    sel = Select()
    sel.edge_falloff = 0.8
    assert sel.edge_falloff == 0.8
    sel.set_bounds(0.0, 1.0)
    assert sel.edge_falloff == 0.5


def test_falloff_blends_at_the_bounds():
    sel = _select(-1.0)
    sel.edge_falloff = 0.5
    assert sel.get_value(0, 0, 0) == pytest.approx(5.0)
    sel.control_module = _Const(1.0)
    assert sel.get_value(0, 0, 0) == pytest.approx(5.0)


def test_falloff_regions_outside_transition():
    sel = _select(0.0)
    sel.edge_falloff = 0.25
    assert sel.get_value(0, 0, 0) == 10.0
    sel.control_module = _Const(-2.0)
    assert sel.get_value(0, 0, 0) == 0.0
    sel.control_module = _Const(2.0)
    assert sel.get_value(0, 0, 0) == 0.0


def test_falloff_blend_stays_between_sources():
    sel = _select(0.0)
    sel.edge_falloff = 0.5
    previous = None
    for control in (-1.45, -1.2, -1.0, -0.8, -0.55):
        sel.control_module = _Const(control)
        value = sel.get_value(0, 0, 0)
        assert 0.0 <= value <= 10.0
        if previous is not None:
            assert value >= previous
        previous = value


def test_missing_control_module_raises():
    sel = Select(_Const(0.0), _Const(1.0))
    with pytest.raises(NoModuleError):
        sel.get_value(0, 0, 0)
    with pytest.raises(NoModuleError):
        _ = sel.control_module


def test_control_module_property_round_trip():
    control = _Const(0.3)
    sel = Select()
    sel.control_module = control
    assert sel.control_module is control
    assert sel.get_source_module(2) is control