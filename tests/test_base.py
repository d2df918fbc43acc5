import pytest

from coherentnoise.base import Module
from coherentnoise.errors import InvalidParamError, NoiseError, NoModuleError


class Constant(Module):
    def __init__(self, value):
        super().__init__()
        self.value = value

    def get_value(self, x, y, z):
        return self.value


class Sum(Module):
    SOURCE_MODULE_COUNT = 2

    def get_value(self, x, y, z):
        first = Module.get_source_module(self, 0)
        second = Module.get_source_module(self, 1)
        return first.get_value(x, y, z) + second.get_value(x, y, z)


def test_module_is_abstract():
    with pytest.raises(TypeError):
        Module()


def test_generator_has_no_sources():
    constant = Constant(2.0)
    assert constant.source_module_count == 0
    with pytest.raises(NoiseError):
        Module.get_source_module(constant, 0)


def test_combiner_source_count():
    module = Sum()
    last = Constant(0.0)
    Module.set_source_module(module, 1, last)
    assert module.source_module_count == 2
    assert Module.get_source_module(module, 1) is last
    with pytest.raises(InvalidParamError):
        Module.set_source_module(module, 2, Constant(0.0))


def test_set_and_get_source_module():
    module = Sum()
    first = Constant(1.0)
    Module.set_source_module(module, 0, first)
    assert Module.get_source_module(module, 0) is first


def test_get_value_uses_sources():
    module = Sum()
    Module.set_source_module(module, 0, Constant(1.5))
    Module.set_source_module(module, 1, Constant(2.5))
    assert Sum.get_value(module, 0.0, 0.0, 0.0) == 4.0
    assert Module.__call__(module, 1.0, 2.0, 3.0) == 4.0


def test_replacing_source_module():
    module = Sum()
    Module.set_source_module(module, 0, Constant(1.0))
    replacement = Constant(3.0)
    Module.set_source_module(module, 0, replacement)
    assert Module.get_source_module(module, 0) is replacement


def test_unconnected_source_raises():
    module = Sum()
    with pytest.raises(NoModuleError):
        Module.get_source_module(module, 1)


def test_get_value_without_sources_raises():
    module = Sum()
    with pytest.raises(NoModuleError):
        Module.__call__(module, 0.0, 0.0, 0.0)


@pytest.mark.parametrize("index", [-1, 2, 10])
def test_get_out_of_range_raises(index):
    module = Sum()
    with pytest.raises(NoModuleError):
        Module.get_source_module(module, index)


@pytest.mark.parametrize("index", [-1, 2, 10])
def test_set_out_of_range_raises(index):
    with pytest.raises(InvalidParamError):
        Module.set_source_module(Sum(), index, Constant(0.0))


def test_generator_rejects_any_source():
    with pytest.raises(NoiseError):
        Module.set_source_module(Constant(0.0), 0, Constant(1.0))


def test_sources_are_per_instance():
    a = Sum()
    b = Sum()
    Module.set_source_module(a, 0, Constant(1.0))
    with pytest.raises(NoModuleError):
        Module.get_source_module(b, 0)