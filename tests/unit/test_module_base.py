"""
Unit tests for the Module base class and source wiring.
"""
import gc
import weakref

import pytest

from pynoisegraph.exceptions import InvalidParameterError, UnboundSourceError
from pynoisegraph.module import Billow, Clamp, Const, Exponent, Module, Perlin


class Invert(Module):
    """Minimal user-defined modifier."""

    source_module_count = 1

    def get_value(self, x, y, z):
        return -self.get_source_module(0).get_value(x, y, z)


class TestSourceModuleCount:

    @pytest.mark.unit
    @pytest.mark.parametrize("cls,count", [
        (Const, 0), (Perlin, 0), (Billow, 0), (Clamp, 1), (Exponent, 1),
    ])
    def test_arity(self, cls, count):
        assert cls().get_source_module_count() == count


class TestSourceBinding:

    @pytest.mark.unit
    def test_bind_and_get(self):
        source = Const(0.25)
        clamp = Clamp()
        assert not clamp.is_bound()
        clamp.set_source_module(0, source)
        assert clamp.is_bound()
        assert clamp.get_source_module(0) is source

    @pytest.mark.unit
    def test_constructor_binding(self):
        source = Const(0.25)
        assert Exponent(source).get_source_module(0) is source

    @pytest.mark.unit
    @pytest.mark.parametrize("index", [-1, 1, 5])
    def test_index_out_of_range(self, index):
        clamp = Clamp()
        with pytest.raises(InvalidParameterError):
            clamp.set_source_module(index, Const())
        with pytest.raises(InvalidParameterError):
            clamp.get_source_module(index)

    @pytest.mark.unit
    def test_generators_take_no_sources(self):
        with pytest.raises(InvalidParameterError):
            Perlin().set_source_module(0, Const())

    @pytest.mark.unit
    def test_non_module_source(self):
        with pytest.raises(TypeError):
            Clamp().set_source_module(0, 0.5)

    @pytest.mark.unit
    def test_rebinding_replaces_source(self):
        clamp = Clamp(Const(0.1))
        clamp.set_source_module(0, Const(0.2))
        assert clamp.get_value(0, 0, 0) == 0.2


class TestUnboundSource:

    @pytest.mark.unit
    @pytest.mark.parametrize("cls", [Clamp, Exponent, Invert])
    def test_evaluation_fails_loudly(self, cls):
        module = cls()
        with pytest.raises(UnboundSourceError) as excinfo:
            module.get_value(0.1, 0.2, 0.3)
        assert excinfo.value.index == 0
        assert excinfo.value.module is module
        assert isinstance(excinfo.value, RuntimeError)

    @pytest.mark.unit
    def test_unbound_deep_in_graph(self):
        root = Clamp(Exponent())
        with pytest.raises(UnboundSourceError):
            root.get_value(0.0, 0.0, 0.0)

    @pytest.mark.unit
    def test_abstract_get_value(self):
        with pytest.raises(NotImplementedError):
            Module().get_value(0.0, 0.0, 0.0)


class TestOwnership:

    @pytest.mark.unit
    def test_bound_source_outlives_caller_reference(self):
        source = Perlin(seed=9)
        expected = source.get_value(0.3, 0.4, 0.5)
        ref = weakref.ref(source)
        clamp = Clamp(source, lower_bound=-10.0, upper_bound=10.0)
        del source
        gc.collect()
        assert ref() is not None
        assert clamp.get_value(0.3, 0.4, 0.5) == expected


class TestCustomModules:

    @pytest.mark.unit
    def test_user_defined_modifier(self):
        node = Invert(Const(0.75))
        assert node.get_source_module_count() == 1
        assert node.get_value(1.0, 2.0, 3.0) == -0.75

    @pytest.mark.unit
    def test_shared_source_dag(self):
        shared = Perlin(seed=4)
        a = Clamp(shared, lower_bound=-0.2, upper_bound=0.2)
        b = Invert(shared)
        v = shared.get_value(0.7, 0.1, 0.4)
        assert a.get_value(0.7, 0.1, 0.4) == min(max(v, -0.2), 0.2)
        assert b.get_value(0.7, 0.1, 0.4) == -v
