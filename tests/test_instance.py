"""Tests for delegating instances and the merge utility."""

import pytest

from odot.core.instance import Instance, get_proto, has_own, is_instance, own_keys
from odot.core.utils import extend


def test_own_properties_shadow_delegated_ones():
    shared = {"color": "pink", "mph": 0}
    car = Instance(shared)
    car.mph = 10
    assert car.mph == 10
    assert car.color == "pink"
    assert own_keys(car) == ["mph"]
    assert shared["mph"] == 0


def test_late_capabilities_are_visible():
    shared = {}
    car = Instance(shared)
    with pytest.raises(AttributeError):
        car.honk
    shared["honk"] = lambda self: "beep"
    assert car.honk() == "beep"


def test_delegated_functions_are_bound_to_the_receiver():
    def gas(self, amount=10):
        self.mph = getattr(self, "mph", 0) + amount
        return self

    shared = {"gas": gas}
    a, b = Instance(shared), Instance(shared)
    assert a.gas().gas(5).mph == 15
    assert not has_own(b, "mph")


def test_own_functions_and_callables_are_not_bound():
    class Counter:
        def __call__(self, *args):
            return args

    shared = {"counter": Counter(), "helper": staticmethod(lambda x: x * 2)}
    obj = Instance(shared)
    obj.plain = lambda: "own"
    assert obj.plain() == "own"
    assert obj.counter(1, 2) == (1, 2)
    assert obj.helper(4) == 8


def test_delegation_chain_through_instances():
    base = Instance({"wheels": 4})
    base.kind = "car"
    child = Instance(base)
    assert child.kind == "car"
    assert child.wheels == 4
    assert get_proto(child) is base
    assert own_keys(child) == []
    assert "wheels" in dir(child)


def test_delegation_to_plain_objects():
    class Defaults:
        size = 3

        def double(self):
            return self.size * 2

    obj = Instance(Defaults())
    assert obj.size == 3
    obj.size = 5
    # Functions reached through an object's class come back bound to that object.
    assert obj.double() == 6


def test_internal_reference_is_not_an_own_property():
    obj = Instance({})
    assert vars(obj) == {}
    assert is_instance(obj)
    assert not is_instance({})
    assert "Instance({})" == repr(obj)


def test_extend_mappings_left_to_right():
    target = {"a": 1}
    defaults = {"a": 2, "b": 2}
    options = {"b": 3}
    assert extend(target, defaults, None, options) is target
    assert target == {"a": 2, "b": 3}
    assert defaults == {"a": 2, "b": 2}


def test_extend_walks_the_delegation_chain():
    source = Instance({"inherited": True, "shadowed": "proto"})
    source.shadowed = "own"
    target = extend({}, source)
    assert target == {"inherited": True, "shadowed": "own"}


def test_extend_onto_an_instance_sets_own_properties():
    obj = extend(Instance({}), {"x": 1})
    assert own_keys(obj) == ["x"]


def test_extend_rejects_non_mappings():
    with pytest.raises(TypeError):
        extend({}, 42)
