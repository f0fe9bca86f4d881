"""Tests for the single-object constructor ``o``."""

from odot import ObjectOptions, construct, o
from odot.core.instance import Instance, get_proto, has_own, own_keys


def _private_init(label):
    def init(self):
        private_prop = label

        self.share("get_private", lambda self: private_prop)

        return self

    return init


def _assert_valid(obj, suffix=""):
    assert has_own(obj, "instance_prop")
    assert obj.instance_prop == "instance property" + suffix
    assert not has_own(obj, "shared_prop")
    assert obj.shared_prop == "shared property" + suffix
    assert not hasattr(obj, "private_prop")
    assert not has_own(obj, "get_private")
    assert obj.get_private() == "private property" + suffix


def test_o_with_arguments_creates_valid_objects():
    obj = o(
        {"shared_prop": "shared property"},
        {"instance_prop": "instance property"},
        _private_init("private property"),
    )
    _assert_valid(obj)


def test_o_with_keywords_creates_valid_objects():
    obj = o(
        shared_properties={"shared_prop": "shared property 2"},
        instance_properties={"instance_prop": "instance property 2"},
        init_function=_private_init("private property 2"),
    )
    _assert_valid(obj, " 2")


def test_o_with_options_struct_creates_valid_objects():
    opts = ObjectOptions.model_validate({
        "sharedProperties": {"shared_prop": "shared property 3"},
        "instanceProperties": {"instance_prop": "instance property 3"},
        "initFunction": _private_init("private property 3"),
    })
    _assert_valid(o(opts), " 3")


def test_own_keys_are_exactly_the_instance_properties():
    shared = {"s1": 1, "s2": 2}
    instance = {"i1": 1, "i2": 2}
    obj = construct(shared, instance)
    assert sorted(own_keys(obj)) == ["i1", "i2"]
    assert obj.s1 == 1 and obj.s2 == 2
    assert get_proto(obj) is shared


def test_defaults_give_an_empty_blessed_object():
    obj = o()
    assert isinstance(obj, Instance)
    assert own_keys(obj) == []
    assert set(get_proto(obj)) == {"share"}


def test_share_reaches_existing_instances():
    shared = {}
    a = o(shared)
    b = o(shared)
    a.share("honk", lambda self: "beep")
    assert b.honk() == "beep"
    assert not has_own(b, "honk")


def test_initializer_result_is_propagated():
    assert o({}, {}, lambda self: "replacement") == "replacement"
    assert o({}, {}, lambda self: None) is None


def test_inherit_from_instance_property_chains():
    source = Instance({"bar": True})
    foo = o({}, source)
    assert foo.bar
    assert has_own(foo, "bar")


def test_private_state_and_shared_private_state():
    proto = {}

    def init_a(self):
        count = 1
        secret = "a"

        def add(self, num=1):
            nonlocal count
            count += num

        self.share("get_count", lambda self: count)
        self.share("add", add)
        self.get_secret = lambda: secret
        return self

    def init_b(self):
        secret = "b"
        self.add()
        self.get_secret = lambda: secret
        return self

    a = o(proto, {}, init_a)
    b = o(proto, {}, init_b)

    assert a.get_count() == b.get_count() == 2
    assert a.get_secret() != b.get_secret()


def test_o_namespace_helpers():
    assert callable(o.factory)
    assert o.extend({}, {"a": 1}) == {"a": 1}
    assert o.map_options("a, b", 1, 2) == {"a": 1, "b": 2}
    o.share("odot_test_marker", True)
    assert o.odot_test_marker is True
    del o.odot_test_marker
