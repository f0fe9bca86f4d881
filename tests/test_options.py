"""Tests for option resolution and the options structs."""

import warnings

import pytest
from pydantic import ValidationError

from odot.core.errors import OdotWarning
from odot.core.options import FactoryOptions, ObjectOptions, get_config, map_options


def test_positional_mode():
    assert map_options("a, b, c", 1, 2, 3) == {"a": 1, "b": 2, "c": 3}


def test_named_mode_leaves_unmatched_names_absent():
    assert map_options("a, b, c", {"a": 5}) == {"a": 5}


def test_missing_positions_resolve_to_none():
    assert map_options("a, b, c", 1) == {"a": 1, "b": None, "c": None}


def test_extra_values_are_ignored():
    assert map_options("a", 1, 2, 3) == {"a": 1}


def test_whitespace_and_sequence_names():
    assert map_options("  a ,b,   c ", 1, 2, 3) == {"a": 1, "b": 2, "c": 3}
    assert map_options(["a", "b"], 1, 2) == {"a": 1, "b": 2}


def test_falsy_or_empty_first_mapping_is_positional():
    assert map_options("a, b", {}) == {"a": {}, "b": None}
    falsy = {"a": 0, "b": ""}
    assert map_options("a, b", falsy, 2) == {"a": falsy, "b": 2}


def test_positional_mode_never_looks_inside():
    named = {"a": 5}
    assert map_options("a, b", named, mode="positional") == {"a": named, "b": None}


def test_named_mode_keeps_falsy_entries():
    assert map_options("a, b, c", {"a": 0, "c": None}, mode="named") == {"a": 0, "c": None}


def test_named_mode_requires_mapping():
    with pytest.raises(TypeError):
        map_options("a", 1, mode="named")


def test_get_config_is_deprecated_alias():
    import odot.core.options as options_mod

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        assert get_config("a, b", 1, 2) == {"a": 1, "b": 2}
    already_warned = getattr(options_mod.get_config, "__odot_deprecated_warned__", False)
    assert already_warned
    assert all(issubclass(w.category, OdotWarning) for w in caught)


def test_object_options_from_positional_call():
    shared = {"x": 1}
    opts = ObjectOptions.from_call(shared, {"y": 2})
    # Shared properties are kept by reference
    assert opts.shared_properties is shared
    assert opts.instance_properties == {"y": 2}
    assert opts.init_function is None


def test_options_struct_is_returned_unchanged():
    opts = ObjectOptions(shared_properties={})
    assert ObjectOptions.from_call(opts) is opts


def test_factory_options_accept_camel_case_mapping():
    opts = FactoryOptions.model_validate(
        {"defaultProperties": {"foo": "bar"}, "ignoreOptions": True}
    )
    assert opts.default_properties == {"foo": "bar"}
    assert opts.ignore_options is True


def test_options_are_frozen_and_strict_about_names():
    opts = FactoryOptions()
    with pytest.raises(ValidationError):
        opts.ignore_options = True
    with pytest.raises(ValidationError):
        FactoryOptions(unknown=1)
