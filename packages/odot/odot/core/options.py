"""
odot: Option Resolution
-----------------------
Turns a declared, ordered list of parameter names plus call-time values into a
name -> value mapping, and defines the explicit options structs accepted by
the constructors.

Behavior
--------
- ``map_options`` in ``"auto"`` mode inspects the first value: when it is a
  mapping carrying a truthy entry under any declared name, the call resolves
  in named-mode and only matched names appear in the result. Otherwise every
  name maps to the value at its position.
- The constructors do not inspect argument contents. They take positional
  values, keyword arguments, or a single ``ObjectOptions`` /
  ``FactoryOptions`` instance, and resolve positional values with
  ``mode="positional"``.
- Both structs validate from camelCase mappings through ``model_validate``,
  so the camelCase named-options spelling stays available explicitly.

Notes
-----
- No mode raises for missing or extra values; absent positions resolve to
  None.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .errors import deprecated
from .instance import Instance, lookup

__all__ = [
    "map_options",
    "get_config",
    "ObjectOptions",
    "FactoryOptions",
]

Mode = Literal["auto", "positional", "named"]

_NAME_SPLIT = re.compile(r"\s*,\s*")
_MISSING = object()


def _split_names(option_names: str | Sequence[str]) -> list[str]:
    if isinstance(option_names, str):
        names = _NAME_SPLIT.split(option_names.strip())
    else:
        names = list(option_names)
    return [n.strip() for n in names if n.strip()]


def _named_entry(value: Any, name: str) -> Any:
    if isinstance(value, Instance):
        return lookup(value, name, _MISSING)
    if isinstance(value, Mapping):
        return value.get(name, _MISSING)
    return _MISSING


def map_options(option_names: str | Sequence[str], *values: Any, mode: Mode = "auto") -> dict[str, Any]:
    """Map call-time values onto declared parameter names.

    Parameters
    ----------
    option_names : str or Sequence[str]
        Comma-delimited names (``"a, b, c"``) or a sequence of names.
    *values : Any
        Positional values, or a single named-options mapping.
    mode : {"auto", "positional", "named"}, default "auto"
        ``"auto"`` picks named-mode when the first value is a mapping with a
        truthy entry under at least one name. ``"positional"`` never looks
        inside the values. ``"named"`` reads the first value as the options
        mapping and keeps every declared entry it has, falsy ones included.

    Returns
    -------
    dict[str, Any]
        Resolved options. In named-mode, names without an entry are absent.

    Examples
    --------
    >>> map_options("a, b, c", 1, 2, 3)
    {'a': 1, 'b': 2, 'c': 3}
    >>> map_options("a, b, c", {"a": 5})
    {'a': 5}
    >>> map_options("a, b", {"a": 0})
    {'a': {'a': 0}, 'b': None}
    """
    names = _split_names(option_names)
    first = values[0] if values else None

    if mode == "named":
        if not isinstance(first, (Mapping, Instance)):
            raise TypeError(
                f"named options must be a mapping, got {type(first).__name__}"
            )
        found = ((n, _named_entry(first, n)) for n in names)
        return {n: v for n, v in found if v is not _MISSING}

    if mode == "auto":
        config = {}
        for name in names:
            entry = _named_entry(first, name)
            if entry is not _MISSING and entry:
                config[name] = entry
        if config:
            return config

    return {name: (values[i] if i < len(values) else None) for i, name in enumerate(names)}


get_config = deprecated("Use map_options() instead")(map_options)


class _Options(BaseModel):
    """Frozen options record shared by the constructors.

    Fields are typed ``Any`` so validation never copies the caller's objects:
    shared properties must stay the very object the caller passed.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        arbitrary_types_allowed=True,
        extra="forbid",
    )

    option_names: ClassVar[tuple[str, ...]] = ()

    @classmethod
    def from_call(cls, *values: Any, **kwargs: Any):
        """Build the record from a constructor call.

        A lone options struct is returned unchanged. Otherwise positional
        values are mapped in declared order and keyword arguments override
        them; ``None`` means "not given".
        """
        given = [v for v in values if v is not None]
        if len(given) == 1 and isinstance(values[0], cls) and not kwargs:
            return values[0]
        resolved = map_options(cls.option_names, *values, mode="positional")
        resolved.update(kwargs)
        return cls(**{k: v for k, v in resolved.items() if v is not None})


class ObjectOptions(_Options):
    """Options of the single-object constructor ``o``."""

    option_names: ClassVar[tuple[str, ...]] = (
        "shared_properties",
        "instance_properties",
        "init_function",
    )

    shared_properties: Any = None
    instance_properties: Any = None
    init_function: Any = None


class FactoryOptions(_Options):
    """Options of ``factory``; also serves as the factory's frozen config."""

    option_names: ClassVar[tuple[str, ...]] = (
        "shared_properties",
        "default_properties",
        "instance_init",
        "factory_init",
        "ignore_options",
    )

    shared_properties: Any = None
    default_properties: Any = None
    instance_init: Any = None
    factory_init: Any = None
    ignore_options: bool = False
