"""
odot: Delegating Instances
--------------------------
The object model behind every constructed object. An ``Instance`` owns its
properties (stored in its ``__dict__``) and holds one delegation reference to
a capability set: a mapping, another Instance, or any attribute-bearing
object. Attribute lookup checks the instance first and then walks the
delegation chain; nothing is copied, so capabilities added to the set later
are visible to every instance already delegating to it.

Behavior
--------
- Plain functions found through delegation are bound to the instance the
  lookup started from, the same way functions in a class body become methods.
- ``staticmethod`` wrappers are unwrapped and returned unbound.
- Any other value, including callable objects, is returned as stored.
- Own properties are never bound: a function assigned onto an instance is
  returned unchanged.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import FunctionType, MethodType
from typing import Any

__all__ = [
    "Instance",
    "lookup",
    "chain_items",
    "own_keys",
    "has_own",
    "get_proto",
    "is_instance",
]

_MISSING = object()


class Instance:
    """An object that delegates missing attributes to a capability set.

    Parameters
    ----------
    proto : Any
        The capability set to delegate to. Held by reference.

    Examples
    --------
    >>> shared = {"greet": lambda self: f"hi {self.name}"}
    >>> obj = Instance(shared)
    >>> obj.name = "ada"
    >>> obj.greet()
    'hi ada'
    """

    __slots__ = ("_odot_proto", "__dict__", "__weakref__")

    def __init__(self, proto: Any) -> None:
        object.__setattr__(self, "_odot_proto", proto)

    def __getattr__(self, name: str) -> Any:
        # Only reached when the instance itself has no such attribute.
        if name == "_odot_proto" or (name.startswith("__") and name.endswith("__")):
            raise AttributeError(name)
        value = lookup(self._odot_proto, name)
        if value is _MISSING:
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            )
        return _bind(value, self)

    def __dir__(self) -> list[str]:
        return sorted(dict(chain_items(self)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({vars(self)!r})"


def _bind(value: Any, receiver: Instance) -> Any:
    if isinstance(value, FunctionType):
        return MethodType(value, receiver)
    if isinstance(value, staticmethod):
        return value.__func__
    return value


def lookup(target: Any, name: str, default: Any = _MISSING) -> Any:
    """Raw lookup of ``name`` along a delegation chain, without binding.

    Returns ``default`` (an internal sentinel when omitted) if no object in
    the chain carries ``name``.
    """
    while target is not None:
        if isinstance(target, Instance):
            own = vars(target)
            if name in own:
                return own[name]
            target = object.__getattribute__(target, "_odot_proto")
            continue
        if isinstance(target, Mapping):
            return target[name] if name in target else default
        return getattr(target, name, default)
    return default


def chain_items(source: Any) -> Iterator[tuple[str, Any]]:
    """Yield every enumerable entry reachable from ``source``.

    Delegated entries come first, deepest link first, so that a later own
    entry with the same name wins when the pairs are collected into a dict.
    Mappings enumerate their items; other objects their ``vars()``.
    """
    if isinstance(source, Instance):
        yield from chain_items(object.__getattribute__(source, "_odot_proto"))
        yield from vars(source).items()
    elif isinstance(source, Mapping):
        yield from source.items()
    elif source is not None:
        yield from vars(source).items()


def own_keys(obj: Any) -> list[str]:
    """Names of the properties ``obj`` owns (never the delegated ones)."""
    if isinstance(obj, Mapping):
        return list(obj.keys())
    return list(vars(obj))


def has_own(obj: Any, name: str) -> bool:
    if isinstance(obj, Mapping):
        return name in obj
    return name in vars(obj)


def get_proto(obj: Instance) -> Any:
    """Return the capability set ``obj`` delegates to."""
    return object.__getattribute__(obj, "_odot_proto")


def is_instance(obj: Any) -> bool:
    return isinstance(obj, Instance)
