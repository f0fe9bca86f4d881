"""
odot: Construction Engine
-------------------------
The single-object constructor ``o`` and the factory constructor ``factory``.

Behavior
--------
- ``o`` blesses the shared capability set, creates an ``Instance`` that
  delegates to it, copies the instance properties on as own properties and
  returns whatever the initializer returns.
- ``factory`` does its setup once: it freezes its options, runs
  ``factory_init`` against a factory-scoped instance whose closures become
  private state shared by every product, and returns a blessed stamping
  function.
- Every stamp merges the factory-scoped instance into the one shared
  capability set, so all products delegate to the same object and see the
  same shared state.

Notes
-----
- Constructors accept positional values, keyword arguments, or a single
  ``ObjectOptions`` / ``FactoryOptions`` struct. They do not look inside
  mappings to guess which form was meant.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from .blessing import bless
from .errors import get_logger
from .instance import Instance
from .options import FactoryOptions, ObjectOptions
from .registry import PluginRegistry
from .utils import extend

__all__ = ["o", "factory", "default_init"]


def default_init(obj: Any, *args: Any) -> Any:
    """Initializer used when none is given: returns its receiver unchanged."""
    return obj


def o(shared_properties: Any = None,
      instance_properties: Any = None,
      init_function: Optional[Callable[..., Any]] = None,
      *,
      registry: Optional[PluginRegistry] = None) -> Any:
    """Create a blessed object with shared, instance and private state.

    Parameters
    ----------
    shared_properties : Mapping or Instance or ObjectOptions, optional
        Capability set the new object delegates to; kept by reference and
        blessed in place. A fresh dict when omitted. May also be a lone
        ``ObjectOptions`` carrying all three options.
    instance_properties : Mapping or Instance, optional
        Entries copied onto the object as own properties.
    init_function : Callable, optional
        Called with the new object; its return value is the result. Closures
        created here are private; expose them with ``self.share(...)`` (all
        objects sharing the capability set) or by assignment (this object).
    registry : PluginRegistry, optional
        Plugins to bless with. Defaults to the process-wide registry.

    Returns
    -------
    Any
        What ``init_function`` returns; the new Instance by default.

    Examples
    --------
    >>> def init(self):
    ...     secret = "s3cr3t"
    ...     self.share("reveal", lambda self: secret)
    ...     return self
    >>> obj = o({"kind": "demo"}, {"name": "a"}, init)
    >>> obj.name, obj.kind, obj.reveal()
    ('a', 'demo', 's3cr3t')
    """
    config = ObjectOptions.from_call(shared_properties, instance_properties, init_function)
    init = config.init_function or default_init
    proto = config.shared_properties if config.shared_properties is not None else {}

    bless(proto, registry)

    obj = extend(Instance(proto), config.instance_properties)

    return init(obj)


def factory(shared_properties: Any = None,
            default_properties: Any = None,
            instance_init: Optional[Callable[..., Any]] = None,
            factory_init: Optional[Callable[..., Any]] = None,
            ignore_options: bool = False,
            *,
            registry: Optional[PluginRegistry] = None) -> Callable[..., Any]:
    """Return a function that stamps out objects sharing one capability set.

    Parameters
    ----------
    shared_properties : Mapping or Instance or FactoryOptions, optional
        Capability set every product delegates to. A single fresh dict is
        created when omitted. May also be a lone ``FactoryOptions``.
    default_properties : Mapping, optional
        Own properties each product starts with.
    instance_init : Callable, optional
        Called as ``instance_init(obj, options)`` for every product; its
        return value is the stamp's result.
    factory_init : Callable, optional
        Called once with the factory-scoped instance. Its closures are
        private state shared by all products; capabilities it installs with
        ``self.share`` or by assignment are merged into the capability set on
        every stamp.
    ignore_options : bool, default False
        When True, stamps ignore their ``options`` argument and every product
        receives ``default_properties`` itself (one object, not a copy).
    registry : PluginRegistry, optional
        Plugins to bless with. Defaults to the process-wide registry.

    Returns
    -------
    Callable
        ``stamp(options=None)``, blessed, with the frozen options at
        ``stamp.config``.

    Examples
    --------
    >>> def count_init(self):
    ...     count = 0
    ...     def add(self, n=1):
    ...         nonlocal count
    ...         count += n
    ...         return count
    ...     self.share("add", add)
    ...     return self
    >>> make = factory(factory_init=count_init)
    >>> a, b = make(), make()
    >>> a.add(6), b.add()
    (6, 7)
    """
    config = FactoryOptions.from_call(
        shared_properties, default_properties, instance_init, factory_init,
        ignore_options or None,
    )
    shared = config.shared_properties if config.shared_properties is not None else {}
    logger = get_logger()

    # Factory-scoped capture: private state shared across all products.
    scope = o(registry=registry)
    if callable(config.factory_init):
        config.factory_init(scope)

    def stamp(options: Any = None) -> Any:
        if config.ignore_options:
            properties = config.default_properties if config.default_properties is not None else {}
        else:
            properties = extend({}, config.default_properties, options)

        obj = o(extend(shared, scope), properties, registry=registry)
        logger.debug(f"stamped {obj!r}")

        init = config.instance_init
        return init(obj, options) if callable(init) else obj

    stamp.config = config  # type: ignore[attr-defined]
    logger.debug(f"factory created (ignore_options={config.ignore_options})")
    return bless(stamp, registry)
