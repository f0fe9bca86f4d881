"""Prototypal Objects Made Easy
===========================

Build objects from shared capabilities, per-instance data and initializer
closures instead of class hierarchies. Objects delegate to a shared
capability set, so behavior added later reaches every object at once; data
captured in initializer closures stays private unless explicitly shared.

Public API
----------
o
    Create one object. Also carries ``factory``, ``extend``, ``add_plugins``,
    ``map_options`` and ``get_config`` as attributes.
factory
    Create an object factory with factory-scoped private state.
add_plugins
    Register capabilities given to every capability set blessed afterwards.
extend
    Shallow, delegation-aware merge.
map_options
    Resolve named or positional options.
"""

from .core.blessing import bless
from .core.engine import factory, o
from .core.errors import OdotError, OdotWarning, configure_logging, get_logger
from .core.instance import Instance, get_proto, has_own, is_instance, own_keys
from .core.options import FactoryOptions, ObjectOptions, get_config, map_options
from .core.registry import PluginRegistry, add_plugins, plugins, register_lazy
from .core.utils import extend

# The namespace object: ``o`` is itself blessed and carries the helpers.
bless(o)
extend(o, {
    "factory": factory,
    "add_plugins": add_plugins,
    "extend": extend,
    "map_options": map_options,
    "get_config": get_config,
})

# Descriptive aliases
construct = o
make_factory = factory
register_plugins = add_plugins
merge_into = extend
resolve_options = map_options

__version__ = "0.3.0"

__all__ = [
    "o",
    "factory",
    "construct",
    "make_factory",
    "add_plugins",
    "register_plugins",
    "register_lazy",
    "extend",
    "merge_into",
    "map_options",
    "resolve_options",
    "get_config",
    "bless",
    "Instance",
    "own_keys",
    "has_own",
    "get_proto",
    "is_instance",
    "ObjectOptions",
    "FactoryOptions",
    "PluginRegistry",
    "plugins",
    "OdotError",
    "OdotWarning",
    "get_logger",
    "configure_logging",
    "__version__",
]
