"""odot: Core Subpackage
--------------------
The construction engine and its supporting pieces: option resolution, the
plugin registry, blessing, delegating instances, errors and configuration.
"""

from .blessing import Share, bless
from .engine import default_init, factory, o
from .instance import Instance, get_proto, has_own, is_instance, own_keys
from .options import FactoryOptions, ObjectOptions, get_config, map_options
from .registry import PluginRegistry, add_plugins, plugins, register_lazy
from .utils import extend

__all__ = [
    "o",
    "factory",
    "default_init",
    "bless",
    "Share",
    "Instance",
    "get_proto",
    "has_own",
    "is_instance",
    "own_keys",
    "map_options",
    "get_config",
    "ObjectOptions",
    "FactoryOptions",
    "PluginRegistry",
    "plugins",
    "add_plugins",
    "register_lazy",
    "extend",
]
