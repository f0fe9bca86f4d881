"""
odot: Blessing
--------------
Prepares a capability set for use: installs a ``share`` operation bound to
that set and copies in the current plugins.
"""

from __future__ import annotations

from typing import Any, Optional

from .errors import get_logger
from .registry import PluginRegistry, plugins
from .utils import set_entry

__all__ = ["Share", "bless"]


class Share:
    """Install a capability on one specific capability set.

    Stored in the set as a callable object rather than a function, so
    instances receive it unbound: ``obj.share(name, value)``.
    """

    __slots__ = ("target",)

    def __init__(self, target: Any) -> None:
        self.target = target

    def __call__(self, name: str, value: Any) -> None:
        set_entry(self.target, name, value)

    def __repr__(self) -> str:
        return f"<share bound to {type(self.target).__name__} at {id(self.target):#x}>"


def bless(target: Any, registry: Optional[PluginRegistry] = None) -> Any:
    """Install ``share`` and the registry's plugins onto ``target``.

    Plugins overwrite same-named entries already on ``target``. Safe to repeat;
    each call re-applies the registry as it is now.

    Parameters
    ----------
    target : Any
        Mapping, Instance, or other attribute-bearing object. Mutated in place.
    registry : PluginRegistry, optional
        Defaults to the process-wide registry.

    Returns
    -------
    Any
        ``target`` itself.
    """
    registry = plugins if registry is None else registry
    set_entry(target, "share", Share(target))
    snapshot = registry.snapshot()
    for name, value in snapshot.items():
        set_entry(target, name, value)
    if snapshot:
        get_logger().debug(f"blessed {type(target).__name__} with {len(snapshot)} plugin(s)")
    return target
