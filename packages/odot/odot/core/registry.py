"""
odot: Plugin Registry
---------------------
The set of capabilities handed to every capability set at blessing time.
Entries are either concrete values (functions or data) or dotted import
targets resolved when a capability set is blessed.

Behavior
--------
- ``register`` merges a mapping into the registry, replacing entries with the
  same name. There is no removal by name; ``clear`` and ``scoped`` give the
  owner of a registry control over its lifetime.
- Blessing copies a snapshot, so capability sets blessed before a
  registration never gain the new entries retroactively.
- A process-wide default registry, ``plugins``, is used whenever a caller
  does not pass its own.

Notes
-----
- Dotted targets accept both ``module:attr`` and ``module.attr`` forms.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import UTC, datetime
from importlib import import_module
from typing import Any, Callable, Dict, Optional

from .errors import OdotConfigError, OdotRegistryError, get_logger

__all__ = [
    "PluginRegistry",
    "plugins",
    "add_plugins",
    "register_lazy",
]


@dataclass
class _Entry:
    """Internal record describing one plugin: a value or a dotted target."""
    kind: str  # "value" | "dotted"
    value: Any = None
    target: Optional[str] = None
    meta: Dict[str, Any] = field(default_factory=dict)


class PluginRegistry:
    """Mapping of capability name to behavior, consumed by blessing.

    Examples
    --------
    >>> reg = PluginRegistry()
    >>> reg.register({"describe": lambda self: repr(self)})
    >>> sorted(reg.snapshot())
    ['describe']
    """

    def __init__(self) -> None:
        self._entries: Dict[str, _Entry] = {}

    # --------------------------- registration ---------------------------
    def register(self, new_plugins: Optional[Mapping[str, Any]] = None, /, **more: Any) -> None:
        """Merge plugins into the registry, overwriting same-named entries.

        Parameters
        ----------
        new_plugins : Mapping[str, Any], optional
            Capability name -> behavior.
        **more : Any
            Additional plugins given as keyword arguments.
        """
        stamp = datetime.now(UTC).isoformat()
        for name, value in {**(new_plugins or {}), **more}.items():
            self._entries[name] = _Entry(kind="value", value=value, meta={"registered_at": stamp})
            get_logger().debug(f"plugin registered: {name}")

    def register_lazy(self, name: str, target: str) -> None:
        """Register a dotted import target, imported on first blessing.

        Parameters
        ----------
        name : str
            Capability name under which the imported object is installed.
        target : str
            Dotted path like ``"pkg.mod:func"`` or ``"pkg.mod.func"``.
        """
        self._entries[name] = _Entry(
            kind="dotted",
            target=str(target),
            meta={"registered_at": datetime.now(UTC).isoformat(), "module_path": str(target)},
        )
        get_logger().debug(f"plugin registered lazily: {name} -> {target}")

    def plugin(self, name: Optional[str] = None) -> Callable[[Any], Any]:
        """Return a decorator registering the decorated object.

        The object's ``__name__`` is used when ``name`` is omitted.
        """
        def _wrap(obj: Any) -> Any:
            self.register({name or obj.__name__: obj})
            return obj
        return _wrap

    # --------------------------- lifecycle ---------------------------
    def clear(self) -> None:
        self._entries.clear()

    @contextmanager
    def scoped(self) -> Iterator["PluginRegistry"]:
        """Restore the current entries when the block exits.

        Examples
        --------
        >>> reg = PluginRegistry()
        >>> with reg.scoped():
        ...     reg.register(temp=1)
        >>> reg.snapshot()
        {}
        """
        saved = dict(self._entries)
        try:
            yield self
        finally:
            self._entries = saved

    # --------------------------- consumption ---------------------------
    def snapshot(self) -> Dict[str, Any]:
        """Return ``{name: behavior}`` with dotted targets imported.

        A dotted entry is replaced by a value entry once imported, so the
        import happens at most once.

        Raises
        ------
        OdotRegistryError
            - [402] Failed to import a registered target.
        OdotConfigError
            - [403] Target not found in the imported module.
        """
        result: Dict[str, Any] = {}
        for name, entry in list(self._entries.items()):
            if entry.kind == "dotted":
                assert entry.target is not None
                entry.value = self._import_target(name, entry.target)
                entry.kind = "value"
                entry.meta["delayed_import"] = True
            result[name] = entry.value
        return result

    def list(self) -> Dict[str, Dict[str, Any]]:
        """List entries with their metadata, sorted by name."""
        return {
            name: {"kind": self._entries[name].kind, **self._entries[name].meta}
            for name in sorted(self._entries)
        }

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    # --------------------------- helpers ---------------------------
    @staticmethod
    def _import_target(name: str, target: str) -> Any:
        module_name, sep, attr_name = target.partition(":")
        if not sep:
            module_name, _, attr_name = target.rpartition(".")
            if not module_name:
                module_name, attr_name = target, ""
        try:
            mod = import_module(module_name)
        except ImportError as e:
            raise OdotRegistryError(f"[402] Failed to import plugin '{name}' from '{target}': {e}") from e
        if not attr_name:
            return mod
        if not hasattr(mod, attr_name):
            raise OdotConfigError(f"[403] Target '{target}' not found")
        return getattr(mod, attr_name)


# Process-wide default
plugins = PluginRegistry()


def add_plugins(new_plugins: Optional[Mapping[str, Any]] = None, /, **more: Any) -> None:
    """Register plugins on the process-wide registry."""
    plugins.register(new_plugins, **more)


def register_lazy(name: str, target: str) -> None:
    """Register a dotted plugin target on the process-wide registry."""
    plugins.register_lazy(name, target)
