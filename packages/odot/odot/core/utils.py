"""
odot: Core Utilities
---------------------------------------------------------
Shared helpers for the construction engine and the configuration layer: the
shallow ``extend`` merge used to combine shared, default and per-call
properties, entry assignment that works on mappings and attribute-bearing
objects alike, deep dictionary merging for configuration files, and YAML
loading.

Public API
----------
``extend`` : Shallow, delegation-aware merge of sources into a target
``set_entry`` : Assign one entry on a mapping or object
``deep_merge_dicts`` : Recursive dictionary merge for configuration layers
``load_yaml_file`` : Load YAML with error handling
"""

from __future__ import annotations

from collections.abc import MutableMapping
from pathlib import Path
from typing import Any

import yaml

from .errors import OdotConfigError, OdotIOError
from .instance import chain_items

__all__ = ["extend", "set_entry", "deep_merge_dicts", "load_yaml_file"]


def set_entry(target: Any, name: str, value: Any) -> None:
    """Assign ``value`` under ``name`` on a mapping (item) or object (attribute)."""
    if isinstance(target, MutableMapping):
        target[name] = value
    else:
        setattr(target, name, value)


def extend(target: Any, *sources: Any) -> Any:
    """Copy every entry of each source onto ``target`` and return ``target``.

    Sources are applied left to right, so later sources win on conflicts.
    ``None`` sources are skipped. When a source is an Instance, the entries it
    reaches through delegation are copied too, with its own entries taking
    precedence.

    Parameters
    ----------
    target : Any
        Mapping or object receiving the entries. Mutated in place.
    *sources : Any
        Mappings, Instances, or attribute-bearing objects.

    Returns
    -------
    Any
        ``target`` itself.

    Examples
    --------
    >>> extend({"a": 1}, {"b": 2}, None, {"a": 3})
    {'a': 3, 'b': 2}
    """
    for source in sources:
        if source is None:
            continue
        for name, value in dict(chain_items(source)).items():
            set_entry(target, name, value)
    return target


def deep_merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override values taking precedence.

    Parameters
    ----------
    base : Dict[str, Any]
        Base dictionary
    override : Dict[str, Any]
        Override dictionary

    Returns
    -------
    Dict[str, Any]
        Merged dictionary; neither input is modified.

    """
    result = dict(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = deep_merge_dicts(result[key], value)
        else:
            result[key] = value
    return result


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML mapping from ``path``.

    Raises
    ------
    OdotIOError
        - [100] The file does not exist.
    OdotConfigError
        - [500] The file cannot be parsed or is not a mapping.

    """
    if not path.exists():
        raise OdotIOError(f"[100] File not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise OdotConfigError(f"[500] Failed to parse YAML file {path}: {e}") from e
    if not isinstance(data, dict):
        raise OdotConfigError(f"[500] Expected a mapping at top level of {path}")
    return data
