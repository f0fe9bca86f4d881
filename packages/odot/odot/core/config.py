"""odot: Configuration
---------------------------------------------------------
Pydantic models for the optional ``config.yaml`` and the loader that builds
the effective configuration from layered YAML files. Configuration covers the
ambient behavior of the package: logging output and plugins to preload into
a registry as dotted import targets.

Public API
----------
``OdotConfig`` : Root configuration model (``logging``, ``plugins``)
``LoggingConfig`` : Arguments for ``configure_logging``
``load_config`` : Load and cache the layered configuration
``apply_config`` : Configure logging and register configured plugins

Notes
-----
- Search order (later overrides earlier): package defaults,
  ``~/.odot/config.yaml``, ``$ODOT_CONFIG``, explicit ``config_path``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import OdotConfigError, OdotError, configure_logging, get_logger
from .registry import PluginRegistry, plugins
from .utils import deep_merge_dicts, load_yaml_file

__all__ = ["OdotConfig", "LoggingConfig", "load_config", "apply_config"]

logger = get_logger()

_CONFIG_CACHE: Optional["OdotConfig"] = None


class LoggingConfig(BaseModel):
    """Logging options, passed through to ``configure_logging``."""

    verbose: bool = Field(default=False, description="Log at DEBUG level.")
    log_file: Optional[str] = Field(default=None, description="Also append logs to this file.")
    as_json: bool = Field(default=False, description="Emit JSON log lines.")
    suppress_warnings: bool = Field(
        default=False, description="Only surface captured warnings at ERROR level."
    )

    model_config = ConfigDict(extra="forbid")


class OdotConfig(BaseModel):
    """Effective package configuration.

    Attributes
    ----------
    logging : LoggingConfig
        Logger setup.
    plugins : dict[str, str]
        Capability name -> dotted target (``pkg.mod:attr``), registered lazily
        by ``apply_config``.

    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    plugins: dict[str, str] = Field(default_factory=dict)

    @field_validator("plugins")
    @classmethod
    def validate_targets_not_empty(cls, v: dict[str, str]) -> dict[str, str]:
        """Validate that every plugin names a non-empty target."""
        for name, target in v.items():
            if not name.strip() or not target or not target.strip():
                raise ValueError(f"Plugin '{name}' needs a non-empty dotted target")
        return v

    model_config = ConfigDict(frozen=False, extra="forbid")


def _overlay(config_dict: dict[str, Any], path: Path, label: str) -> dict[str, Any]:
    try:
        return deep_merge_dicts(config_dict, load_yaml_file(path))
    except OdotError as e:
        logger.warning(f"Failed to load {label} config {path}: {e}")
        return config_dict


def load_config(
    *, force_reload: bool = False, config_path: str | Path | None = None
) -> OdotConfig:
    """Load the configuration with its override chain.

    Parameters
    ----------
    force_reload : bool
        If True, ignore the cache and reload.
    config_path : str or Path, optional
        File overriding everything else. Unlike the implicit layers, an
        unreadable explicit file is an error.

    Returns
    -------
    OdotConfig
        The merged configuration.

    Raises
    ------
    OdotConfigError
        - [501] The explicit file cannot be loaded or the merged data is not
          a valid configuration.

    """
    global _CONFIG_CACHE

    if _CONFIG_CACHE is not None and not force_reload and config_path is None:
        return _CONFIG_CACHE

    config_dict: dict[str, Any] = OdotConfig().model_dump()

    user_path = Path.home() / ".odot" / "config.yaml"
    if user_path.exists():
        config_dict = _overlay(config_dict, user_path, "user")

    env_path = os.environ.get("ODOT_CONFIG")
    if env_path:
        path = Path(env_path)
        if path.exists():
            config_dict = _overlay(config_dict, path, "env")

    if config_path:
        try:
            config_dict = deep_merge_dicts(config_dict, load_yaml_file(Path(config_path)))
        except OdotError as e:
            raise OdotConfigError(f"[501] Failed to load explicit config {config_path}: {e}") from e

    try:
        config = OdotConfig(**config_dict)
    except ValidationError as e:
        raise OdotConfigError(f"[501] Invalid configuration: {e}") from e
    if config_path is None:
        _CONFIG_CACHE = config
    return config


def apply_config(config: OdotConfig, registry: Optional[PluginRegistry] = None) -> PluginRegistry:
    """Configure logging and lazily register the configured plugins.

    Returns the registry the plugins were added to.
    """
    registry = plugins if registry is None else registry
    configure_logging(**config.logging.model_dump())
    for name, target in config.plugins.items():
        registry.register_lazy(name, target)
    logger.debug(f"applied config with {len(config.plugins)} plugin(s)")
    return registry
