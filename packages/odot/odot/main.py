"""odot: CLI Entry Point
---------------------------------------------------------
The ``odot`` command line tool for inspecting the effective configuration and
the plugins it preloads into the process-wide registry.

Public API
----------
``app`` : The Typer application exposed as the ``odot`` console script.
"""

from __future__ import annotations

from typing import Optional

import typer
import yaml

from .core.config import apply_config, load_config
from .core.errors import OdotError, get_logger
from .core.registry import plugins as default_plugins

app = typer.Typer(help="odot CLI")

_CONFIG_OPTION = typer.Option(None, "--config", "-c", help="Explicit config file")


@app.callback()
def main():
    """Inspect odot configuration and plugins."""
    pass


@app.command()
def config(config_path: Optional[str] = _CONFIG_OPTION):
    """Print the effective configuration as YAML."""
    try:
        cfg = load_config(force_reload=True, config_path=config_path)
    except OdotError as e:
        get_logger().error(str(e))
        raise typer.Exit(code=1) from e
    typer.echo(yaml.safe_dump(cfg.model_dump(), sort_keys=False).rstrip())


@app.command()
def plugins(
    config_path: Optional[str] = _CONFIG_OPTION,
    resolve: bool = typer.Option(
        False, "--resolve", help="Import dotted targets and report failures"
    ),
):
    """List plugins registered after applying the configuration."""
    log = get_logger()
    try:
        registry = apply_config(
            load_config(force_reload=True, config_path=config_path), default_plugins
        )
        if resolve:
            registry.snapshot()
    except OdotError as e:
        log.error(str(e))
        raise typer.Exit(code=1) from e

    entries = registry.list()
    if not entries:
        typer.echo("No plugins registered.")
        return

    typer.echo("Registered plugins:")
    for name, meta in entries.items():
        detail = meta.get("module_path", "")
        typer.echo(f"  - {name} [{meta['kind']}] {detail}".rstrip())

    typer.echo(f"\nTotal: {len(entries)} plugin(s)")
