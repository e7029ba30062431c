#!/usr/bin/env python3
"""
cli.py
------
Command line interface for markup_validator.

Commands:
    - show: Print the merged configuration
    - check: Build the registry and list validators
    - services: Print the service registrations for a DI container
    - processors: List registered processor aliases

Usage:
    markup-validator show -c config/base.yaml -c config/local.yaml
    markup-validator check -c config/base.yaml -p myapp.processors
    markup-validator services -c config/base.yaml -p myapp.processors
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Sequence, Tuple

# --- Third party imports ---
import click
import yaml

# --- Local imports ---
from markup_validator.config.loader import load_config, resolve_config_paths
from markup_validator.config.models import NormalizedConfig
from markup_validator.core.cli_decorators import markup_validator_cli_group
from markup_validator.core.cli_options import (
    config_option,
    namespace_option,
    processor_module_option,
)
from markup_validator.core.exceptions import MarkupValidatorError
from markup_validator.core.logging_manager import handle_cli_error
from markup_validator.registry.builder import build_registry
from markup_validator.registry.processors import (
    ProcessorCatalog,
    default_catalog,
    load_processor_modules,
)
from markup_validator.registry.registry import Registry
from markup_validator.registry.services import ServiceManifest


def _catalog(ctx: click.Context) -> ProcessorCatalog:
    # Hosts embedding the CLI may hand in their own catalog through ctx.obj
    catalog = ctx.obj.get("catalog")
    return catalog if catalog is not None else default_catalog


def _load(ctx: click.Context, config_files: Sequence[str]) -> NormalizedConfig:
    paths = resolve_config_paths(config_files)
    ctx.obj["config_files"] = [str(p) for p in paths]
    return load_config(paths, logger=ctx.obj["logger"])


def _build(
    ctx: click.Context, config_files: Sequence[str], processor_modules: Tuple[str, ...]
) -> Registry:
    load_processor_modules(processor_modules)
    config = _load(ctx, config_files)
    return build_registry(config, _catalog(ctx), logger=ctx.obj["logger"])


def _dump(data: dict) -> None:
    click.echo(yaml.safe_dump(data, sort_keys=False, default_flow_style=False), nl=False)


@markup_validator_cli_group("cli")
def cli(ctx: click.Context) -> None:
    """
    markup-validator - Configure named markup validators.

    Merge layered YAML configuration, bind each validator to a processor
    and check the default validator.
    """
    pass


@cli.command()
@config_option
@click.pass_context
def show(ctx: click.Context, config_files: Tuple[str, ...]) -> None:
    """Print the merged configuration as YAML."""
    try:
        config = _load(ctx, config_files)
        _dump(config.to_dict())
    except MarkupValidatorError as e:
        handle_cli_error(ctx, e, "show", {"config_files": list(config_files)})


@cli.command()
@config_option
@processor_module_option
@click.pass_context
def check(
    ctx: click.Context,
    config_files: Tuple[str, ...],
    processor_modules: Tuple[str, ...],
) -> None:
    """Build the validator registry and report what was configured."""
    try:
        registry = _build(ctx, config_files, processor_modules)
    except MarkupValidatorError as e:
        handle_cli_error(ctx, e, "check", {"config_files": list(config_files)})
        return

    if not len(registry):
        click.echo("⚠️  No validators configured")
        return

    click.echo(f"✅ {len(registry)} validator(s) configured")
    for name, alias in registry.summary().items():
        marker = " (default)" if name == registry.default else ""
        click.echo(f"  • {name} → {alias}{marker}")
    if registry.default is None:
        click.echo("No default validator")


@cli.command()
@config_option
@processor_module_option
@namespace_option
@click.pass_context
def services(
    ctx: click.Context,
    config_files: Tuple[str, ...],
    processor_modules: Tuple[str, ...],
    namespace: str,
) -> None:
    """Print the service registrations for a dependency-injection container."""
    try:
        registry = _build(ctx, config_files, processor_modules)
    except MarkupValidatorError as e:
        handle_cli_error(ctx, e, "services", {"config_files": list(config_files)})
        return

    _dump(ServiceManifest.from_registry(registry, namespace=namespace).to_dict())


@cli.command()
@processor_module_option
@click.pass_context
def processors(ctx: click.Context, processor_modules: Tuple[str, ...]) -> None:
    """List registered processor aliases."""
    try:
        load_processor_modules(processor_modules)
    except MarkupValidatorError as e:
        handle_cli_error(ctx, e, "processors")
        return

    aliases = _catalog(ctx).aliases()
    if not aliases:
        click.echo("No processors registered")
        return
    for alias in aliases:
        click.echo(alias)


if __name__ == "__main__":
    cli()
