#!/usr/bin/env python3
"""
cli_options.py
-------------------
Reusable Click option decorators for the markup-validator CLI.

Usage:
    from markup_validator.core.cli_options import config_option, processor_module_option

    @cli.command()
    @config_option
    @processor_module_option
    def check(ctx, config_files, processor_modules):
        pass
"""
import click

from markup_validator.core.paths import CONFIG_ENV_VAR, LOG_DIR


# ═══════════════════════════════════════════════════════════════════════════
# LOGGING OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

verbose_option = click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable verbose output (tracebacks on errors)"
)

log_dir_option = click.option(
    "--log-dir",
    type=click.Path(file_okay=False),
    default=str(LOG_DIR),
    help="Directory for log files"
)


# ═══════════════════════════════════════════════════════════════════════════
# CONFIGURATION OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

config_option = click.option(
    "-c", "--config", "config_files",
    type=click.Path(dir_okay=False),
    multiple=True,
    envvar=CONFIG_ENV_VAR,
    help=(
        "YAML configuration fragment; repeat to layer files "
        f"(later files override earlier ones). Also read from ${CONFIG_ENV_VAR}"
    )
)

processor_module_option = click.option(
    "-p", "--processor-module", "processor_modules",
    multiple=True,
    help="Python module that registers processors on import; repeatable"
)

namespace_option = click.option(
    "--namespace",
    default="markup_validator",
    show_default=True,
    help="Prefix for generated service ids"
)
