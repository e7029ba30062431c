#!/usr/bin/env python3
"""
cli_decorators.py
-----------------
Click group factory that wires logging into ctx.obj.

Usage:
    from markup_validator.core.cli_decorators import markup_validator_cli_group

    @markup_validator_cli_group("cli")
    def cli(ctx):
        '''markup-validator - Configure markup validators'''
        pass
"""
from functools import wraps
from pathlib import Path
from typing import Callable

import click

from markup_validator.core.cli_options import log_dir_option, verbose_option
from markup_validator.core.cli_utils import setup_logger


def markup_validator_cli_group(component_name: str) -> Callable:
    """
    Wrap a function as a click group with log options and a logger.

    The group takes --log-dir and --verbose and stores a
    MarkupValidatorLogger for subcommands.

    Args:
        component_name: Component identifier for logging (e.g. "cli")

    Returns:
        Decorator function

    Provides context with:
        ctx.obj["log_dir"]: Path - Log directory
        ctx.obj["verbose"]: bool - Verbose flag
        ctx.obj["logger"]: MarkupValidatorLogger - Configured logger instance
    """
    def decorator(f: Callable) -> Callable:
        @click.group()
        @log_dir_option
        @verbose_option
        @click.pass_context
        @wraps(f)
        def wrapper(ctx: click.Context, log_dir: str, verbose: bool):
            ctx.ensure_object(dict)
            ctx.obj["log_dir"] = Path(log_dir)
            ctx.obj["verbose"] = verbose
            ctx.obj["logger"] = setup_logger(Path(log_dir), component_name)
            return f(ctx)

        return wrapper
    return decorator
