#!/usr/bin/env python3
"""
cli_utils.py
-------------------
Shared CLI utilities for markup_validator commands.

Functions:
    setup_logger: Initialize MarkupValidatorLogger for CLI operations
"""
from pathlib import Path

from markup_validator.core.logging_manager import MarkupValidatorLogger


def setup_logger(log_dir: Path, component_name: str) -> MarkupValidatorLogger:
    """
    Setup logging for CLI operations.

    Log files go to `<log_dir>/operations`, which is created if missing.

    Args:
        log_dir: Base log directory (typically paths.LOG_DIR)
        component_name: Component identifier for logging (e.g. 'cli')

    Returns:
        Configured MarkupValidatorLogger instance

    Examples:
        >>> from markup_validator.core.paths import LOG_DIR
        >>> logger = setup_logger(LOG_DIR, "cli")
        >>> logger.log_info("Building registry...")
    """
    operations_log_dir = Path(log_dir) / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return MarkupValidatorLogger(operations_log_dir, component_name=component_name)
