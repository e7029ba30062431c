#!/usr/bin/env python3
"""
loader.py
---------
Read configuration fragments from YAML files.

A file may hold the fragment directly or nested under the `markup_validator`
root key, so the same block can live inside a larger application config:

    markup_validator:
        default_validator: tidy
        validators:
            tidy:
                processor: tidy

Usage:
    from markup_validator.config.loader import load_config

    config = load_config(["config/base.yaml", "config/local.yaml"])
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

# --- Third party imports ---
import yaml

# --- Local imports ---
from markup_validator.config.merger import merge_configs
from markup_validator.config.models import NormalizedConfig
from markup_validator.core.exceptions import ConfigLoadError
from markup_validator.core.logging_manager import MarkupValidatorLogger, safe_logger
from markup_validator.core.paths import DEFAULT_CONFIG_PATH

ROOT_KEY = "markup_validator"

PathLike = Union[str, Path]


def load_fragment(path: PathLike) -> Dict[str, Any]:
    """
    Load one configuration fragment from a YAML file.

    Args:
        path: YAML file path

    Returns:
        Fragment mapping (empty for an empty document)

    Raises:
        ConfigLoadError: If the file is missing, unreadable, not valid YAML,
            or does not hold a mapping
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise ConfigLoadError(f"Config file not found: {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML in {file_path}: {e}") from e
    except OSError as e:
        raise ConfigLoadError(f"Cannot read config file {file_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigLoadError(
            f"Config file {file_path} must contain a mapping, got {type(data).__name__}"
        )

    if isinstance(data.get(ROOT_KEY), dict):
        return data[ROOT_KEY]
    if ROOT_KEY in data and data[ROOT_KEY] is None:
        return {}
    return data


def load_fragments(paths: Iterable[PathLike]) -> List[Dict[str, Any]]:
    """Load every file in order."""
    return [load_fragment(path) for path in paths]


def resolve_config_paths(
    config_files: Iterable[PathLike], default_path: Path = DEFAULT_CONFIG_PATH
) -> List[Path]:
    """
    Pick the configuration files to read.

    Explicit files win; otherwise the default config file is used when it
    exists. No file at all means an empty configuration.
    """
    paths = [Path(p) for p in config_files]
    if paths:
        return paths
    return [default_path] if default_path.is_file() else []


def load_config(
    paths: Iterable[PathLike],
    logger: Optional[MarkupValidatorLogger] = None,
) -> NormalizedConfig:
    """
    Load and merge configuration files.

    Args:
        paths: Ordered YAML files (later files override earlier ones)
        logger: Optional logger

    Returns:
        NormalizedConfig

    Raises:
        ConfigLoadError: If any file cannot be loaded
    """
    paths = [Path(p) for p in paths]
    config = merge_configs(load_fragments(paths))
    safe_logger(logger).log_operation(
        "load_config",
        {
            "files": [str(p) for p in paths],
            "validators": list(config.validators),
            "default_validator": config.default_validator,
        },
    )
    return config
