#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants for markup_validator.

Paths are resolved relative to the project root, which is the directory
holding the `markup_validator` package:

    ROOT/
    ├── markup_validator/   # Package code
    ├── config/             # Layered YAML configuration
    └── logs/               # Application logs
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path


def _get_project_root() -> Path:
    """
    Determine project root directory.

    Assumes this file is at ROOT/markup_validator/core/paths.py.

    Returns:
        Path object for project root
    """
    # paths.py -> core/ -> markup_validator/ -> ROOT/
    return Path(__file__).resolve().parent.parent.parent


# ----- Project directory -----
ROOT: Path = _get_project_root()

# ---- Configuration ----
CONFIG_DIR = ROOT / "config"
DEFAULT_CONFIG_PATH = CONFIG_DIR / "markup_validator.yaml"
CONFIG_ENV_VAR = "MARKUP_VALIDATOR_CONFIG"

# ---- Logs ----
LOG_DIR = ROOT / "logs"
