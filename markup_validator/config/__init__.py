"""
config
------
Configuration fragments, merging and YAML loading.

Usage:
    from markup_validator.config import merge_configs, load_config
"""
from markup_validator.config.loader import load_config, load_fragment, load_fragments
from markup_validator.config.merger import ConfigMerger, merge_configs
from markup_validator.config.models import ConfigFragment, NormalizedConfig, ValidatorSpec

__all__ = [
    "ConfigFragment",
    "ConfigMerger",
    "NormalizedConfig",
    "ValidatorSpec",
    "load_config",
    "load_fragment",
    "load_fragments",
    "merge_configs",
]
