"""
markup_validator
================

Configuration-driven registry of markup validators.

Reads layered configuration fragments, binds each named validator to a
processor implementation supplied by the host, and records an optional
default validator. Validation itself is done by the processors.

Main Components:
    - config: Fragment merging and YAML loading
    - registry: Processor catalog, registry builder, service manifest
    - validation: Processor interface and Validator handle
    - core: Exceptions, logging, paths, CLI helpers
    - cli: `markup-validator` command line

Example Usage:
    >>> from markup_validator import ProcessorCatalog, build_registry, merge_configs
    >>> catalog = ProcessorCatalog()
    >>> catalog.register("tidy", TidyProcessor())
    >>> config = merge_configs([{"default_validator": "tidy",
    ...                          "validators": {"tidy": {"processor": "tidy"}}}])
    >>> registry = build_registry(config, catalog)
    >>> registry.get().validate("<p>hello</p>")
"""

__version__ = "1.0.0"

from markup_validator.config import NormalizedConfig, load_config, merge_configs
from markup_validator.core.exceptions import (
    ConfigErrorKind,
    ConfigurationError,
    MarkupValidatorError,
)
from markup_validator.registry import (
    ProcessorCatalog,
    Registry,
    ServiceManifest,
    build_registry,
)
from markup_validator.validation import Processor, ValidationResult, Validator

__all__ = [
    "ConfigErrorKind",
    "ConfigurationError",
    "MarkupValidatorError",
    "NormalizedConfig",
    "Processor",
    "ProcessorCatalog",
    "Registry",
    "ServiceManifest",
    "ValidationResult",
    "Validator",
    "build_registry",
    "load_config",
    "merge_configs",
]
