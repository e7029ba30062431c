#!/usr/bin/env python3
"""
builder.py
----------
Turn a NormalizedConfig into a Registry of bound validators.

For each configured validator, in configuration order:
    1. Require a non-empty `processor` option (MissingProcessorError)
    2. Resolve the processor alias (UnknownProcessorError)
    3. Bind a Validator to the resolved processor

Then the default validator, if configured, must name one of the validators
(UnknownDefaultValidatorError). Any violation aborts the build; a registry
is either complete or not returned at all.

Usage:
    from markup_validator.registry.builder import build_registry

    registry = build_registry(config, catalog)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Any, Callable, Dict, Mapping, Optional, Union

# --- Local imports ---
from markup_validator.config.models import NormalizedConfig, ValidatorSpec
from markup_validator.core.exceptions import (
    ConfigurationError,
    UnknownDefaultValidatorError,
    UnknownProcessorError,
)
from markup_validator.core.logging_manager import MarkupValidatorLogger, safe_logger
from markup_validator.registry.registry import Registry
from markup_validator.validation.base import Validator

ProcessorResolver = Union[Callable[[str], Optional[Any]], Mapping[str, Any]]


def _as_lookup(resolver: ProcessorResolver) -> Callable[[str], Optional[Any]]:
    if isinstance(resolver, Mapping):
        return resolver.get
    return resolver


class RegistryBuilder:
    """
    Builds registries from normalized configuration.

    Attributes:
        logger: Optional MarkupValidatorLogger for build records
    """

    def __init__(self, logger: Optional[MarkupValidatorLogger] = None) -> None:
        self.logger = logger

    def build(self, config: NormalizedConfig, resolve_processor: ProcessorResolver) -> Registry:
        """
        Build a registry.

        Args:
            config: Merged configuration
            resolve_processor: Callable alias -> processor (None when unknown),
                or a mapping alias -> processor

        Returns:
            Registry with every configured validator

        Raises:
            MissingProcessorError: A validator has no processor
            UnknownProcessorError: A processor alias does not resolve
            UnknownDefaultValidatorError: The default names no validator
        """
        log = safe_logger(self.logger)
        lookup = _as_lookup(resolve_processor)

        try:
            validators: Dict[str, Validator] = {}
            for name, options in (config.validators or {}).items():
                spec = ValidatorSpec.from_options(name, options)

                processor = lookup(spec.processor)
                if processor is None:
                    raise UnknownProcessorError(name, spec.processor)

                validators[name] = Validator(
                    name=name,
                    processor_alias=spec.processor,
                    processor=processor,
                    options=spec.options,
                )
                log.log_debug(
                    "Bound validator", {"validator": name, "processor": spec.processor}
                )

            default = config.default_validator or None
            if default is not None:
                if not isinstance(default, str):
                    raise UnknownDefaultValidatorError(str(default))
                if default not in validators:
                    raise UnknownDefaultValidatorError(default)

        except ConfigurationError as e:
            kind = e.kind.value if e.kind is not None else None
            log.log_error(e, {"operation": "build_registry", "kind": kind})
            raise

        registry = Registry(validators=validators, default=default)
        log.log_operation(
            "build_registry",
            {"validators": registry.summary(), "default_validator": registry.default},
        )
        return registry


def build_registry(
    config: NormalizedConfig,
    resolve_processor: ProcessorResolver,
    logger: Optional[MarkupValidatorLogger] = None,
) -> Registry:
    """Build a registry with a fresh RegistryBuilder."""
    return RegistryBuilder(logger).build(config, resolve_processor)
