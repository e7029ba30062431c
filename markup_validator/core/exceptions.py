#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for markup_validator.

All errors raised here are configuration-time errors: they abort startup and
are never retried. Each carries the offending names as attributes so hosts
can report them without parsing messages.

Exception Hierarchy:
    Exception (built-in)
    └── MarkupValidatorError - Base for all project errors
        ├── ConfigurationError - Invalid validator configuration
        │   ├── MissingProcessorError - Validator without a processor
        │   ├── UnknownProcessorError - Processor alias not registered
        │   └── UnknownDefaultValidatorError - Default names no validator
        ├── ConfigLoadError - Configuration file unreadable or malformed
        └── ProcessorRegistrationError - Bad or duplicate processor alias

Usage:
    from markup_validator.core.exceptions import ConfigurationError

    try:
        registry = build_registry(config, catalog)
    except ConfigurationError as e:
        logger.error(f"Invalid configuration ({e.kind.value}): {e}")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from enum import Enum
from typing import List, Optional


class ConfigErrorKind(str, Enum):
    """
    Enumeration of configuration error kinds.
    - MISSING_PROCESSOR: A validator entry has no processor key
    - UNKNOWN_PROCESSOR: A processor alias has no registered implementation
    - UNKNOWN_DEFAULT_VALIDATOR: The default name matches no validator
    """

    MISSING_PROCESSOR = "missing_processor"
    UNKNOWN_PROCESSOR = "unknown_processor"
    UNKNOWN_DEFAULT_VALIDATOR = "unknown_default_validator"

    @classmethod
    def choices(cls) -> List[str]:
        """Get all available error kind values."""
        return [kind.value for kind in cls]


class MarkupValidatorError(Exception):
    """
    Base exception for markup_validator.

    Catch this to handle any error raised by the project, or catch specific
    subclasses for more granular error handling.
    """

    pass


class ConfigurationError(MarkupValidatorError):
    """
    Exception for invalid validator configuration.

    Raised while building the validator registry. Registry construction
    stops at the first violation; no partial registry is returned.

    Attributes:
        kind: ConfigErrorKind identifying the violated contract
        validator: Name of the offending validator (if any)
        processor: Processor alias involved (if any)
        name: Offending default validator name (if any)

    Examples:
        >>> raise MissingProcessorError("tidy")
        >>> raise UnknownProcessorError("tidy", "ghost")
    """

    kind: Optional[ConfigErrorKind] = None

    def __init__(
        self,
        message: str,
        validator: Optional[str] = None,
        processor: Optional[str] = None,
        name: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.validator = validator
        self.processor = processor
        self.name = name


class MissingProcessorError(ConfigurationError):
    """
    Exception for a validator defined without a processor.

    Examples:
        >>> raise MissingProcessorError("w3c")
    """

    kind = ConfigErrorKind.MISSING_PROCESSOR

    def __init__(self, validator: str) -> None:
        super().__init__(
            f"You must define a processor for the '{validator}' validator",
            validator=validator,
        )


class UnknownProcessorError(ConfigurationError):
    """
    Exception for a validator bound to a processor alias nobody registered.

    Examples:
        >>> raise UnknownProcessorError("w3c", "w3c-remote")
    """

    kind = ConfigErrorKind.UNKNOWN_PROCESSOR

    def __init__(self, validator: str, processor: str) -> None:
        super().__init__(
            f"Unknown processor '{processor}' for the '{validator}' validator",
            validator=validator,
            processor=processor,
        )


class UnknownDefaultValidatorError(ConfigurationError):
    """
    Exception for a default validator that is not defined.

    Examples:
        >>> raise UnknownDefaultValidatorError("strict")
    """

    kind = ConfigErrorKind.UNKNOWN_DEFAULT_VALIDATOR

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Invalid default validator: there is no '{name}' validator defined",
            name=name,
        )


class ConfigLoadError(MarkupValidatorError):
    """
    Exception for configuration files that cannot be turned into fragments.

    Raised when:
    - The file does not exist or cannot be read
    - The YAML is syntactically invalid
    - The document is not a mapping

    Examples:
        >>> raise ConfigLoadError("Config file not found: config/extra.yaml")
    """

    pass


class ProcessorRegistrationError(MarkupValidatorError):
    """
    Exception for processor catalog registration failures.

    Raised when:
    - A processor is registered without an alias
    - Two processors claim the same alias
    - A processor module cannot be imported

    Examples:
        >>> raise ProcessorRegistrationError("Processor alias 'tidy' already registered")
    """

    pass
