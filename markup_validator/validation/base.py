#!/usr/bin/env python3
"""
base.py
-------
Processor interface and the validator handle bound to it.

Processors hold the actual markup checks (tidy, W3C, ...) and are provided
by the host application. A Validator is the named, configured service that
callers use; it only delegates to its processor.

Usage:
    class TidyProcessor(Processor):
        alias = "tidy"

        def process(self, markup: str) -> ValidationResult:
            ...
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, List, Mapping, Optional


@dataclass
class ValidationResult:
    """Outcome of validating one markup document."""

    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


class Processor(ABC):
    """
    Base class for markup processors.

    Subclasses set `alias` to the name validators refer to in their
    `processor` option.
    """

    alias: Optional[str] = None

    @abstractmethod
    def process(self, markup: str) -> ValidationResult:
        """Validate markup and report what was found."""
        raise NotImplementedError


@dataclass(frozen=True, eq=False, repr=False)
class Validator:
    """
    Named validator bound to a processor.

    Bindings are fixed once built; reassigning a field raises
    dataclasses.FrozenInstanceError.

    Attributes:
        name: Validator name from the configuration
        processor_alias: Alias the processor was resolved from
        processor: Bound processor instance
        options: Extra configuration options (read-only)
    """

    name: str
    processor_alias: str
    processor: Any
    options: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", MappingProxyType(dict(self.options or {})))

    def validate(self, markup: str) -> ValidationResult:
        """Run the bound processor on markup."""
        return self.processor.process(markup)

    def __repr__(self) -> str:
        return f"Validator(name={self.name!r}, processor={self.processor_alias!r})"
