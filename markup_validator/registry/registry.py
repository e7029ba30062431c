#!/usr/bin/env python3
"""
registry.py
-----------
Immutable registry of configured validators.

The registry is built once at startup by RegistryBuilder and only read
afterwards, so it can be shared between threads without locking.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional

# --- Local imports ---
from markup_validator.validation.base import Validator


@dataclass(frozen=True)
class Registry:
    """
    Validators by name plus an optional default.

    Attributes:
        validators: Read-only mapping name -> Validator, in configuration order
        default: Name of the default validator, or None

    Examples:
        >>> registry["tidy"].validate("<p>hi</p>")
        >>> registry.get().name  # default validator
    """

    validators: Mapping[str, Validator] = field(default_factory=dict)
    default: Optional[str] = None

    def __post_init__(self) -> None:
        # Private copy so callers keep no handle on the backing dict
        object.__setattr__(self, "validators", MappingProxyType(dict(self.validators)))
        if self.default is not None and self.default not in self.validators:
            raise ValueError(f"Default validator '{self.default}' is not registered")

    def __getitem__(self, name: str) -> Validator:
        return self.validators[name]

    def __contains__(self, name: object) -> bool:
        return name in self.validators

    def __iter__(self) -> Iterator[str]:
        return iter(self.validators)

    def __len__(self) -> int:
        return len(self.validators)

    def names(self) -> List[str]:
        return list(self.validators)

    @property
    def default_validator(self) -> Optional[Validator]:
        """The default Validator, or None when no default is configured."""
        return self.validators[self.default] if self.default is not None else None

    def get(self, name: Optional[str] = None) -> Validator:
        """
        Look up a validator, falling back to the default when no name is given.

        Raises:
            KeyError: If the name is unknown, or no name is given and no
                default is configured
        """
        if name is None:
            if self.default is None:
                raise KeyError("No default validator configured")
            name = self.default
        return self.validators[name]

    def summary(self) -> Dict[str, str]:
        """Validator name -> processor alias."""
        return {name: v.processor_alias for name, v in self.validators.items()}
