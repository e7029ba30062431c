#!/usr/bin/env python3
"""
models.py
---------
Typed configuration structures.

    - ConfigFragment: One raw mapping read from a configuration source
    - NormalizedConfig: Merge result of all fragments
    - ValidatorSpec: One validator entry with its processor alias extracted

Example fragment (YAML):

    default_validator: tidy
    validators:
        tidy:
            processor: tidy
        w3c:
            processor: w3c
            timeout: 5
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

# --- Local imports ---
from markup_validator.core.exceptions import MissingProcessorError


ConfigFragment = Mapping[str, Any]

# Both spellings are accepted; the hyphenated one wins inside a fragment.
DEFAULT_VALIDATOR_KEYS = ("default-validator", "default_validator")
VALIDATORS_KEY = "validators"
PROCESSOR_KEY = "processor"


@dataclass
class NormalizedConfig:
    """
    Configuration after merging every fragment.

    Attributes:
        default_validator: Name of the default validator, or None
        validators: Validator name -> options, in first-seen order
    """

    default_validator: Optional[str] = None
    validators: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Plain-dict rendering (for YAML output)."""
        return {
            "default_validator": self.default_validator,
            "validators": {
                name: dict(options) if isinstance(options, Mapping) else options
                for name, options in self.validators.items()
            },
        }


@dataclass(frozen=True)
class ValidatorSpec:
    """
    One validator entry with its processor binding made explicit.

    Attributes:
        name: Validator name (key under `validators`)
        processor: Processor alias to bind
        options: Remaining keys, passed through untouched
    """

    name: str
    processor: str
    options: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_options(cls, name: str, options: Any) -> "ValidatorSpec":
        """
        Build a ValidatorSpec from a raw options mapping.

        Args:
            name: Validator name
            options: Options mapping from the merged configuration

        Returns:
            ValidatorSpec

        Raises:
            MissingProcessorError: If options is not a mapping or has no
                non-empty `processor` value
        """
        if not isinstance(options, Mapping):
            raise MissingProcessorError(name)

        processor = options.get(PROCESSOR_KEY)
        if processor is None or not str(processor).strip():
            raise MissingProcessorError(name)

        extra = {k: v for k, v in options.items() if k != PROCESSOR_KEY}
        return cls(name=name, processor=str(processor).strip(), options=extra)
