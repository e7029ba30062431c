#!/usr/bin/env python3
"""
merger.py
---------
Combine layered configuration fragments into one NormalizedConfig.

Merge rules:
- Fragments are applied earliest to latest.
- `default_validator` (or `default-validator`): the last fragment that sets
  a non-null value wins.
- `validators`: options of a validator seen before are merged key by key,
  later keys overriding earlier ones; new names are appended.

Merging never fails. Malformed entries are passed through and rejected when
the registry is built.

Usage:
    from markup_validator.config.merger import merge_configs

    config = merge_configs([base_fragment, local_fragment])
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Any, Dict, Iterable, Mapping, Optional

# --- Local imports ---
from markup_validator.config.models import (
    DEFAULT_VALIDATOR_KEYS,
    VALIDATORS_KEY,
    ConfigFragment,
    NormalizedConfig,
)


class ConfigMerger:
    """Pure merger of ConfigFragments."""

    def merge(self, fragments: Iterable[Optional[ConfigFragment]]) -> NormalizedConfig:
        """
        Merge fragments in order.

        Args:
            fragments: Ordered fragments; None entries are skipped

        Returns:
            NormalizedConfig (validators is an empty dict when no fragment
            defines any)
        """
        default_validator: Optional[str] = None
        validators: Dict[str, Any] = {}

        for fragment in fragments:
            if not isinstance(fragment, Mapping):
                continue

            default_validator = self._merge_default(fragment, default_validator)

            entries = fragment.get(VALIDATORS_KEY)
            if isinstance(entries, Mapping):
                for name, options in entries.items():
                    validators[name] = self._merge_options(validators.get(name), options)

        return NormalizedConfig(default_validator=default_validator, validators=validators)

    @staticmethod
    def _merge_default(fragment: ConfigFragment, current: Optional[str]) -> Optional[str]:
        for key in DEFAULT_VALIDATOR_KEYS:
            value = fragment.get(key)
            if value is not None:
                return value
        return current

    @staticmethod
    def _merge_options(previous: Any, options: Any) -> Any:
        # `tidy:` with nothing below it loads as None
        if options is None:
            options = {}

        if isinstance(previous, Mapping) and isinstance(options, Mapping):
            return {**previous, **options}
        if isinstance(options, Mapping):
            return dict(options)
        return options


def merge_configs(fragments: Iterable[Optional[ConfigFragment]]) -> NormalizedConfig:
    """Merge fragments with a fresh ConfigMerger."""
    return ConfigMerger().merge(fragments)
