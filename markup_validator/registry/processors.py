#!/usr/bin/env python3
"""
processors.py
-------------
Processor catalog: the lookup table validators are resolved against.

A component becomes a processor by carrying an `alias` attribute. The
host collects tagged components into a ProcessorCatalog, and the catalog is
handed to RegistryBuilder as its resolver.

Usage:
    catalog = ProcessorCatalog()

    @catalog.processor("tidy")
    class TidyProcessor(Processor):
        def process(self, markup):
            ...

    catalog.register("w3c", W3CProcessor(endpoint))
    registry = build_registry(config, catalog)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import importlib
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional

# --- Local imports ---
from markup_validator.core.exceptions import ProcessorRegistrationError

PROCESSOR_TAG = "alias"


class ProcessorCatalog:
    """Alias -> processor lookup with unique aliases."""

    def __init__(self) -> None:
        self._processors: Dict[str, Any] = {}

    def register(self, alias: str, processor: Any) -> Any:
        """
        Register a processor under an alias.

        Args:
            alias: Name validators use in their `processor` option
            processor: Processor instance

        Returns:
            The registered processor

        Raises:
            ProcessorRegistrationError: If the alias is empty or taken
        """
        if not isinstance(alias, str) or not alias.strip():
            raise ProcessorRegistrationError(
                f"Processor {processor!r} must be registered with a non-empty alias"
            )
        alias = alias.strip()
        if alias in self._processors:
            raise ProcessorRegistrationError(f"Processor alias '{alias}' already registered")

        self._processors[alias] = processor
        return processor

    def processor(self, alias: str) -> Callable[[type], type]:
        """
        Class decorator: tag the class with the alias and register an instance.

        The class must be constructible without arguments.
        """
        def decorator(cls: type) -> type:
            setattr(cls, PROCESSOR_TAG, alias)
            self.register(alias, cls())
            return cls
        return decorator

    def collect(self, components: Iterable[Any]) -> None:
        """
        Register every tagged component.

        Raises:
            ProcessorRegistrationError: If a component carries no alias tag
        """
        for component in components:
            alias = getattr(component, PROCESSOR_TAG, None)
            if alias is None:
                raise ProcessorRegistrationError(
                    f"Component {component!r} has no '{PROCESSOR_TAG}' tag"
                )
            self.register(alias, component)

    def resolve(self, alias: str) -> Optional[Any]:
        """Processor registered under alias, or None."""
        return self._processors.get(alias)

    __call__ = resolve

    def aliases(self) -> List[str]:
        return list(self._processors)

    def __contains__(self, alias: object) -> bool:
        return alias in self._processors

    def __iter__(self) -> Iterator[str]:
        return iter(self._processors)

    def __len__(self) -> int:
        return len(self._processors)


def load_processor_modules(module_names: Iterable[str]) -> List[str]:
    """
    Import host modules so their registration decorators run.

    Args:
        module_names: Dotted module paths

    Returns:
        Names of the imported modules

    Raises:
        ProcessorRegistrationError: If a module cannot be imported
    """
    loaded = []
    for name in module_names:
        try:
            importlib.import_module(name)
        except ImportError as e:
            raise ProcessorRegistrationError(
                f"Cannot import processor module '{name}': {e}"
            ) from e
        loaded.append(name)
    return loaded


# Catalog used by the CLI and by modules registering through register_processor
default_catalog = ProcessorCatalog()


def register_processor(alias: str) -> Callable[[type], type]:
    """Class decorator registering on the default catalog."""
    return default_catalog.processor(alias)
