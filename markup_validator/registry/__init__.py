"""
registry
--------
Validator registry construction.

Usage:
    from markup_validator.registry import ProcessorCatalog, build_registry

    catalog = ProcessorCatalog()
    catalog.register("tidy", TidyProcessor())
    registry = build_registry(config, catalog)
"""
from markup_validator.registry.builder import ProcessorResolver, RegistryBuilder, build_registry
from markup_validator.registry.processors import (
    ProcessorCatalog,
    default_catalog,
    load_processor_modules,
    register_processor,
)
from markup_validator.registry.registry import Registry
from markup_validator.registry.services import ServiceDefinition, ServiceManifest

__all__ = [
    "ProcessorCatalog",
    "ProcessorResolver",
    "Registry",
    "RegistryBuilder",
    "ServiceDefinition",
    "ServiceManifest",
    "build_registry",
    "default_catalog",
    "load_processor_modules",
    "register_processor",
]
