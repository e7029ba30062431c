#!/usr/bin/env python3
"""
services.py
-----------
Declarative service registrations for dependency-injection hosts.

For hosts that wire objects through a service container, a built registry
is translated into one definition per validator plus the default alias:

    <namespace>.<name>_validator    -> depends on <namespace>.<alias>_processor
    default_validator (alias)       -> <namespace>.<default>_validator

The container instantiates the services; this module only names them.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol

# --- Local imports ---
from markup_validator.registry.registry import Registry

DEFAULT_NAMESPACE = "markup_validator"
DEFAULT_ALIAS = "default_validator"


def validator_service_id(name: str, namespace: str = DEFAULT_NAMESPACE) -> str:
    return f"{namespace}.{name}_validator"


def processor_service_id(alias: str, namespace: str = DEFAULT_NAMESPACE) -> str:
    return f"{namespace}.{alias}_processor"


class ServiceContainer(Protocol):
    """What a host container must offer to receive the registrations."""

    def set_definition(self, service_id: str, definition: "ServiceDefinition") -> Any: ...

    def set_alias(self, alias: str, service_id: str) -> Any: ...


@dataclass(frozen=True)
class ServiceDefinition:
    """One validator service and the processor service it depends on."""

    service_id: str
    processor_ref: str
    options: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ServiceManifest:
    """
    All registrations derived from a registry.

    Attributes:
        namespace: Service id prefix
        definitions: Validator definitions in registry order
        aliases: Alias name -> service id
    """

    namespace: str
    definitions: List[ServiceDefinition]
    aliases: Dict[str, str]

    @classmethod
    def from_registry(
        cls, registry: Registry, namespace: str = DEFAULT_NAMESPACE
    ) -> "ServiceManifest":
        definitions = [
            ServiceDefinition(
                service_id=validator_service_id(name, namespace),
                processor_ref=processor_service_id(validator.processor_alias, namespace),
                options=dict(validator.options),
            )
            for name, validator in registry.validators.items()
        ]
        aliases: Dict[str, str] = {}
        if registry.default is not None:
            aliases[DEFAULT_ALIAS] = validator_service_id(registry.default, namespace)
        return cls(namespace=namespace, definitions=definitions, aliases=aliases)

    def service_ids(self) -> List[str]:
        return [d.service_id for d in self.definitions]

    def alias_target(self, alias: str = DEFAULT_ALIAS) -> Optional[str]:
        return self.aliases.get(alias)

    def register(self, container: ServiceContainer) -> None:
        """Replay every definition, then every alias, on a host container."""
        for definition in self.definitions:
            container.set_definition(definition.service_id, definition)
        for alias, service_id in self.aliases.items():
            container.set_alias(alias, service_id)

    def to_dict(self) -> Dict[str, Any]:
        services: Dict[str, Any] = {}
        for d in self.definitions:
            entry: Dict[str, Any] = {"processor": d.processor_ref}
            if d.options:
                entry["options"] = dict(d.options)
            services[d.service_id] = entry
        return {"services": services, "aliases": dict(self.aliases)}
