"""Static design-system data: tokens and component contracts."""

from origen.catalog.loader import load_components_yaml, load_tokens_yaml
from origen.catalog.registry import (
    ComponentRegistry,
    TokenCatalog,
    get_component_registry,
    get_token_catalog,
)

__all__ = [
    "ComponentRegistry", "TokenCatalog",
    "get_component_registry", "get_token_catalog",
    "load_components_yaml", "load_tokens_yaml",
]
