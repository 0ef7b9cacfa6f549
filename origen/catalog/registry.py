"""Read-only lookups over the token and component catalogs."""

import copy
import logging
from functools import lru_cache
from typing import Any, Iterator, Optional, Union

from origen.catalog.loader import load_components_yaml, load_tokens_yaml
from origen.catalog.schema import TokensConfig
from origen.config import config
from origen.types import ComponentSpec, ComponentSpecNotFound, Theme, TokenCategory
from origen.utils import coerce_option

logger = logging.getLogger(__name__)


def _is_color_key(key: str) -> bool:
    return "color" in key or key in ("background", "foreground") or key.endswith("-foreground")


class TokenCatalog:
    """Primitive scales plus per-theme semantic aliases."""

    def __init__(self, tokens: TokensConfig):
        self._tokens = tokens

    @classmethod
    def from_yaml(cls, path=None) -> "TokenCatalog":
        return cls(load_tokens_yaml(path))

    @property
    def primitives(self) -> dict[str, Any]:
        return self._tokens.primitives.model_dump()

    def semantic(self, theme: Union[Theme, str, None] = None) -> dict[str, str]:
        theme = coerce_option(Theme, theme, "theme", default=Theme(config.default_theme))
        return dict(self._tokens.semantic[theme])

    def get(
        self,
        category: Union[TokenCategory, str] = TokenCategory.ALL,
        theme: Union[Theme, str, None] = None,
    ) -> dict[str, Any]:
        """Token subset for one category.

        ``all`` and ``colors`` include the theme's semantic map; the scale-only
        categories return primitives alone. An unset theme falls back to
        ``config.default_theme``.

        Raises:
            InvalidOptionError: unknown category or theme.
        """
        category = coerce_option(TokenCategory, category, "category", default=TokenCategory.ALL)
        semantic = self.semantic(theme)
        primitives = self.primitives

        if category is TokenCategory.ALL:
            return {"primitives": primitives, "semantic": semantic}
        if category is TokenCategory.COLORS:
            return {"primitives": primitives["color"], "semantic": semantic}
        if category is TokenCategory.SPACING:
            return {"primitives": primitives["spacing"]}
        if category is TokenCategory.TYPOGRAPHY:
            return {"primitives": primitives["typography"]}
        return {"primitives": primitives["radius"]}

    def all_tokens(self) -> dict[str, Any]:
        """Primitives plus every theme, keyed by theme name."""
        return {
            "primitives": self.primitives,
            "semantic": {t.value: self.semantic(t) for t in Theme},
        }

    def color_tokens(self) -> dict[str, Any]:
        """Color primitives plus the color-like semantic keys of every theme."""
        return {
            "primitives": self.primitives["color"],
            "semantic": {
                t.value: {k: v for k, v in self.semantic(t).items() if _is_color_key(k)}
                for t in Theme
            },
        }


class ComponentRegistry:
    """The five component contracts, keyed by lower-case name."""

    def __init__(self, specs: dict[str, ComponentSpec]):
        self._specs = dict(specs)

    @classmethod
    def from_yaml(cls, path=None) -> "ComponentRegistry":
        return cls(load_components_yaml(path))

    def __iter__(self) -> Iterator[tuple[str, ComponentSpec]]:
        return iter(self._specs.items())

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._specs

    @property
    def names(self) -> list[str]:
        return list(self._specs)

    def get(self, name: str) -> Union[ComponentSpec, ComponentSpecNotFound]:
        """Contract for ``name`` or a not-found record. Never raises."""
        spec = self._specs.get(name.lower())
        if spec is None:
            logger.debug(f"component spec lookup missed: {name!r}")
            return ComponentSpecNotFound(error=f'Component "{name}" not found.')
        return copy.deepcopy(spec)

    def find(self, name: str) -> Optional[ComponentSpec]:
        return self._specs.get(name.lower())

    def all_exports(self) -> list[str]:
        """Every exported name across the library, in catalog order."""
        names: list[str] = []
        for _key, spec in self._specs.items():
            for export in spec.exports:
                if export not in names:
                    names.append(export)
        return names


@lru_cache(maxsize=1)
def get_token_catalog() -> TokenCatalog:
    """Process-wide catalog, loaded once from config.tokens_path or the defaults."""
    return TokenCatalog.from_yaml(config.tokens_path)


@lru_cache(maxsize=1)
def get_component_registry() -> ComponentRegistry:
    """Process-wide registry, loaded once from config.components_path or the defaults."""
    return ComponentRegistry.from_yaml(config.components_path)
