"""Load and validate tokens.yaml / components.yaml into Python objects.

Resolution order for each file:
  1. Path passed explicitly by caller
  2. ./tokens.yaml (or ./components.yaml) in current working directory
  3. Built-in defaults (origen/catalog/defaults/)
"""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from origen.catalog.schema import ComponentsConfig, TokensConfig
from origen.exceptions import CatalogError
from origen.types import ComponentSpec

# Paths to bundled defaults
_DEFAULTS_DIR = Path(__file__).parent / "defaults"


def _find_file(name: str, explicit: Optional[Path]) -> Path:
    """Locate catalog file: explicit > cwd > defaults."""
    if explicit is not None:
        p = Path(explicit)
        if not p.exists():
            raise CatalogError(f"Catalog file not found: {p}", path=str(p))
        return p

    cwd_path = Path.cwd() / name
    if cwd_path.exists():
        return cwd_path

    defaults_path = _DEFAULTS_DIR / name
    if defaults_path.exists():
        return defaults_path

    raise CatalogError(
        f"No {name} found. Create one in your project directory "
        f"or pass path=... explicitly.",
        path=name,
    )


def _read_yaml(path: Path) -> dict:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise CatalogError(f"Malformed YAML in {path}: {exc}", path=str(path)) from exc
    return raw or {}


def load_tokens_yaml(path: Optional[Path] = None) -> TokensConfig:
    """Load tokens.yaml → validated TokensConfig.

    Raises:
        CatalogError: file missing, unparseable, or failing the schema.
    """
    resolved = _find_file("tokens.yaml", path)
    try:
        return TokensConfig.model_validate(_read_yaml(resolved))
    except ValidationError as exc:
        raise CatalogError(f"Invalid token catalog {resolved}: {exc}", path=str(resolved)) from exc


def load_components_yaml(path: Optional[Path] = None) -> dict[str, ComponentSpec]:
    """Load components.yaml → {lower-case name: ComponentSpec}, in file order.

    Raises:
        CatalogError: file missing, unparseable, or failing the schema.
    """
    resolved = _find_file("components.yaml", path)
    try:
        parsed = ComponentsConfig.model_validate(_read_yaml(resolved))
    except ValidationError as exc:
        raise CatalogError(f"Invalid component catalog {resolved}: {exc}", path=str(resolved)) from exc
    return {name.value: spec for name, spec in parsed.components.items()}
