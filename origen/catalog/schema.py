"""Pydantic models for YAML catalog validation.

The component entries validate straight into ``origen.types.ComponentSpec``;
these root models only describe the file layout around them.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from origen.types import ComponentName, ComponentSpec, Theme


class PrimitiveTokens(BaseModel):
    """Raw scales. Nested freely: color palettes are shade → value maps."""

    color: dict[str, Any]
    spacing: dict[str, str]
    typography: dict[str, dict[str, str]]
    radius: dict[str, str]


class TokensConfig(BaseModel):
    """Root schema for tokens.yaml."""

    primitives: PrimitiveTokens
    semantic: dict[Theme, dict[str, str]]

    @field_validator("semantic")
    @classmethod
    def require_every_theme(cls, v):
        missing = [t.value for t in Theme if t not in v]
        if missing:
            raise ValueError(f"semantic tokens missing theme(s): {', '.join(missing)}")
        return v


class ComponentsConfig(BaseModel):
    """Root schema for components.yaml."""

    components: dict[ComponentName, ComponentSpec] = Field(default_factory=dict)
