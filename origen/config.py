"""Application configuration. All env vars defined here with defaults."""

from pydantic_settings import BaseSettings
from typing import Optional


class OrigenConfig(BaseSettings):
    # ── App ──
    app_name: str = "origen"
    debug: bool = False
    log_level: str = "INFO"

    # ── Catalog ──
    tokens_path: Optional[str] = None           # override bundled tokens.yaml
    components_path: Optional[str] = None       # override bundled components.yaml
    default_theme: str = "light"

    # ── Code generation ──
    indent: str = "  "
    package_import: str = "@origen/react"       # module named in generated import lines

    # ── Search ──
    search_default_limit: int = 10
    search_max_limit: int = 20

    # ── Server ──
    host: str = "0.0.0.0"
    port: int = 8000
    mcp_transport: str = "stdio"                # stdio | sse | streamable-http
    cors_origins: list[str] = ["http://localhost:5173"]

    model_config = {"env_prefix": "ORIGEN_", "env_file": ".env", "extra": "ignore"}


config = OrigenConfig()
