"""FastAPI application factory with lifespan management."""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from origen.api.schemas import ServerInfoResponse
from origen.config import config
from origen.version import __version__

logger = logging.getLogger(__name__)

DESCRIPTION = "MCP server for Origen design system"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: load catalogs and register tools once."""
    logger.info(f"origen v{__version__} starting...")

    # Catalogs are cached process-wide; loading here surfaces a bad YAML at startup
    from origen.catalog import get_component_registry, get_token_catalog
    get_token_catalog()
    get_component_registry()

    from origen.tools.registry import ToolRegistry
    tool_registry = ToolRegistry.with_builtins()
    app.state.tool_registry = tool_registry

    logger.info(f"origen v{__version__} ready, {len(tool_registry.list_tools())} tools registered")

    yield

    logger.info("origen shutting down...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="origen",
        description=DESCRIPTION,
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    @app.get("/", response_model=ServerInfoResponse, tags=["info"])
    async def server_info():
        return ServerInfoResponse(name=config.app_name, version=__version__, description=DESCRIPTION)

    from origen.api.routes import health, tools
    app.include_router(health.router, prefix="/v1")
    app.include_router(tools.router, prefix="/v1")

    return app


app = create_app()
