"""GET /v1/health — Health check with catalog probes."""

import logging
from fastapi import APIRouter, Request
from origen.api.schemas import HealthResponse
from origen.version import __version__

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """Check that the catalogs loaded and the tools are registered."""
    services: dict[str, bool] = {"api": True, "tokens": False, "components": False, "tools": False}

    from origen.catalog import get_component_registry, get_token_catalog
    from origen.exceptions import CatalogError

    try:
        get_token_catalog()
        services["tokens"] = True
    except CatalogError as exc:
        logger.warning(f"[health] token catalog failed: {exc}")

    try:
        services["components"] = len(get_component_registry().names) > 0
    except CatalogError as exc:
        logger.warning(f"[health] component catalog failed: {exc}")

    tool_registry = getattr(request.app.state, "tool_registry", None)
    services["tools"] = tool_registry is not None and len(tool_registry.list_tools()) > 0

    overall = "ok" if all(services.values()) else "degraded"
    return HealthResponse(status=overall, version=__version__, services=services)
