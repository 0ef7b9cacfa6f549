"""GET /v1/tools — Tool registry listing. POST /v1/tools/{name} — Run a tool."""

import logging
from fastapi import APIRouter, HTTPException, Request
from origen.api.schemas import ToolCallRequest, ToolCallResponse, ToolResponse
from origen.exceptions import InputContractError, ToolError

logger = logging.getLogger(__name__)
router = APIRouter(tags=["tools"])


@router.get("/tools")
async def list_tools(request: Request):
    """List all registered tools."""
    tool_registry = request.app.state.tool_registry
    return {
        "tools": [
            ToolResponse(name=t.name, description=t.description, parameters=t.parameters)
            for t in tool_registry.list_tools()
        ]
    }


@router.post("/tools/{name}", response_model=ToolCallResponse)
async def call_tool(name: str, body: ToolCallRequest, request: Request):
    """Run one tool with the given arguments."""
    tool_registry = request.app.state.tool_registry
    try:
        result = await tool_registry.call(name, body.arguments)
    except ToolError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except InputContractError as exc:
        logger.info(f"[tools] {name} rejected input: {exc}")
        raise HTTPException(status_code=400, detail=str(exc))
    return ToolCallResponse(tool=name, result=result)
