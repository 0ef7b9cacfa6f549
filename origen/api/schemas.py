"""Pydantic models for API request/response."""

from pydantic import BaseModel, Field
from typing import Any


# ── Requests ──

class ToolCallRequest(BaseModel):
    arguments: dict[str, Any] = Field(default_factory=dict)  # {"intent": "login form"}


# ── Responses ──

class ToolResponse(BaseModel):
    name: str
    description: str
    parameters: dict[str, Any]

class ToolCallResponse(BaseModel):
    tool: str
    result: Any

class HealthResponse(BaseModel):
    status: str
    version: str
    services: dict[str, bool]

class ServerInfoResponse(BaseModel):
    name: str
    version: str
    description: str
