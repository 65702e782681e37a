"""Pydantic v2 models for the canonical entities and the deployment descriptor."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from akit.core.mapping import unique

MODEL_ALIASES = ("haiku", "sonnet", "opus")


class Domain(str, Enum):
    agents = "agents"
    mcp = "mcp"
    commands = "commands"
    skills = "skills"


def _normalize_model(value: Any) -> str | None:
    if value is None:
        return None
    model = str(value).strip()
    if not model or model.lower() == "inherit":
        return None
    if model.lower() in MODEL_ALIASES:
        return model.lower()
    return model


def _clean_identifiers(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    return unique(str(v).strip() for v in value)


# -- Agents --


class Agent(BaseModel):
    """Canonical sub-agent definition.

    ``tools`` and ``skills`` are sets kept in first-seen order so output stays
    stable across regenerations. ``max_tokens`` only survives formats that
    have a field for it.
    """

    name: str = ""
    description: str = ""
    instructions: str = ""
    tools: list[str] = Field(default_factory=list)
    model: str | None = None
    max_tokens: int | None = Field(default=None, gt=0)
    skills: list[str] = Field(default_factory=list)

    @field_validator("tools", "skills", mode="before")
    @classmethod
    def clean_identifiers(cls, v: Any) -> list[str]:
        return _clean_identifiers(v)

    @field_validator("model", mode="before")
    @classmethod
    def normalize_model(cls, v: Any) -> str | None:
        return _normalize_model(v)

    def add_tool(self, tool: str) -> None:
        tool = tool.strip()
        if tool and tool not in self.tools:
            self.tools.append(tool)


# -- MCP servers --


class Transport(str, Enum):
    stdio = "stdio"
    http = "http"
    sse = "sse"


class MCPServer(BaseModel):
    transport: Transport | None = None
    command: str | None = None
    args: list[str] = Field(default_factory=list)
    env: dict[str, str] = Field(default_factory=dict)
    cwd: str | None = None
    url: str | None = None
    headers: dict[str, str] = Field(default_factory=dict)
    timeout: float | None = Field(default=None, gt=0)
    disabled: bool = False

    @field_validator("transport", mode="before")
    @classmethod
    def transport_alias(cls, v: Any) -> Any:
        if isinstance(v, str) and v.lower() in ("streamable-http", "streamablehttp", "http"):
            return Transport.http
        return v

    @model_validator(mode="after")
    def infer_transport(self) -> MCPServer:
        if self.transport is None:
            self.transport = Transport.http if self.url else Transport.stdio
        if self.transport == Transport.stdio and not self.command:
            raise ValueError("stdio server requires a command")
        if self.transport != Transport.stdio and not self.url:
            raise ValueError(f"{self.transport.value} server requires a url")
        return self

    @property
    def is_remote(self) -> bool:
        return self.transport != Transport.stdio


class MCPConfig(BaseModel):
    servers: dict[str, MCPServer] = Field(default_factory=dict)

    def merge(self, other: MCPConfig) -> MCPConfig:
        """Return a config with ``other``'s servers layered over this one's."""
        return MCPConfig(servers={**self.servers, **other.servers})


# -- Commands --


class Command(BaseModel):
    """Canonical slash command. ``instructions`` uses ``$ARGUMENTS`` for user input."""

    name: str = ""
    description: str = ""
    instructions: str = ""
    argument_hint: str | None = None
    allowed_tools: list[str] = Field(default_factory=list)
    model: str | None = None

    @field_validator("allowed_tools", mode="before")
    @classmethod
    def clean_identifiers(cls, v: Any) -> list[str]:
        return _clean_identifiers(v)

    @field_validator("model", mode="before")
    @classmethod
    def normalize_model(cls, v: Any) -> str | None:
        return _normalize_model(v)


# -- Skills --


class Skill(BaseModel):
    name: str = ""
    description: str = ""
    instructions: str = ""
    allowed_tools: list[str] = Field(default_factory=list)

    @field_validator("allowed_tools", mode="before")
    @classmethod
    def clean_identifiers(cls, v: Any) -> list[str]:
        return _clean_identifiers(v)


# -- Deployment descriptor (deployment.json) --


class DeploymentTarget(BaseModel):
    name: str
    platform: str
    priority: str = ""
    output: str
    config: dict[str, Any] = Field(default_factory=dict)


class Deployment(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    schema_: str = Field(default="", alias="$schema")
    team: str = ""
    targets: list[DeploymentTarget] = Field(default_factory=list)
