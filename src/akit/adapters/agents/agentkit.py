"""agentkit local-server adapter.

Single agents are stored as flat JSON documents. ``write_full_config``
produces the complete local configuration (MCP server, LLM and timeout
settings) that bundles several agents into one ``config.json``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as SchemaError

from akit.adapters.base import BaseAdapter
from akit.core.errors import MarshalError, ParseError, WriteError
from akit.core.mapping import VocabularyMap, model_map
from akit.core.schema import Agent, Domain
from akit.utils.paths import write_private

logger = logging.getLogger(__name__)

FORMAT = "agentkit"

# The local runtime only has five primitives; web access and sub-tasks go
# through the shell.
TOOLS = VocabularyMap({
    "Read": "read",
    "Write": "write",
    "Edit": "write",
    "MultiEdit": "write",
    "Glob": "glob",
    "Grep": "grep",
    "Bash": "shell",
    "WebSearch": "shell",
    "WebFetch": "shell",
    "Task": "shell",
})

MODELS = model_map({
    "haiku": "claude-3-haiku-20240307",
    "sonnet": "claude-3-5-sonnet-20241022",
    "opus": "claude-3-opus-20240229",
})


class AgentConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    description: str = ""
    instructions: str = ""
    tools: list[str] = Field(default_factory=list)
    model: str | None = None
    max_tokens: int | None = None


class MCPSettings(BaseModel):
    enabled: bool = True
    transport: str = "stdio"
    port: int | None = None
    server_name: str = "agentkit-local"
    server_version: str = "1.0.0"


class LLMSettings(BaseModel):
    provider: str = "anthropic"
    model: str = MODELS.forward["sonnet"]
    api_key: str = "${ANTHROPIC_API_KEY}"
    base_url: str | None = None
    temperature: float = 0.7


class TimeoutSettings(BaseModel):
    agent_invoke: str = "5m"
    shell_command: str = "2m"
    file_read: str = "30s"
    parallel_total: str = "10m"


class LocalConfig(BaseModel):
    mode: str = "local"
    workspace: str = "."
    agents: list[AgentConfig] = Field(default_factory=list)
    mcp: MCPSettings = Field(default_factory=MCPSettings)
    llm: LLMSettings = Field(default_factory=LLMSettings)
    timeouts: TimeoutSettings = Field(default_factory=TimeoutSettings)


def agent_to_config(agent: Agent) -> AgentConfig:
    return AgentConfig(
        name=agent.name,
        description=agent.description,
        instructions=agent.instructions,
        tools=TOOLS.map_out(agent.tools),
        model=MODELS.map_optional_out(agent.model),
        max_tokens=agent.max_tokens,
    )


def config_to_agent(cfg: AgentConfig) -> Agent:
    return Agent(
        name=cfg.name,
        description=cfg.description,
        instructions=cfg.instructions,
        tools=TOOLS.map_in(cfg.tools),
        model=MODELS.map_optional_in(cfg.model),
        max_tokens=cfg.max_tokens or None,
    )


def _dump(model: BaseModel) -> bytes:
    try:
        return (json.dumps(model.model_dump(exclude_none=True), indent=2) + "\n").encode("utf-8")
    except (TypeError, ValueError) as e:
        raise MarshalError(FORMAT, e) from e


class AgentkitAdapter(BaseAdapter[Agent]):
    name = FORMAT
    domain = Domain.agents
    file_extension = ".json"
    default_paths = ("plugins/agentkit",)

    def parse(self, data: bytes) -> Agent:
        try:
            return config_to_agent(AgentConfig.model_validate_json(data))
        except (SchemaError, ValueError) as e:
            raise ParseError(self.name, e) from e

    def marshal(self, entity: Agent) -> bytes:
        return _dump(agent_to_config(entity))


def generate_full_config(agents: list[Agent], overrides: dict | None = None) -> LocalConfig:
    """Build a complete local configuration holding every agent.

    ``overrides`` may set ``provider``, ``model`` (canonical alias or full id),
    ``base_url`` and ``workspace``.
    """
    overrides = overrides or {}
    cfg = LocalConfig(agents=[agent_to_config(a) for a in agents])
    if overrides.get("workspace"):
        cfg.workspace = str(overrides["workspace"])
    if overrides.get("provider"):
        cfg.llm.provider = str(overrides["provider"])
    if overrides.get("model"):
        cfg.llm.model = MODELS.to_destination(str(overrides["model"]))
    if overrides.get("base_url"):
        cfg.llm.base_url = str(overrides["base_url"])
    return cfg


def write_full_config(agents: list[Agent], path: Path, overrides: dict | None = None) -> Path:
    path = Path(path)
    data = _dump(generate_full_config(agents, overrides))
    try:
        write_private(path, data)
    except OSError as e:
        raise WriteError(path, e) from e
    logger.debug("Wrote agentkit config with %d agents to %s", len(agents), path)
    return path
