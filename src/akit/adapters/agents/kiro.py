"""Kiro CLI agent adapter: one JSON document per agent.

Kiro uses short lower-case tool aliases (``read``, ``write``, ``shell``) and
loads skills lazily through ``skill://`` resources.
"""

from __future__ import annotations

import json

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as SchemaError

from akit.adapters.base import BaseAdapter
from akit.core.errors import MarshalError, ParseError
from akit.core.mapping import VocabularyMap, model_map
from akit.core.schema import Agent, Domain

# Order matters: the first canonical tool listed for a Kiro tool is the one
# restored when parsing back.
TOOLS = VocabularyMap({
    "Read": "read",
    "Write": "write",
    "Edit": "write",
    "MultiEdit": "write",
    "NotebookEdit": "write",
    "Glob": "glob",
    "Grep": "grep",
    "Bash": "shell",
    "WebSearch": "web_search",
    "WebFetch": "web_fetch",
    "Task": "delegate",
    "TodoWrite": "todo_list",
})

MODELS = model_map({
    "haiku": "claude-haiku-4.5",
    "sonnet": "claude-sonnet-4.5",
    "opus": "claude-opus-4.5",
})

SKILL_RESOURCE_PREFIX = "skill://.kiro/skills/"
SKILL_RESOURCE_SUFFIX = "/SKILL.md"


class KiroAgentConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    description: str = ""
    prompt: str = ""
    tools: list[str] = Field(default_factory=list)
    resources: list[str] = Field(default_factory=list)
    model: str | None = None


def skill_resource(skill: str) -> str:
    return f"{SKILL_RESOURCE_PREFIX}{skill}{SKILL_RESOURCE_SUFFIX}"


def resource_skill(resource: str) -> str | None:
    if resource.startswith(SKILL_RESOURCE_PREFIX) and resource.endswith(SKILL_RESOURCE_SUFFIX):
        return resource[len(SKILL_RESOURCE_PREFIX) : -len(SKILL_RESOURCE_SUFFIX)] or None
    return None


class KiroAgentAdapter(BaseAdapter[Agent]):
    name = "kiro"
    domain = Domain.agents
    file_extension = ".json"
    default_paths = (".kiro/agents", "~/.kiro/agents")

    def parse(self, data: bytes) -> Agent:
        try:
            cfg = KiroAgentConfig.model_validate_json(data)
            skills = [s for s in (resource_skill(r) for r in cfg.resources) if s]
            return Agent(
                name=cfg.name,
                description=cfg.description,
                instructions=cfg.prompt,
                tools=TOOLS.map_in(cfg.tools),
                model=MODELS.map_optional_in(cfg.model),
                skills=skills,
            )
        except (SchemaError, ValueError) as e:
            raise ParseError(self.name, e) from e

    def marshal(self, entity: Agent) -> bytes:
        doc: dict = {
            "name": entity.name,
            "description": entity.description,
            "prompt": entity.instructions,
            "tools": TOOLS.map_out(entity.tools),
        }
        if entity.skills:
            doc["resources"] = [skill_resource(s) for s in entity.skills]
        model = MODELS.map_optional_out(entity.model)
        if model:
            doc["model"] = model
        try:
            return (json.dumps(doc, indent=2) + "\n").encode("utf-8")
        except (TypeError, ValueError) as e:
            raise MarshalError(self.name, e) from e
