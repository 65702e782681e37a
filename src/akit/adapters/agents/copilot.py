"""GitHub Copilot custom agent adapter (``.github/agents/<name>.agent.md``).

Copilot groups tools into coarse aliases (``read``, ``edit``, ``search``,
``execute``...), so several canonical tools collapse into one. Model names
are the display names shown in the Copilot model picker.
"""

from __future__ import annotations

import yaml
from pydantic import ValidationError as SchemaError

from akit.adapters.base import BaseAdapter
from akit.core.errors import MarshalError, ParseError
from akit.core.frontmatter import as_list, build_frontmatter, load_document
from akit.core.mapping import VocabularyMap, model_map
from akit.core.schema import Agent, Domain

TOOLS = VocabularyMap({
    "Read": "read",
    "Edit": "edit",
    "Write": "edit",
    "MultiEdit": "edit",
    "NotebookEdit": "edit",
    "Grep": "search",
    "Glob": "search",
    "Bash": "execute",
    "WebFetch": "web",
    "WebSearch": "web",
    "Task": "agent",
    "TodoWrite": "todo",
})

MODELS = model_map({
    "haiku": "Claude Haiku 4.5",
    "sonnet": "Claude Sonnet 4.5",
    "opus": "Claude Opus 4.5",
})


class CopilotAgentAdapter(BaseAdapter[Agent]):
    name = "copilot"
    domain = Domain.agents
    file_extension = ".agent.md"
    default_paths = (".github/agents",)

    def parse(self, data: bytes) -> Agent:
        text = self._decode(data)
        try:
            meta, body = load_document(text)
            return Agent(
                name=meta.get("name") or "",
                description=meta.get("description") or "",
                instructions=body,
                tools=TOOLS.map_in(as_list(meta.get("tools"))),
                model=MODELS.map_optional_in(meta.get("model")),
            )
        except (yaml.YAMLError, ValueError, TypeError, SchemaError) as e:
            raise ParseError(self.name, e) from e

    def marshal(self, entity: Agent) -> bytes:
        meta: dict = {"name": entity.name, "description": entity.description}
        if entity.tools:
            meta["tools"] = TOOLS.map_out(entity.tools)
        model = MODELS.map_optional_out(entity.model)
        if model:
            meta["model"] = model
        try:
            return build_frontmatter(meta, entity.instructions).encode("utf-8")
        except yaml.YAMLError as e:
            raise MarshalError(self.name, e) from e
