"""Claude Code agent adapter: Markdown with YAML frontmatter.

Claude's vocabulary is the canonical one, so tool and model names pass
through untouched. This format also serves as the canonical spec format
read by the generator.

File format::

    ---
    name: agent-name
    description: Agent description
    tools: Read, Grep, Glob, Bash
    model: sonnet
    max_tokens: 4096
    skills: code-review, testing
    ---
    Agent instructions in markdown...

A document that is a bare JSON object is also accepted, with an optional
``instructions`` key holding the body.
"""

from __future__ import annotations

import yaml
from pydantic import ValidationError as SchemaError

from akit.adapters.base import BaseAdapter
from akit.core.errors import MarshalError, ParseError
from akit.core.frontmatter import as_list, build_frontmatter, load_document
from akit.core.mapping import VocabularyMap
from akit.core.schema import Agent, Domain

TOOLS = VocabularyMap.passthrough()
MODELS = VocabularyMap.passthrough()


class ClaudeAgentAdapter(BaseAdapter[Agent]):
    name = "claude"
    domain = Domain.agents
    file_extension = ".md"
    default_paths = (".claude/agents", "~/.claude/agents")

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
                max_tokens=meta.get("max_tokens"),
                skills=as_list(meta.get("skills")),
            )
        except (yaml.YAMLError, ValueError, TypeError, SchemaError) as e:
            raise ParseError(self.name, e) from e

    def marshal(self, entity: Agent) -> bytes:
        meta: dict = {"name": entity.name, "description": entity.description}
        if entity.tools:
            meta["tools"] = ", ".join(TOOLS.map_out(entity.tools))
        model = MODELS.map_optional_out(entity.model)
        if model:
            meta["model"] = model
        if entity.max_tokens:
            meta["max_tokens"] = entity.max_tokens
        if entity.skills:
            meta["skills"] = ", ".join(entity.skills)
        try:
            return build_frontmatter(meta, entity.instructions).encode("utf-8")
        except yaml.YAMLError as e:
            raise MarshalError(self.name, e) from e
