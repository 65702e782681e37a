"""Claude Code slash commands: ``.claude/commands/<name>.md``.

The file name is the command name; frontmatter carries ``description``,
``argument-hint``, ``allowed-tools`` and ``model``. The body is the prompt,
with ``$ARGUMENTS`` standing for user input. A bare JSON object with the
same keys is accepted too.
"""

from __future__ import annotations

import yaml
from pydantic import ValidationError as SchemaError

from akit.adapters.base import BaseAdapter
from akit.core.errors import MarshalError, ParseError
from akit.core.frontmatter import as_hint, as_list, build_document, load_document
from akit.core.schema import Command, Domain


class ClaudeCommandAdapter(BaseAdapter[Command]):
    name = "claude"
    domain = Domain.commands
    file_extension = ".md"
    default_paths = (".claude/commands", "~/.claude/commands")

    def parse(self, data: bytes) -> Command:
        text = self._decode(data)
        try:
            meta, body = load_document(text, verbatim=("argument-hint",))
            return Command(
                name=meta.get("name") or "",
                description=meta.get("description") or "",
                instructions=body.strip(),
                argument_hint=as_hint(meta.get("argument-hint")),
                allowed_tools=as_list(meta.get("allowed-tools")),
                model=meta.get("model"),
            )
        except (yaml.YAMLError, ValueError, TypeError, SchemaError) as e:
            raise ParseError(self.name, e) from e

    def marshal(self, entity: Command) -> bytes:
        meta: dict = {}
        if entity.description:
            meta["description"] = entity.description
        if entity.argument_hint:
            meta["argument-hint"] = entity.argument_hint
        if entity.allowed_tools:
            meta["allowed-tools"] = ", ".join(entity.allowed_tools)
        if entity.model:
            meta["model"] = entity.model
        try:
            return build_document(meta, entity.instructions).encode("utf-8")
        except yaml.YAMLError as e:
            raise MarshalError(self.name, e) from e
