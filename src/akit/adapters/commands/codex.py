"""Codex custom prompts: ``~/.codex/prompts/<name>.md``.

Codex reads ``description`` and ``argument-hint`` from the frontmatter and
expands ``$ARGUMENTS`` itself, so the body is kept as is.
"""

from __future__ import annotations

import yaml
from pydantic import ValidationError as SchemaError

from akit.adapters.base import BaseAdapter
from akit.core.errors import MarshalError, ParseError
from akit.core.frontmatter import as_hint, build_document, load_document
from akit.core.schema import Command, Domain


class CodexCommandAdapter(BaseAdapter[Command]):
    name = "codex"
    domain = Domain.commands
    file_extension = ".md"
    default_paths = (".codex/prompts", "~/.codex/prompts")

    def parse(self, data: bytes) -> Command:
        text = self._decode(data)
        try:
            meta, body = load_document(text, verbatim=("argument-hint",))
            return Command(
                description=meta.get("description") or "",
                instructions=body.strip(),
                argument_hint=as_hint(meta.get("argument-hint")),
            )
        except (yaml.YAMLError, ValueError, TypeError, SchemaError) as e:
            raise ParseError(self.name, e) from e

    def marshal(self, entity: Command) -> bytes:
        meta: dict = {}
        if entity.description:
            meta["description"] = entity.description
        if entity.argument_hint:
            meta["argument-hint"] = entity.argument_hint
        try:
            return build_document(meta, entity.instructions).encode("utf-8")
        except yaml.YAMLError as e:
            raise MarshalError(self.name, e) from e
