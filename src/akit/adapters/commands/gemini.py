"""Gemini CLI custom commands: ``.gemini/commands/<name>.toml``.

Only ``description`` and ``prompt`` exist; user input is ``{{args}}``.
Tool restrictions, argument hints and model pins have no equivalent and
are dropped on output.
"""

from __future__ import annotations

import tomllib

import toml
from pydantic import ValidationError as SchemaError

from akit.adapters.base import BaseAdapter
from akit.core.errors import MarshalError, ParseError
from akit.core.mapping import invert, replace_placeholders
from akit.core.schema import Command, Domain

PLACEHOLDERS = {"$ARGUMENTS": "{{args}}"}
PLACEHOLDERS_IN = invert(PLACEHOLDERS)


class GeminiCommandAdapter(BaseAdapter[Command]):
    name = "gemini"
    domain = Domain.commands
    file_extension = ".toml"
    default_paths = (".gemini/commands", "~/.gemini/commands")

    def parse(self, data: bytes) -> Command:
        text = self._decode(data)
        try:
            doc = tomllib.loads(text)
            prompt = doc.get("prompt")
            if not isinstance(prompt, str):
                raise ValueError("missing required 'prompt' string")
            return Command(
                name=str(doc.get("name") or ""),
                description=str(doc.get("description") or ""),
                instructions=replace_placeholders(prompt, PLACEHOLDERS_IN).strip(),
            )
        except (ValueError, TypeError, SchemaError) as e:
            raise ParseError(self.name, e) from e

    def marshal(self, entity: Command) -> bytes:
        doc: dict = {}
        if entity.description:
            doc["description"] = entity.description
        doc["prompt"] = replace_placeholders(entity.instructions, PLACEHOLDERS)
        try:
            return toml.dumps(doc).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise MarshalError(self.name, e) from e
