"""Shared ``SKILL.md`` handling: one directory per skill, named after it."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError as SchemaError

from akit.adapters.base import BaseAdapter
from akit.core.errors import MarshalError, ParseError
from akit.core.frontmatter import as_list, build_frontmatter, load_document
from akit.core.schema import Domain, Skill
from akit.utils.paths import sanitize_key

SKILL_FILE = "SKILL.md"


class SkillFileAdapter(BaseAdapter[Skill]):
    domain = Domain.skills
    file_extension = ".md"
    # whether the dialect honours an ``allowed-tools`` frontmatter key
    supports_tools = True

    def parse(self, data: bytes) -> Skill:
        text = self._decode(data)
        try:
            meta, body = load_document(text)
            tools = as_list(meta.get("allowed-tools")) if self.supports_tools else []
            return Skill(
                name=meta.get("name") or "",
                description=meta.get("description") or "",
                instructions=body.strip(),
                allowed_tools=tools,
            )
        except (yaml.YAMLError, ValueError, TypeError, SchemaError) as e:
            raise ParseError(self.name, e) from e

    def marshal(self, entity: Skill) -> bytes:
        meta: dict = {"name": entity.name, "description": entity.description}
        if self.supports_tools and entity.allowed_tools:
            meta["allowed-tools"] = ", ".join(entity.allowed_tools)
        try:
            return build_frontmatter(meta, entity.instructions).encode("utf-8")
        except yaml.YAMLError as e:
            raise MarshalError(self.name, e) from e

    def output_filename(self, entity: Skill) -> str:
        return f"{sanitize_key(entity.name)}/{SKILL_FILE}"

    def _name_from_path(self, path: Path) -> str:
        if path.name == SKILL_FILE:
            return path.parent.name
        return super()._name_from_path(path)
