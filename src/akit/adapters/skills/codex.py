"""Codex skills: ``.codex/skills/<name>/SKILL.md``.

Codex reads only ``name`` and ``description``; tool restrictions are dropped.
"""

from __future__ import annotations

from akit.adapters.skills._skill_md import SkillFileAdapter


class CodexSkillAdapter(SkillFileAdapter):
    name = "codex"
    default_paths = (".codex/skills", "~/.codex/skills")
    supports_tools = False
