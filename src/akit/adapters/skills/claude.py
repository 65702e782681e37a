"""Claude Code skills: ``.claude/skills/<name>/SKILL.md`` with ``allowed-tools``."""

from __future__ import annotations

from akit.adapters.skills._skill_md import SkillFileAdapter


class ClaudeSkillAdapter(SkillFileAdapter):
    name = "claude"
    default_paths = (".claude/skills", "~/.claude/skills")
