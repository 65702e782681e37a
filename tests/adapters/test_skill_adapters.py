"""Tests for SKILL.md adapters."""

import pytest

from akit.adapters.skills.claude import ClaudeSkillAdapter
from akit.adapters.skills.codex import CodexSkillAdapter
from akit.core.schema import Skill

SKILL = Skill(
    name="pdf-tools",
    description="Extract text and tables from PDF files",
    instructions="Use pdftotext for plain text.",
    allowed_tools=["Bash", "Read"],
)


@pytest.fixture(params=[ClaudeSkillAdapter, CodexSkillAdapter])
def adapter(request):
    return request.param()


class TestSkillFiles:
    def test_output_filename(self, adapter):
        assert adapter.output_filename(SKILL) == "pdf-tools/SKILL.md"

    def test_round_trip(self, adapter):
        back = adapter.parse(adapter.marshal(SKILL))
        assert back.name == "pdf-tools"
        assert back.description == SKILL.description
        assert back.instructions == SKILL.instructions

    def test_name_from_directory(self, adapter, tmp_path):
        path = tmp_path / "lint" / "SKILL.md"
        path.parent.mkdir()
        path.write_text("---\ndescription: Lint code\n---\n\nRun ruff.")
        assert adapter.read_file(path).name == "lint"


class TestToolSupport:
    def test_claude_keeps_allowed_tools(self):
        back = ClaudeSkillAdapter().parse(ClaudeSkillAdapter().marshal(SKILL))
        assert back.allowed_tools == ["Bash", "Read"]

    def test_codex_drops_allowed_tools(self):
        text = CodexSkillAdapter().marshal(SKILL).decode()
        assert "allowed-tools" not in text
        assert CodexSkillAdapter().parse(text.encode()).allowed_tools == []
