"""Tests for canonical directory reading, multi-target generation and project mode."""

import json
import stat
from pathlib import Path

import pytest

from akit.adapters.registry import build_registry
from akit.core.errors import NoEntitiesError, ParseError, ReadError
from akit.core.generate import (
    Target,
    generate,
    load_deployment,
    parse_targets,
    read_canonical_dir,
    run_project,
)
from akit.core.schema import Domain


class TestParseTargets:
    def test_pairs(self):
        targets = parse_targets("claude:.claude/agents, kiro:out/kiro")
        assert [(t.format, t.output) for t in targets] == [
            ("claude", Path(".claude/agents")),
            ("kiro", Path("out/kiro")),
        ]

    def test_windows_style_dir_keeps_colon(self):
        assert parse_targets("kiro:C:/out")[0].output == Path("C:/out")

    def test_invalid(self):
        with pytest.raises(ValueError, match="expected format:dir"):
            parse_targets("claude")


class TestReadCanonicalDir:
    def test_sorted_file_order(self, agents_dir):
        agents = read_canonical_dir(agents_dir)
        assert [a.name for a in agents] == ["reviewer", "writer"]
        assert agents[0].tools == ["Read", "Grep", "Glob", "Bash"]
        assert agents[0].skills == ["code-review"]

    def test_json_spec(self, tmp_path):
        (tmp_path / "a.json").write_text(json.dumps({"name": "a", "instructions": "Hi"}))
        (agent,) = read_canonical_dir(tmp_path)
        assert agent.instructions == "Hi"

    def test_missing_dir(self, tmp_path):
        with pytest.raises(ReadError) as exc:
            read_canonical_dir(tmp_path / "nope")
        assert exc.value.not_found

    def test_empty_dir(self, tmp_path):
        with pytest.raises(NoEntitiesError):
            read_canonical_dir(tmp_path)

    def test_bad_file_names_path(self, tmp_path):
        bad = tmp_path / "bad.md"
        bad.write_text("---\nname: [oops\n---\nbody")
        with pytest.raises(ParseError) as exc:
            read_canonical_dir(tmp_path)
        assert exc.value.path == bad

    def test_skills_named_after_directory(self, tmp_path):
        skill_dir = tmp_path / "pdf-tools"
        skill_dir.mkdir()
        (skill_dir / "SKILL.md").write_text("---\ndescription: Work with PDFs\n---\n\nSteps.")
        (skill,) = read_canonical_dir(tmp_path, Domain.skills)
        assert skill.name == "pdf-tools"
        assert skill.description == "Work with PDFs"

    def test_mcp_files_merged(self, tmp_path):
        (tmp_path / "a.json").write_text(json.dumps({"mcpServers": {
            "fs": {"command": "npx"}, "web": {"command": "old"},
        }}))
        (tmp_path / "b.json").write_text(json.dumps({"mcpServers": {
            "web": {"type": "http", "url": "https://example.com/mcp"},
        }}))
        (config,) = read_canonical_dir(tmp_path, "mcp")
        assert list(config.servers) == ["fs", "web"]
        assert config.servers["web"].url == "https://example.com/mcp"


class TestGenerate:
    def test_multiple_targets(self, agents_dir, tmp_path):
        registry = build_registry(Domain.agents)
        agents = read_canonical_dir(agents_dir, registry=registry)
        targets = [Target("claude", tmp_path / "claude"), Target("copilot", tmp_path / "gh")]
        report = generate(agents, targets, registry)
        assert report.ok
        assert (tmp_path / "claude" / "reviewer.md").is_file()
        assert (tmp_path / "gh" / "writer.agent.md").is_file()
        assert len(report.files) == 4

    def test_failure_does_not_stop_other_targets(self, agents_dir, tmp_path):
        registry = build_registry(Domain.agents)
        agents = read_canonical_dir(agents_dir, registry=registry)
        targets = [Target("bogus", tmp_path / "x"), Target("kiro", tmp_path / "kiro")]
        report = generate(agents, targets, registry)
        assert not report.ok
        assert [r.target for r in report.failed] == ["bogus"]
        assert "available" in report.failed[0].error
        assert (tmp_path / "kiro" / "reviewer.json").is_file()

    def test_written_file_mode(self, agents_dir, tmp_path):
        registry = build_registry(Domain.agents)
        agents = read_canonical_dir(agents_dir, registry=registry)
        generate(agents, [Target("kiro", tmp_path / "deep" / "kiro")], registry)
        path = tmp_path / "deep" / "kiro" / "writer.json"
        assert stat.S_IMODE(path.stat().st_mode) == 0o600

    def test_skills_layout(self, tmp_path):
        src = tmp_path / "src" / "lint"
        src.mkdir(parents=True)
        (src / "SKILL.md").write_text("---\nname: lint\ndescription: Lint\n---\n\nRun lint.")
        registry = build_registry(Domain.skills)
        skills = read_canonical_dir(tmp_path / "src", Domain.skills, registry)
        generate(skills, [Target("codex", tmp_path / "codex")], registry)
        assert (tmp_path / "codex" / "lint" / "SKILL.md").is_file()


class TestProjectMode:
    def test_load_deployment(self, project_dir):
        deployment = load_deployment(project_dir)
        assert deployment.team == "stats-team"
        assert [t.platform for t in deployment.targets][:2] == ["claude-code", "kiro-cli"]

    def test_missing_deployment(self, tmp_path):
        with pytest.raises(ReadError):
            load_deployment(tmp_path)

    def test_invalid_deployment(self, tmp_path):
        (tmp_path / "deployment.json").write_text('{"targets": [{"name": "x"}]}')
        with pytest.raises(ParseError):
            load_deployment(tmp_path)

    def test_all_targets(self, project_dir):
        report = run_project(project_dir)
        assert report.ok
        by_name = {r.target: r for r in report.results}
        assert (project_dir / "out/claude/reviewer.md").is_file()
        assert (project_dir / "out/kiro/writer.json").is_file()
        assert by_name["k8s"].skipped
        assert by_name["k8s"].files == []

        config = json.loads((project_dir / "out/local/config.json").read_text())
        assert config["mode"] == "local"
        assert config["llm"]["provider"] == "bedrock"
        assert config["llm"]["model"] == "claude-3-opus-20240229"
        assert [a["name"] for a in config["agents"]] == ["reviewer", "writer"]

    def test_priority_filter(self, project_dir):
        report = run_project(project_dir, priority="p2")
        done = [r.target for r in report.results if r.files]
        skipped = [r.target for r in report.results if r.skipped]
        assert done == ["local"]
        assert skipped == ["claude", "kiro", "k8s"]
        assert not (project_dir / "out/claude").exists()

    def test_unsupported_platform_reported(self, project_dir):
        path = project_dir / "deployment.json"
        doc = json.loads(path.read_text())
        doc["targets"].insert(0, {"name": "cdk", "platform": "aws-agentcore", "output": "out/cdk"})
        path.write_text(json.dumps(doc))
        report = run_project(project_dir)
        assert [r.target for r in report.failed] == ["cdk"]
        assert report.failed[0].error == "unsupported platform: aws-agentcore"
        assert (project_dir / "out/kiro/reviewer.json").is_file()
