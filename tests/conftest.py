"""Shared fixtures: canonical source trees, deployment projects, isolated config."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

REVIEWER_MD = """\
---
name: reviewer
description: Reviews pull requests
tools: Read, Grep, Glob, Bash
model: sonnet
skills: code-review
---

Review the diff and report problems.
"""

WRITER_MD = """\
---
name: writer
description: Writes documentation
tools: Read, Write, Edit
model: haiku
---

Write clear docs.
"""


@pytest.fixture
def agents_dir(tmp_path: Path) -> Path:
    """Directory of canonical (Claude-format) agent specs."""
    directory = tmp_path / "agents"
    directory.mkdir()
    (directory / "writer.md").write_text(WRITER_MD)
    (directory / "reviewer.md").write_text(REVIEWER_MD)
    (directory / "notes.txt").write_text("ignored")
    return directory


@pytest.fixture
def project_dir(tmp_path: Path, agents_dir: Path) -> Path:
    """Multi-agent project: agents/ plus deployment.json."""
    deployment = {
        "$schema": "https://example.com/deployment.schema.json",
        "team": "stats-team",
        "targets": [
            {"name": "claude", "platform": "claude-code", "priority": "p1", "output": "out/claude"},
            {"name": "kiro", "platform": "kiro-cli", "priority": "p1", "output": "out/kiro"},
            {
                "name": "local",
                "platform": "agentkit-local",
                "priority": "p2",
                "output": "out/local",
                "config": {"model": "opus", "provider": "bedrock"},
            },
            {"name": "k8s", "platform": "kubernetes", "priority": "p3", "output": "out/k8s"},
        ],
    }
    (tmp_path / "deployment.json").write_text(json.dumps(deployment))
    return tmp_path


@pytest.fixture
def clean_config(monkeypatch, tmp_path: Path) -> Path:
    """Redirect the global config dir to a temp directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setattr("akit.utils.config.global_config_dir", lambda: config_dir)
    return config_dir
