"""Tests for akit config subcommands."""

import json

import pytest
from typer.testing import CliRunner

from akit.cli.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(clean_config):
    return clean_config


class TestConfigSetGet:
    def test_set_and_get(self, clean_config):
        result = runner.invoke(app, ["config", "set", "default_domain", "mcp"])
        assert result.exit_code == 0
        assert json.loads((clean_config / "config.json").read_text()) == {"default_domain": "mcp"}

        result = runner.invoke(app, ["config", "get", "default_domain", "--format", "json"])
        assert json.loads(result.output) == {"key": "default_domain", "value": "mcp"}

    def test_get_unset(self):
        result = runner.invoke(app, ["config", "get", "default_marketplace", "--format", "json"])
        assert result.exit_code == 0
        assert json.loads(result.output)["value"] is None

    def test_unknown_key(self):
        result = runner.invoke(app, ["config", "set", "color", "blue"])
        assert result.exit_code == 1

    def test_invalid_domain(self):
        result = runner.invoke(app, ["config", "set", "default_domain", "widgets"])
        assert result.exit_code == 1

    def test_invalid_marketplace(self):
        result = runner.invoke(app, ["config", "set", "default_marketplace", "nope"])
        assert result.exit_code == 1

    def test_valid_marketplace(self):
        result = runner.invoke(app, ["config", "set", "default_marketplace", "claude"])
        assert result.exit_code == 0


class TestConfigList:
    def test_empty(self):
        result = runner.invoke(app, ["config", "list", "--format", "json"])
        assert json.loads(result.output) == {}

    def test_lists_values(self):
        runner.invoke(app, ["config", "set", "default_domain", "skills"])
        runner.invoke(app, ["config", "set", "default_marketplace", "claude"])
        result = runner.invoke(app, ["config", "list", "--format", "json"])
        assert json.loads(result.output) == {
            "default_domain": "skills",
            "default_marketplace": "claude",
        }
