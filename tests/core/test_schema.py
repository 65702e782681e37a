"""Tests for the canonical pydantic models."""

import pytest
from pydantic import ValidationError

from akit.core.schema import (
    Agent,
    Command,
    Deployment,
    Domain,
    MCPConfig,
    MCPServer,
    Skill,
    Transport,
)


class TestAgent:
    def test_defaults(self):
        agent = Agent(name="reviewer")
        assert agent.tools == []
        assert agent.model is None
        assert agent.skills == []

    def test_tools_deduplicated_in_order(self):
        agent = Agent(name="a", tools=["Read", "Bash", "Read", ""])
        assert agent.tools == ["Read", "Bash"]

    def test_tools_from_comma_string(self):
        agent = Agent(name="a", tools="Read, Grep,Glob")
        assert agent.tools == ["Read", "Grep", "Glob"]

    def test_model_alias_case_normalized(self):
        assert Agent(name="a", model="Sonnet").model == "sonnet"

    def test_inherit_means_unset(self):
        assert Agent(name="a", model="inherit").model is None
        assert Agent(name="a", model="").model is None

    def test_full_model_id_kept(self):
        assert Agent(name="a", model="claude-opus-4-1").model == "claude-opus-4-1"

    def test_max_tokens_positive(self):
        with pytest.raises(ValidationError):
            Agent(name="a", max_tokens=0)

    def test_add_tool(self):
        agent = Agent(name="a", tools=["Read"])
        agent.add_tool("Read")
        agent.add_tool(" Bash ")
        agent.add_tool("")
        assert agent.tools == ["Read", "Bash"]


class TestMCPServer:
    def test_infers_stdio(self):
        server = MCPServer(command="npx", args=["-y", "server"])
        assert server.transport == Transport.stdio
        assert not server.is_remote

    def test_infers_http_from_url(self):
        server = MCPServer(url="https://example.com/mcp")
        assert server.transport == Transport.http
        assert server.is_remote

    def test_streamable_http_alias(self):
        assert MCPServer(transport="streamable-http", url="https://x").transport == Transport.http

    def test_stdio_requires_command(self):
        with pytest.raises(ValidationError):
            MCPServer(transport="stdio")

    def test_remote_requires_url(self):
        with pytest.raises(ValidationError):
            MCPServer(transport="sse", command="npx")

    def test_merge_overrides_by_name(self):
        a = MCPConfig(servers={"x": MCPServer(command="a"), "y": MCPServer(command="y")})
        b = MCPConfig(servers={"x": MCPServer(command="b")})
        merged = a.merge(b)
        assert list(merged.servers) == ["x", "y"]
        assert merged.servers["x"].command == "b"


class TestCommandAndSkill:
    def test_command_allowed_tools(self):
        cmd = Command(name="c", allowed_tools="Bash(git:*), Read, Read")
        assert cmd.allowed_tools == ["Bash(git:*)", "Read"]

    def test_skill_defaults(self):
        skill = Skill(name="pdf")
        assert skill.allowed_tools == []


class TestDeployment:
    def test_schema_alias(self):
        dep = Deployment.model_validate({
            "$schema": "https://example.com/deployment.json",
            "team": "stats",
            "targets": [{"name": "local", "platform": "claude-code", "output": "out"}],
        })
        assert dep.schema_ == "https://example.com/deployment.json"
        assert dep.targets[0].priority == ""
        assert dep.targets[0].config == {}


def test_domain_values():
    assert [d.value for d in Domain] == ["agents", "mcp", "commands", "skills"]
