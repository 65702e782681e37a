"""Tests for format-to-format conversion through the canonical model."""

import json
import tomllib

import pytest

from akit.adapters.agents.claude import ClaudeAgentAdapter
from akit.adapters.registry import AdapterRegistry, build_registry
from akit.core.convert import convert
from akit.core.errors import ParseError, UnknownAdapterError
from akit.core.schema import Domain

ALL_ADAPTERS = [
    (domain, name) for domain in Domain for name in build_registry(domain).adapter_names()
]


class TestConvert:
    def test_claude_json_to_kiro(self):
        out = convert(b'{"name":"demo","tools":["Read","Bash"]}', "claude", "kiro")
        doc = json.loads(out)
        assert doc["name"] == "demo"
        assert doc["tools"] == ["read", "shell"]

    def test_collapsing_tools_not_duplicated(self):
        data = b'{"name":"demo","tools":["Write","Edit","MultiEdit","Read"]}'
        doc = json.loads(convert(data, "claude", "kiro"))
        assert doc["tools"] == ["write", "read"]

    def test_unknown_tool_preserved(self):
        data = b'{"name":"demo","tools":["Read","mcp__github__search"]}'
        doc = json.loads(convert(data, "claude", "kiro"))
        assert doc["tools"] == ["read", "mcp__github__search"]

    def test_unknown_destination_lists_names(self):
        with pytest.raises(UnknownAdapterError) as exc:
            convert(b"{}", "claude", "doesnotexist")
        for name in ("agentkit", "claude", "copilot", "kiro"):
            assert name in str(exc.value)

    def test_unknown_source_fails_before_parsing(self):
        with pytest.raises(UnknownAdapterError):
            convert(b"not even json", "doesnotexist", "claude")

    def test_explicit_registry(self):
        registry = AdapterRegistry(Domain.agents, [ClaudeAgentAdapter()])
        with pytest.raises(UnknownAdapterError) as exc:
            convert(b"{}", "claude", "kiro", registry=registry)
        assert exc.value.available == ["claude"]

    def test_mcp_domain(self):
        data = b'{"mcpServers": {"fs": {"command": "npx", "args": ["-y", "fs"]}}}'
        doc = tomllib.loads(convert(data, "claude", "codex", domain=Domain.mcp).decode())
        assert doc["mcp_servers"]["fs"] == {"command": "npx", "args": ["-y", "fs"]}

    def test_commands_placeholder(self):
        data = b"---\ndescription: Fix an issue\n---\n\nFix issue $ARGUMENTS\n"
        out = convert(data, "claude", "gemini", domain="commands").decode()
        doc = tomllib.loads(out)
        assert doc == {"description": "Fix an issue", "prompt": "Fix issue {{args}}"}

    def test_chained_conversion_may_differ(self):
        data = b'{"name":"demo","tools":["Grep","Glob"]}'
        direct = json.loads(convert(data, "claude", "kiro"))
        via_copilot = json.loads(convert(convert(data, "claude", "copilot"), "copilot", "kiro"))
        assert direct["tools"] == ["grep", "glob"]
        # copilot folds both into "search", which reads back as Grep
        assert via_copilot["tools"] == ["grep"]
        assert direct["name"] == via_copilot["name"] == "demo"


class TestMalformedInput:
    @pytest.mark.parametrize("domain,name", ALL_ADAPTERS)
    def test_truncated_json(self, domain, name):
        adapter = build_registry(domain).require(name)
        with pytest.raises(ParseError) as exc:
            adapter.parse(b'{"name":')
        assert exc.value.format == name
        assert name in str(exc.value)

    @pytest.mark.parametrize("domain,name", ALL_ADAPTERS)
    def test_invalid_utf8(self, domain, name):
        adapter = build_registry(domain).require(name)
        with pytest.raises(ParseError):
            adapter.parse(b"\xff\xfe\x00garbage")

    def test_convert_propagates_parse_error(self):
        with pytest.raises(ParseError):
            convert(b'{"name":', "claude", "kiro")
