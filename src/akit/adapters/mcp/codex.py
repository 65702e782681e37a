"""Codex MCP adapter: ``[mcp_servers.<name>]`` tables in ``.codex/config.toml``."""

from __future__ import annotations

import tomllib

import toml

from akit.adapters.mcp._servers import ServerMapAdapter, compact
from akit.core.schema import MCPServer


class CodexMCPAdapter(ServerMapAdapter):
    name = "codex"
    file_extension = ".toml"
    default_paths = (".codex/config.toml", "~/.codex/config.toml")
    servers_key = "mcp_servers"

    def load(self, text: str) -> dict:
        return tomllib.loads(text)

    def dump(self, doc: dict) -> str:
        return toml.dumps(doc)

    def entry_to_server(self, entry: dict) -> MCPServer:
        return MCPServer(
            command=entry.get("command"),
            args=entry.get("args") or [],
            env=entry.get("env") or {},
            cwd=entry.get("cwd"),
            url=entry.get("url"),
            headers=entry.get("http_headers") or {},
            timeout=entry.get("startup_timeout_sec"),
            disabled=not entry.get("enabled", True),
        )

    def server_to_entry(self, server: MCPServer) -> dict:
        if not server.is_remote:
            entry = {
                "command": server.command,
                "args": server.args,
                "env": server.env,
                "cwd": server.cwd,
            }
        else:
            entry = {"url": server.url, "http_headers": server.headers}
        entry["startup_timeout_sec"] = server.timeout
        entry = compact(entry)
        if server.disabled:
            entry["enabled"] = False
        return entry
