"""Kiro MCP adapter: ``.kiro/settings/mcp.json`` with ``disabled`` and millisecond timeouts."""

from __future__ import annotations

from akit.adapters.mcp._servers import ServerMapAdapter, compact, ms_to_seconds, seconds_to_ms
from akit.core.schema import MCPServer


class KiroMCPAdapter(ServerMapAdapter):
    name = "kiro"
    file_extension = ".json"
    default_paths = (".kiro/settings/mcp.json", "~/.kiro/settings/mcp.json")

    def entry_to_server(self, entry: dict) -> MCPServer:
        return MCPServer(
            command=entry.get("command"),
            args=entry.get("args") or [],
            env=entry.get("env") or {},
            url=entry.get("url"),
            headers=entry.get("headers") or {},
            timeout=ms_to_seconds(entry.get("timeout")),
            disabled=bool(entry.get("disabled", False)),
        )

    def server_to_entry(self, server: MCPServer) -> dict:
        if not server.is_remote:
            entry = {"command": server.command, "args": server.args, "env": server.env}
        else:
            entry = {"url": server.url, "headers": server.headers}
        entry["timeout"] = seconds_to_ms(server.timeout)
        entry = compact(entry)
        if server.disabled:
            entry["disabled"] = True
        return entry
