"""Cursor MCP adapter: ``.cursor/mcp.json``.

Cursor has no transport field; a ``url`` entry is treated as streamable
HTTP, so ``sse`` servers come back as ``http``.
"""

from __future__ import annotations

from akit.adapters.mcp._servers import ServerMapAdapter, compact
from akit.core.schema import MCPServer


class CursorMCPAdapter(ServerMapAdapter):
    name = "cursor"
    file_extension = ".json"
    default_paths = (".cursor/mcp.json", "~/.cursor/mcp.json")

    def entry_to_server(self, entry: dict) -> MCPServer:
        return MCPServer(
            command=entry.get("command"),
            args=entry.get("args") or [],
            env=entry.get("env") or {},
            url=entry.get("url"),
            headers=entry.get("headers") or {},
        )

    def server_to_entry(self, server: MCPServer) -> dict:
        if not server.is_remote:
            return compact({"command": server.command, "args": server.args, "env": server.env})
        return compact({"url": server.url, "headers": server.headers})
