"""Claude Code MCP adapter: project ``.mcp.json`` with an explicit ``type``."""

from __future__ import annotations

from akit.adapters.mcp._servers import ServerMapAdapter, compact
from akit.core.schema import MCPServer


class ClaudeMCPAdapter(ServerMapAdapter):
    name = "claude"
    file_extension = ".json"
    default_paths = (".mcp.json", "~/.claude.json")

    def entry_to_server(self, entry: dict) -> MCPServer:
        return MCPServer(
            transport=entry.get("type"),
            command=entry.get("command"),
            args=entry.get("args") or [],
            env=entry.get("env") or {},
            url=entry.get("url"),
            headers=entry.get("headers") or {},
        )

    def server_to_entry(self, server: MCPServer) -> dict:
        if not server.is_remote:
            return compact({
                "type": "stdio",
                "command": server.command,
                "args": server.args,
                "env": server.env,
            })
        return compact({
            "type": server.transport.value,
            "url": server.url,
            "headers": server.headers,
        })
