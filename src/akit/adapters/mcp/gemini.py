"""Gemini CLI MCP adapter: ``mcpServers`` inside ``.gemini/settings.json``.

Gemini distinguishes transports by key: ``command`` (stdio), ``url`` (SSE)
and ``httpUrl`` (streamable HTTP). Timeouts are in milliseconds.
"""

from __future__ import annotations

from akit.adapters.mcp._servers import ServerMapAdapter, compact, ms_to_seconds, seconds_to_ms
from akit.core.schema import MCPServer, Transport


class GeminiMCPAdapter(ServerMapAdapter):
    name = "gemini"
    file_extension = ".json"
    default_paths = (".gemini/settings.json", "~/.gemini/settings.json")

    def entry_to_server(self, entry: dict) -> MCPServer:
        if entry.get("httpUrl"):
            transport, url = Transport.http, entry["httpUrl"]
        elif entry.get("url"):
            transport, url = Transport.sse, entry["url"]
        else:
            transport, url = Transport.stdio, None
        return MCPServer(
            transport=transport,
            command=entry.get("command"),
            args=entry.get("args") or [],
            env=entry.get("env") or {},
            cwd=entry.get("cwd"),
            url=url,
            headers=entry.get("headers") or {},
            timeout=ms_to_seconds(entry.get("timeout")),
        )

    def server_to_entry(self, server: MCPServer) -> dict:
        entry = {"timeout": seconds_to_ms(server.timeout)}
        if server.transport == Transport.stdio:
            entry.update(command=server.command, args=server.args, env=server.env, cwd=server.cwd)
        elif server.transport == Transport.sse:
            entry.update(url=server.url, headers=server.headers)
        else:
            entry.update(httpUrl=server.url, headers=server.headers)
        return compact(entry)
