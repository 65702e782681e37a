"""Shared machinery for MCP server-map formats.

Every MCP dialect stores a mapping of server name -> server entry under one
top-level key. Concrete adapters only describe how a single entry looks.
Writing merges into an existing file so unrelated settings (editor options,
model defaults) survive.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as SchemaError

from akit.adapters.base import BaseAdapter
from akit.core.errors import MarshalError, ParseError, ReadError, WriteError
from akit.core.schema import Domain, MCPConfig, MCPServer
from akit.utils.paths import write_private

logger = logging.getLogger(__name__)


def seconds_to_ms(value: float | None) -> int | None:
    if value is None:
        return None
    return int(round(value * 1000))


def ms_to_seconds(value: Any) -> float | None:
    # 0 means no timeout
    if not value:
        return None
    return float(value) / 1000


def compact(entry: dict) -> dict:
    """Drop unset and empty optional fields from a server entry."""
    return {k: v for k, v in entry.items() if v not in (None, [], {}, "")}


class ServerMapAdapter(BaseAdapter[MCPConfig]):
    """Base for formats holding ``{servers_key: {name: entry}}``."""

    domain = Domain.mcp
    servers_key = "mcpServers"

    # -- per-format hooks --

    def entry_to_server(self, entry: dict) -> MCPServer:
        raise NotImplementedError

    def server_to_entry(self, server: MCPServer) -> dict:
        raise NotImplementedError

    def load(self, text: str) -> dict:
        return json.loads(text)

    def dump(self, doc: dict) -> str:
        return json.dumps(doc, indent=2) + "\n"

    # -- contract --

    def parse(self, data: bytes) -> MCPConfig:
        text = self._decode(data)
        try:
            doc = self.load(text)
            if not isinstance(doc, dict):
                raise ValueError("expected an object at the top level")
            raw = doc.get(self.servers_key)
            if raw is None:
                raw = {}
            if not isinstance(raw, dict):
                raise ValueError(f"{self.servers_key!r} must be an object")
            servers = {}
            for name, entry in raw.items():
                if not isinstance(entry, dict):
                    raise ValueError(f"server {name!r} must be an object")
                servers[name] = self.entry_to_server(entry)
            return MCPConfig(servers=servers)
        except (SchemaError, ValueError, TypeError) as e:
            raise ParseError(self.name, e) from e

    def marshal(self, entity: MCPConfig) -> bytes:
        return self._render(entity, {})

    def _render(self, entity: MCPConfig, base: dict) -> bytes:
        doc = dict(base)
        doc[self.servers_key] = {
            name: self.server_to_entry(server) for name, server in entity.servers.items()
        }
        try:
            return self.dump(doc).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise MarshalError(self.name, e) from e

    def write_file(self, entity: MCPConfig, path: Path) -> None:
        """Write servers into ``path``, keeping any other top-level settings."""
        path = Path(path)
        base: dict = {}
        if path.is_file():
            try:
                existing = self.load(path.read_text(encoding="utf-8"))
            except OSError as e:
                raise ReadError(path, e) from e
            except ValueError as e:
                raise ParseError(self.name, e, path) from e
            if isinstance(existing, dict):
                base = existing
                logger.debug("Merging %d servers into existing %s", len(entity.servers), path)
        data = self._render(entity, base)
        try:
            write_private(path, data)
        except OSError as e:
            raise WriteError(path, e) from e

    def output_filename(self, entity: MCPConfig) -> str:
        return Path(self.default_paths[0]).name
