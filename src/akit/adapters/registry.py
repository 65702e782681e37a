"""Adapter registration and lookup, one registry per domain."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from akit.adapters.agents.agentkit import AgentkitAdapter
from akit.adapters.agents.claude import ClaudeAgentAdapter
from akit.adapters.agents.copilot import CopilotAgentAdapter
from akit.adapters.agents.kiro import KiroAgentAdapter
from akit.adapters.base import AdapterProtocol
from akit.adapters.commands.claude import ClaudeCommandAdapter
from akit.adapters.commands.codex import CodexCommandAdapter
from akit.adapters.commands.gemini import GeminiCommandAdapter
from akit.adapters.mcp.claude import ClaudeMCPAdapter
from akit.adapters.mcp.codex import CodexMCPAdapter
from akit.adapters.mcp.cursor import CursorMCPAdapter
from akit.adapters.mcp.gemini import GeminiMCPAdapter
from akit.adapters.mcp.kiro import KiroMCPAdapter
from akit.adapters.mcp.vscode import VSCodeMCPAdapter
from akit.adapters.skills.claude import ClaudeSkillAdapter
from akit.adapters.skills.codex import CodexSkillAdapter
from akit.core.errors import DuplicateAdapterError, UnknownAdapterError
from akit.core.schema import Domain

logger = logging.getLogger(__name__)

_ADAPTER_CLASSES: dict[Domain, tuple[type, ...]] = {
    Domain.agents: (ClaudeAgentAdapter, KiroAgentAdapter, AgentkitAdapter, CopilotAgentAdapter),
    Domain.mcp: (
        ClaudeMCPAdapter,
        CursorMCPAdapter,
        VSCodeMCPAdapter,
        GeminiMCPAdapter,
        KiroMCPAdapter,
        CodexMCPAdapter,
    ),
    Domain.commands: (ClaudeCommandAdapter, GeminiCommandAdapter, CodexCommandAdapter),
    Domain.skills: (ClaudeSkillAdapter, CodexSkillAdapter),
}


class AdapterRegistry:
    """Name -> adapter lookup for a single domain.

    Built from an explicit adapter list; lookups need no locking because the
    table is only mutated through ``register``.
    """

    def __init__(self, domain: Domain, adapters: Iterable[AdapterProtocol] = ()) -> None:
        self.domain = Domain(domain)
        self._adapters: dict[str, AdapterProtocol] = {}
        self._lock = threading.Lock()
        for adapter in adapters:
            self.register(adapter)

    def register(self, adapter: AdapterProtocol) -> None:
        if adapter.domain != self.domain:
            raise ValueError(
                f"adapter {adapter.name!r} serves {adapter.domain.value}, "
                f"not {self.domain.value}"
            )
        with self._lock:
            if adapter.name in self._adapters:
                raise DuplicateAdapterError(adapter.name, self.domain.value)
            self._adapters[adapter.name] = adapter
        logger.debug("Registered %s adapter %s", self.domain.value, adapter.name)

    def get_adapter(self, name: str) -> AdapterProtocol | None:
        return self._adapters.get(name)

    def require(self, name: str) -> AdapterProtocol:
        adapter = self._adapters.get(name)
        if adapter is None:
            raise UnknownAdapterError(name, self.adapter_names(), self.domain.value)
        return adapter

    def adapter_names(self) -> list[str]:
        return sorted(self._adapters)

    def __contains__(self, name: object) -> bool:
        return name in self._adapters

    def __len__(self) -> int:
        return len(self._adapters)


def build_registry(domain: Domain | str) -> AdapterRegistry:
    """Fresh registry holding the built-in adapters of ``domain``."""
    domain = Domain(domain)
    return AdapterRegistry(domain, [cls() for cls in _ADAPTER_CLASSES[domain]])


_registries: dict[Domain, AdapterRegistry] = {}
_registries_lock = threading.Lock()


def get_registry(domain: Domain | str = Domain.agents) -> AdapterRegistry:
    """Process-wide registry for ``domain``, built on first use."""
    domain = Domain(domain)
    with _registries_lock:
        registry = _registries.get(domain)
        if registry is None:
            registry = _registries[domain] = build_registry(domain)
        return registry
