"""Marketplace publishers."""

from __future__ import annotations

from akit.core.errors import UnknownAdapterError
from akit.publish.base import Publisher, PublishOptions, PublishResult
from akit.publish.claude import ClaudeMarketplacePublisher

_PUBLISHER_CLASSES = {
    ClaudeMarketplacePublisher.name: ClaudeMarketplacePublisher,
}


def list_publishers() -> list[str]:
    return sorted(_PUBLISHER_CLASSES)


def get_publisher(name: str) -> Publisher:
    cls = _PUBLISHER_CLASSES.get(name)
    if cls is None:
        raise UnknownAdapterError(name, list_publishers(), "marketplace")
    return cls()


__all__ = [
    "Publisher",
    "PublishOptions",
    "PublishResult",
    "get_publisher",
    "list_publishers",
]
