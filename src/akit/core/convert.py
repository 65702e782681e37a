"""Format-to-format conversion through the canonical model."""

from __future__ import annotations

import logging

from akit.adapters.registry import AdapterRegistry, get_registry
from akit.core.schema import Domain

logger = logging.getLogger(__name__)


def convert(
    data: bytes,
    source: str,
    dest: str,
    *,
    domain: Domain | str = Domain.agents,
    registry: AdapterRegistry | None = None,
) -> bytes:
    """Convert ``data`` from the ``source`` format to the ``dest`` format.

    Both names are resolved before any parsing so an unknown format fails
    fast with ``UnknownAdapterError``. Parse and marshal errors propagate
    unchanged.
    """
    if registry is None:
        registry = get_registry(domain)
    reader = registry.require(source)
    writer = registry.require(dest)

    entity = reader.parse(data)
    out = writer.marshal(entity)
    logger.debug("Converted %s %s -> %s (%d bytes)", registry.domain.value, source, dest, len(out))
    return out
