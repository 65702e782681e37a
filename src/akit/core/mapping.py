"""Vocabulary mapping tables: canonical identifiers <-> dialect identifiers.

Each adapter owns one forward table per translated vocabulary (tool names,
model identifiers, argument placeholders). The reverse table is derived from
the forward one; when several canonical values share a destination value the
first entry in table order wins on the way back.

Values absent from a table are never dropped: going out they pass through
the table's ``normalize`` function (lower-casing for most dialects), coming
back they are returned unchanged.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Union


@dataclass(frozen=True)
class Known:
    """A value found in the table, carrying its translation."""

    value: str


@dataclass(frozen=True)
class Unmapped:
    """A value absent from the table, carrying the original string."""

    value: str


Resolution = Union[Known, Unmapped]


def _identity(value: str) -> str:
    return value


def invert(forward: Mapping[str, str]) -> dict[str, str]:
    """Invert a forward table. First entry wins on colliding destinations."""
    reverse: dict[str, str] = {}
    for source, dest in forward.items():
        reverse.setdefault(dest, source)
    return reverse


def unique(values: Iterable[str]) -> list[str]:
    """Drop duplicates and empty strings, keeping first-seen order."""
    return [v for v in dict.fromkeys(values) if v]


class VocabularyMap:
    """Immutable bidirectional table for one vocabulary of one adapter."""

    def __init__(
        self,
        forward: Mapping[str, str],
        normalize: Callable[[str], str] = str.lower,
    ) -> None:
        self._forward = MappingProxyType(dict(forward))
        self._reverse = MappingProxyType(invert(forward))
        self._normalize = normalize

    @classmethod
    def passthrough(cls) -> VocabularyMap:
        """Table for dialects that share the canonical vocabulary."""
        return cls({}, normalize=_identity)

    @property
    def forward(self) -> Mapping[str, str]:
        return self._forward

    @property
    def reverse(self) -> Mapping[str, str]:
        return self._reverse

    def lookup(self, value: str) -> Resolution:
        if value in self._forward:
            return Known(self._forward[value])
        return Unmapped(value)

    def reverse_lookup(self, value: str) -> Resolution:
        if value in self._reverse:
            return Known(self._reverse[value])
        return Unmapped(value)

    def to_destination(self, value: str) -> str:
        resolved = self.lookup(value)
        if isinstance(resolved, Known):
            return resolved.value
        return self._normalize(resolved.value)

    def to_canonical(self, value: str) -> str:
        return self.reverse_lookup(value).value

    def map_out(self, values: Iterable[str]) -> list[str]:
        """Translate a collection outwards. Duplicates collapse."""
        return unique(self.to_destination(v) for v in values)

    def map_in(self, values: Iterable[str]) -> list[str]:
        """Translate a collection back to canonical vocabulary."""
        return unique(self.to_canonical(v) for v in values)

    def map_optional_out(self, value: str | None) -> str | None:
        if not value:
            return None
        return self.to_destination(value)

    def map_optional_in(self, value: str | None) -> str | None:
        if not value:
            return None
        return self.to_canonical(value)


def model_map(forward: Mapping[str, str]) -> VocabularyMap:
    """Model identifiers are open-ended and kept verbatim when unmapped."""
    return VocabularyMap(forward, normalize=_identity)


def replace_placeholders(text: str, table: Mapping[str, str]) -> str:
    """Rewrite placeholder tokens in free text (e.g. ``$ARGUMENTS`` -> ``{{args}}``)."""
    for source, dest in table.items():
        text = text.replace(source, dest)
    return text
