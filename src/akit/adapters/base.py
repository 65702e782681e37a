"""AdapterProtocol: the contract every format adapter satisfies.

An adapter encapsulates everything specific to one (domain, tool) pair:
parsing bytes into a canonical entity, marshaling a canonical entity back
into bytes, and the file I/O built on top of those two.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel

from akit.core.errors import ParseError, ReadError, WriteError
from akit.core.schema import Domain
from akit.utils.paths import sanitize_key, stem_of, write_private

EntityT = TypeVar("EntityT", bound=BaseModel)


@runtime_checkable
class AdapterProtocol(Protocol):
    """Interface that all adapters must implement."""

    name: str
    domain: Domain
    file_extension: str
    default_paths: tuple[str, ...]

    def parse(self, data: bytes) -> Any:
        """Deserialize format bytes into a canonical entity. Raises ParseError."""
        ...

    def marshal(self, entity: Any) -> bytes:
        """Serialize a canonical entity into format bytes. Raises MarshalError."""
        ...

    def read_file(self, path: Path) -> Any:
        ...

    def write_file(self, entity: Any, path: Path) -> None:
        ...

    def output_filename(self, entity: Any) -> str:
        """Relative file name used when generating into a directory."""
        ...


class BaseAdapter(Generic[EntityT]):
    """File I/O and naming shared by the concrete adapters.

    Subclasses set the class attributes and implement ``parse``/``marshal``.
    """

    name: str = ""
    domain: Domain
    file_extension: str = ""
    default_paths: tuple[str, ...] = ()

    def parse(self, data: bytes) -> EntityT:
        raise NotImplementedError

    def marshal(self, entity: EntityT) -> bytes:
        raise NotImplementedError

    def read_file(self, path: Path) -> EntityT:
        path = Path(path)
        try:
            data = path.read_bytes()
        except OSError as e:
            raise ReadError(path, e) from e
        try:
            entity = self.parse(data)
        except ParseError as e:
            e.path = path
            raise
        return self._default_name(entity, path)

    def write_file(self, entity: EntityT, path: Path) -> None:
        path = Path(path)
        data = self.marshal(entity)
        try:
            write_private(path, data)
        except OSError as e:
            raise WriteError(path, e) from e

    def output_filename(self, entity: EntityT) -> str:
        return f"{sanitize_key(entity.name)}{self.file_extension}"

    def _default_name(self, entity: EntityT, path: Path) -> EntityT:
        """Fill an empty ``name`` from the file name, for formats that omit it."""
        if "name" in type(entity).model_fields and not entity.name:
            return entity.model_copy(update={"name": self._name_from_path(path)})
        return entity

    def _name_from_path(self, path: Path) -> str:
        return stem_of(path)

    def _decode(self, data: bytes) -> str:
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(self.name, e) from e
