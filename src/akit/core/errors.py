"""Error taxonomy shared by adapters, the registry, conversion and publishing.

Every error keeps its underlying cause in ``.err`` (and is raised ``from`` it)
so callers can tell I/O problems (ReadError/WriteError) from data problems
(ParseError/MarshalError).
"""

from __future__ import annotations

from pathlib import Path


class AkitError(Exception):
    """Base class for all assistantkit errors."""


class ParseError(AkitError):
    """Source bytes do not match the adapter's expected structure."""

    def __init__(self, format: str, err: Exception | str, path: Path | None = None) -> None:
        self.format = format
        self.err = err
        self.path = path
        super().__init__(str(self))

    def __str__(self) -> str:
        where = f" ({self.path})" if self.path else ""
        return f"failed to parse {self.format}{where}: {self.err}"


class MarshalError(AkitError):
    """Canonical data could not be encoded in the destination format."""

    def __init__(self, format: str, err: Exception | str) -> None:
        self.format = format
        self.err = err
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"failed to marshal {self.format}: {self.err}"


class ReadError(AkitError):
    def __init__(self, path: Path, err: Exception) -> None:
        self.path = Path(path)
        self.err = err
        super().__init__(str(self))

    @property
    def not_found(self) -> bool:
        return isinstance(self.err, FileNotFoundError)

    def __str__(self) -> str:
        if self.not_found:
            return f"file not found: {self.path}"
        return f"failed to read {self.path}: {self.err}"


class WriteError(AkitError):
    def __init__(self, path: Path, err: Exception) -> None:
        self.path = Path(path)
        self.err = err
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"failed to write {self.path}: {self.err}"


class UnknownAdapterError(AkitError, LookupError):
    """Requested format name is not registered."""

    def __init__(self, name: str, available: list[str], domain: str = "") -> None:
        self.name = name
        self.available = list(available)
        self.domain = domain
        super().__init__(str(self))

    def __str__(self) -> str:
        kind = f"{self.domain} format" if self.domain else "format"
        names = ", ".join(self.available) or "none"
        return f"unknown {kind} {self.name!r} (available: {names})"


class DuplicateAdapterError(AkitError, ValueError):
    def __init__(self, name: str, domain: str = "") -> None:
        self.name = name
        self.domain = domain
        super().__init__(f"adapter {name!r} already registered for domain {domain!r}")


class NoEntitiesError(AkitError):
    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)
        super().__init__(f"no entities found in {self.directory}")


class ValidationError(AkitError):
    """A generated output directory is missing required artifacts."""

    def __init__(self, directory: Path, missing: list[str]) -> None:
        self.directory = Path(directory)
        self.missing = list(missing)
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"{self.directory} is missing required files: {', '.join(self.missing)}"


# -- Publishing --


class PublishError(AkitError):
    """A marketplace submission step failed."""

    def __init__(self, message: str, err: Exception | str | None = None) -> None:
        self.message = message
        self.err = err
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.err is None or str(self.err) == "":
            return self.message
        return f"{self.message}: {self.err}"


class AuthError(PublishError):
    pass


class ForkError(PublishError):
    pass


class BranchError(PublishError):
    pass


class CommitError(PublishError):
    pass


class PRError(PublishError):
    pass
