"""Publisher contract and the option/result types shared by marketplaces."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class MarketplaceConfig:
    name: str
    repo: str
    plugins_dir: str
    required_files: tuple[str, ...]

    @property
    def repo_name(self) -> str:
        return self.repo.split("/", 1)[-1]


@dataclass
class PublishOptions:
    plugin_dir: Path
    plugin_name: str
    dry_run: bool = False
    title: str = ""
    body: str = ""
    branch: str = ""

    def __post_init__(self) -> None:
        self.plugin_dir = Path(self.plugin_dir)


@dataclass
class PublishResult:
    pr_url: str = ""
    branch: str = ""
    files: list[str] = field(default_factory=list)
    dry_run: bool = False

    def to_dict(self) -> dict:
        return {
            "pr_url": self.pr_url,
            "branch": self.branch,
            "files": list(self.files),
            "dry_run": self.dry_run,
        }


@runtime_checkable
class Publisher(Protocol):
    name: str

    def validate(self, directory: Path) -> None:
        """Raise ValidationError naming every required file missing from ``directory``."""
        ...

    def publish(self, options: PublishOptions) -> PublishResult:
        ...
