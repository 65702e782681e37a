"""Batch generation: canonical directories and deployment projects -> tool formats.

Every target is attempted; a failing target is recorded in the report and
never stops the others.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import ValidationError as SchemaError

from akit.adapters.agents.agentkit import write_full_config
from akit.adapters.registry import AdapterRegistry, get_registry
from akit.core.errors import AkitError, NoEntitiesError, ParseError, ReadError
from akit.core.schema import Agent, Deployment, DeploymentTarget, Domain, MCPConfig

logger = logging.getLogger(__name__)

CANONICAL_FORMAT = "claude"
DEPLOYMENT_FILE = "deployment.json"
AGENTS_DIR = "agents"

# deployment.json platform -> agents adapter name
PLATFORM_FORMATS = {
    "claude-code": "claude",
    "kiro-cli": "kiro",
    "github-copilot": "copilot",
}
AGENTKIT_PLATFORM = "agentkit-local"
AGENTKIT_CONFIG_FILE = "config.json"
KUBERNETES_PLATFORMS = ("kubernetes", "aws-eks", "azure-aks", "gcp-gke")


@dataclass
class Target:
    format: str
    output: Path
    name: str = ""

    def __post_init__(self) -> None:
        self.output = Path(self.output)
        if not self.name:
            self.name = self.format


@dataclass
class TargetResult:
    target: str
    format: str
    output: Path
    files: list[Path] = field(default_factory=list)
    error: str | None = None
    skipped: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        return {
            "target": self.target,
            "format": self.format,
            "output": str(self.output),
            "files": [str(f) for f in self.files],
            "error": self.error,
            "skipped": self.skipped,
        }


@dataclass
class GenerationReport:
    results: list[TargetResult] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(r.ok for r in self.results)

    @property
    def failed(self) -> list[TargetResult]:
        return [r for r in self.results if not r.ok]

    @property
    def files(self) -> list[Path]:
        return [f for r in self.results for f in r.files]


def parse_targets(spec: str) -> list[Target]:
    """Parse ``format:dir,format:dir`` into targets."""
    targets = []
    for pair in spec.split(","):
        if not pair.strip():
            continue
        fmt, sep, directory = pair.partition(":")
        fmt, directory = fmt.strip(), directory.strip()
        if not sep or not fmt or not directory:
            raise ValueError(f"Invalid target format: {pair!r} (expected format:dir)")
        targets.append(Target(fmt, Path(directory)))
    return targets


# -- Reading canonical sources --


def _canonical_files(directory: Path, domain: Domain) -> list[Path]:
    if domain == Domain.skills:
        files = directory.glob("*/SKILL.md")
    elif domain == Domain.mcp:
        files = directory.glob("*.json")
    else:
        files = [p for p in directory.iterdir() if p.suffix in (".md", ".json")]
    return sorted(p for p in files if p.is_file())


def read_canonical_dir(
    directory: Path,
    domain: Domain | str = Domain.agents,
    registry: AdapterRegistry | None = None,
) -> list:
    """Read every canonical entity of ``domain`` under ``directory``, in file order.

    MCP files are merged into a single config, later files overriding
    servers of the same name.
    """
    directory = Path(directory)
    domain = Domain(domain)
    registry = registry or get_registry(domain)
    if not directory.is_dir():
        raise ReadError(directory, FileNotFoundError(f"not a directory: {directory}"))

    reader = registry.require(CANONICAL_FORMAT)
    entities = [reader.read_file(path) for path in _canonical_files(directory, domain)]
    if not entities:
        raise NoEntitiesError(directory)

    if domain == Domain.mcp:
        merged = MCPConfig()
        for config in entities:
            merged = merged.merge(config)
        entities = [merged]
    logger.debug("Read %d %s from %s", len(entities), domain.value, directory)
    return entities


# -- Writing targets --


def generate_target(entities: list, fmt: str, output: Path, registry: AdapterRegistry) -> list[Path]:
    """Write ``entities`` into ``output`` using adapter ``fmt``. Returns written paths."""
    adapter = registry.require(fmt)
    output = Path(output)
    written = []
    for entity in entities:
        path = output / adapter.output_filename(entity)
        adapter.write_file(entity, path)
        logger.debug("Generated %s", path)
        written.append(path)
    return written


def generate(entities: list, targets: list[Target], registry: AdapterRegistry) -> GenerationReport:
    report = GenerationReport()
    for target in targets:
        result = TargetResult(target.name, target.format, target.output)
        try:
            result.files = generate_target(entities, target.format, target.output, registry)
        except (AkitError, ValueError) as e:
            logger.debug("Target %s failed: %s", target.name, e)
            result.error = str(e)
        report.results.append(result)
    return report


# -- Deployment projects --


def load_deployment(project_dir: Path) -> Deployment:
    path = Path(project_dir) / DEPLOYMENT_FILE
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ReadError(path, e) from e
    try:
        return Deployment.model_validate_json(data)
    except SchemaError as e:
        raise ParseError("deployment", e, path) from e


def _generate_platform(
    agents: list[Agent], target: DeploymentTarget, output: Path, registry: AdapterRegistry
) -> TargetResult:
    result = TargetResult(target.name, target.platform, output)
    platform = target.platform
    try:
        if platform in PLATFORM_FORMATS:
            result.format = PLATFORM_FORMATS[platform]
            result.files = generate_target(agents, result.format, output, registry)
        elif platform == AGENTKIT_PLATFORM:
            result.format = "agentkit"
            path = write_full_config(agents, output / AGENTKIT_CONFIG_FILE, target.config)
            result.files = [path]
        elif platform in KUBERNETES_PLATFORMS:
            result.skipped = f"{platform} deployment not yet implemented"
            logger.debug("Skipping %s: %s", target.name, result.skipped)
        else:
            result.error = f"unsupported platform: {platform}"
    except (AkitError, ValueError) as e:
        result.error = str(e)
    return result


def run_project(
    project_dir: Path,
    priority: str | None = None,
    registry: AdapterRegistry | None = None,
) -> GenerationReport:
    """Generate every target of a project's ``deployment.json``.

    Agents are read from ``<project>/agents``. Targets whose priority does
    not match ``priority`` are reported as skipped.
    """
    project_dir = Path(project_dir)
    registry = registry or get_registry(Domain.agents)
    deployment = load_deployment(project_dir)
    agents = read_canonical_dir(project_dir / AGENTS_DIR, Domain.agents, registry)
    logger.debug(
        "Project %s: %d agents, %d targets", deployment.team, len(agents), len(deployment.targets)
    )

    report = GenerationReport()
    for target in deployment.targets:
        output = project_dir / target.output
        if priority and target.priority != priority:
            result = TargetResult(target.name, target.platform, output)
            result.skipped = f"priority {target.priority or 'unset'} does not match {priority}"
            logger.debug("Skipping %s: %s", target.name, result.skipped)
        else:
            result = _generate_platform(agents, target, output, registry)
        report.results.append(result)
    return report
