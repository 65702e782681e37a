"""Batch generation from a canonical directory or a deployment project."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from akit.adapters.registry import get_registry
from akit.cli._shared import DOMAIN_OPTION, FORMAT_OPTION, resolve_domain
from akit.core.errors import AkitError
from akit.core.generate import (
    GenerationReport,
    Target,
    generate,
    parse_targets,
    read_canonical_dir,
    run_project,
)
from akit.utils.output import error, info, output, success, warning


def _report(report: GenerationReport, fmt: str | None) -> None:
    if fmt == "json":
        output(
            {
                "ok": report.ok,
                "files": [str(f) for f in report.files],
                "results": [r.to_dict() for r in report.results],
            },
            fmt="json",
        )
    else:
        for result in report.results:
            if result.skipped:
                warning(f"Skipped {result.target}: {result.skipped}")
            elif result.error:
                error(f"{result.target}: {result.error}")
            else:
                success(f"Generated {len(result.files)} {result.format} file(s) in {result.output}")
                for path in result.files:
                    info(f"  {path}")
        if len(report.results) > 1:
            info(f"{len(report.files)} file(s) written")
    if not report.ok:
        raise typer.Exit(1)


def register_generate_commands(app: typer.Typer) -> None:
    @app.command("generate")
    def generate_cmd(
        spec: Optional[Path] = typer.Option(None, "--spec", "-s", help="Directory of canonical files"),
        output_dir: Optional[Path] = typer.Option(None, "--output", "-o", help="Output directory"),
        target_format: str = typer.Option("claude", "--to", "-t", help="Output format for --output"),
        targets: Optional[str] = typer.Option(
            None, "--targets", help="Several targets as format:dir pairs, comma-separated"
        ),
        project: Optional[Path] = typer.Option(
            None, "--project", "-p", help="Project directory holding deployment.json"
        ),
        priority: Optional[str] = typer.Option(
            None, "--priority", help="Only deployment targets with this priority (with --project)"
        ),
        domain: Optional[str] = DOMAIN_OPTION,
        fmt: Optional[str] = FORMAT_OPTION,
    ) -> None:
        """Generate tool-specific files from canonical sources."""
        try:
            if project is not None:
                _report(run_project(project, priority), fmt)
                return

            if spec is None:
                error("--spec or --project required")
                raise typer.Exit(1)
            if targets:
                target_list = parse_targets(targets)
            elif output_dir is not None:
                target_list = [Target(target_format, output_dir)]
            else:
                error("--output, --targets or --project required")
                raise typer.Exit(1)

            d = resolve_domain(domain)
            registry = get_registry(d)
            entities = read_canonical_dir(spec, d, registry)
            if fmt != "json":
                info(f"Found {len(entities)} {d.value} in {spec}")
            _report(generate(entities, target_list, registry), fmt)
        except (AkitError, ValueError) as e:
            error(str(e))
            raise typer.Exit(1)
