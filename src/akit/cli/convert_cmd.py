"""Single-file conversion and adapter listing."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from akit.adapters.registry import get_registry
from akit.cli._shared import DOMAIN_OPTION, FORMAT_OPTION, resolve_domain
from akit.core.convert import convert
from akit.core.errors import AkitError, ReadError, WriteError
from akit.core.schema import Domain
from akit.utils.output import error, output_table, success
from akit.utils.paths import write_private


def register_convert_commands(app: typer.Typer) -> None:
    """Register adapters and convert as top-level commands."""

    @app.command("adapters")
    def adapters_list(
        domain: Optional[str] = DOMAIN_OPTION,
        all_domains: bool = typer.Option(False, "--all", help="List adapters of every domain"),
        fmt: Optional[str] = FORMAT_OPTION,
    ) -> None:
        """List registered adapters."""
        domains = list(Domain) if all_domains else [resolve_domain(domain)]
        rows = []
        for d in domains:
            registry = get_registry(d)
            for name in registry.adapter_names():
                adapter = registry.require(name)
                rows.append({
                    "domain": d.value,
                    "name": name,
                    "extension": adapter.file_extension,
                    "default_path": adapter.default_paths[0] if adapter.default_paths else "",
                })
        output_table(rows, ["domain", "name", "extension", "default_path"], fmt=fmt)

    @app.command("convert")
    def convert_file(
        input_path: Path = typer.Argument(..., help="File to convert"),
        source: str = typer.Option(..., "--from", "-f", help="Source format"),
        dest: str = typer.Option(..., "--to", "-t", help="Destination format"),
        domain: Optional[str] = DOMAIN_OPTION,
        output_path: Optional[Path] = typer.Option(
            None, "--output", "-o", help="Write here instead of stdout"
        ),
    ) -> None:
        """Convert one file between two formats of the same domain."""
        d = resolve_domain(domain)
        try:
            try:
                data = input_path.read_bytes()
            except OSError as e:
                raise ReadError(input_path, e) from e
            out = convert(data, source, dest, domain=d)
            if output_path is None:
                typer.echo(out.decode("utf-8"), nl=False)
                return
            try:
                write_private(output_path, out)
            except OSError as e:
                raise WriteError(output_path, e) from e
        except AkitError as e:
            error(str(e))
            raise typer.Exit(1)
        success(f"Converted {input_path} ({source} -> {dest}) to {output_path}")
