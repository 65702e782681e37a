"""Shared CLI options and helpers."""

from __future__ import annotations

import typer

from akit.core.schema import Domain
from akit.utils.config import default_domain
from akit.utils.output import error

FORMAT_OPTION = typer.Option(None, "--format", "-F", help="Output format: json or text")
DOMAIN_OPTION = typer.Option(
    None,
    "--domain",
    "-d",
    help="Configuration domain: agents, mcp, commands or skills (default from config)",
)


def resolve_domain(domain: str | None) -> Domain:
    """Explicit ``--domain`` wins, then the ``default_domain`` config key."""
    if domain is None:
        return default_domain()
    try:
        return Domain(domain)
    except ValueError:
        error(f"Unknown domain: {domain}. Valid domains: {', '.join(d.value for d in Domain)}")
        raise typer.Exit(1)
