"""Marketplace validation and submission."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from akit.cli._shared import FORMAT_OPTION
from akit.core.errors import AkitError, ValidationError
from akit.publish import PublishOptions, get_publisher
from akit.utils.config import default_marketplace
from akit.utils.output import error, info, output, success

MARKETPLACE_OPTION = typer.Option(
    None, "--marketplace", "-m", help="Target marketplace (default from config)"
)


def register_publish_commands(app: typer.Typer) -> None:
    @app.command("validate")
    def validate_cmd(
        plugin_dir: Path = typer.Argument(..., help="Plugin directory"),
        marketplace: Optional[str] = MARKETPLACE_OPTION,
        fmt: Optional[str] = FORMAT_OPTION,
    ) -> None:
        """Check a plugin directory has the files a marketplace requires."""
        try:
            publisher = get_publisher(marketplace or default_marketplace())
            publisher.validate(plugin_dir)
        except ValidationError as e:
            if fmt == "json":
                output({"valid": False, "missing": e.missing}, fmt="json")
            else:
                error(str(e))
            raise typer.Exit(1)
        except AkitError as e:
            error(str(e))
            raise typer.Exit(1)
        if fmt == "json":
            output({"valid": True, "missing": []}, fmt="json")
        else:
            success(f"{plugin_dir} is ready for the {publisher.name} marketplace")

    @app.command("publish")
    def publish_cmd(
        plugin_dir: Path = typer.Argument(..., help="Plugin directory"),
        name: str = typer.Option(..., "--name", "-n", help="Plugin name"),
        marketplace: Optional[str] = MARKETPLACE_OPTION,
        dry_run: bool = typer.Option(False, "--dry-run", help="Validate and list files only"),
        title: str = typer.Option("", "--title", help="Pull request title"),
        body: str = typer.Option("", "--body", help="Pull request body"),
        branch: str = typer.Option("", "--branch", help="Branch name in the fork"),
        fmt: Optional[str] = FORMAT_OPTION,
    ) -> None:
        """Submit a plugin to a marketplace as a pull request."""
        options = PublishOptions(
            plugin_dir=plugin_dir,
            plugin_name=name,
            dry_run=dry_run,
            title=title,
            body=body,
            branch=branch,
        )
        try:
            result = get_publisher(marketplace or default_marketplace()).publish(options)
        except (AkitError, ValueError) as e:
            error(str(e))
            raise typer.Exit(1)

        if fmt == "json":
            output(result, fmt="json")
        elif result.dry_run:
            info(f"Dry run -- would submit {len(result.files)} files on branch {result.branch}:")
            for f in result.files:
                info(f"  {f}")
        else:
            success(f"Pull request created: {result.pr_url}")
