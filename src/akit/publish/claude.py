"""Submit a plugin to the official Claude Code plugin marketplace.

The flow mirrors what a contributor does by hand: fork the marketplace
repo, clone the fork, branch, copy the plugin under ``plugins/<name>/``,
commit, push and open a pull request upstream. GitHub calls go through the
``gh`` CLI; local repository work goes through GitPython.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import tempfile
from pathlib import Path

import git

from akit.core.errors import (
    AuthError,
    BranchError,
    CommitError,
    ForkError,
    PRError,
    PublishError,
    ValidationError,
)
from akit.publish.base import MarketplaceConfig, PublishOptions, PublishResult
from akit.utils.paths import sanitize_key

logger = logging.getLogger(__name__)

MARKETPLACE = MarketplaceConfig(
    name="claude",
    repo="anthropics/claude-plugins-official",
    plugins_dir="plugins",
    required_files=(".claude-plugin/plugin.json", "README.md"),
)

_GH_TIMEOUT = 120


class ClaudeMarketplacePublisher:
    name = MARKETPLACE.name

    def __init__(self, config: MarketplaceConfig = MARKETPLACE) -> None:
        self.config = config

    def validate(self, directory: Path) -> None:
        directory = Path(directory)
        missing = [f for f in self.config.required_files if not (directory / f).is_file()]
        if missing:
            raise ValidationError(directory, missing)

    def publish(self, options: PublishOptions) -> PublishResult:
        self.validate(options.plugin_dir)
        name = sanitize_key(options.plugin_name)
        branch = options.branch or f"add-plugin-{name}"
        files = _list_files(options.plugin_dir)
        result = PublishResult(branch=branch, files=files, dry_run=options.dry_run)
        if options.dry_run:
            logger.debug("Dry run: would submit %d files as %s", len(files), branch)
            return result

        user = self._current_user()
        self._exec_gh(["gh", "repo", "fork", self.config.repo, "--clone=false"], ForkError)
        logger.debug("Forked %s as %s", self.config.repo, user)

        with tempfile.TemporaryDirectory(prefix="akit-publish-") as tmp:
            repo = self._clone(f"https://github.com/{user}/{self.config.repo_name}.git", Path(tmp))
            try:
                repo.git.checkout("-b", branch)
            except git.GitCommandError as e:
                raise BranchError(f"failed to create branch {branch}", e) from e

            dest = Path(tmp) / self.config.plugins_dir / name
            try:
                shutil.copytree(options.plugin_dir, dest, dirs_exist_ok=True)
            except OSError as e:
                raise CommitError(f"failed to copy plugin into {dest}", e) from e
            title = options.title or f"Add {name} plugin"
            try:
                repo.git.add(A=True)
                repo.index.commit(title)
            except git.GitCommandError as e:
                raise CommitError("failed to commit plugin files", e) from e

            try:
                repo.remotes.origin.push(refspec=f"{branch}:{branch}")
            except git.GitCommandError as e:
                raise BranchError(f"failed to push branch {branch}", e) from e
            logger.debug("Pushed %s to %s/%s", branch, user, self.config.repo_name)

        body = options.body or f"Adds the `{name}` plugin under `{self.config.plugins_dir}/{name}`."
        out = self._exec_gh(
            [
                "gh", "pr", "create",
                "--repo", self.config.repo,
                "--head", f"{user}:{branch}",
                "--title", title,
                "--body", body,
            ],
            PRError,
        )
        result.pr_url = out.strip().splitlines()[-1] if out.strip() else ""
        return result

    def _current_user(self) -> str:
        login = self._exec_gh(["gh", "api", "user", "--jq", ".login"], AuthError).strip()
        if not login:
            raise AuthError("could not determine GitHub user")
        return login

    def _clone(self, url: str, path: Path) -> git.Repo:
        try:
            return git.Repo.clone_from(url, path)
        except git.GitCommandError as e:
            raise ForkError(f"failed to clone {url}", e) from e

    def _exec_gh(self, cmd: list[str], error: type[PublishError]) -> str:
        """Execute a gh CLI command and return stdout."""
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, timeout=_GH_TIMEOUT)
        except FileNotFoundError as e:
            raise AuthError("gh CLI not found. Install it: https://cli.github.com/", e) from e
        except subprocess.TimeoutExpired as e:
            raise error(f"gh command timed out after {_GH_TIMEOUT} seconds", e) from e

        if result.returncode != 0:
            stderr = result.stderr.strip()
            if "auth login" in stderr or "not logged" in stderr.lower():
                raise AuthError("gh authentication required. Run: gh auth login", stderr)
            raise error(f"{' '.join(cmd[:3])} failed", stderr)

        return result.stdout


def _list_files(directory: Path) -> list[str]:
    return sorted(p.relative_to(directory).as_posix() for p in directory.rglob("*") if p.is_file())
