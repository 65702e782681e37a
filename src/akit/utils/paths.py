"""Path utilities: file modes, directory creation, filename sanitizing."""

from __future__ import annotations

import os
import re
from pathlib import Path

# Generated configs may embed API keys or tokens.
DEFAULT_FILE_MODE = 0o600
DEFAULT_DIR_MODE = 0o755


def ensure_dir(directory: Path, mode: int = DEFAULT_DIR_MODE) -> None:
    """Create ``directory`` and any missing ancestors with ``mode``."""
    missing: list[Path] = []
    current = directory
    while not current.exists():
        missing.append(current)
        if current.parent == current:
            break
        current = current.parent
    for d in reversed(missing):
        d.mkdir(mode=mode, exist_ok=True)
        # mkdir applies the umask
        os.chmod(d, mode)


def write_private(path: Path, data: bytes, mode: int = DEFAULT_FILE_MODE) -> None:
    """Write bytes to ``path`` with a restrictive mode, creating parent directories."""
    ensure_dir(path.parent)
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
    with os.fdopen(fd, "wb") as f:
        f.write(data)
    # os.open only applies the mode to newly created files
    os.chmod(path, mode)


def sanitize_key(key: str) -> str:
    """Sanitize a key for use as a filename (no path traversal, no special chars)."""
    key = key.strip().lower()
    key = re.sub(r"[^\w\-.]", "-", key)
    key = re.sub(r"-+", "-", key).strip("-.")
    if not key:
        raise ValueError("Key cannot be empty")
    return key


def stem_of(path: Path) -> str:
    """File stem without any multi-part extension (``foo.agent.md`` -> ``foo``)."""
    return path.name.split(".", 1)[0]
