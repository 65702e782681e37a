"""Tests for path helpers: modes, sanitizing, stems."""

import stat
from pathlib import Path

import pytest

from akit.utils.paths import ensure_dir, sanitize_key, stem_of, write_private


class TestWritePrivate:
    def test_creates_parents(self, tmp_path):
        path = tmp_path / "a" / "b" / "c.json"
        write_private(path, b"{}")
        assert path.read_bytes() == b"{}"
        assert stat.S_IMODE(path.stat().st_mode) == 0o600
        assert stat.S_IMODE((tmp_path / "a" / "b").stat().st_mode) == 0o755

    def test_tightens_existing_file(self, tmp_path):
        path = tmp_path / "open.json"
        path.write_text("old")
        path.chmod(0o644)
        write_private(path, b"new")
        assert path.read_text() == "new"
        assert stat.S_IMODE(path.stat().st_mode) == 0o600

    def test_existing_dir_untouched(self, tmp_path):
        tmp_path.chmod(0o700)
        ensure_dir(tmp_path)
        assert stat.S_IMODE(tmp_path.stat().st_mode) == 0o700


class TestSanitizeKey:
    def test_basic(self):
        assert sanitize_key("Code Reviewer") == "code-reviewer"

    def test_traversal(self):
        assert sanitize_key("../../etc/passwd") == "etc-passwd"

    def test_empty(self):
        with pytest.raises(ValueError):
            sanitize_key("  ")


def test_stem_of_multi_extension():
    assert stem_of(Path("x/docs.agent.md")) == "docs"
