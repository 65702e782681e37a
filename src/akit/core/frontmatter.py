"""YAML frontmatter parser/builder for Markdown-based formats.

Handles the standard ``---``-delimited YAML block used by Claude agents,
commands and skills, Copilot ``.agent.md`` files and Codex prompts.
"""

from __future__ import annotations

import json
import re

import yaml

_CLOSING = re.compile(r"\n---[ \t]*(?:\n|$)")


class _Dumper(yaml.SafeDumper):
    """Block-style mappings with inline lists (``tools: [read, edit]``)."""


def _represent_list(dumper: yaml.SafeDumper, data: list) -> yaml.Node:
    return dumper.represent_sequence("tag:yaml.org,2002:seq", data, flow_style=True)


_Dumper.add_representer(list, _represent_list)


def split_frontmatter(text: str) -> tuple[str | None, str]:
    """Split a document into (frontmatter_text, body).

    Returns (None, original_text) when there is no complete frontmatter block.
    """
    if not text.startswith("---"):
        return None, text

    end_match = _CLOSING.search(text, 3)
    if not end_match:
        return None, text

    return text[3 : end_match.start()], text[end_match.end() :]


def _pull_verbatim(raw: str, keys: tuple[str, ...]) -> tuple[str, dict]:
    """Remove top-level ``key: value`` lines for *keys* and return their raw values.

    Used for values such as ``argument-hint: [pr-number] [priority]`` that
    are written for humans and are not valid YAML.
    """
    kept: list[str] = []
    values: dict = {}
    for line in raw.split("\n"):
        key, sep, value = line.partition(":")
        if sep and key in keys:
            value = value.strip()
            if value[:1] in ("'", '"'):
                value = yaml.safe_load(value)
            values[key] = value
        else:
            kept.append(line)
    return "\n".join(kept), values


def parse_frontmatter(text: str, verbatim: tuple[str, ...] = ()) -> tuple[dict, str]:
    """Parse YAML frontmatter + markdown body.

    Returns (metadata_dict, body_content). If no frontmatter is present,
    returns ({}, original_text). Keys listed in *verbatim* are read as plain
    line values instead of YAML. Raises ``yaml.YAMLError`` on invalid YAML
    and ``ValueError`` when the block is not a mapping.
    """
    raw, body = split_frontmatter(text)
    if raw is None:
        return {}, text

    raw, extra = _pull_verbatim(raw, verbatim) if verbatim else (raw, {})
    metadata = yaml.safe_load(raw)
    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        raise ValueError("frontmatter must be a mapping")
    metadata.update(extra)

    return metadata, body.strip()


def build_frontmatter(metadata: dict, body: str) -> str:
    """Build a frontmatter document from metadata dict and body text.

    Keys keep their insertion order and are written one per line; flat
    lists are written in flow style. An empty dict gives an empty block.
    """
    if metadata:
        yaml_text = yaml.dump(
            metadata,
            Dumper=_Dumper,
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
            width=4096,
        ).rstrip("\n")
        lines = ["---", yaml_text, "---", "", body.strip(), ""]
    else:
        lines = ["---", "---", "", body.strip(), ""]
    return "\n".join(lines)


def build_document(metadata: dict, body: str) -> str:
    """Like :func:`build_frontmatter`, but write the bare body when there is no metadata.

    A body that would read back as frontmatter or JSON keeps an empty block.
    """
    body = body.strip()
    if not metadata and not body.startswith(("---", "{")):
        return body + "\n"
    return build_frontmatter(metadata, body)


def load_document(text: str, verbatim: tuple[str, ...] = ()) -> tuple[dict, str]:
    """Read a Markdown-with-frontmatter document, a bare JSON object, or plain Markdown.

    A document starting with ``{`` must be a complete JSON object; its
    ``instructions`` key, if present, becomes the body. Raises ``ValueError``
    (``json.JSONDecodeError`` included) or ``yaml.YAMLError`` on malformed input.
    """
    raw, _ = split_frontmatter(text)
    if raw is not None:
        return parse_frontmatter(text, verbatim)
    if text.lstrip().startswith("{"):
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("expected a JSON object")
        body = data.pop("instructions", "") or ""
        return data, str(body).strip()
    return {}, text.strip()


def as_list(value) -> list[str]:
    """Claude writes lists as comma-separated strings; accept YAML lists too."""
    if value is None:
        return []
    if isinstance(value, str):
        return [v.strip() for v in value.split(",") if v.strip()]
    if isinstance(value, list):
        return [str(v).strip() for v in value]
    raise ValueError(f"expected a list or comma-separated string, got {type(value).__name__}")


def as_hint(value) -> str | None:
    """Normalize an ``argument-hint``; a list becomes ``[a] [b]``."""
    if value is None or value == "":
        return None
    if isinstance(value, list):
        return " ".join(f"[{v}]" for v in value)
    return str(value)
