"""Read skill metadata from SKILL.md YAML frontmatter."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

import yaml

from claude_sync.models import SkillRef

_FRONTMATTER_RE = re.compile(r"^---\s*\n(.*?)\n---\s*(?:\n|$)", re.DOTALL)


@dataclass(frozen=True)
class SkillMetadata:
    name: str = ""
    description: str = ""


def parse_frontmatter(text: str) -> dict:
    match = _FRONTMATTER_RE.match(text)
    if not match:
        return {}
    try:
        raw = yaml.safe_load(match.group(1))
    except yaml.YAMLError:
        return {}
    return raw if isinstance(raw, dict) else {}


def read_skill_metadata(skill: SkillRef) -> SkillMetadata:
    """Metadata for display; a skill with unreadable frontmatter still syncs."""
    text = _read_marker(skill.skill_path)
    raw = parse_frontmatter(text)
    description = raw.get("description", "")
    return SkillMetadata(
        name=str(raw.get("name") or skill.name),
        description=" ".join(str(description).split()) if description else "",
    )


def _read_marker(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return ""
