import os
import re
from pathlib import Path

from claude_sync.constants import (
    CLAUDE_SETTINGS_FILENAME,
    SKILL_MARKER_FILENAME,
    SKILLS_DIRNAME,
)
from claude_sync.models import MCPServerSpec, SkillRef, SourceConfig
from claude_sync.utils import read_json_safe

_SECRET_PATTERN = re.compile(r"key|token|secret|password|credential|auth", re.IGNORECASE)


class ClaudeHomeRepository:
    """Read-only view of a Claude Code home directory."""

    def __init__(self, root: Path | None = None) -> None:
        self._root = (root or (Path.home() / ".claude")).absolute()

    @property
    def root(self) -> Path:
        return self._root

    @property
    def skills_dir(self) -> Path:
        return self.root / SKILLS_DIRNAME

    @property
    def settings_path(self) -> Path:
        return self.root / CLAUDE_SETTINGS_FILENAME

    def list_skills(self) -> list[SkillRef]:
        try:
            entries = sorted(os.scandir(self.skills_dir), key=lambda item: item.name)
        except (FileNotFoundError, NotADirectoryError):
            return []

        skills: list[SkillRef] = []
        for entry in entries:
            is_link = entry.is_symlink()
            if not is_link and not entry.is_dir(follow_symlinks=False):
                continue

            entry_path = Path(entry.path)
            skill_path = entry_path / SKILL_MARKER_FILENAME
            if not skill_path.exists():
                continue

            source_dir = entry_path.resolve() if is_link else entry_path
            skills.append(
                SkillRef(name=entry.name, source_dir=source_dir, skill_path=skill_path)
            )
        return skills

    def load_mcp_servers(self) -> dict[str, MCPServerSpec]:
        payload, _error = read_json_safe(self.settings_path)
        if not isinstance(payload, dict):
            return {}
        servers = payload.get("mcpServers")
        if not isinstance(servers, dict):
            return {}
        return {
            str(name): MCPServerSpec.from_payload(raw) for name, raw in servers.items()
        }

    def load(self) -> SourceConfig:
        return SourceConfig(
            skills=self.list_skills(), mcp_servers=self.load_mcp_servers()
        )


def load_claude_home(root: Path | None = None) -> SourceConfig:
    return ClaudeHomeRepository(root).load()


def find_secret_env_names(servers: dict[str, MCPServerSpec]) -> list[str]:
    """Names of env vars and headers that look like they carry secrets."""
    names: set[str] = set()
    for server in servers.values():
        for mapping in (server.env, server.headers):
            if not mapping:
                continue
            names.update(
                str(key) for key in mapping if _SECRET_PATTERN.search(str(key))
            )
    return sorted(names)
