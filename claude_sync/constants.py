from typing import Final


SKILL_MARKER_FILENAME: Final[str] = "SKILL.md"
SKILLS_DIRNAME: Final[str] = "skills"
CLAUDE_SETTINGS_FILENAME: Final[str] = "settings.json"

OPENCODE_CONFIG_FILENAME: Final[str] = "opencode.json"
CODEX_CONFIG_FILENAME: Final[str] = "config.toml"

CODEX_SYNC_MARKER: Final[str] = "# MCP servers synced from Claude Code"
CODEX_CONFIG_HEADER: Final[str] = "# Codex config"

PRIVATE_FILE_MODE: Final[int] = 0o600
