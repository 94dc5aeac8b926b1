import re
from pathlib import Path
from typing import Any

try:
    import tomllib
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore

from claude_sync.apps.common.interfaces.repositories import IAppConfigRepository
from claude_sync.constants import (
    CODEX_CONFIG_FILENAME,
    CODEX_CONFIG_HEADER,
    CODEX_SYNC_MARKER,
)
from claude_sync.errors import InvalidConfigSchemaError

_BARE_KEY = re.compile(r"^[A-Za-z0-9_-]+$")


def escape_toml_string(value: str) -> str:
    return (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )


def _dump_string(value: Any) -> str:
    return f'"{escape_toml_string(str(value))}"'


def _dump_key(key: str) -> str:
    return key if _BARE_KEY.match(key) else _dump_string(key)


class CodexConfigRepository(IAppConfigRepository):
    """Owns the block of ``config.toml`` below the sync marker.

    Everything above the marker belongs to the user and is kept as-is; the
    file is never parsed as a whole.
    """

    def __init__(self, root: Path | None = None) -> None:
        self._root = root or (Path.home() / ".codex")

    @property
    def root(self) -> Path:
        return self._root

    @property
    def config_path(self) -> Path:
        return self.root / CODEX_CONFIG_FILENAME

    def serialize_servers(self, servers: dict[str, Any]) -> str:
        sections: list[str] = []
        for name, server in servers.items():
            table = f"mcp_servers.{_dump_key(name)}"
            lines = [f"[{table}]", f"command = {_dump_string(server['command'])}"]

            args = server.get("args")
            if args:
                lines.append("args = [" + ", ".join(_dump_string(arg) for arg in args) + "]")

            env = server.get("env")
            if env:
                lines.append("")
                lines.append(f"[{table}.env]")
                for key, value in env.items():
                    lines.append(f"{_dump_key(key)} = {_dump_string(value)}")

            sections.append("\n".join(lines))
        return "\n\n".join(sections) + "\n"

    def parse_servers(self, text: str) -> dict[str, Any]:
        try:
            payload = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise InvalidConfigSchemaError(self.config_path, str(exc)) from exc
        servers = payload.get("mcp_servers", {})
        return servers if isinstance(servers, dict) else {}

    @staticmethod
    def user_content(existing: str) -> str:
        """Text the user owns: everything before the marker of a previous sync."""
        index = existing.find(CODEX_SYNC_MARKER)
        if index == -1:
            return existing.rstrip()
        return existing[:index].rstrip()

    def merge_text(self, existing: str, sections: str) -> str:
        preserved = self.user_content(existing)
        head = preserved if preserved else CODEX_CONFIG_HEADER
        return f"{head}\n\n{CODEX_SYNC_MARKER}\n{sections}"
