from typing import Any

from claude_sync.apps.common.interfaces.mapper import IAppMCPMapper
from claude_sync.models import MCPServerSpec


class CodexMCPMapper(IAppMCPMapper):
    """Codex only runs local servers; remote entries are dropped."""

    def from_source(self, servers: dict[str, MCPServerSpec]) -> dict[str, Any]:
        mapped: dict[str, Any] = {}
        for name, server in servers.items():
            if not server.is_local:
                continue

            out: dict[str, Any] = {"command": server.command}
            args = [str(item) for item in server.args or []]
            if args:
                out["args"] = args
            env = {str(key): str(value) for key, value in (server.env or {}).items()}
            if env:
                out["env"] = env

            mapped[name] = out
        return mapped
