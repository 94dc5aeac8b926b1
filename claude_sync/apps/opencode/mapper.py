from copy import deepcopy
from typing import Any

from claude_sync.apps.common.interfaces.mapper import IAppMCPMapper
from claude_sync.models import MCPServerSpec


class OpenCodeMCPMapper(IAppMCPMapper):
    def from_source(self, servers: dict[str, MCPServerSpec]) -> dict[str, Any]:
        mapped: dict[str, Any] = {}
        for name, server in servers.items():
            out: dict[str, Any] = {}
            if server.is_local:
                out["type"] = "local"
                out["command"] = [server.command, *(server.args or [])]
                if server.env is not None:
                    out["environment"] = deepcopy(server.env)
            elif server.is_remote:
                out["type"] = "remote"
                out["url"] = server.url
                if server.headers is not None:
                    out["headers"] = deepcopy(server.headers)
            else:
                continue

            out["enabled"] = True
            mapped[name] = out
        return mapped
