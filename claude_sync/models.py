from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional


class SyncTarget(str, Enum):
    OPENCODE = "opencode"
    CODEX = "codex"


class ActionKind(str, Enum):
    WRITE_JSON = "write_json"
    WRITE_TEXT = "write_text"
    SYMLINK = "symlink"


class ActionStatus(str, Enum):
    NOOP = "noop"
    CREATE = "create"
    UPDATE = "update"
    FIX = "fix"


@dataclass(frozen=True)
class SkillRef:
    name: str
    source_dir: Path
    skill_path: Path


@dataclass(frozen=True)
class MCPServerSpec:
    command: Optional[str] = None
    args: Optional[list[Any]] = None
    env: Optional[dict[str, Any]] = None
    url: Optional[str] = None
    headers: Optional[dict[str, Any]] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "MCPServerSpec":
        """Build a server spec from a raw ``mcpServers`` entry.

        Fields holding the wrong JSON type are treated as absent; values are
        otherwise kept verbatim.
        """
        if not isinstance(payload, dict):
            return cls()
        command = payload.get("command")
        args = payload.get("args")
        env = payload.get("env")
        url = payload.get("url")
        headers = payload.get("headers")
        return cls(
            command=command if isinstance(command, str) else None,
            args=list(args) if isinstance(args, list) else None,
            env=dict(env) if isinstance(env, dict) else None,
            url=url if isinstance(url, str) else None,
            headers=dict(headers) if isinstance(headers, dict) else None,
        )

    @property
    def is_local(self) -> bool:
        return bool(self.command)

    @property
    def is_remote(self) -> bool:
        return not self.is_local and bool(self.url)


@dataclass(frozen=True)
class SourceConfig:
    skills: list[SkillRef] = field(default_factory=list)
    mcp_servers: dict[str, MCPServerSpec] = field(default_factory=dict)


@dataclass
class Action:
    kind: ActionKind
    path: Path
    status: ActionStatus
    detail: str
    source: Optional[Path] = None


@dataclass
class SyncReport:
    target: SyncTarget
    root: Path
    actions: list[Action] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    def summary(self) -> dict[str, int]:
        counts = {status.value: 0 for status in ActionStatus}
        for action in self.actions:
            counts[action.status.value] += 1
        counts["actions"] = len(self.actions)
        counts["skipped"] = len(self.skipped)
        return counts

    def extend(self, actions: list[Action], skipped: list[str]) -> None:
        self.actions.extend(actions)
        self.skipped.extend(skipped)
