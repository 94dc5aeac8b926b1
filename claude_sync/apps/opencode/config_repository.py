from copy import deepcopy
from pathlib import Path
from typing import Any

from claude_sync.apps.common.interfaces.repositories import IAppConfigRepository
from claude_sync.constants import OPENCODE_CONFIG_FILENAME
from claude_sync.utils import dump_json, read_json_safe


class OpenCodeConfigRepository(IAppConfigRepository):
    def __init__(self, root: Path | None = None) -> None:
        self._root = root or (Path.home() / ".config" / "opencode")

    @property
    def root(self) -> Path:
        return self._root

    @property
    def config_path(self) -> Path:
        return self.root / OPENCODE_CONFIG_FILENAME

    def load_config(self) -> tuple[dict[str, Any], str | None]:
        """Existing config, or an empty object plus the reason it was unusable."""
        payload, error = read_json_safe(self.config_path)
        if error is not None:
            return {}, f"invalid JSON ({error})"
        if payload is None:
            return {}, None
        if not isinstance(payload, dict):
            return {}, "must be a JSON object"
        return payload, None

    def merge_mcp(
        self, existing: dict[str, Any], mapped_mcp: dict[str, Any]
    ) -> dict[str, Any]:
        merged = deepcopy(existing)
        current = merged.get("mcp")
        mcp = dict(current) if isinstance(current, dict) else {}
        mcp.update(deepcopy(mapped_mcp))
        merged["mcp"] = mcp
        return merged

    def serialize_config(self, payload: dict[str, Any]) -> str:
        return dump_json(payload)
