import json
from pathlib import Path
from typing import Any

from claude_sync.apps.common.interfaces.repositories import ISchemaRepository

_SCHEMA_CACHE: dict[str, dict[str, Any]] = {}


class JsonSchemaRepository(ISchemaRepository):
    """Loads a JSON schema shipped alongside the package."""

    def __init__(self, *, local_schema_path: Path) -> None:
        self.local_schema_path = local_schema_path

    def load_schema(self) -> dict[str, Any]:
        key = str(self.local_schema_path.resolve())
        cached = _SCHEMA_CACHE.get(key)
        if cached is not None:
            return cached
        schema = json.loads(self.local_schema_path.read_text(encoding="utf-8"))
        _SCHEMA_CACHE[key] = schema
        return schema
