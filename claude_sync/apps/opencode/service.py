from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from claude_sync.apps.common.framework import (
    RegisteredSyncService,
    format_schema_error,
)
from claude_sync.apps.common.interfaces.mapper import IAppMCPMapper
from claude_sync.apps.common.interfaces.repositories import ISchemaRepository
from claude_sync.apps.common.schema import JsonSchemaRepository
from claude_sync.apps.opencode.config_repository import OpenCodeConfigRepository
from claude_sync.apps.opencode.mapper import OpenCodeMCPMapper
from claude_sync.errors import InvalidConfigSchemaError
from claude_sync.models import Action, ActionKind, MCPServerSpec, SyncTarget


class OpenCodeSchemaRepository(JsonSchemaRepository):
    def __init__(self) -> None:
        super().__init__(local_schema_path=Path(__file__).resolve().parent / "schema.json")


class OpenCodeSyncService(RegisteredSyncService):
    """Links skills and merges MCP servers into ``opencode.json``."""

    TARGET = SyncTarget.OPENCODE

    def __init__(
        self,
        repository: OpenCodeConfigRepository,
        mapper: IAppMCPMapper,
        schema_repository: ISchemaRepository,
    ) -> None:
        self._repository = repository
        self._mapper = mapper
        self._validator = Draft202012Validator(schema_repository.load_schema())

    @classmethod
    def create_default(cls, root: Path | None = None) -> "OpenCodeSyncService":
        return cls(
            repository=OpenCodeConfigRepository(root),
            mapper=OpenCodeMCPMapper(),
            schema_repository=OpenCodeSchemaRepository(),
        )

    @property
    def repository(self) -> OpenCodeConfigRepository:
        return self._repository

    @property
    def mapper(self) -> IAppMCPMapper:
        return self._mapper

    def validate_mcp(self, payload: Any) -> None:
        error = next(iter(self._validator.iter_errors(payload)), None)
        if error is not None:
            raise InvalidConfigSchemaError(
                self.repository.config_path, format_schema_error(error)
            )

    def write_mcp(self, servers: dict[str, MCPServerSpec]) -> tuple[Action, list[str]]:
        skipped: list[str] = []
        existed = self.repository.config_exists()
        existing, problem = self.repository.load_config()
        if problem is not None:
            skipped.append(
                f"Existing {self.repository.config_path} ignored: {problem}"
            )
        previous = self.repository.read_text() if problem is None else ""

        desired_mcp = self.mapper.from_source(servers)
        self.validate_mcp(desired_mcp)

        rendered = self.repository.serialize_config(
            self.repository.merge_mcp(existing, desired_mcp)
        )
        self.repository.write_text(rendered)

        return (
            Action(
                kind=ActionKind.WRITE_JSON,
                path=self.repository.config_path,
                status=self.derive_status(existed, previous, rendered),
                detail=f"merge {len(desired_mcp)} mcp server(s) into opencode config",
            ),
            skipped,
        )
