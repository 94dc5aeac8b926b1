from pathlib import Path
from typing import Any

from jsonschema import Draft7Validator

from claude_sync.apps.codex.config_repository import CodexConfigRepository
from claude_sync.apps.codex.mapper import CodexMCPMapper
from claude_sync.apps.common.framework import (
    RegisteredSyncService,
    format_schema_error,
)
from claude_sync.apps.common.interfaces.mapper import IAppMCPMapper
from claude_sync.apps.common.interfaces.repositories import ISchemaRepository
from claude_sync.apps.common.schema import JsonSchemaRepository
from claude_sync.errors import InvalidConfigSchemaError
from claude_sync.models import Action, ActionKind, MCPServerSpec, SyncTarget


class CodexSchemaRepository(JsonSchemaRepository):
    def __init__(self) -> None:
        super().__init__(local_schema_path=Path(__file__).resolve().parent / "schema.json")


class CodexSyncService(RegisteredSyncService):
    TARGET = SyncTarget.CODEX

    def __init__(
        self,
        repository: CodexConfigRepository,
        mapper: IAppMCPMapper,
        schema_repository: ISchemaRepository,
    ) -> None:
        self._repository = repository
        self._mapper = mapper
        self._validator = Draft7Validator(schema_repository.load_schema())

    @classmethod
    def create_default(cls, root: Path | None = None) -> "CodexSyncService":
        return cls(
            repository=CodexConfigRepository(root),
            mapper=CodexMCPMapper(),
            schema_repository=CodexSchemaRepository(),
        )

    @property
    def repository(self) -> CodexConfigRepository:
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
        desired = self.mapper.from_source(servers)
        skipped = [
            f"Skipping MCP server without a command (Codex has no remote servers): {name}"
            for name, server in servers.items()
            if name not in desired and server.is_remote
        ]

        sections = self.repository.serialize_servers(desired)
        # the generated block must read back as exactly what was mapped
        parsed = self.repository.parse_servers(sections)
        self.validate_mcp(parsed)
        if parsed != desired:
            raise InvalidConfigSchemaError(
                self.repository.config_path, "generated mcp_servers do not round-trip"
            )

        existed = self.repository.config_exists()
        previous = self.repository.read_text()
        rendered = self.repository.merge_text(previous, sections)
        self.repository.write_text(rendered)

        return (
            Action(
                kind=ActionKind.WRITE_TEXT,
                path=self.repository.config_path,
                status=self.derive_status(existed, previous, rendered),
                detail=f"replace synced section with {len(desired)} mcp server(s)",
            ),
            skipped,
        )
