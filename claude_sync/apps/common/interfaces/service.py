from abc import ABC, abstractmethod
from typing import Any

from claude_sync.apps.common.interfaces.mapper import IAppMCPMapper
from claude_sync.apps.common.interfaces.repositories import IAppConfigRepository
from claude_sync.models import (
    Action,
    ActionStatus,
    MCPServerSpec,
    SourceConfig,
    SyncReport,
    SyncTarget,
)
from claude_sync.symlinks import link_skills


class IAppSyncService(ABC):
    @property
    @abstractmethod
    def target(self) -> SyncTarget:
        raise NotImplementedError

    @property
    @abstractmethod
    def repository(self) -> IAppConfigRepository:
        raise NotImplementedError

    @property
    @abstractmethod
    def mapper(self) -> IAppMCPMapper:
        raise NotImplementedError

    @abstractmethod
    def validate_mcp(self, payload: Any) -> None:
        raise NotImplementedError

    @abstractmethod
    def write_mcp(self, servers: dict[str, MCPServerSpec]) -> tuple[Action, list[str]]:
        raise NotImplementedError

    def sync(self, config: SourceConfig) -> SyncReport:
        report = SyncReport(target=self.target, root=self.repository.root)
        report.extend(*link_skills(config.skills, self.repository.skills_dir))

        # no servers: leave the target config file alone entirely
        if not config.mcp_servers:
            return report

        action, skipped = self.write_mcp(config.mcp_servers)
        report.extend([action], skipped)
        return report

    @staticmethod
    def derive_status(existed: bool, previous: str, rendered: str) -> ActionStatus:
        if not existed:
            return ActionStatus.CREATE
        if previous == rendered:
            return ActionStatus.NOOP
        return ActionStatus.UPDATE
