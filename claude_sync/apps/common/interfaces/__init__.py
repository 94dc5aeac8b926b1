from claude_sync.apps.common.interfaces.mapper import IAppMCPMapper
from claude_sync.apps.common.interfaces.repositories import (
    IAppConfigRepository,
    ISchemaRepository,
)
from claude_sync.apps.common.interfaces.service import IAppSyncService

__all__ = [
    "IAppConfigRepository",
    "IAppMCPMapper",
    "IAppSyncService",
    "ISchemaRepository",
]
