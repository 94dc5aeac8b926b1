from claude_sync.apps.common.framework import (
    RegisteredSyncService,
    create_registered_service,
)
from claude_sync.apps.common.interfaces.service import IAppSyncService

__all__ = [
    "IAppSyncService",
    "RegisteredSyncService",
    "create_registered_service",
]
