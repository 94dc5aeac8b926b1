from pathlib import Path

from claude_sync.apps.common.framework import (
    RegisteredSyncService,
    create_registered_service,
)
from claude_sync.errors import UnknownTargetError
from claude_sync.models import SourceConfig, SyncReport, SyncTarget


def normalize_target(value: SyncTarget | str) -> SyncTarget:
    if isinstance(value, SyncTarget):
        return value
    try:
        return SyncTarget(value.lower())
    except ValueError:
        raise UnknownTargetError(value) from None


def create_target_service(
    target: SyncTarget | str, root: Path | None = None
) -> RegisteredSyncService:
    return create_registered_service(normalize_target(target), root=root)


def sync_to_target(
    config: SourceConfig, target: SyncTarget | str, output_root: Path | None = None
) -> SyncReport:
    """Project ``config`` into one target's skills dir and config file."""
    return create_target_service(target, root=output_root).sync(config)
