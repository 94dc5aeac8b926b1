from abc import ABCMeta, abstractmethod
from pathlib import Path
from typing import Any, ClassVar, cast

from claude_sync.apps.common.interfaces.service import IAppSyncService
from claude_sync.models import SyncTarget


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


class SyncServiceRegistryMeta(ABCMeta):
    _registry: dict[SyncTarget, type["RegisteredSyncService"]] = {}

    def __new__(
        mcls,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        **kwargs: Any,
    ):
        cls = super().__new__(mcls, name, bases, namespace, **kwargs)
        target = getattr(cls, "TARGET", None)
        is_abstract = bool(getattr(cls, "__abstractmethods__", False))
        if target is not None and not is_abstract:
            mcls._registry[target] = cast(type["RegisteredSyncService"], cls)  # type: ignore[assignment]
        return cls


class RegisteredSyncService(IAppSyncService, metaclass=SyncServiceRegistryMeta):
    TARGET: ClassVar[SyncTarget | None] = None

    @property
    def target(self) -> SyncTarget:
        if self.TARGET is None:
            raise NotImplementedError(f"{type(self).__name__} has no TARGET")
        return self.TARGET

    @classmethod
    @abstractmethod
    def create_default(cls, root: Path | None = None) -> "RegisteredSyncService":
        raise NotImplementedError


def create_registered_service(
    target: SyncTarget, root: Path | None = None
) -> RegisteredSyncService:
    _load_registered_modules()
    service_class = SyncServiceRegistryMeta._registry.get(target)
    if service_class is None:
        raise KeyError(f"No sync service registered for: {target.value}")
    return service_class.create_default(root=root)


def _load_registered_modules() -> None:
    from claude_sync.apps.common.loader import load_app_service_modules

    load_app_service_modules()
