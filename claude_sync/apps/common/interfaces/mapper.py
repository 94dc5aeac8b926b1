from abc import ABC, abstractmethod
from typing import Any

from claude_sync.models import MCPServerSpec


class IAppMCPMapper(ABC):
    @abstractmethod
    def from_source(self, servers: dict[str, MCPServerSpec]) -> dict[str, Any]:
        raise NotImplementedError
