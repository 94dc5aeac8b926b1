from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from claude_sync.utils import read_text_safe, write_private_text


class ISchemaRepository(ABC):
    @abstractmethod
    def load_schema(self) -> dict[str, Any]:
        raise NotImplementedError


class IAppConfigRepository(ABC):
    @property
    @abstractmethod
    def root(self) -> Path:
        raise NotImplementedError

    @property
    @abstractmethod
    def config_path(self) -> Path:
        raise NotImplementedError

    @property
    def skills_dir(self) -> Path:
        return self.root / "skills"

    def config_exists(self) -> bool:
        return self.config_path.exists()

    def read_text(self) -> str:
        return read_text_safe(self.config_path)

    def write_text(self, text: str) -> None:
        write_private_text(self.config_path, text)
