from pathlib import Path


class SyncAppError(Exception):
    """Base user-facing application error."""


class SyncFileError(SyncAppError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class SymlinkConflictError(SyncFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(
            path=path,
            message=(
                "Refusing to overwrite a real directory with a symlink "
                "(remove it manually to let sync manage it)"
            ),
        )


class InvalidConfigSchemaError(SyncFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config schema ({detail})")


class UnknownTargetError(SyncAppError):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Unknown target: {value}. Use 'opencode' or 'codex'.")
