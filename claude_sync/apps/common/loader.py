_LOADED = False


def load_app_service_modules() -> None:
    global _LOADED
    if _LOADED:
        return

    from claude_sync.apps.codex import service as _codex_service  # noqa: F401
    from claude_sync.apps.opencode import service as _opencode_service  # noqa: F401

    _LOADED = True
