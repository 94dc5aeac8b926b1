import json
import os
from pathlib import Path
from typing import Any

from claude_sync.constants import PRIVATE_FILE_MODE


def read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def read_json_safe(path: Path) -> tuple[Any | None, str | None]:
    """Read JSON, reporting malformed content instead of raising.

    A missing or empty file yields ``(None, None)``. I/O errors other than a
    missing file propagate.
    """
    try:
        if path.stat().st_size == 0:
            return None, None
        return read_json(path), None
    except FileNotFoundError:
        return None, None
    except ValueError as exc:
        return None, str(exc)


def read_text_safe(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return ""


def write_private_text(path: Path, text: str) -> None:
    """Write ``text`` readable and writable by the owner only."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, PRIVATE_FILE_MODE)
    with os.fdopen(fd, "w", encoding="utf-8") as handle:
        handle.write(text)
    # os.open only applies the mode to newly created files
    os.chmod(path, PRIVATE_FILE_MODE)


def dump_json(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


def compact_home_path(path: str | Path) -> str:
    text = str(path)
    home = str(Path.home())
    if text == home:
        return "~"
    home_prefix = f"{home}/"
    if text.startswith(home_prefix):
        return f"~/{text[len(home_prefix):]}"
    return text


def compact_home_paths_in_text(text: str) -> str:
    home = str(Path.home())
    if text == home:
        return "~"
    return text.replace(f"{home}/", "~/")
