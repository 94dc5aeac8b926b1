import json
import stat
from pathlib import Path

from claude_sync.utils import (
    compact_home_path,
    compact_home_paths_in_text,
    dump_json,
    read_json_safe,
    read_text_safe,
    write_private_text,
)


# --- read_json_safe ---


def test_read_json_safe_file_missing(tmp_path: Path) -> None:
    assert read_json_safe(tmp_path / "missing.json") == (None, None)


def test_read_json_safe_file_empty(tmp_path: Path) -> None:
    path = tmp_path / "empty.json"
    path.write_text("", encoding="utf-8")

    assert read_json_safe(path) == (None, None)


def test_read_json_safe_valid_json(tmp_path: Path) -> None:
    path = tmp_path / "valid.json"
    path.write_text(json.dumps({"key": "value"}), encoding="utf-8")

    assert read_json_safe(path) == ({"key": "value"}, None)


def test_read_json_safe_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "invalid.json"
    path.write_text("{bad json", encoding="utf-8")

    result, error = read_json_safe(path)

    assert result is None
    assert isinstance(error, str)


# --- text helpers ---


def test_read_text_safe_missing(tmp_path: Path) -> None:
    assert read_text_safe(tmp_path / "nope.toml") == ""


def test_write_private_text_creates_parents_with_owner_only_mode(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "dir" / "config.toml"

    write_private_text(path, "a = 1\n")

    assert path.read_text(encoding="utf-8") == "a = 1\n"
    assert stat.S_IMODE(path.stat().st_mode) == 0o600


def test_write_private_text_truncates_existing(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("a much longer previous content\n", encoding="utf-8")

    write_private_text(path, "short\n")

    assert path.read_text(encoding="utf-8") == "short\n"


def test_dump_json_keeps_unicode_and_trailing_newline() -> None:
    assert dump_json({"name": "café"}) == '{\n  "name": "café"\n}\n'


# --- compact_home_path ---


def test_compact_home_path(tmp_path: Path) -> None:
    assert compact_home_path(tmp_path) == "~"
    assert compact_home_path(tmp_path / ".codex") == "~/.codex"
    assert compact_home_path("/etc/hosts") == "/etc/hosts"


def test_compact_home_paths_in_text(tmp_path: Path) -> None:
    text = f"Existing {tmp_path}/.config/opencode/opencode.json ignored"

    assert compact_home_paths_in_text(text) == (
        "Existing ~/.config/opencode/opencode.json ignored"
    )
