import sys
import json
from pathlib import Path
from typing import Any, Callable, Optional

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / ".config"))
    monkeypatch.setattr(Path, "home", lambda: tmp_path)


@pytest.fixture
def write_json():
    def _write(path: Path, payload: Any) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload), encoding="utf-8")

    return _write


@pytest.fixture
def claude_home(tmp_path: Path) -> Path:
    return tmp_path / ".claude"


@pytest.fixture
def opencode_root(tmp_path: Path) -> Path:
    return tmp_path / ".config" / "opencode"


@pytest.fixture
def codex_root(tmp_path: Path) -> Path:
    return tmp_path / ".codex"


@pytest.fixture
def make_skill(claude_home: Path) -> Callable[..., Path]:
    def _make(
        name: str,
        content: str = "---\nname: demo\ndescription: Demo skill\n---\nBody\n",
        root: Optional[Path] = None,
    ) -> Path:
        skill_dir = (root or claude_home / "skills") / name
        skill_dir.mkdir(parents=True, exist_ok=True)
        (skill_dir / "SKILL.md").write_text(content, encoding="utf-8")
        return skill_dir

    return _make


@pytest.fixture
def write_settings(claude_home: Path, write_json) -> Callable[[dict], Path]:
    def _write(mcp_servers: dict) -> Path:
        path = claude_home / "settings.json"
        write_json(path, {"model": "opus", "mcpServers": mcp_servers})
        return path

    return _write


@pytest.fixture
def sample_servers() -> dict:
    return {
        "a": {"command": "foo", "args": ["x"]},
        "b": {"url": "http://h"},
    }


@pytest.fixture
def cli_runner(tmp_path: Path) -> CliRunner:
    class HomeCliRunner(CliRunner):
        def invoke(self, cli: Any, args: Any = None, **kwargs: Any):  # type: ignore[override]
            env = dict(kwargs.pop("env", {}) or {})
            env.setdefault("HOME", str(tmp_path))
            env.setdefault("XDG_CONFIG_HOME", str(tmp_path / ".config"))
            kwargs["env"] = env
            return super().invoke(cli, args=args, **kwargs)

    return HomeCliRunner()
