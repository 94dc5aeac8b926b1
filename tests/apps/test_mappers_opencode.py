from claude_sync.apps.opencode.mapper import OpenCodeMCPMapper
from claude_sync.models import MCPServerSpec


def test_opencode_mapper_local_and_remote() -> None:
    mapper = OpenCodeMCPMapper()
    mapped = mapper.from_source(
        {
            "a": MCPServerSpec(command="foo", args=["x"]),
            "b": MCPServerSpec(url="http://h"),
        }
    )

    assert mapped == {
        "a": {"type": "local", "command": ["foo", "x"], "enabled": True},
        "b": {"type": "remote", "url": "http://h", "enabled": True},
    }


def test_opencode_mapper_passes_env_and_headers_verbatim() -> None:
    mapper = OpenCodeMCPMapper()
    env = {"API_KEY": "${API_KEY}", "PORT": 8080}
    headers = {"Authorization": "Bearer t"}
    mapped = mapper.from_source(
        {
            "local": MCPServerSpec(command="uvx", env=env),
            "remote": MCPServerSpec(url="https://example.com/mcp", headers=headers),
        }
    )

    assert mapped["local"]["environment"] == env
    assert mapped["local"]["environment"] is not env
    assert mapped["remote"]["headers"] == headers


def test_opencode_mapper_keeps_empty_env_when_set() -> None:
    mapper = OpenCodeMCPMapper()
    mapped = mapper.from_source({"local": MCPServerSpec(command="uvx", env={})})

    assert mapped["local"]["environment"] == {}


def test_opencode_mapper_command_wins_over_url() -> None:
    mapper = OpenCodeMCPMapper()
    mapped = mapper.from_source(
        {"both": MCPServerSpec(command="run", url="https://example.com")}
    )

    assert mapped["both"]["type"] == "local"
    assert "url" not in mapped["both"]


def test_opencode_mapper_drops_unrepresentable_servers() -> None:
    mapper = OpenCodeMCPMapper()
    mapped = mapper.from_source(
        {
            "empty": MCPServerSpec(),
            "blank-command": MCPServerSpec(command=""),
            "env-only": MCPServerSpec(env={"A": "1"}),
        }
    )

    assert mapped == {}


def test_opencode_mapper_preserves_source_order() -> None:
    mapper = OpenCodeMCPMapper()
    mapped = mapper.from_source(
        {
            "zeta": MCPServerSpec(command="z"),
            "alpha": MCPServerSpec(command="a"),
        }
    )

    assert list(mapped) == ["zeta", "alpha"]
