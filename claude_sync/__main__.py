from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from claude_sync.claude_home import ClaudeHomeRepository, find_secret_env_names
from claude_sync.errors import SyncAppError
from claude_sync.models import SyncTarget
from claude_sync.sync import create_target_service, normalize_target
from claude_sync.tui import SyncConsoleUI


TARGET_VALUES = [target.value for target in SyncTarget]


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
def cli() -> None:
    """Sync Claude Code skills and MCP servers to other agents."""


@cli.command(help="Sync Claude Code config (~/.claude) to OpenCode or Codex.")
@click.argument("target", type=click.Choice(TARGET_VALUES, case_sensitive=False))
@click.option(
    "--claude-home",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Path to Claude home (default: ~/.claude).",
)
@click.option(
    "--output-root",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Target config directory (default: ~/.config/opencode or ~/.codex).",
)
def sync(
    target: str,
    claude_home: Optional[Path],
    output_root: Optional[Path],
) -> None:
    ui = SyncConsoleUI(Console())
    source = ClaudeHomeRepository(claude_home.expanduser() if claude_home else None)

    try:
        config = source.load()
        ui.render_secret_warning(find_secret_env_names(config.mcp_servers))
        ui.render_source(config, str(source.root))

        service = create_target_service(
            normalize_target(target),
            root=output_root.expanduser() if output_root else None,
        )
        report = service.sync(config)
    except (SyncAppError, OSError) as exc:
        raise click.ClickException(f"Fatal: {exc}")

    ui.render_report(report)


def main() -> int:
    try:
        cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.exceptions.Abort:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
