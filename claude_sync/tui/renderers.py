from rich.console import Console
from rich.markup import escape

from claude_sync.models import SourceConfig, SyncReport
from claude_sync.tui.enums import UIStyle
from claude_sync.tui.sections import UISection
from claude_sync.tui.tables import ReportTable, SourceTable
from claude_sync.utils import compact_home_path, compact_home_paths_in_text


class SyncConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_secret_warning(self, names: list[str]) -> None:
        if not names:
            return
        self.console.print(
            UISection.note(
                "warning",
                "MCP env vars or headers may include secrets:\n"
                f"{escape(', '.join(names))}\n"
                "These will be copied to the target config. "
                "Review before sharing the config file.",
                style=UIStyle.YELLOW.value,
            )
        )

    def render_source(self, config: SourceConfig, claude_home: str) -> None:
        self.console.print(
            f"Syncing {len(config.skills)} skills, "
            f"{len(config.mcp_servers)} MCP servers..."
        )
        self.console.print(
            UISection.wrap(
                "source",
                SourceTable.summary_block(config, claude_home),
                style=UIStyle.BLUE.value,
            )
        )
        if config.skills:
            self.console.print(
                UISection.wrap(
                    "skills",
                    SourceTable.skills_table(config),
                    style=UIStyle.CYAN.value,
                )
            )

    def render_report(self, report: SyncReport) -> None:
        self.console.print(
            UISection.wrap(
                "sync overview",
                ReportTable.summary_block(report),
                style=UIStyle.BLUE.value,
            )
        )

        if report.actions:
            self.console.print(
                UISection.wrap(
                    "changes",
                    ReportTable.actions_table(report.actions),
                    style=UIStyle.CYAN.value,
                )
            )
        else:
            self.console.print(
                UISection.note("changes", "Nothing to sync.", style=UIStyle.DIM.value)
            )

        if report.skipped:
            skipped_text = "\n".join(
                [f"- {escape(compact_home_paths_in_text(item))}" for item in report.skipped]
            )
            self.console.print(
                UISection.note("skipped", skipped_text, style=UIStyle.YELLOW.value)
            )

        self.console.print(
            f"[{UIStyle.GREEN.value}]✓[/{UIStyle.GREEN.value}] "
            f"Synced to {report.target.value}: {escape(compact_home_path(report.root))}"
        )
