from rich.markup import escape
from rich.table import Column, Table

from claude_sync.models import Action, ActionStatus, SourceConfig, SyncReport
from claude_sync.skills.parser import read_skill_metadata
from claude_sync.tui.enums import ACTION_STATUS_STYLE, UIStyle
from claude_sync.utils import compact_home_path


class SourceTable:
    @staticmethod
    def summary_block(config: SourceConfig, claude_home: str):
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Source", escape(compact_home_path(claude_home)))
        table.add_row("Skills", str(len(config.skills)))
        table.add_row("MCP servers", str(len(config.mcp_servers)))
        return table

    @staticmethod
    def skills_table(config: SourceConfig) -> Table:
        table = Table(
            Column(header="Skill", overflow="fold", max_width=32),
            Column(header="Description", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for skill in config.skills:
            metadata = read_skill_metadata(skill)
            table.add_row(escape(skill.name), escape(metadata.description))
        return table


class ReportTable:
    @staticmethod
    def summary_block(report: SyncReport):
        counts = report.summary()
        chips = [
            f"{status.value}={counts[status.value]}"
            for status in ActionStatus
            if counts[status.value] > 0
        ]
        if not chips:
            chips = ["none"]

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Target", report.target.value)
        table.add_row("Root", escape(compact_home_path(report.root)))
        table.add_row("Actions", str(len(report.actions)))
        table.add_row("Statuses", "  ".join(chips))
        return table

    @staticmethod
    def actions_table(actions: list[Action]) -> Table:
        table = Table(
            Column(header="Type", width=10),
            Column(header="Status", width=8),
            Column(header="Target", overflow="ellipsis", max_width=58),
            Column(header="Source", overflow="ellipsis", max_width=42),
            Column(header="Reason", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )

        for action in actions:
            source = compact_home_path(action.source) if action.source is not None else ""
            status_style = ACTION_STATUS_STYLE.get(action.status, UIStyle.WHITE.value)
            status_text = f"[{status_style}]{action.status.value}[/{status_style}]"
            table.add_row(
                action.kind.value,
                status_text,
                escape(compact_home_path(action.path)),
                escape(source),
                action.detail,
            )
        return table
