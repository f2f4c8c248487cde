from collections import Counter
from pathlib import Path

from rich.panel import Panel
from rich.table import Column, Table
from rich.text import Text

from lint_presets.models import Action, GenerationPlan
from lint_presets.rules.models import Severity
from lint_presets.tui.enums import ACTION_STATUS_STYLE, SEVERITY_STYLE, UIStyle
from lint_presets.utils import relative_to_root


class RuleLine:
    @staticmethod
    def render(prefix: str, name: str, severity: Severity, width: int) -> Text:
        line = Text()
        line.append(prefix, style=UIStyle.DIM.value)
        line.append(name.ljust(width))
        line.append(" = ")
        line.append(
            severity.value, style=SEVERITY_STYLE.get(severity, UIStyle.WHITE.value)
        )
        return line


class PlanTable:
    @staticmethod
    def summary_block(plan: GenerationPlan, mode: str):
        counts = Counter(action.status.value for action in plan.actions)
        chips = [f"{key}={value}" for key, value in sorted(counts.items()) if value > 0]
        if not chips:
            chips = ["none"]

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Mode", mode)
        table.add_row("Artifacts", str(len(plan.actions)))
        table.add_row("Statuses", "  ".join(chips))
        return table

    @staticmethod
    def actions_table(actions: list[Action], root: Path) -> Table:
        table = Table(
            Column(header="Preset", width=24),
            Column(header="Status", width=8),
            Column(header="Target", overflow="ellipsis"),
            Column(header="Detail", overflow="ellipsis", max_width=24),
            expand=True,
            header_style="bold",
        )

        for action in actions:
            status_value = action.status.value
            status_style = ACTION_STATUS_STYLE.get(action.status, UIStyle.WHITE.value)
            status_text = f"[{status_style}]{status_value}[/{status_style}]"
            table.add_row(
                action.job or "",
                status_text,
                relative_to_root(action.path, root),
                action.detail,
            )
        return table


class ApplyTable:
    @staticmethod
    def stats_panel(applied: int, unchanged: int) -> Panel:
        stats: dict[str, str] = {
            "written": str(applied),
            "unchanged": str(unchanged),
        }
        table = Table(show_header=False, box=None)
        for key, value in stats.items():
            table.add_row(f"[bold]{key}[/bold]", value)
        return Panel(table, title="generate", border_style=UIStyle.GREEN.value)
