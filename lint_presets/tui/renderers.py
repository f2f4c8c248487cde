from pathlib import Path
from typing import Optional

from rich.console import Console

from lint_presets.jobs import PresetJob
from lint_presets.models import GenerationPlan
from lint_presets.rules.models import Severity
from lint_presets.tui.enums import UIStyle
from lint_presets.tui.sections import UISection
from lint_presets.tui.tables import ApplyTable, PlanTable, RuleLine
from lint_presets.utils import relative_to_root


class PresetConsoleUI:
    def __init__(
        self, console: Optional[Console] = None, rule_name_width: int = 0
    ) -> None:
        self.console = console or Console()
        self.rule_name_width = rule_name_width

    def render_job(self, job: PresetJob) -> None:
        self.console.print()
        self.console.print(UISection.heading(job.title))

    def render_rule(self, prefix: str, name: str, severity: Severity) -> None:
        self.console.print(
            RuleLine.render(prefix, name, severity, self.rule_name_width)
        )

    def render_plan(self, plan: GenerationPlan, mode: str, root: Path) -> None:
        self.console.print()
        self.console.print(
            UISection.wrap(
                "plan overview",
                PlanTable.summary_block(plan, mode=mode),
                style=UIStyle.BLUE.value,
            )
        )
        if plan.actions:
            self.console.print(
                UISection.wrap(
                    "preset artifacts",
                    PlanTable.actions_table(plan.actions, root),
                    style=UIStyle.CYAN.value,
                )
            )
        else:
            self.console.print(
                UISection.note("artifacts", "No presets planned.", style=UIStyle.DIM.value)
            )

    def render_apply_result(self, applied: int, unchanged: int) -> None:
        self.console.print(ApplyTable.stats_panel(applied=applied, unchanged=unchanged))

    def render_check_result(self, plan: GenerationPlan, root: Path) -> None:
        pending = plan.pending()
        if not pending:
            self.console.print(
                UISection.note(
                    "check",
                    "All preset artifacts are up to date.",
                    style=UIStyle.GREEN.value,
                )
            )
            return
        stale_text = "\n".join(
            f"- {relative_to_root(action.path, root)} ({action.status.value})"
            for action in pending
        )
        self.console.print(
            UISection.note(
                "out of date",
                f"{stale_text}\n\nRun: lint-presets generate",
                style=UIStyle.RED.value,
            )
        )
