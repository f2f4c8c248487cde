from pathlib import Path
from typing import Any, Dict

import click
from rich.console import Console

from lint_presets.config import load_config
from lint_presets.errors import PresetAppError
from lint_presets.executor import PresetExecutor
from lint_presets.models import GenerationPlan
from lint_presets.planner import PresetPlanner
from lint_presets.tui import PresetConsoleUI


def _build_plan(obj: Dict[str, Any], ui: PresetConsoleUI) -> GenerationPlan:
    verbose = not obj["quiet"]
    try:
        config = load_config(obj["root"])
        planner = PresetPlanner(
            config,
            reporter=ui.render_rule if verbose else None,
            on_job=ui.render_job if verbose else None,
        )
        collections = planner.load_collections()
        ui.rule_name_width = max(
            collection.max_name_length for collection in collections.values()
        )
        return planner.build(collections)
    except PresetAppError as exc:
        raise click.ClickException(f"Fatal: {exc}")


@click.group(
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option(
    "--root",
    type=click.Path(path_type=Path, file_okay=False),
    default=".",
    show_default=True,
    help="Repository root holding the plugin packages.",
)
@click.option("-q", "--quiet", is_flag=True, help="Hide the per-rule severity log.")
@click.pass_context
def cli(ctx: click.Context, root: Path, quiet: bool) -> None:
    """Generate lint preset configs from exported rule metadata."""
    ctx.obj = {"root": root.resolve(), "quiet": quiet}
    if ctx.invoked_subcommand is None:
        ctx.invoke(generate)


@cli.command(help="Regenerate all preset artifacts.")
@click.pass_obj
def generate(obj: Dict[str, Any]) -> None:
    ui = PresetConsoleUI(Console())
    plan_result = _build_plan(obj, ui)
    ui.render_plan(plan_result, mode="generate", root=obj["root"])

    try:
        applied = PresetExecutor().execute(plan_result)
    except PresetAppError as exc:
        raise click.ClickException(f"Generation aborted: {exc}")
    ui.render_apply_result(applied=applied, unchanged=len(plan_result.actions) - applied)


@cli.command(help="Show which preset artifacts would change, without writing.")
@click.pass_obj
def plan(obj: Dict[str, Any]) -> None:
    ui = PresetConsoleUI(Console())
    plan_result = _build_plan(obj, ui)
    ui.render_plan(plan_result, mode="plan", root=obj["root"])


@cli.command(help="Fail when committed preset artifacts are out of date.")
@click.pass_obj
def check(obj: Dict[str, Any]) -> None:
    ui = PresetConsoleUI(Console())
    plan_result = _build_plan(obj, ui)
    ui.render_check_result(plan_result, root=obj["root"])

    if not plan_result.is_in_sync():
        raise click.exceptions.Exit(1)


def main() -> int:
    try:
        cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
