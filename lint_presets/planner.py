from pathlib import Path
from typing import Callable, Optional

from lint_presets.compilers import (
    IPresetCompiler,
    JsonPresetCompiler,
    ModulePresetCompiler,
)
from lint_presets.config import PresetConfig
from lint_presets.formatting import OutputFormatter
from lint_presets.jobs import CollectionKey, PresetJob, default_jobs
from lint_presets.models import Action, ActionStatus, GenerationPlan, Preset
from lint_presets.rules.models import RuleCollection
from lint_presets.selector import RuleReporter
from lint_presets.utils import read_text_safe
from lint_presets.validation import load_verified_collection

JobCallback = Callable[[PresetJob], None]


class PresetPlanner:
    def __init__(
        self,
        config: PresetConfig,
        formatter: Optional[OutputFormatter] = None,
        jobs: Optional[list[PresetJob]] = None,
        reporter: Optional[RuleReporter] = None,
        on_job: Optional[JobCallback] = None,
    ) -> None:
        self.config = config
        self.formatter = formatter or OutputFormatter(config.formatter, cwd=config.root)
        self.jobs = jobs if jobs is not None else default_jobs()
        self.reporter = reporter
        self.on_job = on_job
        self.json_compiler = JsonPresetCompiler()
        self.module_compiler = ModulePresetCompiler()

        self.actions: list[Action] = []
        self.rule_counts: dict[str, int] = {}

    def load_collections(self) -> dict[CollectionKey, RuleCollection]:
        # Both collections are verified before any job runs.
        return {
            CollectionKey.PRIMARY: load_verified_collection(
                self.config.repository(self.config.primary)
            ),
            CollectionKey.SECONDARY: load_verified_collection(
                self.config.repository(self.config.secondary)
            ),
        }

    def build(
        self, collections: Optional[dict[CollectionKey, RuleCollection]] = None
    ) -> GenerationPlan:
        if collections is None:
            collections = self.load_collections()
        self.actions = []
        self.rule_counts = {}
        for job in self.jobs:
            self._plan_job(job, collections[job.collection])
        return GenerationPlan(actions=self.actions, rule_counts=self.rule_counts)

    def json_path(self, job: PresetJob) -> Path:
        collection = (
            self.config.primary
            if job.collection == CollectionKey.PRIMARY
            else self.config.secondary
        )
        return self.config.configs_dir(collection) / job.json_filename

    def module_path(self, job: PresetJob) -> Path:
        return self.config.output_configs_dir / job.module_filename

    def _plan_job(self, job: PresetJob, collection: RuleCollection) -> None:
        if self.on_job is not None:
            self.on_job(job)
        rules = job.build_rules(collection, reporter=self.reporter)
        self.rule_counts[job.name] = len(rules)
        preset = job.build_preset(rules)
        self.actions.append(
            self._plan_artifact(job, preset, self.json_compiler, self.json_path(job))
        )
        self.actions.append(
            self._plan_artifact(
                job, preset, self.module_compiler, self.module_path(job)
            )
        )

    def _plan_artifact(
        self,
        job: PresetJob,
        preset: Preset,
        compiler: IPresetCompiler,
        path: Path,
    ) -> Action:
        content = self.formatter.format(compiler.compile(preset), compiler.syntax, path)
        existing = read_text_safe(path)
        if existing == content:
            return Action(
                compiler.action_kind,
                path,
                ActionStatus.NOOP,
                "already up to date",
                payload=content,
                job=job.name,
            )
        status = ActionStatus.CREATE if existing is None else ActionStatus.UPDATE
        return Action(
            compiler.action_kind,
            path,
            status,
            f"{len(preset.rules)} rules",
            payload=content,
            job=job.name,
        )


def build_plan(config: PresetConfig, **kwargs) -> GenerationPlan:
    return PresetPlanner(config, **kwargs).build()
