"""The fixed preset jobs: which rules go into which preset, at which severity."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from lint_presets.constants import (
    ACCESSIBILITY_TAG,
    LIFECYCLE_INTERFACE_RULE,
    PRESET_NAME_PREFIX,
    PRIMARY_PARSER,
    PRIMARY_PLUGIN,
    PRIMARY_PREFIX,
    SECONDARY_PARSER,
    SECONDARY_PLUGIN,
    SECONDARY_PREFIX,
)
from lint_presets.models import Preset
from lint_presets.rules.models import (
    Rule,
    RuleCollection,
    RulesMapping,
    SelectionPolicy,
    Severity,
    TypeCheckingFilter,
)
from lint_presets.selector import RuleReporter, select_rules

RuleFilter = Callable[[Rule], bool]


class CollectionKey(str, Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"


def any_rule(rule: Rule) -> bool:
    return True


def is_recommended(rule: Rule) -> bool:
    return rule.metadata.recommended


def is_accessibility_rule(rule: Rule) -> bool:
    return rule.metadata.description.startswith(ACCESSIBILITY_TAG)


@dataclass(frozen=True)
class PresetJob:
    name: str
    title: str
    collection: CollectionKey
    prefix: str
    policy: SelectionPolicy
    json_filename: str
    parser: str
    plugins: tuple[str, ...]
    base_factory: str
    base_import: str
    rule_filter: RuleFilter = any_rule
    overrides: dict[str, Severity] = field(default_factory=dict)

    @property
    def module_filename(self) -> str:
        return f"{self.name}.ts"

    @property
    def preset_name(self) -> str:
        return f"{PRESET_NAME_PREFIX}{self.name}"

    def build_rules(
        self, collection: RuleCollection, reporter: Optional[RuleReporter] = None
    ) -> RulesMapping:
        candidates = [rule for rule in collection.sorted_rules() if self.rule_filter(rule)]
        rules = select_rules(candidates, self.prefix, self.policy, reporter=reporter)
        rules.update(self.overrides)
        return rules

    def build_preset(self, rules: RulesMapping) -> Preset:
        return Preset(
            name=self.preset_name,
            parser=self.parser,
            plugins=self.plugins,
            base_factory=self.base_factory,
            base_import=self.base_import,
            rules=rules,
        )


ALL_RULES_POLICY = SelectionPolicy(error_level=Severity.ERROR, exclude_deprecated=True)
RECOMMENDED_POLICY = SelectionPolicy(type_checking=TypeCheckingFilter.EXCLUDE)
ACCESSIBILITY_POLICY = SelectionPolicy(
    error_level=Severity.ERROR, type_checking=TypeCheckingFilter.EXCLUDE
)

_PRIMARY = dict(
    collection=CollectionKey.PRIMARY,
    prefix=PRIMARY_PREFIX,
    parser=PRIMARY_PARSER,
    plugins=(PRIMARY_PLUGIN,),
    base_factory="tsBaseConfig",
    base_import="./ts-base",
)
_SECONDARY = dict(
    collection=CollectionKey.SECONDARY,
    prefix=SECONDARY_PREFIX,
    parser=SECONDARY_PARSER,
    plugins=(SECONDARY_PLUGIN,),
    base_factory="templateBaseConfig",
    base_import="./template-base",
)


def default_jobs() -> list[PresetJob]:
    return [
        PresetJob(
            name="ts-all",
            title="TS => All Rules",
            policy=ALL_RULES_POLICY,
            json_filename="all.json",
            **_PRIMARY,
        ),
        PresetJob(
            name="ts-recommended",
            title="TS => Recommended Rules",
            policy=RECOMMENDED_POLICY,
            json_filename="recommended.json",
            rule_filter=is_recommended,
            overrides={LIFECYCLE_INTERFACE_RULE: Severity.WARN},
            **_PRIMARY,
        ),
        PresetJob(
            name="template-all",
            title="Template => All Rules",
            policy=ALL_RULES_POLICY,
            json_filename="all.json",
            **_SECONDARY,
        ),
        PresetJob(
            name="template-recommended",
            title="Template => Recommended",
            policy=RECOMMENDED_POLICY,
            json_filename="recommended.json",
            rule_filter=is_recommended,
            **_SECONDARY,
        ),
        PresetJob(
            name="template-accessibility",
            title="Template => Accessibility",
            policy=ACCESSIBILITY_POLICY,
            json_filename="accessibility.json",
            rule_filter=is_accessibility_rule,
            **_SECONDARY,
        ),
    ]
