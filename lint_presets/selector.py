"""Fold rule metadata into a rule name -> severity mapping."""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from lint_presets.rules.models import (
    DEFAULT_SEVERITY,
    Rule,
    RulesMapping,
    SelectionPolicy,
    Severity,
    TypeCheckingFilter,
)

RuleReporter = Callable[[str, str, Severity], None]


def is_selected(rule: Rule, policy: SelectionPolicy) -> bool:
    metadata = rule.metadata
    if policy.exclude_deprecated and metadata.deprecated:
        return False
    if (
        policy.type_checking == TypeCheckingFilter.EXCLUDE
        and metadata.requires_type_checking
    ):
        return False
    if (
        policy.type_checking == TypeCheckingFilter.INCLUDE
        and not metadata.requires_type_checking
    ):
        return False
    return True


def severity_for(rule: Rule, policy: SelectionPolicy) -> Severity:
    if policy.error_level is not None:
        return policy.error_level
    if rule.metadata.recommended:
        return Severity.ERROR
    return DEFAULT_SEVERITY


def select_rules(
    rules: Iterable[Rule],
    prefix: str,
    policy: SelectionPolicy,
    reporter: Optional[RuleReporter] = None,
) -> RulesMapping:
    mapping: RulesMapping = {}
    for rule in rules:
        if not is_selected(rule, policy):
            continue
        severity = severity_for(rule, policy)
        if reporter is not None:
            reporter(prefix, rule.name, severity)
        mapping[f"{prefix}{rule.name}"] = severity
    return mapping
