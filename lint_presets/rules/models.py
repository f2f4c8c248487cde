"""Rule data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Union


class Severity(str, Enum):
    OFF = "off"
    WARN = "warn"
    ERROR = "error"


DEFAULT_SEVERITY = Severity.WARN

# A bare level, or a level followed by rule options.
SeveritySetting = Union[Severity, list]
RulesMapping = dict[str, SeveritySetting]


class TypeCheckingFilter(str, Enum):
    ANY = "any"
    INCLUDE = "include"
    EXCLUDE = "exclude"


@dataclass(frozen=True)
class RuleMetadata:
    description: str = ""
    recommended: bool = False
    deprecated: bool = False
    requires_type_checking: bool = False


@dataclass(frozen=True)
class Rule:
    name: str
    metadata: RuleMetadata = field(default_factory=RuleMetadata)


@dataclass(frozen=True)
class RuleCollection:
    """Rules exported by one plugin package, keyed by rule name."""

    name: str
    rules: dict[str, Rule]
    rules_dir: Path
    manifest_path: Path

    def sorted_rules(self) -> list[Rule]:
        return [self.rules[name] for name in sorted(self.rules, key=_rule_sort_key)]

    def has_rule(self, name: str) -> bool:
        return name in self.rules

    @property
    def max_name_length(self) -> int:
        return max((len(name) for name in self.rules), default=0)


@dataclass(frozen=True)
class SelectionPolicy:
    error_level: Optional[Severity] = None
    exclude_deprecated: bool = False
    type_checking: TypeCheckingFilter = TypeCheckingFilter.ANY


def _rule_sort_key(name: str) -> tuple[str, str]:
    return name.casefold(), name
