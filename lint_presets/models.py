from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from lint_presets.rules.models import RulesMapping


class ActionKind(str, Enum):
    WRITE_JSON = "write_json"
    WRITE_TEXT = "write_text"


class ActionStatus(str, Enum):
    NOOP = "noop"
    CREATE = "create"
    UPDATE = "update"


class Syntax(str, Enum):
    JSON = "json"
    TYPESCRIPT = "typescript"


@dataclass(frozen=True)
class Preset:
    name: str
    parser: str
    plugins: tuple[str, ...]
    base_factory: str
    base_import: str
    rules: RulesMapping


@dataclass
class Action:
    kind: ActionKind
    path: Path
    status: ActionStatus
    detail: str
    payload: Optional[str] = None
    job: Optional[str] = None


@dataclass
class GenerationPlan:
    actions: list[Action]
    rule_counts: dict[str, int]

    def summary(self) -> dict[str, int]:
        counts = {status.value: 0 for status in ActionStatus}
        for action in self.actions:
            counts[action.status.value] += 1
        counts["actions"] = len(self.actions)
        return counts

    def pending(self) -> list[Action]:
        return [action for action in self.actions if action.status != ActionStatus.NOOP]

    def is_in_sync(self) -> bool:
        return not self.pending()
