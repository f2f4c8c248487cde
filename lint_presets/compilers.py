"""Preset compilers: render a rules mapping into JSON and TypeScript artifacts."""

from __future__ import annotations

import json
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any

from lint_presets.constants import AUTOGENERATED_DISCLAIMER
from lint_presets.models import ActionKind, Preset, Syntax
from lint_presets.rules.models import RulesMapping, SeveritySetting

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_INDENT = "  "

MODULE_TEMPLATE = """{disclaimer}

import type {{ TSESLint }} from '@typescript-eslint/utils';

import {base_factory} from '{base_import}';

export default (
  plugin: TSESLint.FlatConfig.Plugin,
  parser: TSESLint.FlatConfig.Parser,
): TSESLint.FlatConfig.ConfigArray => {config_array};
"""


@dataclass(frozen=True)
class FactoryCall:
    """Reference to another config factory, rendered as a call expression."""

    name: str
    args: tuple[str, ...] = ()


def plain_setting(setting: SeveritySetting) -> Any:
    if isinstance(setting, Enum):
        return setting.value
    if isinstance(setting, list):
        return [plain_setting(item) for item in setting]
    return setting


def plain_rules(rules: RulesMapping) -> dict[str, Any]:
    return {name: plain_setting(setting) for name, setting in rules.items()}


def _ts_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace("'", "\\'").replace("\n", "\\n")
    return f"'{escaped}'"


def _ts_key(key: str) -> str:
    return key if _IDENTIFIER_RE.match(key) else _ts_string(key)


def render_ts_value(value: Any, level: int = 0) -> str:
    """Serialize plain data to a TypeScript expression, prettier style."""
    indent = _INDENT * level
    inner = _INDENT * (level + 1)
    if isinstance(value, FactoryCall):
        return f"{value.name}({', '.join(value.args)})"
    if isinstance(value, Enum):
        return render_ts_value(value.value, level)
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        return _ts_string(value)
    if isinstance(value, dict):
        if not value:
            return "{}"
        lines = [
            f"{inner}{_ts_key(str(key))}: {render_ts_value(item, level + 1)},"
            for key, item in value.items()
        ]
        return "{\n" + "\n".join(lines) + f"\n{indent}}}"
    if isinstance(value, (list, tuple)):
        if not value:
            return "[]"
        lines = [f"{inner}{render_ts_value(item, level + 1)}," for item in value]
        return "[\n" + "\n".join(lines) + f"\n{indent}]"
    raise TypeError(f"Cannot render {type(value).__name__} as TypeScript")


class IPresetCompiler(ABC):
    syntax: Syntax
    action_kind: ActionKind

    @abstractmethod
    def compile(self, preset: Preset) -> str:
        """Return the unformatted artifact text for the preset."""


class JsonPresetCompiler(IPresetCompiler):
    """Flat preset: parser, plugin list and rules."""

    syntax = Syntax.JSON
    action_kind = ActionKind.WRITE_JSON

    def compile(self, preset: Preset) -> str:
        payload = {
            "parser": preset.parser,
            "plugins": list(preset.plugins),
            "rules": plain_rules(preset.rules),
        }
        return json.dumps(payload, indent=2) + "\n"


class ModulePresetCompiler(IPresetCompiler):
    """Flat config factory extending the base preset with the rules mapping."""

    syntax = Syntax.TYPESCRIPT
    action_kind = ActionKind.WRITE_TEXT

    def compile(self, preset: Preset) -> str:
        config_array = [
            FactoryCall(preset.base_factory, ("plugin", "parser")),
            {"name": preset.name, "rules": plain_rules(preset.rules)},
        ]
        return MODULE_TEMPLATE.format(
            disclaimer=AUTOGENERATED_DISCLAIMER,
            base_factory=preset.base_factory,
            base_import=preset.base_import,
            config_array=render_ts_value(config_array),
        )
