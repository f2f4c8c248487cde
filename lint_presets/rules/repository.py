"""Repository for a plugin package's exported rules and rule definition files."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from lint_presets.constants import MANIFEST_FILENAMES, RULE_FILE_SUFFIX, RULES_DIRNAME
from lint_presets.errors import MissingRulesDirectoryError
from lint_presets.rules.models import RuleCollection
from lint_presets.rules.parser import parse_manifest


class RulesRepository:
    def __init__(
        self,
        package_root: Path,
        name: Optional[str] = None,
        manifest: Optional[str] = None,
        rules_dir: Optional[str] = None,
    ) -> None:
        self._package_root = package_root
        self._name = name or package_root.name
        self._manifest = manifest
        self._rules_dir = package_root / (rules_dir or RULES_DIRNAME)

    @property
    def name(self) -> str:
        return self._name

    @property
    def rules_dir(self) -> Path:
        return self._rules_dir

    @property
    def manifest_path(self) -> Path:
        if self._manifest is not None:
            return self._package_root / self._manifest
        for filename in MANIFEST_FILENAMES:
            candidate = self._package_root / filename
            if candidate.exists():
                return candidate
        return self._package_root / MANIFEST_FILENAMES[0]

    def list_rule_files(self) -> list[str]:
        if not self._rules_dir.is_dir():
            raise MissingRulesDirectoryError(self._rules_dir)
        names: list[str] = []
        for child in sorted(self._rules_dir.iterdir()):
            if child.name.startswith("."):
                continue
            names.append(child.name.removesuffix(RULE_FILE_SUFFIX))
        return names

    def load_collection(self) -> RuleCollection:
        manifest_path = self.manifest_path
        return RuleCollection(
            name=self._name,
            rules=parse_manifest(manifest_path),
            rules_dir=self._rules_dir,
            manifest_path=manifest_path,
        )
