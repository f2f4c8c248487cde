"""Repository layout and formatter settings, optionally read from lint-presets.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from lint_presets.constants import (
    CONFIG_FILENAME,
    CONFIGS_DIRNAME,
    OUTPUT_PACKAGE,
    PRIMARY_PACKAGE,
    SECONDARY_PACKAGE,
)
from lint_presets.errors import InvalidManifestFormatError
from lint_presets.models import Syntax
from lint_presets.rules.repository import RulesRepository
from lint_presets.schema import CONFIG_SCHEMA, validate_payload


@dataclass(frozen=True)
class CollectionConfig:
    package: str
    manifest: Optional[str] = None
    rules_dir: Optional[str] = None


@dataclass(frozen=True)
class PresetConfig:
    root: Path
    primary: CollectionConfig = CollectionConfig(PRIMARY_PACKAGE)
    secondary: CollectionConfig = CollectionConfig(SECONDARY_PACKAGE)
    output_package: str = OUTPUT_PACKAGE
    formatter: dict[Syntax, list[str]] = field(default_factory=dict)

    def package_root(self, collection: CollectionConfig) -> Path:
        return self.root / collection.package

    def configs_dir(self, collection: CollectionConfig) -> Path:
        return self.package_root(collection) / CONFIGS_DIRNAME

    @property
    def output_configs_dir(self) -> Path:
        return self.root / self.output_package / CONFIGS_DIRNAME

    def repository(self, collection: CollectionConfig) -> RulesRepository:
        return RulesRepository(
            self.package_root(collection),
            name=Path(collection.package).name,
            manifest=collection.manifest,
            rules_dir=collection.rules_dir,
        )


def _collection_from(raw: Optional[dict[str, Any]], default: str) -> CollectionConfig:
    raw = raw or {}
    return CollectionConfig(
        package=raw.get("package", default),
        manifest=raw.get("manifest"),
        rules_dir=raw.get("rules_dir"),
    )


def load_config(root: Path) -> PresetConfig:
    path = root / CONFIG_FILENAME
    if not path.exists():
        return PresetConfig(root=root)
    try:
        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise InvalidManifestFormatError(path, str(exc)) from exc
    if payload is None:
        payload = {}
    validate_payload(payload, CONFIG_SCHEMA, path)

    collections = payload.get("collections", {})
    formatter = {
        Syntax(syntax): list(command)
        for syntax, command in payload.get("formatter", {}).items()
    }
    return PresetConfig(
        root=root,
        primary=_collection_from(collections.get("primary"), PRIMARY_PACKAGE),
        secondary=_collection_from(collections.get("secondary"), SECONDARY_PACKAGE),
        output_package=payload.get("output_package", OUTPUT_PACKAGE),
        formatter=formatter,
    )
