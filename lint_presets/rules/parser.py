"""Parse exported rule manifests into rule models."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from lint_presets.errors import InvalidManifestFormatError, MissingManifestError
from lint_presets.rules.models import Rule, RuleMetadata
from lint_presets.schema import MANIFEST_SCHEMA, validate_payload


def load_manifest(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise MissingManifestError(path)
    text = path.read_text(encoding="utf-8")
    if path.suffix == ".json":
        try:
            payload = json.loads(text) if text.strip() else None
        except json.JSONDecodeError as exc:
            raise InvalidManifestFormatError(path, str(exc)) from exc
    else:
        try:
            payload = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise InvalidManifestFormatError(path, str(exc)) from exc
    if payload is None:
        payload = {}
    validate_payload(payload, MANIFEST_SCHEMA, path)
    return payload


def parse_rule(name: str, raw: dict[str, Any] | None) -> Rule:
    meta = (raw or {}).get("meta") or {}
    docs = meta.get("docs") or {}
    recommended = docs.get("recommended", False)
    metadata = RuleMetadata(
        description=str(docs.get("description", "")),
        recommended=bool(recommended),
        deprecated=bool(meta.get("deprecated", False)),
        requires_type_checking=docs.get("requiresTypeChecking") is True,
    )
    return Rule(name=name, metadata=metadata)


def parse_manifest(path: Path) -> dict[str, Rule]:
    payload = load_manifest(path)
    return {
        name: parse_rule(name, raw) for name, raw in payload["rules"].items()
    }
