"""Tests for rule manifest parsing."""

import json
from pathlib import Path

import pytest

from lint_presets.errors import (
    InvalidManifestFormatError,
    InvalidManifestSchemaError,
    MissingManifestError,
)
from lint_presets.rules.parser import load_manifest, parse_manifest, parse_rule


def test_parse_rule_full_metadata() -> None:
    rule = parse_rule(
        "no-call-expression",
        {
            "meta": {
                "deprecated": True,
                "docs": {
                    "description": "Disallows calling expressions",
                    "recommended": "recommended",
                    "requiresTypeChecking": True,
                },
            }
        },
    )
    assert rule.name == "no-call-expression"
    assert rule.metadata.description == "Disallows calling expressions"
    assert rule.metadata.recommended is True
    assert rule.metadata.deprecated is True
    assert rule.metadata.requires_type_checking is True


def test_parse_rule_absent_flags_default_to_false() -> None:
    rule = parse_rule("bare", {"meta": {}})
    assert rule.metadata.description == ""
    assert rule.metadata.recommended is False
    assert rule.metadata.deprecated is False
    assert rule.metadata.requires_type_checking is False


def test_parse_rule_without_meta() -> None:
    rule = parse_rule("bare", None)
    assert rule.metadata.recommended is False


def test_parse_rule_empty_recommended_string_is_not_recommended() -> None:
    rule = parse_rule("r", {"meta": {"docs": {"recommended": ""}}})
    assert rule.metadata.recommended is False


def test_parse_rule_boolean_recommended() -> None:
    rule = parse_rule("r", {"meta": {"docs": {"recommended": True}}})
    assert rule.metadata.recommended is True


def test_parse_manifest_json(tmp_path: Path, write_json) -> None:
    path = tmp_path / "rules.json"
    write_json(
        path,
        {
            "rules": {
                "alpha": {"meta": {"docs": {"description": "Alpha"}}},
                "beta": {"meta": {"deprecated": True}},
            }
        },
    )
    rules = parse_manifest(path)
    assert list(rules) == ["alpha", "beta"]
    assert rules["alpha"].metadata.description == "Alpha"
    assert rules["beta"].metadata.deprecated is True


def test_parse_manifest_yaml(tmp_path: Path) -> None:
    path = tmp_path / "rules.yaml"
    path.write_text(
        "rules:\n"
        "  alt-text:\n"
        "    meta:\n"
        "      docs:\n"
        "        description: '[Accessibility] Alt text'\n"
        "        recommended: recommended\n",
        encoding="utf-8",
    )
    rules = parse_manifest(path)
    assert rules["alt-text"].metadata.recommended is True
    assert rules["alt-text"].metadata.description.startswith("[Accessibility]")


def test_load_manifest_missing(tmp_path: Path) -> None:
    with pytest.raises(MissingManifestError):
        load_manifest(tmp_path / "rules.json")


def test_load_manifest_invalid_format(tmp_path: Path) -> None:
    path = tmp_path / "rules.yaml"
    path.write_text("rules: [unclosed\n", encoding="utf-8")
    with pytest.raises(InvalidManifestFormatError):
        load_manifest(path)


def test_load_manifest_schema_error(tmp_path: Path, write_json) -> None:
    path = tmp_path / "rules.json"
    write_json(path, {"rules": {"alpha": {"meta": {"deprecated": "yes"}}}})
    with pytest.raises(InvalidManifestSchemaError) as excinfo:
        load_manifest(path)
    assert "rules.alpha.meta.deprecated" in str(excinfo.value)


def test_load_manifest_requires_rules_key(tmp_path: Path) -> None:
    path = tmp_path / "rules.json"
    path.write_text("", encoding="utf-8")
    with pytest.raises(InvalidManifestSchemaError):
        load_manifest(path)


def test_parse_manifest_tab_indented_json(tmp_path: Path) -> None:
    path = tmp_path / "rules.json"
    payload = {
        "rules": {
            "no-input-rename": {
                "meta": {"docs": {"description": "No aliases", "recommended": True}}
            }
        }
    }
    path.write_text(json.dumps(payload, indent="\t"), encoding="utf-8")
    rules = parse_manifest(path)
    assert rules["no-input-rename"].metadata.recommended is True
    assert rules["no-input-rename"].metadata.description == "No aliases"


def test_load_manifest_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "rules.json"
    path.write_text('{"rules": {', encoding="utf-8")
    with pytest.raises(InvalidManifestFormatError):
        load_manifest(path)
