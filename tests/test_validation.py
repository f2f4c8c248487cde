from pathlib import Path

import pytest

from conftest import PRIMARY_RULES, write_rule_package
from lint_presets.errors import RuleNotExportedError
from lint_presets.rules.models import Rule, RuleCollection
from lint_presets.rules.repository import RulesRepository
from lint_presets.validation import ensure_all_rules_exported, load_verified_collection


def _collection(*names: str) -> RuleCollection:
    return RuleCollection(
        name="eslint-plugin",
        rules={name: Rule(name=name) for name in names},
        rules_dir=Path("/fake/src/rules"),
        manifest_path=Path("/fake/rules.json"),
    )


def test_all_rule_files_exported() -> None:
    ensure_all_rules_exported(_collection("a", "b"), ["a", "b"])


def test_exported_rules_without_files_are_allowed() -> None:
    ensure_all_rules_exported(_collection("a", "b"), ["a"])


def test_missing_export_names_rule_and_collection() -> None:
    with pytest.raises(RuleNotExportedError) as excinfo:
        ensure_all_rules_exported(_collection("a"), ["a", "ghost-rule"])
    assert excinfo.value.rule == "ghost-rule"
    assert excinfo.value.collection == "eslint-plugin"
    assert "Rule ghost-rule is not exported by eslint-plugin" in str(excinfo.value)


def test_load_verified_collection(primary_package: Path) -> None:
    collection = load_verified_collection(RulesRepository(primary_package))
    assert set(collection.rules) == set(PRIMARY_RULES)


def test_load_verified_collection_rejects_unexported_file(tmp_path: Path) -> None:
    package = tmp_path / "eslint-plugin"
    write_rule_package(
        package,
        {"exported": {"meta": {}}},
        rule_files=["exported", "forgotten"],
    )
    with pytest.raises(RuleNotExportedError, match="forgotten"):
        load_verified_collection(RulesRepository(package))
