import sys
import json
from pathlib import Path
from typing import Any

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


def _meta(
    description: str,
    recommended: Any = None,
    deprecated: bool = False,
    requires_type_checking: bool = False,
) -> dict:
    docs: dict[str, Any] = {"description": description}
    if recommended is not None:
        docs["recommended"] = recommended
    if requires_type_checking:
        docs["requiresTypeChecking"] = True
    meta: dict[str, Any] = {"docs": docs}
    if deprecated:
        meta["deprecated"] = True
    return {"meta": meta}


PRIMARY_RULES: dict[str, dict] = {
    "use-lifecycle-interface": _meta(
        "Ensures that classes implement lifecycle interfaces",
        recommended="recommended",
    ),
    "component-class-suffix": _meta(
        "Classes decorated with @Component must have suffix Component",
        recommended="recommended",
    ),
    "no-host-metadata-property": _meta(
        "Disallows usage of the host metadata property",
        recommended="recommended",
        deprecated=True,
    ),
    "no-input-rename": _meta(
        "Ensures that input bindings are not aliased",
        recommended="recommended",
    ),
    "prefer-on-push": _meta("Ensures component's changeDetection is OnPush"),
    "sort-lifecycle-methods": _meta(
        "Ensures lifecycle methods are declared in order of execution",
        recommended="recommended",
        requires_type_checking=True,
    ),
}

SECONDARY_RULES: dict[str, dict] = {
    "alt-text": _meta("[Accessibility] Enforces alternate text for elements"),
    "banana-in-box": _meta(
        "Ensures that the two-way data binding syntax is correct",
        recommended="recommended",
    ),
    "accessibility-label-for": _meta(
        "[Accessibility] Ensures that a label element is associated with a form element",
        deprecated=True,
    ),
    "elements-content": _meta("[Accessibility] Ensures that elements have content"),
    "interactive-supports-focus": _meta(
        "[Accessibility] Ensures that interactive elements are focusable",
        requires_type_checking=True,
    ),
    "no-call-expression": _meta(
        "Disallows calling expressions in templates",
        requires_type_checking=True,
    ),
    "no-negated-async": _meta(
        "Ensures that async pipe results are not negated",
        recommended="recommended",
    ),
}


def write_rule_package(
    package_root: Path, rules: dict[str, dict], rule_files: list[str] | None = None
) -> None:
    package_root.mkdir(parents=True, exist_ok=True)
    (package_root / "rules.json").write_text(
        json.dumps({"rules": rules}, indent=2), encoding="utf-8"
    )
    rules_dir = package_root / "src" / "rules"
    rules_dir.mkdir(parents=True, exist_ok=True)
    for name in rule_files if rule_files is not None else list(rules):
        (rules_dir / f"{name}.ts").write_text(
            f"export const RULE_NAME = '{name}';\n", encoding="utf-8"
        )


@pytest.fixture
def write_json():
    def _write(path: Path, payload: dict) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload), encoding="utf-8")

    return _write


@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
    root = tmp_path / "repo"
    write_rule_package(root / "packages" / "eslint-plugin", PRIMARY_RULES)
    write_rule_package(root / "packages" / "eslint-plugin-template", SECONDARY_RULES)
    return root


@pytest.fixture
def primary_package(repo_root: Path) -> Path:
    return repo_root / "packages" / "eslint-plugin"


@pytest.fixture
def secondary_package(repo_root: Path) -> Path:
    return repo_root / "packages" / "eslint-plugin-template"


@pytest.fixture
def output_configs(repo_root: Path) -> Path:
    return repo_root / "packages" / "angular-eslint" / "src" / "configs"


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()
