from typing import Final


CONFIG_FILENAME: Final[str] = "lint-presets.yaml"

RULES_DIRNAME: Final[str] = "src/rules"
CONFIGS_DIRNAME: Final[str] = "src/configs"
RULE_FILE_SUFFIX: Final[str] = ".ts"
MANIFEST_FILENAMES: Final[tuple[str, ...]] = (
    "rules.json",
    "rules.yaml",
    "rules.yml",
)

PRIMARY_PACKAGE: Final[str] = "packages/eslint-plugin"
SECONDARY_PACKAGE: Final[str] = "packages/eslint-plugin-template"
OUTPUT_PACKAGE: Final[str] = "packages/angular-eslint"

PRIMARY_PREFIX: Final[str] = "@angular-eslint/"
SECONDARY_PREFIX: Final[str] = "@angular-eslint/template/"

PRIMARY_PARSER: Final[str] = "@typescript-eslint/parser"
SECONDARY_PARSER: Final[str] = "@angular-eslint/template-parser"
PRIMARY_PLUGIN: Final[str] = "@angular-eslint"
SECONDARY_PLUGIN: Final[str] = "@angular-eslint/template"

PRESET_NAME_PREFIX: Final[str] = "angular-eslint/"
ACCESSIBILITY_TAG: Final[str] = "[Accessibility]"

# Kept at warn in ts-recommended until error vs warn can be controlled per rule.
LIFECYCLE_INTERFACE_RULE: Final[str] = "@angular-eslint/use-lifecycle-interface"

AUTOGENERATED_DISCLAIMER: Final[str] = """/**
 * DO NOT EDIT THIS FILE
 *
 * In order to update this config, please run `lint-presets generate`.
 */"""
