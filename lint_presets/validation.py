from typing import Iterable

from lint_presets.errors import RuleNotExportedError
from lint_presets.rules.models import RuleCollection
from lint_presets.rules.repository import RulesRepository


def ensure_all_rules_exported(
    collection: RuleCollection, rule_files: Iterable[str]
) -> None:
    """Raise for the first rule definition file the collection does not export."""
    for rule_name in rule_files:
        if not collection.has_rule(rule_name):
            raise RuleNotExportedError(
                rule=rule_name,
                collection=collection.name,
                manifest_path=collection.manifest_path,
            )


def load_verified_collection(repository: RulesRepository) -> RuleCollection:
    collection = repository.load_collection()
    ensure_all_rules_exported(collection, repository.list_rule_files())
    return collection
