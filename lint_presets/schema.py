import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from lint_presets.errors import InvalidManifestSchemaError

SCHEMAS_DIR = Path(__file__).resolve().parent / "schemas"

MANIFEST_SCHEMA = "manifest.schema.json"
CONFIG_SCHEMA = "config.schema.json"


@lru_cache(maxsize=None)
def load_validator(name: str) -> Draft202012Validator:
    schema = json.loads((SCHEMAS_DIR / name).read_text(encoding="utf-8"))
    return Draft202012Validator(schema)


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


def validate_payload(payload: Any, schema_name: str, path: Path) -> None:
    validator = load_validator(schema_name)
    error = next(iter(validator.iter_errors(payload)), None)
    if error is not None:
        raise InvalidManifestSchemaError(path, format_schema_error(error))
