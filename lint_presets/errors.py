from pathlib import Path


class PresetAppError(Exception):
    """Base user-facing application error."""


class RuleNotExportedError(PresetAppError):
    def __init__(self, rule: str, collection: str, manifest_path: Path) -> None:
        self.rule = rule
        self.collection = collection
        self.manifest_path = manifest_path
        super().__init__(
            f"Rule {rule} is not exported by {collection} ({manifest_path})"
        )


class PresetFileError(PresetAppError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class MissingManifestError(PresetFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Missing rule manifest")


class MissingRulesDirectoryError(PresetFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Missing rules directory")


class InvalidManifestFormatError(PresetFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid file format ({detail})")


class InvalidManifestSchemaError(PresetFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid schema ({detail})")


class FormatterError(PresetFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Formatter failed ({detail})")


class ArtifactWriteError(PresetFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Failed to write artifact ({detail})")
