"""Optional external formatting of rendered artifacts (e.g. prettier)."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Mapping, Optional, Sequence

from lint_presets.errors import FormatterError
from lint_presets.models import Syntax

PATH_PLACEHOLDER = "{path}"


class OutputFormatter:
    def __init__(
        self,
        commands: Optional[Mapping[Syntax, Sequence[str]]] = None,
        cwd: Optional[Path] = None,
    ) -> None:
        self.commands = dict(commands or {})
        self.cwd = cwd

    def command_for(self, syntax: Syntax, path: Path) -> Optional[list[str]]:
        command = self.commands.get(syntax)
        if not command:
            return None
        return [part.replace(PATH_PLACEHOLDER, str(path)) for part in command]

    def format(self, text: str, syntax: Syntax, path: Path) -> str:
        command = self.command_for(syntax, path)
        if command is None:
            return text
        try:
            result = subprocess.run(
                command,
                input=text,
                capture_output=True,
                text=True,
                cwd=self.cwd,
            )
        except OSError as exc:
            raise FormatterError(path, str(exc)) from exc
        if result.returncode != 0:
            detail = result.stderr.strip() or f"exit code {result.returncode}"
            raise FormatterError(path, detail)
        return result.stdout
