from typing import Optional, Protocol

from lint_presets.errors import ArtifactWriteError
from lint_presets.models import Action, ActionKind, ActionStatus, GenerationPlan
from lint_presets.utils import write_text


class ActionHandler(Protocol):
    def handle(self, action: Action) -> bool: ...


class WriteArtifactHandler:
    def handle(self, action: Action) -> bool:
        if action.status == ActionStatus.NOOP:
            return False
        if not isinstance(action.payload, str):
            raise ArtifactWriteError(action.path, "missing rendered payload")
        try:
            write_text(action.path, action.payload)
        except OSError as exc:
            raise ArtifactWriteError(action.path, str(exc)) from exc
        return True


class PresetExecutor:
    """Write planned artifacts in order, stopping at the first failure."""

    def __init__(self, handlers: Optional[dict[ActionKind, ActionHandler]] = None) -> None:
        writer = WriteArtifactHandler()
        self.handlers: dict[ActionKind, ActionHandler] = handlers or {
            ActionKind.WRITE_JSON: writer,
            ActionKind.WRITE_TEXT: writer,
        }

    def execute(self, plan: GenerationPlan) -> int:
        applied = 0
        for action in plan.actions:
            handler = self.handlers.get(action.kind)
            if handler is None:
                raise ArtifactWriteError(
                    action.path, f"unknown action kind {action.kind.value}"
                )
            if handler.handle(action):
                applied += 1
        return applied


def execute_plan(plan: GenerationPlan) -> int:
    return PresetExecutor().execute(plan)
