from enum import Enum

from lint_presets.models import ActionStatus
from lint_presets.rules.models import Severity


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    DIM = "dim"
    WHITE = "white"


ACTION_STATUS_STYLE = {
    ActionStatus.CREATE: UIStyle.GREEN.value,
    ActionStatus.UPDATE: UIStyle.CYAN.value,
    ActionStatus.NOOP: UIStyle.DIM.value,
}

SEVERITY_STYLE = {
    Severity.ERROR: UIStyle.RED.value,
    Severity.WARN: UIStyle.YELLOW.value,
    Severity.OFF: UIStyle.DIM.value,
}
