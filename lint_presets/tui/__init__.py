from lint_presets.tui.renderers import PresetConsoleUI

__all__ = ["PresetConsoleUI"]
