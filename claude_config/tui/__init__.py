from claude_config.tui.renderers import ConfigConsoleUI

__all__ = ["ConfigConsoleUI"]
