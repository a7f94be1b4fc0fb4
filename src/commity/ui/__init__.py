"""
Commity UI - Drawing pages and reading keys.

Usage:
    from commity.ui import TerminalSession

    session = TerminalSession(tui_config)
    navigator = Navigator(config, session, session.next_event, session.window_height())
"""

from commity.ui.protocol import Renderer
from commity.ui.terminal import TerminalSession

__all__ = ["Renderer", "TerminalSession"]
