"""
prompt_toolkit terminal session.

Draws the latest frame and blocks for exactly one key per call to
next_event(). Each wait runs a short-lived Application, so raw mode is
entered and left by prompt_toolkit around every single key press and is
released even when drawing or reading fails. Frames are drawn on stderr so
that stdout carries nothing but the rendered message.
"""

import logging
import sys

from prompt_toolkit import Application
from prompt_toolkit.formatted_text import StyleAndTextTuples
from prompt_toolkit.input import Input
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import (
    FormattedTextControl,
    HorizontalAlign,
    HSplit,
    Layout,
    VerticalAlign,
    VSplit,
    Window,
)
from prompt_toolkit.output import Output, create_output

from commity.config.schema import TUIConfig, TUILayout
from commity.config.theme import STYLE
from commity.ui.frame import TERMINAL_MIN_HEIGHT, build_frame
from commity.ui.protocol import Renderer
from commity.wizard.controllers import InputController, PageInfo, TextController
from commity.wizard.events import (
    CANCEL,
    CONFIRM,
    DELETE_BACK,
    MOVE_DOWN,
    MOVE_LEFT,
    MOVE_RIGHT,
    MOVE_UP,
    Event,
)

logger = logging.getLogger(__name__)

KEY_EVENTS: dict[str, Event] = {
    "up": MOVE_UP,
    "down": MOVE_DOWN,
    "left": MOVE_LEFT,
    "right": MOVE_RIGHT,
    "enter": CONFIRM,
    "escape": CANCEL,
    "c-c": CANCEL,
    "backspace": DELETE_BACK,
}


class TerminalSession(Renderer):
    """Renderer and blocking event source backed by the real terminal."""

    def __init__(
        self,
        tui_config: TUIConfig | None = None,
        input: Input | None = None,
        output: Output | None = None,
    ):
        self.tui_config = tui_config or TUIConfig()
        self._input = input
        self._output = output
        self._fragments: StyleAndTextTuples = []
        self._show_cursor = False
        self._event: Event | None = None

    # --- Renderer ---

    def render(self, page: PageInfo, controller: InputController) -> None:
        self._fragments = build_frame(page, controller, self.tui_config.symbols)
        self._show_cursor = isinstance(controller, TextController)

    # --- Event source ---

    def output(self) -> Output:
        """Where frames are drawn; stdout is left for the rendered message."""
        if self._output is None:
            self._output = create_output(stdout=sys.stderr)
        return self._output

    def window_height(self) -> int:
        """Rows available for a choice list."""
        return max(1, self.output().get_size().rows - TERMINAL_MIN_HEIGHT)

    def next_event(self) -> Event:
        """Show the current frame and block until a mapped key is pressed."""
        self._event = None
        app = self._create_application()
        app.run()

        if self._event is None:
            # The application ended without a key, e.g. input closed
            raise EOFError("Input closed before a key was pressed")
        return self._event

    # --- prompt_toolkit plumbing ---

    def _key_bindings(self) -> KeyBindings:
        kb = KeyBindings()

        def emit(wizard_event: Event):
            def handler(event) -> None:
                self._event = wizard_event
                event.app.exit()

            return handler

        for key, wizard_event in KEY_EVENTS.items():
            kb.add(key)(emit(wizard_event))

        @kb.add(Keys.Any)
        def character(event) -> None:
            if len(event.data) == 1 and event.data.isprintable():
                self._event = Event.character(event.data)
                event.app.exit()

        return kb

    def _container(self):
        layout = self.tui_config.layout
        window = Window(
            FormattedTextControl(lambda: self._fragments, show_cursor=self._show_cursor),
            dont_extend_height=True,
            dont_extend_width=layout == TUILayout.FULLSCREEN_CENTER,
            wrap_lines=False,
        )
        if layout == TUILayout.FULLSCREEN_CENTER:
            return HSplit(
                [VSplit([window], align=HorizontalAlign.CENTER)],
                align=VerticalAlign.CENTER,
            )
        return HSplit([window])

    def _create_application(self) -> Application:
        return Application(
            layout=Layout(self._container()),
            key_bindings=self._key_bindings(),
            style=STYLE,
            full_screen=self.tui_config.layout != TUILayout.INLINE,
            erase_when_done=True,
            input=self._input,
            output=self.output(),
        )
