"""
Input controllers for the three entry kinds.

A controller owns its entry for the duration of one page. It turns
navigation events into edits of a local buffer/selection and only writes
the entry's value when the page is accepted.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from commity.config.schema import BooleanEntry, ChoiceEntry, TextEntry
from commity.wizard.events import Event, EventKind, EventSource
from commity.wizard.viewport import Viewport

if TYPE_CHECKING:
    from commity.ui.protocol import Renderer

logger = logging.getLogger(__name__)


class Outcome(Enum):
    """Terminal result of one page."""

    ACCEPT = "accept"
    BACK = "back"
    CANCEL = "cancel"


@dataclass(frozen=True)
class PageInfo:
    """What the renderer needs to know about the page besides the body."""

    label: str
    description: str
    page: int
    pages: int

    @property
    def is_first(self) -> bool:
        return self.page == 1

    @property
    def is_last(self) -> bool:
        return self.page == self.pages


class InputController(ABC):
    """Shared event handling: cancel, back and accept."""

    def __init__(self, entry: TextEntry | ChoiceEntry | BooleanEntry):
        self.entry = entry

    def handle(self, event: Event) -> Outcome | None:
        """
        Apply one event.

        Returns:
            The page outcome, or None while the page stays open.
        """
        if event.kind is EventKind.CANCEL:
            return Outcome.CANCEL
        if event.kind is EventKind.MOVE_LEFT:
            return Outcome.BACK
        if event.kind in (EventKind.CONFIRM, EventKind.MOVE_RIGHT):
            self.commit()
            return Outcome.ACCEPT

        self.update(event)
        return None

    @abstractmethod
    def update(self, event: Event) -> None:
        """Apply a non-terminal event to the local state."""
        ...

    @abstractmethod
    def commit(self) -> None:
        """Write the local state to the entry."""
        ...


class TextController(InputController):
    """Single-line editor; the buffer starts from the committed value."""

    entry: TextEntry

    def __init__(self, entry: TextEntry):
        super().__init__(entry)
        self.buffer = entry.value

    def update(self, event: Event) -> None:
        if event.kind is EventKind.CHARACTER_INPUT and event.char:
            self.buffer += event.char
        elif event.kind is EventKind.DELETE_BACK:
            self.buffer = self.buffer[:-1]

    def commit(self) -> None:
        self.entry.value = self.buffer


class ChoiceController(InputController):
    """Vertical list selection with a scrolling window."""

    entry: ChoiceEntry

    def __init__(self, entry: ChoiceEntry, window_height: int):
        super().__init__(entry)
        index = entry.index_of(entry.value)
        self.selected_index = index if index is not None else 0
        self.viewport = Viewport(len(entry.choices), window_height)
        self.viewport.follow(self.selected_index)

    @property
    def visible_range(self) -> tuple[int, int]:
        return self.viewport.start, self.viewport.end

    def update(self, event: Event) -> None:
        if event.kind is EventKind.MOVE_UP:
            if self.selected_index > 0:
                self.selected_index -= 1
        elif event.kind is EventKind.MOVE_DOWN:
            if self.selected_index < len(self.entry.choices) - 1:
                self.selected_index += 1
        else:
            return
        self.viewport.follow(self.selected_index)

    def commit(self) -> None:
        self.entry.value = self.entry.choices[self.selected_index].value


class BooleanController(InputController):
    """Yes/No toggle."""

    entry: BooleanEntry

    def __init__(self, entry: BooleanEntry):
        super().__init__(entry)
        self.selected = entry.value

    def update(self, event: Event) -> None:
        if event.kind in (EventKind.MOVE_UP, EventKind.MOVE_DOWN):
            self.selected = not self.selected

    def commit(self) -> None:
        self.entry.value = self.selected


def controller_for(
    entry: TextEntry | ChoiceEntry | BooleanEntry, window_height: int
) -> InputController:
    """Build the controller matching the entry's kind."""
    if isinstance(entry, TextEntry):
        return TextController(entry)
    elif isinstance(entry, ChoiceEntry):
        return ChoiceController(entry, window_height)
    elif isinstance(entry, BooleanEntry):
        return BooleanController(entry)
    raise TypeError(f"Unknown entry type: {type(entry).__name__}")


def run_page(
    controller: InputController,
    renderer: "Renderer",
    next_event: EventSource,
    page: PageInfo,
) -> Outcome:
    """
    Blocking loop for one page: draw, wait for an event, handle it.

    Render failures propagate to the caller untouched.
    """
    while True:
        renderer.render(page, controller)
        event = next_event()
        outcome = controller.handle(event)
        if outcome is not None:
            logger.debug(f"Page {page.page}/{page.pages} ({controller.entry.name}): {outcome.value}")
            return outcome
