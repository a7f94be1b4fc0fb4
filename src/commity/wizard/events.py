"""
Discrete input events consumed by the input controllers.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable


class EventKind(Enum):
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    CONFIRM = auto()
    CANCEL = auto()
    CHARACTER_INPUT = auto()
    DELETE_BACK = auto()


@dataclass(frozen=True)
class Event:
    """A single navigation event; char is set only for CHARACTER_INPUT."""

    kind: EventKind
    char: str | None = None

    @classmethod
    def character(cls, char: str) -> "Event":
        return cls(EventKind.CHARACTER_INPUT, char)


MOVE_UP = Event(EventKind.MOVE_UP)
MOVE_DOWN = Event(EventKind.MOVE_DOWN)
MOVE_LEFT = Event(EventKind.MOVE_LEFT)
MOVE_RIGHT = Event(EventKind.MOVE_RIGHT)
CONFIRM = Event(EventKind.CONFIRM)
CANCEL = Event(EventKind.CANCEL)
DELETE_BACK = Event(EventKind.DELETE_BACK)

# Blocking source of the next event
EventSource = Callable[[], Event]
