"""
Commity wizard engine.

Turns the configured sections into a sequence of pages, runs one input
controller per page and renders the collected answers into the message.
It is UI-agnostic: drawing and key capture are injected.
"""

from commity.wizard.controllers import (
    BooleanController,
    ChoiceController,
    InputController,
    Outcome,
    PageInfo,
    TextController,
    controller_for,
    run_page,
)
from commity.wizard.events import Event, EventKind
from commity.wizard.navigator import Navigator, WizardResult, WizardStatus
from commity.wizard.values import collect_field_values, page_for, reset_values
from commity.wizard.viewport import Viewport, scroll_window

__all__ = [
    "BooleanController",
    "ChoiceController",
    "Event",
    "EventKind",
    "InputController",
    "Navigator",
    "Outcome",
    "PageInfo",
    "TextController",
    "Viewport",
    "WizardResult",
    "WizardStatus",
    "collect_field_values",
    "controller_for",
    "page_for",
    "reset_values",
    "run_page",
    "scroll_window",
]
