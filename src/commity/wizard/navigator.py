"""
Page navigation for the commit wizard.

The navigator walks the entries of all sections in order, one page per
entry. Its position is the pair (section_index, entry_index); the page
number is a flat 1-based counter kept in step with that pair so the
footer can show "Page X/N" independently of how entries are grouped.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from commity.config.schema import BooleanEntry, ChoiceEntry, Configuration, TextEntry
from commity.template import render_message
from commity.wizard.controllers import Outcome, PageInfo, controller_for, run_page
from commity.wizard.events import EventSource
from commity.wizard.values import FieldValue, collect_field_values, count_pages

if TYPE_CHECKING:
    from commity.ui.protocol import Renderer

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_HEIGHT = 10

TemplateRenderer = Callable[[Mapping[str, FieldValue], str], str]


class WizardStatus(Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class WizardResult:
    """How the wizard ended; message is set only when it completed."""

    status: WizardStatus
    message: str | None = None
    values: Mapping[str, FieldValue] = field(default_factory=dict)

    @property
    def cancelled(self) -> bool:
        return self.status is WizardStatus.CANCELLED


class Navigator:
    """State machine over the wizard pages."""

    def __init__(
        self,
        configuration: Configuration,
        renderer: "Renderer",
        next_event: EventSource,
        window_height: int = DEFAULT_WINDOW_HEIGHT,
        render_template: TemplateRenderer = render_message,
    ):
        self.sections = configuration.sections
        self.template = configuration.template
        self.renderer = renderer
        self.next_event = next_event
        self.window_height = window_height
        self.render_template = render_template

        self.total_pages = count_pages(self.sections)
        self.page = 1
        self.entry_index = 0

        first = self._next_section(-1)
        self.section_index = first if first is not None else 0
        self.status = WizardStatus.ACTIVE if first is not None else WizardStatus.COMPLETED

    # --- Position ---

    @property
    def current_entry(self) -> TextEntry | ChoiceEntry | BooleanEntry:
        return self.sections[self.section_index].entries[self.entry_index]

    def page_info(self) -> PageInfo:
        entry = self.current_entry
        return PageInfo(
            label=entry.label,
            description=entry.description,
            page=self.page,
            pages=self.total_pages,
        )

    def _next_section(self, section_index: int) -> int | None:
        """Index of the first non-empty section after section_index."""
        for index in range(section_index + 1, len(self.sections)):
            if self.sections[index].entries:
                return index
        return None

    def _previous_section(self, section_index: int) -> int | None:
        """Index of the last non-empty section before section_index."""
        for index in range(section_index - 1, -1, -1):
            if self.sections[index].entries:
                return index
        return None

    # --- Transitions ---

    def apply(self, outcome: Outcome) -> WizardStatus:
        """
        Move according to the outcome of the active page.

        Returns:
            The status after the transition.
        """
        if self.status is not WizardStatus.ACTIVE:
            raise RuntimeError(f"Wizard already {self.status.value}")

        if outcome is Outcome.ACCEPT:
            self._accept()
        elif outcome is Outcome.BACK:
            self._back()
        elif outcome is Outcome.CANCEL:
            self.status = WizardStatus.CANCELLED

        logger.debug(
            f"{outcome.value} -> section {self.section_index}, entry {self.entry_index}, "
            f"page {self.page}/{self.total_pages} ({self.status.value})"
        )
        return self.status

    def _accept(self) -> None:
        section = self.sections[self.section_index]
        if self.entry_index < len(section.entries) - 1:
            self.entry_index += 1
        else:
            next_section = self._next_section(self.section_index)
            if next_section is None:
                self.status = WizardStatus.COMPLETED
                return
            self.section_index = next_section
            self.entry_index = 0
        self.page += 1

    def _back(self) -> None:
        if self.entry_index > 0:
            self.entry_index -= 1
        else:
            previous_section = self._previous_section(self.section_index)
            if previous_section is None:
                return  # nothing before page 1
            self.section_index = previous_section
            self.entry_index = len(self.sections[previous_section].entries) - 1
        self.page = max(1, self.page - 1)

    # --- Driving ---

    def step(self) -> WizardStatus:
        """Run the active page until it ends and apply its outcome."""
        controller = controller_for(self.current_entry, self.window_height)
        outcome = run_page(controller, self.renderer, self.next_event, self.page_info())
        return self.apply(outcome)

    def run(self) -> WizardResult:
        """
        Run pages until the wizard completes or is cancelled.

        Returns:
            WizardResult with the rendered message when completed.

        Raises:
            TemplateRenderError: If the message template fails to render.
        """
        while self.status is WizardStatus.ACTIVE:
            self.step()

        if self.status is WizardStatus.CANCELLED:
            logger.info(f"Wizard cancelled on page {self.page}/{self.total_pages}")
            return WizardResult(status=WizardStatus.CANCELLED)

        values = collect_field_values(self.sections)
        message = self.render_template(values, self.template)
        return WizardResult(status=WizardStatus.COMPLETED, message=message, values=values)
