"""
Renderer Protocol - Abstract interface for drawing wizard pages.

The navigator calls render() once before waiting for each event; an
implementation must have finished drawing when it returns.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from commity.wizard.controllers import InputController, PageInfo


class Renderer(ABC):
    """Abstract base class for page renderers."""

    @abstractmethod
    def render(self, page: "PageInfo", controller: "InputController") -> None:
        """Draw the page header, the controller's current state and the footer."""
        ...
