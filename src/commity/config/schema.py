"""
Pydantic configuration schema for Commity.

Defines the wizard document (sections of typed entries plus a message
template) and the terminal UI preferences.
"""

from collections import Counter
from collections.abc import Iterator
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

# =============================================================================
# Entries
# =============================================================================


class _EntryBase(BaseModel):
    """Fields shared by every entry kind."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    label: str
    description: str

    def reset(self) -> None:
        """Restore the current value to the declared default."""
        self.value = self.default  # type: ignore[attr-defined]

    @model_validator(mode="after")
    def _start_from_default(self):
        # The runtime value is never taken from the document.
        self.reset()
        return self


class TextEntry(_EntryBase):
    """Free text answer.

    min_length, max_length and multi_line are carried as metadata only.
    """

    type: Literal["Text"] = "Text"
    min_length: int
    max_length: int
    multi_line: bool
    default: str
    value: str = Field(default="", exclude=True)


class Choice(BaseModel):
    """One selectable option of a ChoiceEntry."""

    value: str
    label: str


class ChoiceEntry(_EntryBase):
    """Single choice out of an ordered list of options."""

    type: Literal["Choice"] = "Choice"
    choices: list[Choice] = Field(min_length=1)
    default: str
    value: str = Field(default="", exclude=True)

    def index_of(self, value: str) -> int | None:
        """Return the position of the option holding value, if any."""
        for i, choice in enumerate(self.choices):
            if choice.value == value:
                return i
        return None


class BooleanEntry(_EntryBase):
    """Yes/No answer."""

    type: Literal["Boolean"] = "Boolean"
    default: bool
    value: bool = Field(default=False, exclude=True)


Entry = Annotated[Union[TextEntry, ChoiceEntry, BooleanEntry], Field(discriminator="type")]


# =============================================================================
# Sections & Document
# =============================================================================


class Section(BaseModel):
    """Titled, ordered group of entries."""

    title: str = ""
    entries: list[Entry] = Field(default_factory=list)


class Configuration(BaseModel):
    """The wizard document: ordered sections and the message template."""

    sections: list[Section]
    template: str

    @model_validator(mode="after")
    def _check_unique_names(self):
        counts = Counter(entry.name for entry in self.entries())
        duplicates = sorted(name for name, count in counts.items() if count > 1)
        if duplicates:
            raise ValueError(f"Duplicate entry name(s): {', '.join(duplicates)}")
        return self

    def entries(self) -> Iterator[TextEntry | ChoiceEntry | BooleanEntry]:
        """Iterate over all entries in page order."""
        for section in self.sections:
            yield from section.entries

    @property
    def total_pages(self) -> int:
        return sum(len(section.entries) for section in self.sections)


# =============================================================================
# Terminal UI Preferences
# =============================================================================


class TuiSymbols(str, Enum):
    """Glyph set used in prompts and the footer."""

    NONE = "none"
    UNICODE = "unicode"
    NERD_FONT = "nerdFont"


class TUILayout(str, Enum):
    """Where the wizard is drawn."""

    INLINE = "inline"
    FULLSCREEN = "fullscreen"
    FULLSCREEN_CENTER = "fullscreenCenter"


class TUIConfig(BaseModel):
    """Terminal UI preferences."""

    model_config = ConfigDict(extra="allow")

    symbols: TuiSymbols = TuiSymbols.UNICODE
    layout: TUILayout = TUILayout.INLINE
