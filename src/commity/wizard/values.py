"""Field values collected by the wizard."""

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Union

from commity.config.schema import BooleanEntry, ChoiceEntry, Section, TextEntry

FieldValue = Union[str, bool]


def collect_field_values(sections: Iterable[Section]) -> Mapping[str, FieldValue]:
    """Snapshot every entry's current value, keyed by entry name."""
    values: dict[str, FieldValue] = {}
    for section in sections:
        for entry in section.entries:
            if isinstance(entry, (TextEntry, ChoiceEntry)):
                values[entry.name] = str(entry.value)
            elif isinstance(entry, BooleanEntry):
                values[entry.name] = bool(entry.value)
            else:
                raise TypeError(f"Unknown entry type: {type(entry).__name__}")
    return MappingProxyType(values)


def reset_values(sections: Iterable[Section]) -> None:
    """Put every entry back on its default."""
    for section in sections:
        for entry in section.entries:
            entry.reset()


def page_for(sections: list[Section], section_index: int, entry_index: int) -> int:
    """1-based flat page number of the entry at (section_index, entry_index)."""
    return sum(len(section.entries) for section in sections[:section_index]) + entry_index + 1


def count_pages(sections: Iterable[Section]) -> int:
    return sum(len(section.entries) for section in sections)
