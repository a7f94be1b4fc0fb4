"""
Page composition.

Turns a page and its controller state into prompt_toolkit style/text
fragments. Kept free of any terminal access so frames can be inspected
directly.
"""

from prompt_toolkit.formatted_text import StyleAndTextTuples

from commity.config.schema import TuiSymbols
from commity.ui.symbols import Symbol, query
from commity.wizard.controllers import (
    BooleanController,
    ChoiceController,
    InputController,
    PageInfo,
    TextController,
)

MARGIN_LEFT = "    "
# Rows taken by everything except the body: title, description, spacing, footer
TERMINAL_MIN_HEIGHT = 7


def _pad(text: str, width: int) -> str:
    return f"{text:<{width}}"


def text_body(controller: TextController, symbols: TuiSymbols) -> StyleAndTextTuples:
    return [
        ("class:prompt", f"{MARGIN_LEFT}{query(Symbol.INPUT, symbols)} "),
        ("class:input", controller.buffer),
        ("[SetCursorPosition]", ""),
        ("", "\n"),
    ]


def choice_body(controller: ChoiceController) -> StyleAndTextTuples:
    choices = controller.entry.choices
    width_nr = len(str(len(choices))) + 1
    width_val = max(len(choice.value) for choice in choices)
    start, end = controller.visible_range

    result: StyleAndTextTuples = []
    for i in range(start, end):
        choice = choices[i]
        selected = i == controller.selected_index
        marker = "●" if selected else "○"
        row = f"{MARGIN_LEFT}{marker} {_pad(f'{i + 1}.', width_nr)} {_pad(choice.value, width_val)}    "
        result.append(("class:choice-selected" if selected else "class:choice-item", row))
        result.append(("class:choice-label", choice.label))
        result.append(("", "\n"))
    return result


def boolean_body(controller: BooleanController) -> StyleAndTextTuples:
    result: StyleAndTextTuples = []
    for option, value in (("Yes", True), ("No", False)):
        if controller.selected is value:
            result.append(("class:bool-selected", f"{MARGIN_LEFT}● {option}"))
        else:
            result.append(("class:bool-item", f"{MARGIN_LEFT}○ {option}"))
        result.append(("", "\n"))
    return result


def body(controller: InputController, symbols: TuiSymbols) -> StyleAndTextTuples:
    """Body fragments for whichever controller is active."""
    if isinstance(controller, TextController):
        return text_body(controller, symbols)
    elif isinstance(controller, ChoiceController):
        return choice_body(controller)
    elif isinstance(controller, BooleanController):
        return boolean_body(controller)
    raise TypeError(f"Unknown controller type: {type(controller).__name__}")


def footer(page: PageInfo, symbols: TuiSymbols) -> StyleAndTextTuples:
    result: StyleAndTextTuples = [
        ("class:hint", f"{MARGIN_LEFT}{query(Symbol.PAGE, symbols)} {page.page}/{page.pages}"),
        ("class:hint", f" • [{query(Symbol.ESCAPE, symbols)}] Quit"),
    ]
    if not page.is_first:
        result.append(("class:hint", f" • [{query(Symbol.PREVIOUS, symbols)}] Back"))
    result.append(("class:hint", " • "))
    if page.is_last:
        result.append(("class:hint-commit", f"[{query(Symbol.ENTER, symbols)}] Commit"))
    else:
        result.append(("class:hint", f"[{query(Symbol.ENTER, symbols)}] Accept"))
    result.append(("", "\n"))
    return result


def build_frame(
    page: PageInfo, controller: InputController, symbols: TuiSymbols
) -> StyleAndTextTuples:
    """Full page: title, description, body and footer."""
    return [
        ("", "\n"),
        ("class:title", f"{MARGIN_LEFT}{page.label}\n"),
        ("class:description", f"{MARGIN_LEFT}{page.description}\n\n"),
        *body(controller, symbols),
        ("", "\n"),
        *footer(page, symbols),
    ]
