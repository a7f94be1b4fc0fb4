"""Glyphs used in the prompt and footer, per configured symbol set."""

from enum import Enum

from commity.config.schema import TuiSymbols


class Symbol(Enum):
    ENTER = "enter"
    ESCAPE = "escape"
    PREVIOUS = "previous"
    PAGE = "page"
    INPUT = "input"


SYMBOLS: dict[Symbol, dict[TuiSymbols, str]] = {
    Symbol.ENTER: {
        TuiSymbols.NONE: "CR",
        TuiSymbols.UNICODE: "⏎",
        TuiSymbols.NERD_FONT: "\U000f0311",
    },
    Symbol.ESCAPE: {
        TuiSymbols.NONE: "ESC",
        TuiSymbols.UNICODE: "␛",
        TuiSymbols.NERD_FONT: "\U000f12b7",
    },
    Symbol.PREVIOUS: {
        TuiSymbols.NONE: "LEFT",
        TuiSymbols.UNICODE: "←",
        TuiSymbols.NERD_FONT: "\uf060",
    },
    Symbol.PAGE: {
        TuiSymbols.NONE: "Page",
        TuiSymbols.UNICODE: "Page",
        TuiSymbols.NERD_FONT: "\uea7b",
    },
    Symbol.INPUT: {
        TuiSymbols.NONE: ">",
        TuiSymbols.UNICODE: ">",
        TuiSymbols.NERD_FONT: "\uf105",
    },
}


def query(symbol: Symbol, symbols: TuiSymbols) -> str:
    return SYMBOLS[symbol][symbols]
