from prompt_toolkit.styles import Style

THEME_STYLES = {
    # Page header
    "title": "",
    "description": "#888888",
    # Choice list
    "choice-selected": "ansicyan",
    "choice-item": "",
    "choice-label": "#888888",
    # Yes/No
    "bool-selected": "ansiyellow",
    "bool-item": "",
    # Text input
    "prompt": "",
    "input": "",
    # Footer
    "hint": "#888888",
    "hint-commit": "bold",
}

STYLE = Style.from_dict(THEME_STYLES)
