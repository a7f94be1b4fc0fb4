"""
Pytest configuration and fixtures for commity tests.
"""

import tempfile
from collections.abc import Callable, Generator, Iterable
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from commity.config import Configuration
from commity.ui.protocol import Renderer
from commity.wizard.controllers import InputController, PageInfo
from commity.wizard.events import Event


class ScriptedSession(Renderer):
    """Renderer and event source replaying a fixed list of events."""

    def __init__(self, events: Iterable[Event], window_height: int = 10):
        self.events = list(events)
        self.pages: list[PageInfo] = []
        self.render_count = 0
        self._window_height = window_height

    def render(self, page: PageInfo, controller: InputController) -> None:
        self.render_count += 1
        if not self.pages or self.pages[-1] != page:
            self.pages.append(page)

    def next_event(self) -> Event:
        if not self.events:
            raise AssertionError("Wizard asked for more events than scripted")
        return self.events.pop(0)

    def window_height(self) -> int:
        return self._window_height


def type_text(text: str) -> list[Event]:
    """Character events for every character of text."""
    return [Event.character(c) for c in text]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_commity_home(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point COMMITY_HOME at an empty temporary data directory."""
    home = temp_dir / "commity-home"
    home.mkdir()
    monkeypatch.setenv("COMMITY_HOME", str(home))
    return home


@pytest.fixture
def scripted_session() -> Callable[..., ScriptedSession]:
    """Factory for sessions replaying the given events."""
    return ScriptedSession


def text_entry(name: str, default: str = "", **extra: Any) -> dict[str, Any]:
    return {
        "type": "Text",
        "name": name,
        "label": name.title(),
        "description": f"Enter {name}",
        "minLength": 0,
        "maxLength": 72,
        "multiLine": False,
        "default": default,
        **extra,
    }


def choice_entry(name: str, values: list[str], default: str = "") -> dict[str, Any]:
    return {
        "type": "Choice",
        "name": name,
        "label": name.title(),
        "description": f"Pick {name}",
        "choices": [{"value": v, "label": f"{v} label"} for v in values],
        "default": default,
    }


def boolean_entry(name: str, default: bool = False) -> dict[str, Any]:
    return {
        "type": "Boolean",
        "name": name,
        "label": name.title(),
        "description": f"Is it {name}?",
        "default": default,
    }


@pytest.fixture
def build_config() -> Callable[..., Configuration]:
    """Factory building a Configuration from lists of entry dicts, one list per section."""

    def _build(*sections: list[dict[str, Any]], template: str = "") -> Configuration:
        return Configuration.model_validate(
            {
                "sections": [
                    {"title": f"Section {i + 1}", "entries": entries}
                    for i, entries in enumerate(sections)
                ],
                "template": template,
            }
        )

    return _build


@pytest.fixture
def sample_config_yaml() -> str:
    """Provide a sample .commity.yaml document."""
    return """
sections:
  - title: Header
    entries:
      - type: Choice
        name: type
        label: Type
        description: Kind of change
        default: fix
        choices:
          - value: feat
            label: A new feature
          - value: fix
            label: A bug fix
          - value: docs
            label: Documentation only
      - type: Text
        name: summary
        label: Summary
        description: Short description
        minLength: 1
        maxLength: 72
        multiLine: false
        default: ""
  - title: Footer
    entries:
      - type: Boolean
        name: breaking
        label: Breaking change
        description: Does this break the public API?
        default: false
template: "{{type}}: {{summary}}{% if breaking %} [BREAKING]{% endif %}"
"""
