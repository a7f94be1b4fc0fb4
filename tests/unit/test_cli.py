"""
Unit tests for the commity command.
"""

import logging
from pathlib import Path

import pytest
from git import Repo
from typer.testing import CliRunner

from commity import __version__
from commity.cli import app as cli_app
from commity.cli.app import EXIT_CANCELED, EXIT_ERROR, app, release_logs
from commity.cli.output import print_error, print_success, print_warning
from commity.wizard.events import CANCEL, CONFIRM, MOVE_DOWN, MOVE_UP
from conftest import ScriptedSession, type_text


@pytest.fixture
def repo_dir(temp_dir: Path, mock_commity_home: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An empty git repository used as the working directory."""
    path = temp_dir / "repo"
    path.mkdir()
    Repo.init(path)
    monkeypatch.chdir(path)
    return path


@pytest.fixture
def with_config(repo_dir: Path, sample_config_yaml: str) -> Path:
    path = repo_dir / ".commity.yaml"
    path.write_text(sample_config_yaml, encoding="utf-8")
    return path


@pytest.fixture
def script(monkeypatch: pytest.MonkeyPatch):
    """Replace the terminal with a scripted session."""

    def _script(events) -> ScriptedSession:
        session = ScriptedSession(events)
        monkeypatch.setattr(cli_app, "_create_session", lambda tui_config: session)
        return session

    return _script


def test_version(cli_runner: CliRunner) -> None:
    """Test --version flag."""
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_help(cli_runner: CliRunner) -> None:
    """Test --help flag."""
    result = cli_runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "--config" in result.stdout
    assert "--commit" in result.stdout


def test_completed_wizard_prints_message(cli_runner, with_config, script) -> None:
    """Accepting every page prints the rendered message."""
    # type: fix -> feat, summary, breaking: No -> Yes
    events = [MOVE_UP, MOVE_UP, CONFIRM] + type_text("add wizard") + [CONFIRM]
    script(events + [MOVE_DOWN, CONFIRM])
    result = cli_runner.invoke(app, [])

    assert result.exit_code == 0
    assert result.stdout == "feat: add wizard [BREAKING]\n"


def test_cancel_exits_with_canceled_status(cli_runner, with_config, script) -> None:
    """Escape on any page ends with 'Commit canceled'."""
    script([CONFIRM, CANCEL])
    result = cli_runner.invoke(app, [])

    assert result.exit_code == EXIT_CANCELED
    assert "Commit canceled" in result.output


def test_message_is_printed_verbatim(cli_runner, repo_dir, temp_dir, script) -> None:
    """Rich markup in answers is not interpreted."""
    config = temp_dir / "wizard.yaml"
    config.write_text(
        "sections:\n"
        "  - title: Only\n"
        "    entries:\n"
        "      - type: Text\n"
        "        name: summary\n"
        "        label: Summary\n"
        "        description: ''\n"
        "        minLength: 0\n"
        "        maxLength: 72\n"
        "        multiLine: false\n"
        "        default: ''\n"
        "template: '{{summary}}'\n",
        encoding="utf-8",
    )
    script(type_text("[bold]x[/bold]") + [CONFIRM])
    result = cli_runner.invoke(app, ["--config", str(config)])

    assert result.exit_code == 0
    assert result.stdout == "[bold]x[/bold]\n"


def test_missing_config(cli_runner, repo_dir, script) -> None:
    """No local or global config is an error before the wizard starts."""
    session = script([])
    result = cli_runner.invoke(app, [])

    assert result.exit_code == EXIT_ERROR
    assert "No config file found" in result.output
    assert session.render_count == 0


def test_outside_git_repository(cli_runner, temp_dir, mock_commity_home, monkeypatch) -> None:
    plain = temp_dir / "plain"
    plain.mkdir()
    monkeypatch.chdir(plain)

    result = cli_runner.invoke(app, [])
    assert result.exit_code == EXIT_ERROR
    assert "No Git repository found" in result.output


def test_invalid_tui_config(cli_runner, with_config, mock_commity_home, script) -> None:
    (mock_commity_home / "tui_config.yaml").write_text("symbols: emoji\n", encoding="utf-8")
    script([])
    result = cli_runner.invoke(app, [])

    assert result.exit_code == EXIT_ERROR
    assert "Invalid TUI configuration" in result.output


def test_template_error(cli_runner, repo_dir, sample_config_yaml, script) -> None:
    """Referencing an unknown name fails after the last page."""
    broken = sample_config_yaml.replace("{{summary}}", "{{subject}}")
    (repo_dir / ".commity.yaml").write_text(broken, encoding="utf-8")
    script([CONFIRM, CONFIRM, CONFIRM])
    result = cli_runner.invoke(app, [])

    assert result.exit_code == EXIT_ERROR
    assert "Failed to render commit message" in result.output


def test_terminal_error(cli_runner, with_config, monkeypatch) -> None:
    class ClosedTerminal(ScriptedSession):
        def next_event(self):
            raise EOFError("Input closed before a key was pressed")

    monkeypatch.setattr(cli_app, "_create_session", lambda tui_config: ClosedTerminal([]))
    result = cli_runner.invoke(app, [])

    assert result.exit_code == EXIT_ERROR
    assert "Terminal error" in result.output


def test_commit_flag_creates_commit(cli_runner, with_config, repo_dir, script, monkeypatch) -> None:
    """--commit records the rendered message as a commit."""
    for var in ("GIT_AUTHOR_NAME", "GIT_COMMITTER_NAME"):
        monkeypatch.setenv(var, "Test User")
    for var in ("GIT_AUTHOR_EMAIL", "GIT_COMMITTER_EMAIL"):
        monkeypatch.setenv(var, "test@example.com")

    repo = Repo(repo_dir)
    (repo_dir / "main.py").write_text("print('hi')\n", encoding="utf-8")
    repo.index.add(["main.py"])

    script([CONFIRM] + type_text("initial") + [CONFIRM, CONFIRM])
    result = cli_runner.invoke(app, ["--commit"])

    assert result.exit_code == 0
    assert "Created commit" in result.output
    assert repo.head.commit.message == "fix: initial"


def test_commit_flag_without_staged_changes(cli_runner, with_config, script) -> None:
    script([CONFIRM] + type_text("initial") + [CONFIRM, CONFIRM])
    result = cli_runner.invoke(app, ["--commit"])

    assert result.exit_code == EXIT_ERROR
    assert "fix: initial" in result.stdout
    assert "No changes staged" in result.output


def test_status_messages_go_to_stderr(capsys) -> None:
    """stdout is reserved for the message so `$(commity)` captures only it."""
    print_warning("Commit canceled")
    print_error("No config file found")
    print_success("Created commit abc123")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Commit canceled" in captured.err
    assert "No config file found" in captured.err
    assert "Created commit abc123" in captured.err


def test_logs_held_while_wizard_runs(cli_runner, with_config, monkeypatch) -> None:
    """--verbose records are not written while the wizard draws its frame."""
    held = []

    class Watching(ScriptedSession):
        def next_event(self):
            held.append(len(logging.getLogger().handlers[0].buffer))
            return super().next_event()

    session = Watching([CONFIRM, CONFIRM, CONFIRM])
    monkeypatch.setattr(cli_app, "_create_session", lambda tui_config: session)
    result = cli_runner.invoke(app, ["--verbose"])

    assert result.exit_code == 0
    assert held[0] > 0
    assert held == sorted(held)
    assert logging.getLogger().handlers[0].buffer == []


def test_release_logs_passes_later_records_through() -> None:
    buffer = cli_app._configure_logging(verbose=True)
    log = logging.getLogger("commity.cli.test")

    log.debug("held")
    assert len(buffer.buffer) == 1

    release_logs(buffer)
    assert buffer.buffer == []
    log.debug("direct")
    assert buffer.buffer == []
