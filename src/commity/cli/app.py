"""
Main Typer application for the commity CLI.

Runs the wizard once: the rendered message is printed on completion,
cancellation and errors end with a non-zero exit status.
"""

import logging
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from commity import __version__
from commity.cli.output import print_error, print_info, print_success, print_warning
from commity.config import (
    Configuration,
    ConfigurationError,
    TUIConfig,
    load_configuration,
    load_tui_config,
)
from commity.template import TemplateRenderError
from commity.ui.terminal import TerminalSession
from commity.vcs import VcsError, commit_message, find_git_repository
from commity.wizard import Navigator, WizardResult

logger = logging.getLogger(__name__)

EXIT_CANCELED = 1
EXIT_ERROR = 2

app = typer.Typer(
    name="commity",
    help="Write commit messages with an interactive, configurable wizard.",
    add_completion=False,
    rich_markup_mode="rich",
    pretty_exceptions_enable=True,
    pretty_exceptions_show_locals=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        print_info(f"commity version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> MemoryHandler:
    """
    Route log records to a Rich handler on stderr.

    Records are buffered until release_logs() is called, so they are not
    drawn into the wizard frame.
    """
    target = RichHandler(console=Console(stderr=True), show_path=False)
    target.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    buffer = MemoryHandler(capacity=10_000, flushLevel=logging.CRITICAL + 1, target=target)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        handlers=[buffer],
        force=True,
    )
    return buffer


def release_logs(buffer: MemoryHandler) -> None:
    """Write the held records and pass later ones straight through."""
    buffer.flush()
    buffer.setLevel(logging.NOTSET)
    buffer.flushLevel = logging.NOTSET


def _create_session(tui_config: TUIConfig) -> TerminalSession:
    return TerminalSession(tui_config)


def run_wizard(configuration: Configuration, tui_config: TUIConfig) -> WizardResult:
    """Drive the wizard on the terminal until it completes or is cancelled."""
    session = _create_session(tui_config)
    navigator = Navigator(
        configuration,
        renderer=session,
        next_event=session.next_event,
        window_height=session.window_height(),
    )
    return navigator.run()


@app.command()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Use this wizard config instead of searching for .commity.yaml.",
        ),
    ] = None,
    commit: Annotated[
        bool,
        typer.Option(
            "--commit",
            help="Commit the staged changes with the rendered message.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log wizard transitions to stderr once the wizard has finished.",
        ),
    ] = False,
) -> None:
    """
    [bold blue]commity[/bold blue] - Commit message wizard

    Asks the questions from [bold].commity.yaml[/bold] (repository root,
    then the data directory) and prints the rendered commit message.
    """
    log_buffer = _configure_logging(verbose)
    cwd = Path.cwd()

    try:
        configuration = load_configuration(cwd, config_file)
        tui_config = load_tui_config()
    except ConfigurationError as e:
        release_logs(log_buffer)
        print_error(str(e))
        raise typer.Exit(EXIT_ERROR)

    logger.debug(
        f"{configuration.total_pages} page(s), layout {tui_config.layout.value}, "
        f"symbols {tui_config.symbols.value}"
    )

    try:
        result = run_wizard(configuration, tui_config)
    except TemplateRenderError as e:
        release_logs(log_buffer)
        print_error(f"Failed to render commit message: {e}")
        raise typer.Exit(EXIT_ERROR)
    except (OSError, EOFError) as e:
        release_logs(log_buffer)
        print_error(f"Terminal error: {e}")
        raise typer.Exit(EXIT_ERROR)

    release_logs(log_buffer)

    if result.cancelled:
        print_warning("Commit canceled")
        raise typer.Exit(EXIT_CANCELED)

    typer.echo(result.message)

    if commit:
        repo_dir = find_git_repository(cwd)
        if repo_dir is None:
            print_error("No Git repository found")
            raise typer.Exit(EXIT_ERROR)
        try:
            short_hash = commit_message(repo_dir, result.message or "")
        except VcsError as e:
            print_error(str(e))
            raise typer.Exit(EXIT_ERROR)
        print_success(f"Created commit {short_hash}")


if __name__ == "__main__":
    app()
