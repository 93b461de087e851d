"""CLI: Typer app wired to the streaming assistant."""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Optional

import typer
from rich.console import Console

from llm_tools.assistant import (
    DEFAULT_TASK,
    CallFailedError,
    ConfigurationError,
    ModelUnavailableError,
    TypewriterRenderer,
    UnknownTaskError,
    build_request_config,
    get_task_definition,
    print_metadata,
    run_request,
    task_usage_lines,
)
from llm_tools.config import (
    SettingsError,
    build_provider,
    default_settings_path,
    load_settings,
    setup_interactive,
)

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"

app = typer.Typer(
    help="llm-assistant: send text to Gemini and stream the answer.",
    add_completion=False,
)


def _read_text(text: Optional[str]) -> str:
    if text is not None and text != "-":
        return text
    if sys.stdin.isatty():
        return ""
    return sys.stdin.read()


def _fail(err_console: Console, message: str, code: int = 1) -> typer.Exit:
    err_console.print(message, style="red", markup=False, highlight=False, soft_wrap=True)
    return typer.Exit(code=code)


@app.command()
def main(
    text: Optional[str] = typer.Argument(
        None, help="Text to send. Use '-' or omit it to read from stdin."
    ),
    task: str = typer.Option(DEFAULT_TASK, "--task", "-t", help="Task to run (see --list-tasks)."),
    model: str = typer.Option(DEFAULT_MODEL, "--model", "-m", help="Model name."),
    think: bool = typer.Option(False, "--think", help="Enable the model's thinking phase."),
    think_level: str = typer.Option(
        "", "--think-level", help="Thinking level for Gemini 3 models (minimal|low|medium|high)."
    ),
    init: bool = typer.Option(False, "--init", help="Run the interactive setup and exit."),
    list_tasks: bool = typer.Option(False, "--list-tasks", help="List available tasks and exit."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable DEBUG logging to stderr."),
) -> None:
    """Stream the model's answer to stdout and print call metadata to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    err_console = Console(stderr=True)

    if list_tasks:
        typer.echo("Tasks:")
        typer.echo(task_usage_lines())
        return

    settings_path = default_settings_path()
    if init:
        typer.echo("Initializing settings...")
        try:
            setup_interactive(settings_path)
        except SettingsError as e:
            raise _fail(err_console, f"Setup failed: {e}") from e
        typer.echo("Settings initialized.")
        return

    try:
        task_def = get_task_definition(task)
    except UnknownTaskError as e:
        err_console.print(str(e), style="red", markup=False, highlight=False, soft_wrap=True)
        err_console.print("Available tasks:\n" + task_usage_lines(), markup=False)
        raise typer.Exit(code=1) from e

    input_text = _read_text(text)
    if not input_text:
        raise _fail(err_console, "No input text given (pass it as an argument or on stdin).", 2)

    try:
        request = build_request_config(
            task_def, model, input_text, enable_thinking=think, thinking_level=think_level
        )
    except ConfigurationError as e:
        raise _fail(err_console, str(e)) from e

    try:
        settings = load_settings(settings_path)
        if settings is None:
            typer.echo("No settings file found; starting interactive setup.")
            settings = setup_interactive(settings_path)
        provider = build_provider(settings)
    except SettingsError as e:
        raise _fail(err_console, str(e)) from e

    try:
        metadata = asyncio.run(
            run_request(
                request,
                provider,
                renderer=TypewriterRenderer(Console()),
                diagnostics=err_console,
            )
        )
    except ModelUnavailableError as e:
        raise _fail(err_console, str(e)) from e
    except CallFailedError as e:
        logger.debug("Call failed", exc_info=e)
        raise _fail(err_console, str(e)) from e

    print_metadata(err_console, metadata, api_method=provider.api_method, task_name=task_def.name)


if __name__ == "__main__":
    app()
