from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional, TextIO

import typer
from rich.console import Console
from rich.markup import escape

from resultreplay.config.loader import load_options
from resultreplay.log import setup_logging
from resultreplay.replay.engine import replay_report
from resultreplay.replay.render import build_console

app = typer.Typer(add_completion=False)
err_console = Console(stderr=True)

PATH_PROPERTIES = ("path", "FullName", "fullName")


def _path_from_stream(stream: TextIO) -> str | None:
    raw = stream.read().strip()
    if not raw:
        return None
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        data = None
    if isinstance(data, dict):
        for key in PATH_PROPERTIES:
            value = data.get(key)
            if isinstance(value, str) and value:
                return value
        return None
    if isinstance(data, str):
        return data
    return raw.splitlines()[0].strip()


def _resolve_path(path: str | None, path_option: str | None) -> str | None:
    if path_option:
        return path_option
    if path:
        return path
    if not sys.stdin.isatty():
        return _path_from_stream(sys.stdin)
    return None


@app.command()
def replay(
    path: Optional[str] = typer.Argument(
        None,
        help="Path to an NUnit-style XML result file (may also be piped on stdin)",
        show_default=False,
    ),
    path_option: Optional[str] = typer.Option(
        None,
        "--path",
        "--full-name",
        "-p",
        help="Path to the result file",
    ),
    config: Optional[str] = typer.Option(
        None,
        "--config",
        "-c",
        help="Optional YAML file with replay options",
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output"),
    delay_ms: Optional[int] = typer.Option(
        None,
        "--delay-ms",
        help="Pause after each test case to mimic a live run",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Replay a test result file to the console."""
    setup_logging("DEBUG" if verbose else "WARNING")

    result_path = _resolve_path(path, path_option)
    if result_path is None:
        err_console.print("[red]Missing result file path.[/red]")
        raise typer.Exit(code=2)

    try:
        options = load_options(
            Path(config) if config else None,
            no_color=True if no_color else None,
            delay_ms=delay_ms,
        )
    except Exception as exc:
        err_console.print(f"[red]Failed to load config:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    try:
        replay_report(Path(result_path), console=build_console(options), options=options)
    except Exception as exc:
        err_console.print(f"[red]Failed to replay results:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)
