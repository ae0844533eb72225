"""
cli.py

PURPOSE: Command-line interface for the adventure game.
DEPENDENCIES: typer, rich

ARCHITECTURE NOTES:
The CLI provides commands for:
- play: Play an adventure interactively
- validate: Load an adventure and report problems in it
- config: Show the current configuration

The CLI owns the console. It loads the world, hands each input line to the
GameEngine and prints the TurnResult; the engine never does I/O.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from adventure import __version__
from adventure.config import Settings, get_settings
from adventure.engine.engine import GameEngine
from adventure.engine.motion import ForcedMotionLoopError
from adventure.loader import LoadedAdventure, WorldLoadError, load_adventure
from adventure.observability import init_telemetry, shutdown_telemetry
from adventure.ui import plain
from adventure.validator import ValidationSeverity, validate_world

app = typer.Typer(
    name="adventure",
    help="Play room-and-exit text adventures.",
    add_completion=False,
)

console = Console()

ADVENTURE_PROMPT = "What will be your adventure today? "


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"adventure version {__version__}")
        raise typer.Exit()


def configure_logging(settings: Settings) -> None:
    """Send log records through rich at the configured level."""
    level = "DEBUG" if settings.debug else settings.log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load(name: str, data_dir: Path | None, settings: Settings) -> LoadedAdventure:
    """Load an adventure or exit with the loader's message."""
    try:
        return load_adventure(name, data_dir or settings.data_dir)
    except WorldLoadError as e:
        plain.print_error(str(e))
        raise typer.Exit(1) from None


@app.callback()
def main(
    _version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Adventure - explore rooms, carry things, find the way out."""
    pass


@app.command()
def play(
    name: Annotated[
        str | None,
        typer.Argument(
            help="Adventure name (file prefix, e.g. Small) or path to a .json world",
        ),
    ] = None,
    data_dir: Annotated[
        Path | None,
        typer.Option(
            "--data-dir",
            help="Directory holding the adventure files",
            exists=True,
            file_okay=False,
        ),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            "-d",
            help="Show debug information after each turn",
        ),
    ] = False,
) -> None:
    """Play an adventure interactively."""
    settings = get_settings()
    configure_logging(settings)

    if name is None:
        try:
            name = plain.print_prompt(ADVENTURE_PROMPT).strip()
        except (EOFError, KeyboardInterrupt):
            console.print()
            return

    adventure = _load(name, data_dir, settings)
    init_telemetry(settings.otel)
    engine = GameEngine(
        adventure.world,
        synonyms=adventure.synonyms,
        affirmative=settings.quit_affirmative,
    )

    plain.print_message(engine.start().message)
    console.print()

    prompt = "> "
    try:
        while engine.running:
            try:
                user_input = plain.print_prompt(prompt)
            except (EOFError, KeyboardInterrupt):
                console.print()
                break

            result = engine.process_input(user_input)

            if result.awaiting_confirmation:
                prompt = result.message
                continue
            prompt = "> "

            if result.error:
                plain.print_error(result.message)
            else:
                plain.print_message(result.message)

            if debug:
                plain.print_debug(
                    {
                        "room": engine.state.current_room,
                        "inventory": engine.state.inventory,
                        "running": engine.state.running,
                    }
                )
    except ForcedMotionLoopError as e:
        plain.print_error(f"Broken adventure: {e}")
        raise typer.Exit(1) from None
    finally:
        shutdown_telemetry()

    plain.print_game_over("Thanks for playing!")


@app.command()
def validate(
    name: Annotated[
        str,
        typer.Argument(
            help="Adventure name (file prefix) or path to a .json world",
        ),
    ],
    data_dir: Annotated[
        Path | None,
        typer.Option(
            "--data-dir",
            help="Directory holding the adventure files",
            exists=True,
            file_okay=False,
        ),
    ] = None,
) -> None:
    """Validate an adventure's data files."""
    settings = get_settings()
    configure_logging(settings)

    adventure = _load(name, data_dir, settings)
    world = adventure.world

    issues = validate_world(world, adventure.synonyms)
    for issue in issues:
        if issue.severity is ValidationSeverity.ERROR:
            plain.print_error(str(issue))
        elif issue.severity is ValidationSeverity.WARNING:
            plain.print_warning(str(issue))
        else:
            plain.print_message(str(issue))

    if any(issue.severity is ValidationSeverity.ERROR for issue in issues):
        raise typer.Exit(1)

    plain.print_success(f"Valid adventure: {adventure.name}")
    console.print(f"  Rooms: {len(world.rooms)}")
    console.print(f"  Objects: {len(world.objects)}")
    console.print(f"  Synonyms: {len(adventure.synonyms)}")
    console.print(f"  Directions: {', '.join(world.directions()) or '(none)'}")


@app.command("config")
def config_cmd() -> None:
    """Show the current configuration."""
    settings = get_settings()
    console.print("[bold]Current Configuration:[/bold]")
    console.print(f"  Data directory: {settings.data_dir}")
    console.print(f"  Log level: {settings.log_level}")
    console.print(f"  Debug: {settings.debug}")
    console.print(f"  Quit affirmative: {settings.quit_affirmative}")
    console.print()
    console.print("[bold]OpenTelemetry Settings:[/bold]")
    console.print(f"  Enabled: {settings.otel.enabled}")
    console.print(f"  Service name: {settings.otel.service_name}")
    endpoint_status = settings.otel.endpoint if settings.otel.endpoint else "(console only)"
    console.print(f"  Endpoint: {endpoint_status}")


if __name__ == "__main__":
    app()
