"""Command-line interface for the room directory."""

from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from roomdirectory.config.settings import SeedConfig

app = typer.Typer(
    name="roomdirectory",
    help="Room directory seeding and lookup.",
    no_args_is_help=True,
)

console = Console()
error_console = Console(stderr=True)

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Path to configuration YAML file.",
        exists=True,
        dir_okay=False,
    ),
]


def _load(config: Path | None) -> "SeedConfig":
    """Load configuration and set up logging."""
    from roomdirectory.config.loader import load_config
    from roomdirectory.utils.logging import configure_logging

    try:
        seed_config = load_config(config)
    except ValueError as e:
        error_console.print(f"[red]Invalid configuration: {e}[/red]")
        raise typer.Exit(code=1) from e

    configure_logging(
        level=seed_config.logging.level,
        json_output=seed_config.logging.json_output,
    )
    return seed_config


@app.command()
def seed(config: ConfigOption = None) -> None:
    """Load the room CSV into the database."""
    from sqlalchemy.exc import SQLAlchemyError

    from roomdirectory.exceptions import InputFormatError
    from roomdirectory.seeding import SeedReporter, run_seed

    seed_config = _load(config)

    console.print("[blue]Starting database seed...[/blue]")
    console.print(f"[dim]Input: {seed_config.input_path}[/dim]")

    try:
        result = run_seed(seed_config)
    except FileNotFoundError as e:
        error_console.print(f"[red]Error seeding database: {e}[/red]")
        raise typer.Exit(code=1) from e
    except InputFormatError as e:
        error_console.print(f"[red]Error seeding database: {e}[/red]")
        raise typer.Exit(code=1) from e
    except SQLAlchemyError as e:
        error_console.print(f"[red]Database error, seed aborted: {e}[/red]")
        raise typer.Exit(code=1) from e

    SeedReporter(console, error_console).print_result(result)


@app.command()
def validate(config: ConfigOption = None) -> None:
    """Check the room CSV and show which rows would be skipped."""
    from roomdirectory.exceptions import InputFormatError
    from roomdirectory.ingestion import load_room_rows
    from roomdirectory.seeding import SeedReporter, preview_seed

    seed_config = _load(config)

    console.print("[blue]Validating seed input...[/blue]")

    try:
        rows = load_room_rows(seed_config)
    except (FileNotFoundError, InputFormatError) as e:
        error_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1) from e

    SeedReporter(console, error_console).print_preview(preview_seed(rows))


@app.command()
def rooms(
    config: ConfigOption = None,
    building: Annotated[
        str | None,
        typer.Option("--building", "-b", help="Building abbreviation."),
    ] = None,
    room_type: Annotated[
        str | None,
        typer.Option("--type", "-t", help="Room type, e.g. 'computer-lab'."),
    ] = None,
    min_capacity: Annotated[
        int | None,
        typer.Option("--min-capacity", help="Minimum capacity (inclusive)."),
    ] = None,
    max_capacity: Annotated[
        int | None,
        typer.Option("--max-capacity", help="Maximum capacity (inclusive)."),
    ] = None,
    floor: Annotated[
        int | None,
        typer.Option("--floor", "-f", help="Floor (0 = ground, -1 = B1)."),
    ] = None,
    accessible: Annotated[
        bool | None,
        typer.Option("--accessible/--not-accessible", help="Accessibility."),
    ] = None,
    feature: Annotated[
        list[str] | None,
        typer.Option("--feature", help="Required feature name (repeatable)."),
    ] = None,
    search: Annotated[
        str | None,
        typer.Option("--search", "-s", help="Free-text search."),
    ] = None,
) -> None:
    """List rooms matching the given filters."""
    from roomdirectory.database import create_db_engine, session_scope
    from roomdirectory.directory import (
        SearchFilters,
        format_feature_label,
        format_floor,
        format_room_type,
        list_buildings,
        list_features,
        search_rooms,
    )
    from roomdirectory.room_types import ROOM_TYPE_VALUES

    seed_config = _load(config)

    if room_type is not None and room_type not in ROOM_TYPE_VALUES:
        error_console.print(
            f"[red]Error: Invalid room type '{room_type}'. "
            f"Valid types: {', '.join(ROOM_TYPE_VALUES)}[/red]"
        )
        raise typer.Exit(code=1)

    engine = create_db_engine(seed_config.database)
    try:
        with session_scope(engine) as session:
            building_id = None
            if building is not None:
                matches = [
                    b for b in list_buildings(session) if b.abbreviation == building
                ]
                if not matches:
                    error_console.print(f"[red]Error: Unknown building '{building}'[/red]")
                    raise typer.Exit(code=1)
                building_id = matches[0].id

            feature_ids: list[str] = []
            if feature:
                by_name = {f.name.lower(): f.id for f in list_features(session)}
                for name in feature:
                    if name.lower() not in by_name:
                        error_console.print(f"[red]Error: Unknown feature '{name}'[/red]")
                        raise typer.Exit(code=1)
                    feature_ids.append(by_name[name.lower()])

            filters = SearchFilters(
                building_id=building_id,
                room_type=room_type,
                min_capacity=min_capacity,
                max_capacity=max_capacity,
                floor=floor,
                accessible=accessible,
                feature_ids=tuple(feature_ids),
                search_query=search,
            )
            results = search_rooms(session, filters)
    finally:
        engine.dispose()

    if not results:
        console.print("[yellow]No rooms found[/yellow]")
        return

    table = Table(title=f"Found {len(results)} room{'' if len(results) == 1 else 's'}")
    table.add_column("Room", style="cyan", no_wrap=True)
    table.add_column("Building")
    table.add_column("Type")
    table.add_column("Capacity", justify="right")
    table.add_column("Floor", justify="right")
    table.add_column("Features", style="dim")

    for room in results:
        label = f"{room.building_abbrev} {room.room_number}"
        if room.display_name:
            label += f" ({room.display_name})"
        table.add_row(
            label,
            room.building_name,
            format_room_type(room.room_type),
            str(room.capacity),
            format_floor(room.floor),
            ", ".join(format_feature_label(f) for f in room.features),
        )

    console.print(table)


@app.command()
def version() -> None:
    """Show version information."""
    from roomdirectory import __version__

    console.print(f"roomdirectory version {__version__}")


if __name__ == "__main__":
    app()
