"""Command Line Interface for Venue Planner.

This module provides a simple CLI for inspecting venue scenes, checking
seating constraints, exporting layouts, drawing walls and moving tables
or fixtures.
"""

import json
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from .core.model import ToolMode
from .core.topology import attached_rooms
from .core.units import pixels_per_unit, to_unit
from .engine.validators import (
    find_assignment_mismatches,
    find_out_of_bounds_tables,
    validate_constraints,
    validate_venue_config,
)
from .engine.dragging import ObjectDragController
from .engine.wall_drawing import WallDrawingMachine
from .geom.rooms import find_room_overlaps, get_all_room_rects, get_venue_bounding_box
from .io.parser import load_scene
from .io.serializer import dump_scene, serialize_layout, to_dict

app = typer.Typer(
    name="venue-planner",
    help="A CLI tool for venue layout inspection and seating validation",
    no_args_is_help=True,
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _parse_point(value: str) -> tuple:
    try:
        x, y = (float(v) for v in value.split(","))
    except ValueError:
        raise typer.BadParameter(f"Expected 'x,y', got {value!r}")
    return x, y


@app.command()
def info(
    scene: Path = typer.Option(..., "--scene", "-s", help="Path to scene JSON file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
):
    """Show the rooms of a venue and its overall extent."""
    _setup_logging(verbose)
    try:
        scene_obj = load_scene(str(scene))
        venue = scene_obj.venue
        validate_venue_config(venue)

        unit = venue.unit.value
        rects = get_all_room_rects(venue, pixels_per_unit(unit))

        console.print(f"[bold]Venue Information: {scene}[/bold]")
        console.print()
        console.print(f"[cyan]Rooms: {len(rects)}[/cyan]")

        table = Table()
        table.add_column("Room ID", style="cyan")
        table.add_column("Label", style="green")
        table.add_column("Position (px)", justify="center")
        table.add_column(f"Size ({unit})", justify="center")
        table.add_column("Attached", justify="center")

        for r in rects:
            table.add_row(
                r.id,
                r.label,
                f"{r.x:g}, {r.y:g}",
                f"{to_unit(r.width, unit):g} x {to_unit(r.height, unit):g}",
                str(len(attached_rooms(venue, r.id))),
            )
        console.print(table)

        bbox = get_venue_bounding_box(rects)
        console.print(
            f"\n[cyan]Bounding box:[/cyan] {bbox.x:g}, {bbox.y:g} "
            f"({to_unit(bbox.width, unit):g}{unit} x {to_unit(bbox.height, unit):g}{unit})"
        )
        console.print(
            f"[cyan]Objects:[/cyan] {len(venue.tables)} tables, "
            f"{len(venue.fixtures)} fixtures, {len(venue.walls)} walls"
        )

        for a, b in find_room_overlaps(rects):
            console.print(f"[yellow]![/yellow] Rooms {a} and {b} overlap")

    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def validate(
    scene: Path = typer.Option(..., "--scene", "-s", help="Path to scene JSON file"),
    json_output: bool = typer.Option(False, "--json", help="Print violations as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
):
    """Check seating constraints and table placement."""
    _setup_logging(verbose)
    try:
        scene_obj = load_scene(str(scene))
        venue = scene_obj.venue
        violations = validate_constraints(scene_obj.constraints, scene_obj.guests, venue.tables)

        if json_output:
            console.print_json(json.dumps(to_dict(violations)))
        else:
            console.print(f"[green]✓[/green] Checked {len(scene_obj.constraints)} constraints")
            if violations:
                table = Table()
                table.add_column("Constraint", style="cyan")
                table.add_column("Table", style="green")
                table.add_column("Message")
                for v in violations:
                    table.add_row(v.constraint_id, v.table_id, v.message)
                console.print(table)

            for guest_id, table_id in find_assignment_mismatches(scene_obj.guests, venue.tables):
                console.print(f"[yellow]![/yellow] Guest {guest_id} and table {table_id} disagree on the assignment")
            for table_id in find_out_of_bounds_tables(venue):
                console.print(f"[yellow]![/yellow] Table {table_id} extends outside its room")

        if violations:
            if not json_output:
                console.print(f"\n[bold red]✗ {len(violations)} constraint violation(s)[/bold red]")
            raise typer.Exit(1)
        if not json_output:
            console.print("\n[bold green]✓ All constraints satisfied![/bold green]")

    except typer.Exit:
        raise
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        if verbose:
            import traceback

            console.print(traceback.format_exc())
        raise typer.Exit(1)


@app.command()
def export(
    scene: Path = typer.Option(..., "--scene", "-s", help="Path to scene JSON file"),
    output: Path = typer.Option(None, "--out", help="Write the layout to this file instead of stdout"),
):
    """Export the layout as a plain-text summary."""
    try:
        text = serialize_layout(load_scene(str(scene)).venue)
        if output:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(text + "\n", encoding="utf-8")
            console.print(f"[green]✓[/green] Layout saved to {output}")
        else:
            console.print(text, markup=False, highlight=False)
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def draw_wall(
    scene: Path = typer.Option(..., "--scene", "-s", help="Path to scene JSON file"),
    start: str = typer.Option(..., "--from", help="Press point as 'x,y' in pixels"),
    end: str = typer.Option(..., "--to", help="Release point as 'x,y' in pixels"),
    output: Path = typer.Option(..., "--out", help="Path to output scene JSON file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
):
    """Draw a wall with a simulated pointer drag and save the scene."""
    _setup_logging(verbose)
    try:
        scene_obj = load_scene(str(scene))
        validate_venue_config(scene_obj.venue)

        machine = WallDrawingMachine(scene_obj)
        machine.set_tool_mode(ToolMode.DRAW_WALL)
        machine.pointer_down(*_parse_point(start))
        machine.pointer_move(*_parse_point(end))
        wall_id = machine.pointer_up()

        if wall_id is None:
            console.print("[yellow]![/yellow] Drag too short, no wall created")
            raise typer.Exit(1)

        wall = scene_obj.venue.walls[-1]
        console.print(
            f"[green]✓[/green] Added wall {wall_id}: "
            f"({wall.start.x:g}, {wall.start.y:g}) to ({wall.end.x:g}, {wall.end.y:g})"
        )

        output.parent.mkdir(parents=True, exist_ok=True)
        with open(output, "w", encoding="utf-8") as f:
            json.dump(dump_scene(scene_obj), f, indent=2, ensure_ascii=False)
        console.print(f"[green]✓[/green] Scene saved to {output}")

    except (typer.Exit, typer.BadParameter):
        raise
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def move(
    scene: Path = typer.Option(..., "--scene", "-s", help="Path to scene JSON file"),
    kind: str = typer.Option("table", "--kind", help="Object kind: table or fixture"),
    object_id: str = typer.Option(..., "--id", help="ID of the object to move"),
    target: str = typer.Option(..., "--to", help="Drop point as 'x,y' in pixels (object center)"),
    output: Path = typer.Option(..., "--out", help="Path to output scene JSON file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
):
    """Drag a table or fixture with alignment and grid snapping and save the scene."""
    _setup_logging(verbose)
    try:
        scene_obj = load_scene(str(scene))
        validate_venue_config(scene_obj.venue)

        if kind not in ("table", "fixture"):
            raise typer.BadParameter(f"Expected 'table' or 'fixture', got {kind!r}")
        items = scene_obj.venue.tables if kind == "table" else scene_obj.venue.fixtures
        if all(obj.id != object_id for obj in items):
            console.print(f"[red]Error: no {kind} with ID {object_id}[/red]")
            raise typer.Exit(1)

        controller = ObjectDragController(scene_obj)
        shown = controller.drag_move(kind, object_id, *_parse_point(target))
        for guide in controller.guides:
            console.print(f"[cyan]·[/cyan] {guide.orientation} {guide.type} guide at {guide.position:g}")
        position = controller.drag_end(kind, object_id, shown.x, shown.y)
        console.print(f"[green]✓[/green] Moved {kind} {object_id} to ({position.x:g}, {position.y:g})")

        output.parent.mkdir(parents=True, exist_ok=True)
        with open(output, "w", encoding="utf-8") as f:
            json.dump(dump_scene(scene_obj), f, indent=2, ensure_ascii=False)
        console.print(f"[green]✓[/green] Scene saved to {output}")

    except (typer.Exit, typer.BadParameter):
        raise
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
