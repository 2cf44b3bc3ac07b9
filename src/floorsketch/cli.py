"""Command Line Interface for Floor Sketch.

This module provides a simple CLI to inspect sketch payloads: detect rooms,
resolve snap points, lay out staircases, validate and render plans.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config import (
    DEFAULT_FLOOR_HEIGHT,
    DEFAULT_GRID_SIZE,
    DEFAULT_PIXELS_PER_FOOT,
    DEFAULT_RISER_HEIGHT,
    DEFAULT_SNAP_DISTANCE,
    DEFAULT_STAIR_WIDTH,
    DEFAULT_TREAD_DEPTH,
)
from .core.model import Point, StaircaseType, TurnDirection
from .core.topology import build_wall_graph, connected_wall_groups
from .core.validators import InvalidSketch, find_dangling_walls, validate_sketch
from .geom.rooms import detect_rooms
from .geom.snapping import best_snap_point
from .geom.staircase import code_violations, create_staircase, staircase_bounds
from .io.parser import build_save_payload, load_sketch
from .visualization.generator import generate_sketch_image

app = typer.Typer(
    name="floorsketch",
    help="A CLI tool for floor plan sketch geometry",
    no_args_is_help=True,
)
console = Console()


def _fail(message: str) -> None:
    console.print(f"[red]Error: {message}[/red]")
    raise typer.Exit(1)


def _load(path: Path):
    try:
        return load_sketch(str(path))
    except FileNotFoundError as e:
        _fail(f"File not found - {e}")
    except json.JSONDecodeError as e:
        _fail(f"Invalid JSON - {e}")
    except ValueError as e:
        _fail(str(e))


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Floor plan sketch geometry tools."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def rooms(
    sketch: Path = typer.Option(..., "--sketch", "-s", help="Path to sketch JSON file"),
    pixels_per_foot: float = typer.Option(
        DEFAULT_PIXELS_PER_FOOT, "--ppf", help="Coordinate units per foot"
    ),
):
    """Detect enclosed rooms from the walls of a sketch."""
    sketch_obj = _load(sketch)
    console.print(f"[green]✓[/green] Loaded {len(sketch_obj.walls)} walls from {sketch}")

    detected = detect_rooms(sketch_obj.walls, pixels_per_foot)
    if not detected:
        console.print("[yellow]No enclosed rooms found[/yellow]")
        return

    table = Table(title="Detected rooms")
    table.add_column("Room", style="cyan")
    table.add_column("Area (sq ft)", justify="right")
    table.add_column("Perimeter (ft)", justify="right")
    table.add_column("Vertices", justify="right")

    for index, room in enumerate(detected, start=1):
        table.add_row(f"Room {index}", f"{room.area:.2f}", f"{room.perimeter:.2f}", str(len(room.points)))

    console.print(table)
    total = sum(room.area for room in detected)
    console.print(f"[blue]ℹ[/blue] {len(detected)} rooms, {total:.2f} sq ft total")


@app.command()
def snap(
    sketch: Path = typer.Option(..., "--sketch", "-s", help="Path to sketch JSON file"),
    x: float = typer.Option(..., "--x", help="Cursor x"),
    y: float = typer.Option(..., "--y", help="Cursor y"),
    grid_size: float = typer.Option(DEFAULT_GRID_SIZE, "--grid", help="Grid spacing"),
    snap_distance: float = typer.Option(DEFAULT_SNAP_DISTANCE, "--distance", help="Snap distance"),
    exclude: Optional[List[str]] = typer.Option(None, "--exclude", help="Wall id to ignore"),
    grid_enabled: bool = typer.Option(True, "--grid-snap/--no-grid", help="Allow grid snaps"),
):
    """Resolve the snap point for a cursor position."""
    sketch_obj = _load(sketch)

    result = best_snap_point(
        Point(x, y),
        sketch_obj.walls,
        grid_size,
        snap_distance,
        frozenset(exclude or ()),
        grid_enabled,
    )

    if result is None:
        console.print("[yellow]No snap point in range[/yellow]")
        return

    reference = f" (wall {result.reference_id})" if result.reference_id else ""
    console.print(
        f"[green]✓[/green] {result.type.value} snap at ({result.x:.2f}, {result.y:.2f}){reference}"
    )


@app.command()
def staircase(
    stair_type: StaircaseType = typer.Option(StaircaseType.STRAIGHT, "--type", "-t", help="Staircase topology"),
    total_rise: float = typer.Option(DEFAULT_FLOOR_HEIGHT, "--rise", help="Floor-to-floor rise"),
    riser_height: float = typer.Option(DEFAULT_RISER_HEIGHT, "--riser", help="Target riser height"),
    tread_depth: float = typer.Option(DEFAULT_TREAD_DEPTH, "--depth", help="Tread depth"),
    width: float = typer.Option(DEFAULT_STAIR_WIDTH, "--width", help="Stair width"),
    turn: TurnDirection = typer.Option(TurnDirection.RIGHT, "--turn", help="Turn direction"),
    rotation: float = typer.Option(0.0, "--rotation", help="Rotation in degrees"),
):
    """Lay out a staircase and report its derived dimensions."""
    stair = create_staircase(
        stair_type,
        0.0,
        0.0,
        width=width,
        total_rise=total_rise,
        riser_height=riser_height,
        tread_depth=tread_depth,
        turn_direction=turn,
        rotation=rotation,
    )
    bounds = staircase_bounds(stair)

    table = Table(title=f"{stair.type.value} staircase")
    table.add_column("Property", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Risers", str(stair.treads))
    table.add_row("Riser height", f"{stair.riser_height:.3f}")
    table.add_row("Tread depth", f"{stair.tread_depth:g}")
    table.add_row("Run length", f"{stair.length:g}")
    table.add_row("Footprint", f"{bounds.width:g} x {bounds.height:g}")
    if stair.landing_width is not None:
        table.add_row("Landing", f"{stair.landing_width:g}")
    console.print(table)

    for problem in code_violations(stair):
        console.print(f"[yellow]⚠[/yellow] {problem}")


@app.command()
def validate(
    sketch: Path = typer.Option(..., "--sketch", "-s", help="Path to sketch JSON file"),
):
    """Check a sketch for orphaned openings, zero-length walls and duplicate ids."""
    sketch_obj = _load(sketch)

    for wall_id in find_dangling_walls(sketch_obj.walls):
        console.print(f"[yellow]⚠[/yellow] Wall '{wall_id}' has a free end")

    groups = connected_wall_groups(build_wall_graph(sketch_obj.walls))
    if len(groups) > 1:
        console.print(f"[blue]ℹ[/blue] {len(groups)} disconnected wall groups")

    try:
        validate_sketch(sketch_obj)
    except InvalidSketch as e:
        for problem in e.problems:
            console.print(f"[red]✗[/red] {problem}")
        raise typer.Exit(1)

    console.print("[bold green]✓ Sketch is valid[/bold green]")


@app.command()
def render(
    sketch: Path = typer.Option(..., "--sketch", "-s", help="Path to sketch JSON file"),
    output: Path = typer.Option(..., "--out", help="Path to output PNG file"),
    pixels_per_foot: float = typer.Option(
        DEFAULT_PIXELS_PER_FOOT, "--ppf", help="Coordinate units per foot"
    ),
):
    """Render a sketch to a PNG image."""
    sketch_obj = _load(sketch)

    if not generate_sketch_image(sketch_obj, output, pixels_per_foot):
        _fail(f"Could not render {sketch}")

    console.print(f"[green]✓[/green] Image saved to {output}")


@app.command()
def save(
    sketch: Path = typer.Option(..., "--sketch", "-s", help="Path to sketch JSON file"),
    output: Path = typer.Option(..., "--out", help="Path to output payload JSON file"),
    pixels_per_foot: float = typer.Option(
        DEFAULT_PIXELS_PER_FOOT, "--ppf", help="Coordinate units per foot"
    ),
):
    """Detect rooms and write the payload stored when a plan is saved."""
    sketch_obj = _load(sketch)
    payload = build_save_payload(sketch_obj, pixels_per_foot)

    output.parent.mkdir(parents=True, exist_ok=True)
    with open(output, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)

    console.print(f"[green]✓[/green] Saved {len(payload['rooms'])} rooms to {output}")


if __name__ == "__main__":
    app()
