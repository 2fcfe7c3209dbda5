"""CLI for metro-signs."""

from __future__ import annotations

from pathlib import Path

import click

from metro_signs import __version__
from metro_signs.layout import LayoutError, Sign, compose_signs
from metro_signs.parser import Segment, load_line_description
from metro_signs.render import TileStyle, render_signs
from metro_signs.render.constants import CELL_SIZE, OUTPUT_FORMATS

DEFAULT_INPUT = "stations.txt"


def _load(input_file: Path) -> list[Segment]:
    try:
        return load_line_description(input_file)
    except ValueError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """metro-signs: Generate station indicator signs from a line description."""


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path),
                default=DEFAULT_INPUT)
@click.option("--assets", type=click.Path(file_okay=False, path_type=Path),
              default=Path("images"), envvar="METRO_SIGNS_ASSETS",
              help="Directory holding the tile images (default: ./images)")
@click.option("-o", "--output", type=click.Path(file_okay=False, path_type=Path),
              default=Path("output"), envvar="METRO_SIGNS_OUTPUT",
              help="Directory for generated signs (default: ./output)")
@click.option("--format", "fmt", type=click.Choice(OUTPUT_FORMATS), default="png",
              help="Output image format (default: png)")
@click.option("--cell-size", type=click.IntRange(min=1), default=CELL_SIZE,
              help=f"Tile size in pixels (default: {CELL_SIZE})")
def render(
    input_file: Path,
    assets: Path,
    output: Path,
    fmt: str,
    cell_size: int,
) -> None:
    """Render every sign described in a line description file."""
    click.echo(f"Reading {input_file}...")
    segments = _load(input_file)
    style = TileStyle(cell_size=cell_size)

    failed = False
    rendered = 0
    for segment in segments:
        click.echo(f"Generating line {segment.line_id}...")
        try:
            signs = compose_signs(segment)
        except LayoutError as e:
            click.echo(f"Line {segment.line_id}: layout error: {e}", err=True)
            failed = True
            continue

        report = render_signs(signs, assets, output, style=style, fmt=fmt)
        rendered += len(report.written)
        for err in report.errors:
            click.echo(f"  {err.name}: {err.message}", err=True)
        if not report.ok:
            failed = True

    click.echo(f"Rendered {rendered} signs -> {output}")
    if failed:
        raise SystemExit(1)


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path),
                default=DEFAULT_INPUT)
def validate(input_file: Path) -> None:
    """Validate a line description without rendering anything."""
    segments = _load(input_file)

    errors = []
    warnings = []
    total_signs = 0
    for segment in segments:
        line = segment.line_id
        for station, raw in segment.unrecognized:
            warnings.append(f"Line {line}: station '{station}' has unrecognized "
                            f"config code '{raw}', no sign will be built")
        try:
            total_signs += len(compose_signs(segment))
        except LayoutError as e:
            errors.append(f"Line {line}: {e}")

    for warning in warnings:
        click.echo(f"Warning: {warning}", err=True)

    if errors:
        click.echo("Validation errors:", err=True)
        for err in errors:
            click.echo(f"  - {err}", err=True)
        raise SystemExit(1)

    total_stations = sum(len(s.stations) for s in segments)
    click.echo(f"Valid: {len(segments)} segments, "
               f"{total_stations} stations, "
               f"{total_signs} signs")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path),
                default=DEFAULT_INPUT)
def info(input_file: Path) -> None:
    """Show the signs a line description would generate."""
    segments = _load(input_file)

    click.echo(f"Segments: {len(segments)}")
    for segment in segments:
        click.echo(f"Line {segment.line_id}: {len(segment.stations)} stations, "
                   f"anchor {', '.join(segment.anchor) or '(none)'}")
        try:
            signs: list[Sign] = compose_signs(segment)
        except LayoutError as e:
            click.echo(f"  layout error: {e}")
            continue
        for sign in signs:
            click.echo(f"  {sign.name} ({sign.columns}x{sign.rows})")
