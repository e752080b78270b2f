"""Command-line interface for the geoc library."""

import json
from typing import Any

import typer

from . import __version__
from .coordinates import parse_coord, parse_point
from .exceptions import GeocException
from .formats import TEMPLATE_LAT, TEMPLATE_LON, TEMPLATE_POINT_SEPARATOR, format_class, format_display_name
from .locations import LOCATION_LAT, LOCATION_LON, location_display_name, normalize_location
from .models import Coord, Point
from .parsing import match_coordinate

app = typer.Typer(help="Geographic coordinate parsing and formatting CLI")


@app.command()
def parse(
    text: str = typer.Argument(..., help="Coordinate to parse, e.g. 48-33-27N"),
    as_json: bool = typer.Option(False, "--json", help="Output JSON instead of text"),
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print JSON output"),
):
    """Parse a coordinate string into decimal degrees."""
    try:
        coord = parse_coord(text)
        format_name = format_display_name(format_class(match_coordinate(text)))
        if as_json:
            payload = _with_meta({"input": text, "format": format_name, **_coord_payload(coord)})
            typer.echo(json.dumps(payload, indent=2 if pretty else None))
            return
        typer.echo(f"Value: {coord.value:.6f}")
        typer.echo(f"Location: {location_display_name(coord.loc)}")
        typer.echo(f"Format: {format_name}")
    except GeocException as e:
        typer.echo(f"Parse error: {e}", err=True)
        raise typer.Exit(1)


@app.command(name="parse-point")
def parse_point_command(
    text: str = typer.Argument(..., help="Point to parse, e.g. '48-33-27N; 120-57-49E'"),
    as_json: bool = typer.Option(False, "--json", help="Output JSON instead of text"),
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print JSON output"),
):
    """Parse a latitude/longitude pair."""
    try:
        point = parse_point(text)
        if as_json:
            payload = _with_meta(
                {"input": text, "lat": _coord_payload(point.lat), "lon": _coord_payload(point.lon)}
            )
            typer.echo(json.dumps(payload, indent=2 if pretty else None))
            return
        typer.echo(f"Latitude: {point.lat.value:.6f}")
        typer.echo(f"Longitude: {point.lon.value:.6f}")
    except GeocException as e:
        typer.echo(f"Parse error: {e}", err=True)
        raise typer.Exit(1)


@app.command(name="format")
def format_command(
    value: float = typer.Argument(..., help="Signed decimal degrees"),
    template: str = typer.Argument(..., help="Example of the output format, e.g. 48°33'27\"N"),
    loc: str = typer.Option("none", "--loc", help="Location of the value: lat, lon, or none"),
):
    """Format decimal degrees using an example string."""
    try:
        location = normalize_location(loc)
    except ValueError as e:
        typer.echo(f"Format error: {e}", err=True)
        raise typer.Exit(1)
    try:
        typer.echo(Coord(value, location).format(template))
    except GeocException as e:
        typer.echo(f"Format error: {e}", err=True)
        raise typer.Exit(1)


@app.command(name="format-point")
def format_point_command(
    lat: float = typer.Argument(..., help="Latitude in signed decimal degrees"),
    lon: float = typer.Argument(..., help="Longitude in signed decimal degrees"),
    lat_template: str = typer.Option(TEMPLATE_LAT, "--lat-template", help="Example of the latitude format"),
    lon_template: str = typer.Option(TEMPLATE_LON, "--lon-template", help="Example of the longitude format"),
    separator: str = typer.Option(TEMPLATE_POINT_SEPARATOR, "--separator", help="Text between latitude and longitude"),
):
    """Format a latitude/longitude pair using example strings."""
    point = Point(Coord(lat, LOCATION_LAT), Coord(lon, LOCATION_LON))
    try:
        typer.echo(point.format(lat_template, lon_template, separator))
    except GeocException as e:
        typer.echo(f"Format error: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def convert(
    text: str = typer.Argument(..., help="Coordinate to convert"),
    template: str = typer.Argument(..., help="Example of the output format"),
):
    """Convert a coordinate string to the format of an example string."""
    try:
        typer.echo(parse_coord(text).format(template))
    except GeocException as e:
        typer.echo(f"Convert error: {e}", err=True)
        raise typer.Exit(1)


def main():
    """Entry point for the CLI."""
    app()


def _coord_payload(coord: Coord) -> dict[str, Any]:
    return {
        "value": coord.value,
        "location": location_display_name(coord.loc),
        "text": str(coord),
    }


def _with_meta(payload: dict[str, Any]) -> dict[str, Any]:
    meta = {
        "generator": {
            "name": "geoc",
            "version": __version__,
        }
    }
    combined = dict(payload)
    combined["_meta"] = meta
    return combined


if __name__ == "__main__":
    main()
