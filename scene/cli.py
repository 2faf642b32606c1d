"""CLI entrypoint for the station map."""

from __future__ import annotations

import json
from pathlib import Path as FilePath

import click
from rich.console import Console
from rich.table import Table

from common.types import GeographicPoint
from common.units import DISTANCE_UNITS, convert_distance
from geospatial.distance_calculations import great_circle_distance, initial_bearing_deg
from geospatial.interpolation import AntipodalPointsError
from geospatial.path_builder import build_path
from scene.basemap import decode_world_map, PALETTE
from scene.config import SceneConfig
from scene.station_map import StationMap
from validation.consistency_checks import GeometryConsistencyChecker

console = Console()


class GeoPointType(click.ParamType):
    """A ``LAT,LON`` pair in degrees."""

    name = "lat,lon"

    def convert(self, value, param, ctx):
        if isinstance(value, GeographicPoint):
            return value
        try:
            lat_text, lon_text = value.split(",")
            return GeographicPoint(latitude=float(lat_text), longitude=float(lon_text))
        except ValueError as e:
            self.fail(f"{value!r} is not a valid LAT,LON pair: {e}", param, ctx)


GEO_POINT = GeoPointType()
UNIT_CHOICE = click.Choice(sorted(DISTANCE_UNITS))


@click.group()
def cli():
    """Great-circle station map: distances and paths on a spherical Earth."""


@cli.command()
@click.option("--from", "start", required=True, type=GEO_POINT, help="Start as LAT,LON.")
@click.option("--to", "end", required=True, type=GEO_POINT, help="End as LAT,LON.")
@click.option("--units", default="km", type=UNIT_CHOICE, help="Distance unit.")
def distance(start: GeographicPoint, end: GeographicPoint, units: str):
    """Great-circle distance between two points."""
    value = convert_distance(great_circle_distance(start, end), units)
    console.print(f"{value:.3f} {units}")


@cli.command()
@click.option("--from", "start", required=True, type=GEO_POINT, help="Start as LAT,LON.")
@click.option("--to", "end", required=True, type=GEO_POINT, help="End as LAT,LON.")
@click.option("--segments", default=SceneConfig().num_segments, help="Number of path segments.")
@click.option("--json", "as_json", is_flag=True, help="Print vertices as JSON.")
def path(start: GeographicPoint, end: GeographicPoint, segments: int, as_json: bool):
    """Normalized map vertices of the great-circle path."""
    try:
        result = build_path(start, end, segments)
    except (AntipodalPointsError, ValueError) as e:
        raise click.ClickException(str(e))

    if as_json:
        click.echo(json.dumps([[p.x, p.y] for p in result.points]))
        return

    table = Table(title=f"Path ({len(result)} vertices)")
    table.add_column("#", justify="right")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")

    for i, point in enumerate(result.points):
        style = None if point.in_bounds else "red"
        table.add_row(str(i), f"{point.x:+.5f}", f"{point.y:+.5f}", style=style)

    console.print(table)


@cli.command()
@click.option("--point", "-p", "points", multiple=True, required=True, type=GEO_POINT,
              help="Station as LAT,LON; repeat for each station in order.")
@click.option("--units", default="km", type=UNIT_CHOICE, help="Distance unit.")
@click.option("--audit", "audit_path", type=click.Path(dir_okay=False, path_type=FilePath),
              default=None, help="Write the route audit log to this JSON file.")
def route(points: tuple, units: str, audit_path: FilePath | None):
    """Place stations in order and report every leg."""
    station_map = StationMap()
    try:
        for station in points:
            station_map.add_station(station)
    except AntipodalPointsError as e:
        raise click.ClickException(str(e))

    stations = station_map.stations
    table = Table(title=f"Route ({len(stations)} stations)")
    table.add_column("Leg", justify="right")
    table.add_column("From")
    table.add_column("To")
    table.add_column("Bearing", justify="right")
    table.add_column(f"Distance ({units})", justify="right")

    for i, distance_km in enumerate(station_map.segment_distances):
        start, end = stations[i], stations[i + 1]
        table.add_row(
            str(i + 1),
            f"{start.latitude:.3f}, {start.longitude:.3f}",
            f"{end.latitude:.3f}, {end.longitude:.3f}",
            f"{initial_bearing_deg(start, end):.1f}°",
            f"{convert_distance(distance_km, units):.1f}",
        )

    console.print(table)
    total = convert_distance(station_map.total_distance_km, units)
    console.print(f"[bold]Total:[/] {total:.1f} {units}")

    if audit_path is not None:
        station_map.audit.export_json(audit_path)


@cli.command()
@click.option("--from", "start", required=True, type=GEO_POINT, help="Start as LAT,LON.")
@click.option("--to", "end", required=True, type=GEO_POINT, help="End as LAT,LON.")
@click.option("--segments", default=SceneConfig().num_segments, help="Number of path segments.")
def check(start: GeographicPoint, end: GeographicPoint, segments: int):
    """Run the geometric consistency checks on one pair of points."""
    checker = GeometryConsistencyChecker()
    try:
        results = checker.check_all(start, end, segments)
    except (AntipodalPointsError, ValueError) as e:
        raise click.ClickException(str(e))

    table = Table(title="Consistency checks")
    table.add_column("Check")
    table.add_column("Result", width=6)
    table.add_column("Details")

    for result in results:
        status = "[green]PASS[/]" if result.passed else "[red]FAIL[/]"
        table.add_row(result.test_name, status, result.message)

    console.print(table)
    if not all(r.passed for r in results):
        raise SystemExit(1)


@cli.command()
def basemap():
    """Summarise the bundled world map texture."""
    texture = decode_world_map()
    pixels = texture.reshape(-1, 3)

    table = Table(title=f"World map {texture.shape[1]}x{texture.shape[0]}")
    table.add_column("Colour")
    table.add_column("Pixels", justify="right")

    for index, color in enumerate(PALETTE):
        count = int((pixels == color).all(axis=1).sum())
        table.add_row(f"{index}: {tuple(float(c) for c in color)}", str(count))

    console.print(table)


if __name__ == "__main__":
    cli()
