import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer

from wgscoord.core.parser import parse_coordinate, parse_lat_lon
from wgscoord.csv_handler import parse_csv_column, save_results_csv
from wgscoord.domain.coordinate import CanonicalCoordinate
from wgscoord.domain.schemas import CoordinateRecord
from wgscoord.errors import CoordinateError

app = typer.Typer(no_args_is_help=True)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging.")) -> None:
    """wgscoord: latitude/longitude text parsing and formatting."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


@app.command()
def version() -> None:
    """Print version."""
    typer.echo("wgscoord 0.1.0")


def _emit(coord: CanonicalCoordinate, text: Optional[str], dms: bool, as_json: bool) -> None:
    if as_json:
        typer.echo(CoordinateRecord.from_coordinate(coord, text).model_dump_json())
    elif dms:
        typer.echo(coord.to_dms())
    else:
        typer.echo(coord.to_decimal())


def _fail(e: Exception) -> NoReturn:
    typer.echo(f"Error: {e}", err=True)
    raise typer.Exit(code=1)


@app.command()
def parse(
    text: str = typer.Argument(..., help='Coordinate text, e.g. "175.836666,-39.78,1160ft". Use -- before text starting with "-".'),
    dms: bool = typer.Option(False, "--dms", help="Print degrees, minutes, seconds."),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON record."),
) -> None:
    """Parse free-form coordinate text."""
    try:
        coord = parse_coordinate(text)
    except CoordinateError as e:
        _fail(e)
    _emit(coord, text, dms, as_json)


@app.command("lat-lon")
def lat_lon(
    lat: str = typer.Argument(..., help='Latitude, e.g. "393030.78S"'),
    lon: str = typer.Argument(..., help='Longitude, e.g. "1753300.8E"'),
    dms: bool = typer.Option(False, "--dms", help="Print degrees, minutes, seconds."),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON record."),
) -> None:
    """Parse separate latitude and longitude strings."""
    try:
        coord = parse_lat_lon(lat, lon)
    except CoordinateError as e:
        _fail(e)
    _emit(coord, f"{lat}, {lon}", dms, as_json)


@app.command("format")
def format_(
    lon: float = typer.Option(..., "--lon", help="Longitude in degrees, negative is West"),
    lat: float = typer.Option(..., "--lat", help="Latitude in degrees, negative is South"),
    elevation: Optional[float] = typer.Option(None, "--elevation", help="Metres AMSL"),
    dms: bool = typer.Option(False, "--dms", help="Print degrees, minutes, seconds."),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON record."),
) -> None:
    """Render numeric longitude/latitude as text."""
    _emit(CanonicalCoordinate(lon, lat, elevation), None, dms, as_json)


@app.command()
def convert(
    input_csv: Path = typer.Option(..., "--input-csv", exists=True, readable=True, help="CSV with a coordinate text column"),
    column: str = typer.Option("coordinate", "--column", help="Name of the coordinate text column"),
    output_csv: Optional[Path] = typer.Option(None, "--output-csv", help="Output CSV with Lon, Lat, h columns."),
) -> None:
    """Parse a column of coordinate text in a CSV file."""
    try:
        df = parse_csv_column(input_csv, column)
    except ValueError as e:
        _fail(e)

    failed = int((df["error"] != "").sum())
    typer.echo(f"Parsed {len(df) - failed} of {len(df)} rows.")

    if output_csv:
        save_results_csv(output_csv, df)
        typer.echo(f"Coordinates saved to: {output_csv}")
    else:
        typer.echo(df.to_csv(index=False))


if __name__ == "__main__":
    app()
