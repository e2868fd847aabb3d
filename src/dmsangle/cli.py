import typer
from pathlib import Path
from typing import Optional

from dmsangle.angles import ValidationError, parse, to_dms
from dmsangle.core.angle_input import classify, resolve
from dmsangle.csv_handler import convert_column, read_angles_csv, save_results_csv
from dmsangle.domain.schemas import AngleRecord, ConversionRequest
from dmsangle.logging_config import configure_logging

app = typer.Typer(no_args_is_help=True)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging to stderr."),
    log_json: bool = typer.Option(False, "--log-json", help="Structured JSON log output to stderr."),
) -> None:
    """dmsangle: convert angles between decimal degrees and degrees-minutes-seconds."""
    configure_logging(verbose=verbose, log_json=log_json)


@app.command()
def version() -> None:
    """Print version."""
    typer.echo("dmsangle 0.1.0")


@app.command("to-decimal")
def to_decimal(text: str = typer.Argument(..., help="DMS text, e.g. \"-12 30 15\" or 12°30'15\"")) -> None:
    """Parse DMS text and print decimal degrees."""
    dms = parse(text)
    if dms is None:
        typer.echo(f"Error: not a valid DMS angle: {text!r}", err=True)
        raise typer.Exit(code=1)
    typer.echo(repr(dms.to_decimal()))


@app.command("to-dms")
def to_dms_cmd(
    value: float = typer.Argument(..., help="Decimal degrees"),
    digits: int = typer.Option(0, "--digits", "-d", min=0, help="Decimal places for seconds."),
) -> None:
    """Print decimal degrees as DMS text."""
    try:
        dms = to_dms(value)
    except ValidationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(dms.format(digits))


@app.command()
def inspect(
    value: str = typer.Argument(..., help="Decimal degrees or DMS text"),
    digits: int = typer.Option(0, "--digits", "-d", min=0, help="Decimal places for seconds."),
) -> None:
    """Print every component of an angle as JSON."""
    request = ConversionRequest(value=value, fraction_digits=digits)
    dms = resolve(classify(request.value))
    if dms is None:
        typer.echo(f"Error: not a valid angle: {value!r}", err=True)
        raise typer.Exit(code=1)
    typer.echo(AngleRecord.from_dms(dms, request.fraction_digits).model_dump_json(indent=2))


@app.command("convert-csv")
def convert_csv(
    input_csv: Path = typer.Argument(..., exists=True, readable=True, help="CSV file to convert."),
    column: str = typer.Option(..., "--column", "-c", help="Column holding the angles."),
    to: str = typer.Option("dms", "--to", help="Conversion target: [dms|decimal]"),
    digits: int = typer.Option(0, "--digits", "-d", min=0, help="Decimal places for seconds."),
    output_csv: Optional[Path] = typer.Option(None, "--output", "-o", help="Output CSV (default: print to stdout)."),
) -> None:
    """Add a converted copy of one angle column to a CSV."""
    df = read_angles_csv(input_csv)
    try:
        result = convert_column(df, column, to=to, fraction_digits=digits)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if output_csv:
        save_results_csv(output_csv, result)
        typer.echo(f"Converted angles saved to: {output_csv}")
    else:
        typer.echo(result.to_csv(index=False), nl=False)


if __name__ == "__main__":
    app()
