from __future__ import annotations

from typing import Annotated

import typer

from ..context import ParseContext
from ..convert import convert, format_instant
from ..global_config import DEFAULT_DEST_TZ
from ..parsing import parse
from ..timezones import get_timezone_db
from ..utils.time import format_fixed
from .base import configure_logging, fail, get_logger, get_tzconv_version, handle_errors

configure_logging()
logger = get_logger(__name__)

app = typer.Typer(
    help="Convert a date/time in any timezone into another timezone.",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"tzconv {get_tzconv_version()}")
        raise typer.Exit()


@app.command()
def convert_command(
    datetime_text: Annotated[
        str,
        typer.Argument(
            metavar="DATETIME",
            help="Date/time to convert, e.g. '2023-10-22 10:34:16 jst' or '10:34:16 +09:00'",
        ),
    ],
    dest_tz: Annotated[
        str,
        typer.Argument(metavar="DEST_TZ", help="Timezone to convert to"),
    ] = DEFAULT_DEST_TZ,
    source_tz: Annotated[
        str | None,
        typer.Option(
            "-s",
            "--source",
            help="Timezone of DATETIME; overrides any timezone in the string",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Report every format tried and every error"),
    ] = False,
    iso: Annotated[
        bool,
        typer.Option("--iso", help="Print the result as RFC 3339"),
    ] = False,
    epoch: Annotated[
        bool,
        typer.Option("--epoch/--no-epoch", help="Recognize raw Unix epoch seconds"),
    ] = True,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit",
        ),
    ] = None,
) -> None:
    """Parse DATETIME, resolve its timezone and print it in DEST_TZ.

    Destination and source timezones are checked against the timezone
    database before anything is parsed.

    User Output:
        - Converted date/time on stdout.
        - With --verbose, the parsed fixed-offset instant before conversion.
        - Red error message on stderr and exit code 1 on unknown timezones or
          unparseable input.
    """
    db = get_timezone_db()

    dest_zone = db.zone(dest_tz)
    if dest_zone is None:
        raise fail(
            f"Destination timezone {dest_tz} could not be found in the timezone database"
        )

    source_zone = None
    if source_tz is not None:
        source_zone = db.zone(source_tz)
        if source_zone is None:
            raise fail(
                f"Source timezone {source_tz} could not be found in the timezone database"
            )

    ctx = ParseContext(
        verbose=verbose,
        source_zone=source_zone,
        epoch=epoch,
        timezone_db=db,
    )
    with handle_errors("parse", logger=logger):
        parsed = parse(datetime_text, ctx)

    if verbose:
        typer.echo(format_fixed(parsed))

    typer.echo(format_instant(convert(parsed, dest_zone), "iso" if iso else "display"))


def main() -> None:
    """Main entry point for package CLI.

    Invokes the Typer application, which handles argument parsing and
    execution.

    Side Effects:
        - Processes CLI arguments and prints the converted date/time.
        - Exits with code 1 on unknown timezones or unparseable input.
    """
    app()


if __name__ == "__main__":
    main()
