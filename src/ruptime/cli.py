from __future__ import annotations

from datetime import datetime

import typer

from ruptime.config import PROG_NAME, VERSION, SourceSettings
from ruptime.display import (
    build_pretty_line,
    build_since_line,
    build_status_line,
    print_line,
)
from ruptime.logging import get_logger
from ruptime.system import ParseError, collect_status, read_elapsed

app = typer.Typer(
    name=PROG_NAME,
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Tell how long the system has been running.",
)

log = get_logger("ruptime")


def get_settings() -> SourceSettings:
    return SourceSettings()


@app.command()
def main(
    ctx: typer.Context,
    pretty: bool = typer.Option(False, "--pretty", "-p", help="show uptime in pretty format"),
    since: bool = typer.Option(False, "--since", "-s", help="system up since"),
    version: bool = typer.Option(False, "--version", "-V", help="output version information and exit"),
) -> None:
    """
    Print the current time, how long the system has been running, how many
    users are logged on, and the system load averages.
    """
    if sum((pretty, since, version)) > 1:
        typer.echo(ctx.get_help())
        raise typer.Exit(1)

    if version:
        print_line(f"{PROG_NAME} {VERSION}")
        return

    settings = get_settings()
    now = datetime.now()
    try:
        if pretty:
            print_line(build_pretty_line(read_elapsed(settings)))
        elif since:
            print_line(build_since_line(read_elapsed(settings), now))
        else:
            print_line(build_status_line(collect_status(settings), now))
    except (ParseError, OSError) as e:
        log.error(f"{PROG_NAME}: {e}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
