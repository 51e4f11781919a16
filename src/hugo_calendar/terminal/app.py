# SPDX-License-Identifier: MIT

import typer

from hugo_calendar.terminal import configuration
from hugo_calendar.terminal.calendar import calendar
from hugo_calendar.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="hugo-calendar - Post activity calendars for Hugo sites",
    no_args_is_help=True,
)
app.command(name="calendar, cal")(calendar)
app.add_typer(configuration.app, name="config, c", help="Show configuration")


def run() -> None:
    app()
