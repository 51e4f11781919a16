# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console
from rich.markup import escape

from hugo_calendar.error import PostsDirectoryNotFound
from hugo_calendar.repository.post import PostRepository
from hugo_calendar.service.date_index import build_date_index
from hugo_calendar.terminal.configuration import load_config_or_exit
from hugo_calendar.terminal.parse import parse_month_option
from hugo_calendar.view.calendar import (
    get_available_width,
    print_calendar,
    render_calendar,
    today_local,
)


def calendar(
    project_path: Annotated[
        Path,
        typer.Argument(help="Path to the Hugo project", file_okay=False),
    ],
    month: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--month",
            "-m",
            parser=parse_month_option,
            help="Show only this month (YYYY-MM)",
        ),
    ] = None,
    counts: Annotated[
        Optional[bool],
        typer.Option(
            "--counts/--no-counts",
            "-c",
            help="Show post counts instead of day numbers",
        ),
    ] = None,
    filter_text: Annotated[
        Optional[str],
        typer.Option(
            "--filter",
            "-f",
            help="Skip posts whose body contains this text",
        ),
    ] = None,
    width: Annotated[
        Optional[int],
        typer.Option(
            "--width",
            "-w",
            min=1,
            help="Display width in columns (defaults to the terminal width)",
        ),
    ] = None,
) -> None:
    """Show a calendar of published posts per day."""
    console = Console(highlight=False, soft_wrap=True)
    err_console = Console(stderr=True, highlight=False, soft_wrap=True)

    config = load_config_or_exit(err_console)
    if filter_text is None:
        filter_text = config["filter_text"]
    show_counts = config["show_counts"] if counts is None else counts

    repository = PostRepository(
        project_path / config["posts_dir"], config["post_filename"]
    )
    try:
        records, warnings = repository.get_post_records(filter_text)
    except PostsDirectoryNotFound as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    for warning in warnings:
        err_console.print(
            f"[yellow]Warning: Could not parse front matter in "
            f"{escape(str(warning.path))}: {escape(warning.reason)}[/yellow]"
        )

    date_index = build_date_index(records, filter_text)
    lines = render_calendar(
        date_index,
        today_local(),
        get_available_width(console, config["fallback_width"], width),
        show_counts,
        month,
    )

    if len(lines) == 0:
        console.print("No posts found in the Hugo project.")
        return

    print_calendar(console, lines, config)
