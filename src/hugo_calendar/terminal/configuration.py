# SPDX-License-Identifier: MIT

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from yaml import YAMLError

from hugo_calendar import configuration
from hugo_calendar.repository.configuration import CONFIGURATION_REPO
from hugo_calendar.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def load_config_or_exit(console: Console) -> configuration.Configuration:
    try:
        return CONFIGURATION_REPO.get_config()
    except (OSError, ValueError, YAMLError) as e:
        console.print(
            f"[red]Error: Could not read configuration "
            f"{escape(str(configuration.APP_CONFIG_PATH))}: {escape(str(e))}[/red]"
        )
        raise typer.Exit(1)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    console = Console()
    config = load_config_or_exit(Console(stderr=True, soft_wrap=True))

    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("filter_text", escape(config["filter_text"]) or "✗ Disabled")
    table.add_row(
        "show_counts", "✓ Enabled" if config["show_counts"] else "✗ Disabled"
    )
    table.add_row("fallback_width", str(config["fallback_width"]))
    table.add_row("posts_dir", escape(config["posts_dir"]))
    table.add_row("post_filename", escape(config["post_filename"]))
    table.add_row("today_style", escape(config["today_style"]))
    table.add_row("active_style", escape(config["active_style"]))
    table.add_row("neutral_style", escape(config["neutral_style"]))
    table.add_row("header_style", escape(config["header_style"]))

    console.print(table)


@app.command("path, p")
def path() -> None:
    """Show where the configuration file is read from."""
    console = Console(highlight=False, soft_wrap=True)
    status = ""
    if not configuration.APP_CONFIG_PATH.is_file():
        status = " (not created, using defaults)"
    console.print(f"{escape(str(configuration.APP_CONFIG_PATH))}{status}")
