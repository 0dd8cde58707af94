# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from kalender import configuration
from kalender.repository.configuration import CONFIGURATION_REPO
from kalender.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("user_email", config["user_email"] or "")
    table.add_row("locale", config["locale"])
    table.add_row("holiday_feed_url", config["holiday_feed_url"])
    table.add_row("holiday_cache_hours", str(config["holiday_cache_hours"]))
    table.add_row("request_timeout_seconds", str(config["request_timeout_seconds"]))
    table.add_row("data_path", config["data_path"] or str(configuration.DATA_PATH))
    table.add_row(
        "show_header", "✓ Enabled" if config["show_header"] else "✗ Disabled"
    )
    table.add_row("log_level", config["log_level"])

    console.print(table)
    console.print(f"\n[dim]Config file: {configuration.APP_CONFIG_PATH}[/dim]")


@app.command("set, s", no_args_is_help=True)
def set_config(
    user_email: Annotated[
        Optional[str], typer.Option("--user-email", "-u", help="who is signed in")
    ] = None,
    remove_user_email: Annotated[
        bool, typer.Option("--remove-user-email", help="sign out")
    ] = False,
    locale: Annotated[Optional[str], typer.Option("--locale")] = None,
    holiday_feed_url: Annotated[
        Optional[str], typer.Option("--holiday-feed-url")
    ] = None,
    holiday_cache_hours: Annotated[
        Optional[int], typer.Option("--holiday-cache-hours", min=0)
    ] = None,
    request_timeout_seconds: Annotated[
        Optional[int], typer.Option("--request-timeout-seconds", min=1)
    ] = None,
    data_path: Annotated[Optional[str], typer.Option("--data-path")] = None,
    remove_data_path: Annotated[bool, typer.Option("--remove-data-path")] = False,
    show_header: Annotated[
        Optional[bool], typer.Option("--show-header/--hide-header")
    ] = None,
    log_level: Annotated[
        Optional[str], typer.Option("--log-level", help=", ".join(LOG_LEVELS))
    ] = None,
) -> None:
    """Update configuration settings."""
    if log_level is not None and log_level.upper() not in LOG_LEVELS:
        raise typer.BadParameter(f"Log level must be one of: {', '.join(LOG_LEVELS)}")

    CONFIGURATION_REPO.update_config(
        user_email=user_email,
        remove_user_email=remove_user_email,
        locale=locale,
        holiday_feed_url=holiday_feed_url,
        holiday_cache_hours=holiday_cache_hours,
        request_timeout_seconds=request_timeout_seconds,
        data_path=data_path,
        remove_data_path=remove_data_path,
        show_header=show_header,
        log_level=log_level.upper() if log_level is not None else None,
    )
    view()
