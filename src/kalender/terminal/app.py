# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from kalender.repository.id_map import ID_MAP_REPO
from kalender.terminal import activity, configuration, holiday, view
from kalender.terminal.custom_typer import OrderedAliasedTyperGroup
from kalender.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="Kalender - jadwal kegiatan redaksi di terminal",
    no_args_is_help=True,
)
for sub_app, name in [
    (activity.app, "activity, a"),
    (view.app, "view, v"),
    (holiday.app, "holiday, h"),
    (configuration.app, "config, c"),
]:
    app.add_typer(sub_app, name=name)
app.command(name="search, s")(view.search)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool, typer.Option("--no-header", "-nh", help="hide the report banner")
    ] = False,
    clear_ids: Annotated[
        bool,
        typer.Option(
            "--clear-ids/--no-clear-ids",
            help="forget the short ids handed out so far and start again at 1",
        ),
    ] = False,
) -> None:
    """Options shared by every command."""
    if no_header:
        view_state.set_show_header(False)
    if clear_ids:
        ID_MAP_REPO.clear_ids()


def run() -> None:
    app()
