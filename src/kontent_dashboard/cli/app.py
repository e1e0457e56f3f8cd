import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from kontent_dashboard.cli.analytics import analytics
from kontent_dashboard.cli.assign import assign, assignments, unassign
from kontent_dashboard.cli.items import items_app
from kontent_dashboard.cli.languages import languages_app
from kontent_dashboard.cli.serve import serve_app
from kontent_dashboard.cli.users import users_app

app = typer.Typer(
    name="kontent-dashboard",
    help="Kontent.ai dashboard CLI: browse content and manage assignments.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def _configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output.")] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


app.add_typer(items_app, name="items")
app.command("assign")(assign)
app.command("unassign")(unassign)
app.command("assignments")(assignments)
app.add_typer(languages_app, name="languages")
app.add_typer(users_app, name="users")
app.command("analytics")(analytics)
app.add_typer(serve_app, name="serve")


def main() -> None:
    app()
