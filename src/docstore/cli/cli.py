"""CLI entrypoint: Typer app definition and command registration"""

import typer

from docstore.cli.commands import get_cmd, main_callback, search_cmd


app = typer.Typer(name="docstore", no_args_is_help=True, help="In-memory document store with multi-criteria search")

app.callback()(main_callback)
app.command(name="search")(search_cmd)
app.command(name="get")(get_cmd)
