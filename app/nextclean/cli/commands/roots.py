"""Roots command implementation.

Shows the default search roots (home directory and other user
directories). These roots are informational: scans only cover the
paths passed with --path, or the current directory.
"""

import typer

from nextclean.cache.roots import default_roots
from nextclean.utils.formatting import console

app = typer.Typer(
    help="Show default search roots.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def show_roots(ctx: typer.Context) -> None:
    """List the home directory and the other user directories."""
    if ctx.invoked_subcommand is not None:
        return

    for root in default_roots():
        console.print(str(root), highlight=False)
    console.print(
        "\n[dim]Pass these with --path to include them in a scan.[/dim]",
    )
