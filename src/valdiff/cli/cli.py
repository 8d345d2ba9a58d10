"""CLI entrypoint: Typer app definition and command registration"""

import typer

from valdiff.cli.commands import compare_cmd, encodings_cmd


app = typer.Typer(name="valdiff", no_args_is_help=True, help="Render the difference between actual and expected values")

app.command(name="compare")(compare_cmd)
app.command(name="encodings")(encodings_cmd)
