"""CLI entrypoint: Typer app definition and command registration"""

import typer

from fmstrip.cli.commands import preprocess_cmd, strip_cmd, supports_cmd


app = typer.Typer(
    name="mdbook-frontmatter-strip",
    add_completion=False,
    help="mdBook preprocessor that strips YAML frontmatter from chapters",
)

app.callback(invoke_without_command=True)(preprocess_cmd)
app.command(name="supports")(supports_cmd)
app.command(name="strip")(strip_cmd)
