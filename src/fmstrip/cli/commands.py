"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from fmstrip.config import Settings, load_config
from fmstrip.core.envelope import EnvelopeError
from fmstrip.core.pipeline import run_preprocess, supports_renderer
from fmstrip.core.split import split_frontmatter
from fmstrip.util.logging import configure_logging, get_logger


logger = get_logger(__name__)


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def preprocess_cmd(
    ctx: typer.Context,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Log level for stderr output")] = None,
    ):
    """Read the [context, book] envelope from stdin and write the stripped book to stdout."""
    try:
        settings = load_config(overrides={"log_level": log_level})
    except ValueError as e:
        _fail(str(e))
    configure_logging(settings.log_level)
    ctx.obj = settings
    if ctx.invoked_subcommand is not None:
        return

    try:
        raw = typer.get_text_stream("stdin").read()
    except (OSError, UnicodeDecodeError) as e:
        _fail("Failed to read stdin", e)
    try:
        output = run_preprocess(raw)
    except EnvelopeError as e:
        _fail(str(e))
    typer.echo(output)


def supports_cmd(
    ctx: typer.Context,
    renderer: Annotated[str, typer.Argument(help="Renderer name mdbook asks about")],
    ):
    """Exit 0 if the renderer is supported, 1 otherwise."""
    settings: Settings = ctx.obj
    renderers = settings.renderers
    supported = supports_renderer(renderer, renderers)
    logger.debug("Renderer %r supported: %s (configured: %s)", renderer, supported, renderers)
    raise typer.Exit(0 if supported else 1)


def strip_cmd(
    path: Annotated[Path, typer.Argument(help="Markdown file to split")],
    frontmatter: Annotated[bool, typer.Option("--frontmatter", help="Print the frontmatter instead of the body")] = False,
    ):
    """Split one file and print its body (or its frontmatter)."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot read {path}", e)
    body, fm = split_frontmatter(text)
    if frontmatter:
        if fm is not None:
            typer.echo(fm)
    else:
        typer.echo(body)
