"""CLI entry point using Typer."""

import logging
from collections.abc import Callable
from functools import wraps
from typing import Annotated, Any, TypeVar

import typer

from draftkit.drafts import DraftError, create_draft, draft_path
from draftkit.logging_utils import setup_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Create a dated draft folder with a README stub.",
    add_completion=False,
)

USAGE = "Usage: {prog} <note name>"

R = TypeVar("R")


def handle_cli_errors(func: Callable[..., R]) -> Callable[..., R]:
    """Handle common CLI errors."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> R:  # noqa: ANN401
        try:
            return func(*args, **kwargs)
        except (DraftError, OSError) as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1) from e

    return wrapper


@app.command("draft", context_settings={"ignore_unknown_options": True})
@handle_cli_errors
def cmd_draft(
    ctx: typer.Context,
    note_names: Annotated[
        list[str] | None,
        typer.Argument(
            metavar="NOTE_NAME",
            help="Name of the note, used as the draft folder suffix",
            show_default=False,
        ),
    ] = None,
    root: Annotated[
        str,
        typer.Option("--root", "-C", help="Directory that holds drafts/"),
    ] = ".",
    truncate: Annotated[
        bool,
        typer.Option(help="Empty an existing README.md instead of keeping it"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output to stderr"),
    ] = False,
) -> None:
    """Create drafts/<YYYYMMDD>_<note name>/README.md and print its folder."""
    names = note_names or []
    if len(names) != 1:
        typer.echo(USAGE.format(prog=ctx.find_root().info_name), err=True)
        raise typer.Exit(code=1)

    setup_logging(logging.DEBUG if verbose else logging.WARNING)

    path = draft_path(names[0], root=root)
    typer.echo(path)
    try:
        create_draft(path, truncate=truncate)
    except OSError:
        logger.exception("Failed to create draft %s", path, extra={"draft": path})
        raise


def main() -> None:
    """Entry point for the draft CLI."""
    app()


if __name__ == "__main__":
    main()
