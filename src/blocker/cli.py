"""`blocker` console script."""

from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path
from typing import Annotated, Optional

import typer

from blocker.__about__ import __version__
from blocker.config import LOG_LEVELS, Settings

app = typer.Typer(
    name="blocker",
    help="Content-addressable blob store over HTTP.",
    add_completion=False,
)


def _check_log_level(value: Optional[str]) -> Optional[str]:
    if value is not None and value.lower() not in LOG_LEVELS:
        raise typer.BadParameter(f"must be one of: {', '.join(LOG_LEVELS)}")
    return value


@app.callback(invoke_without_command=True)
def _root(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(f"blocker v{__version__}")
        typer.echo(ctx.get_usage())


@app.command()
def version() -> None:
    """Print the version and exit."""
    typer.echo(f"blocker v{__version__}")


def resolve_settings(
    host: Optional[str] = None,
    port: Optional[int] = None,
    db_dir: Optional[Path] = None,
    log_level: Optional[str] = None,
) -> Settings:
    """Environment settings with command line overrides applied."""
    settings = Settings.from_env()
    overrides = {
        "host": host,
        "port": port,
        "db_dir": db_dir,
        "log_level": log_level,
    }
    return replace(settings, **{k: v for k, v in overrides.items() if v is not None})


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option(help="Interface to bind (env: HOST).")] = None,
    port: Annotated[Optional[int], typer.Option(help="Port to listen on (env: PORT).")] = None,
    db_dir: Annotated[Optional[Path], typer.Option(help="Storage root (env: DB_DIR).")] = None,
    log_level: Annotated[
        Optional[str], typer.Option(help="Log verbosity (env: LOG_LEVEL).", callback=_check_log_level)
    ] = None,
) -> None:
    """Run the HTTP server."""
    from blocker.server.app import run_server

    run_server(resolve_settings(host, port, db_dir, log_level))


def main(argv: Sequence[str] | None = None) -> None:
    app(args=argv, prog_name="blocker")


if __name__ == "__main__":
    main()
