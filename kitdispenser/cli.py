"""
Command-line interface for the dev kit dispenser.
"""

from __future__ import annotations

import os

import click

from kitdispenser.common.config import Config
from kitdispenser.common.exceptions import DispenserError
from kitdispenser.server import start_server
from kitdispenser.server.core import DispenserServer
from kitdispenser.server.layout import StorageLayout

base_dir_option = click.option(
    "--base-dir",
    default=None,
    help="Directory holding available/, used/, builds/ and dev-kit/ "
    "(default: from KITDISPENSER_BASE_DIR env or the current directory)",
)


def _apply_base_dir(base_dir: str | None) -> None:
    if base_dir:
        os.environ["KITDISPENSER_BASE_DIR"] = base_dir


@click.group()
def cli() -> None:
    """Dev kit dispenser CLI"""


@cli.command()
@base_dir_option
def init(base_dir: str | None) -> None:
    """Create the dispenser directory layout"""
    _apply_base_dir(base_dir)
    layout = StorageLayout(Config())
    layout.ensure()
    for directory in layout.directories():
        click.echo(str(directory))


@cli.command()
@base_dir_option
@click.option(
    "--host",
    default=None,
    help="Host to bind server to (default: from KITDISPENSER_SERVER_HOST env or 127.0.0.1)",
)
@click.option(
    "--port",
    default=None,
    type=int,
    help="Port to bind server to (default: from KITDISPENSER_SERVER_PORT env or 8000)",
)
def serve(base_dir: str | None, host: str | None, port: int | None) -> None:
    """Start the dispenser server"""
    # Set environment variables before building the config
    _apply_base_dir(base_dir)
    if host:
        os.environ["KITDISPENSER_SERVER_HOST"] = host
    if port:
        os.environ["KITDISPENSER_SERVER_PORT"] = str(port)

    start_server(Config())


@cli.command()
@base_dir_option
@click.argument("slug")
def dispense(base_dir: str | None, slug: str) -> None:
    """Build a dev kit bundle locally and print its archive name"""
    _apply_base_dir(base_dir)
    server = DispenserServer(config=Config())
    try:
        resp = server.service.dispense(slug)
    except DispenserError as e:
        raise click.ClickException(str(e)) from e
    click.echo(resp.zip_name)


@cli.command()
@base_dir_option
def status(base_dir: str | None) -> None:
    """Show available and used license counts"""
    _apply_base_dir(base_dir)
    server = DispenserServer(config=Config(), ensure_layout=False)
    pool = server.service.pool_status()
    for platform, count in sorted(pool.available.items()):
        click.echo(f"available[{platform or '-'}]: {count}")
    click.echo(f"used: {pool.used}")


if __name__ == "__main__":
    cli()
