"""Vellum CLI application using Typer.

Database maintenance for the content-object tables.
"""

import asyncio

import typer
from rich.console import Console

from vellum.infrastructure.persistence.sqlalchemy.init_db import (
    content_table_names,
    create_tables,
    reset_tables,
)
from vellum_config import configure_logging

app = typer.Typer(
    name="vellum",
    help="Vellum content-object store CLI",
    no_args_is_help=True,
)
console = Console()

db_app = typer.Typer(
    name="db",
    help="Content-object table maintenance",
    no_args_is_help=True,
)
app.add_typer(db_app)


@db_app.command("init")
def db_init() -> None:
    """Create content-object tables that do not exist yet."""
    configure_logging()
    created = asyncio.run(create_tables())

    if created:
        console.print(f"[green]Created[/green] {', '.join(created)}")
    else:
        console.print("[dim]All content tables already exist.[/dim]")


@db_app.command("tables")
def db_tables() -> None:
    """List the tables mapped by content-object classes."""
    for name in content_table_names():
        console.print(name)


@db_app.command("reset")
def db_reset(
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Skip the confirmation prompt",
    ),
) -> None:
    """Drop and recreate all content-object tables (DELETES ALL DATA)."""
    tables = content_table_names()
    if not yes:
        console.print(
            f"[yellow]This drops {len(tables)} tables: {', '.join(tables)}[/yellow]"
        )
        if not typer.confirm("Delete all stored content objects?", default=False):
            console.print("Aborted.")
            raise typer.Exit(1)

    configure_logging()
    asyncio.run(reset_tables())
    console.print("[green]Content tables recreated.[/green]")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
