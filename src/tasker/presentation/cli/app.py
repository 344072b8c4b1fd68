"""Tasker CLI application using Typer.

This module provides command-line utilities for the Tasker backend:
secret generation for deployment configuration, database schema setup,
and running the API server.
"""

import asyncio
import base64
import secrets

import typer
import uvicorn
from rich.console import Console

from tasker.infrastructure.persistence.sqlalchemy.engine import (
    create_database_engine,
    drop_schema,
    init_schema,
)
from tasker_config.settings import MIN_JWT_SECRET_BYTES, get_settings

app = typer.Typer(
    name="tasker",
    help="Tasker - task list service CLI",
    no_args_is_help=True,
)
console = Console()


# Create secrets subcommand group
secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)

# Create db subcommand group
db_app = typer.Typer(
    name="db",
    help="Database schema management",
    no_args_is_help=True,
)
app.add_typer(db_app)


def generate_jwt_secret() -> str:
    """Return a fresh base64-encoded HS256 key of 32 random bytes."""
    return base64.b64encode(secrets.token_bytes(MIN_JWT_SECRET_BYTES)).decode()


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for Tasker configuration.

    Generates the required secrets:
    - JWT_SECRET_KEY: base64 key for signing JWT authentication tokens
    - POSTGRES_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Tasker Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={generate_jwt_secret()}")

    db_password = secrets.token_urlsafe(32)
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={db_password}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above values to your config/.env (Docker) or "
        "config/.env.dev (local) file.[/dim]\n"
    )


async def _run_schema_command(drop_first: bool) -> None:
    settings = get_settings()
    engine = create_database_engine(settings.database_url)
    try:
        if drop_first:
            await drop_schema(engine)
        await init_schema(engine)
    finally:
        await engine.dispose()


def _database_display() -> str:
    url = get_settings().database_url
    return url.split("@")[-1] if "@" in url else url


@db_app.command("init")
def db_init() -> None:
    """Create all missing database tables (idempotent)."""
    console.print(f"Database: [bold]{_database_display()}[/bold]")
    asyncio.run(_run_schema_command(drop_first=False))
    console.print("[green]Database initialized successfully![/green]")


@db_app.command("reset")
def db_reset(
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Skip the confirmation prompt",
    ),
) -> None:
    """Drop and recreate all database tables (USE WITH CAUTION!)."""
    console.print(f"Database: [bold]{_database_display()}[/bold]")

    if not force:
        console.print("[red]WARNING: This will DELETE ALL DATA in the database![/red]")
        if not typer.confirm("Continue?", default=False):
            console.print("Aborted.")
            raise typer.Exit(code=1)

    asyncio.run(_run_schema_command(drop_first=True))
    console.print("[green]Database recreated successfully![/green]")


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: int | None = typer.Option(None, help="Bind port (default: API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the API server with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "tasker.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
