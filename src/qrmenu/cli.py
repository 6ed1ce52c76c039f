"""Operator CLI: admin accounts, demo data and maintenance."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

import typer
from rich.console import Console
from rich.table import Table
from sqlalchemy.ext.asyncio import AsyncSession

from qrmenu import __version__
from qrmenu.config import settings
from qrmenu.core.constants import MIN_PASSWORD_LENGTH
from qrmenu.core.database import async_engine, async_session_factory
from qrmenu.core.logging import configure_logging
from qrmenu.models import Base
from qrmenu.modules.catalog.services import CatalogService, SweepResult
from qrmenu.seeding import DEMO_ADMIN, DEMO_SHOPS, SeedSummary, ensure_platform_admin, seed_demo


console = Console()

app = typer.Typer(
    name="qrmenu",
    help="Operate a QR Menu deployment.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

T = TypeVar("T")


def _run_in_session(work: Callable[[AsyncSession], Awaitable[T]]) -> T:
    """Run ``work`` in one session, committing on success."""

    async def runner() -> T:
        try:
            async with async_session_factory() as session:
                try:
                    result = await work(session)
                    await session.commit()
                except Exception:
                    await session.rollback()
                    raise
                return result
        finally:
            await async_engine.dispose()

    return asyncio.run(runner())


@app.callback(invoke_without_command=True)
def version_callback(
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit."
    ),
) -> None:
    """QR Menu CLI - manage admins, demo data and maintenance."""
    configure_logging(json_logs=False)
    if version:
        console.print(f"[bold cyan]qrmenu[/bold cyan] version {__version__}")
        raise typer.Exit()


@app.command(name="create-admin")
def create_admin(
    email: str = typer.Argument(..., help="Email of the platform admin"),
    password: str = typer.Option(
        ..., "--password", "-p", prompt=True, hide_input=True, confirmation_prompt=True
    ),
    name: str = typer.Option("Platform Admin", "--name", "-n", help="Display name"),
) -> None:
    """Create a platform admin, or promote an existing account."""
    if len(password) < MIN_PASSWORD_LENGTH:
        console.print(
            f"[red]Error:[/red] Password must be at least {MIN_PASSWORD_LENGTH} characters."
        )
        raise typer.Exit(1)

    account, created = _run_in_session(
        lambda session: ensure_platform_admin(session, email, password, name)
    )

    verb = "Created" if created else "Promoted"
    console.print(f"[green]✓[/green] {verb} platform admin [bold]{account.email}[/bold]")


@app.command(name="seed")
def seed(
    reset: bool = typer.Option(
        False, "--reset", help="Delete ALL existing data before seeding"
    ),
) -> None:
    """Load the demo admin and the two demo shops."""
    if reset and settings.is_production:
        console.print("[red]Error:[/red] Refusing to reset a production database.")
        raise typer.Exit(1)

    with console.status("[bold green]Seeding demo data..."):
        summary: SeedSummary = _run_in_session(lambda session: seed_demo(session, reset=reset))

    table = Table(title="Demo logins")
    table.add_column("Role")
    table.add_column("URL")
    table.add_column("Email")
    table.add_column("Password")
    table.add_row("platform admin", "/super-admin", DEMO_ADMIN["email"], DEMO_ADMIN["password"])
    for shop in DEMO_SHOPS:
        table.add_row("owner", f"/{shop['slug']}", shop["owner_email"], shop["owner_password"])
    console.print(table)

    console.print(
        f"[green]✓[/green] Shops created: {len(summary.shops_created)}, "
        f"skipped: {len(summary.shops_skipped)}, "
        f"categories: {summary.categories_created}, items: {summary.items_created}"
    )


@app.command(name="sweep-orphans")
def sweep_orphans() -> None:
    """Delete items and categories whose shop or category is gone."""
    result: SweepResult = _run_in_session(
        lambda session: CatalogService(session).sweep_orphans()
    )
    console.print(
        f"[green]✓[/green] Removed {result.categories_deleted} categories "
        f"and {result.items_deleted} items"
    )


@app.command(name="init-db")
def init_db() -> None:
    """Create all tables directly. Use Alembic outside development."""
    if settings.is_production:
        console.print(
            "[red]Error:[/red] init-db is for development. Run [bold]alembic upgrade head[/bold]."
        )
        raise typer.Exit(1)

    async def create_all() -> None:
        async with async_engine.begin() as connection:
            await connection.run_sync(Base.metadata.create_all)
        await async_engine.dispose()

    asyncio.run(create_all())
    console.print("[green]✓[/green] Tables created")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
