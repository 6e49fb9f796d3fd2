"""User management CLI commands."""

import typer
from rich.table import Table

from src.storefront.core.services import DbSessionService, UserService
from src.storefront.runtime.init_db import init_db

from .console import console

users_app = typer.Typer(help="👤 Manage users who can sign in and edit the catalog")


@users_app.command("create")
def create_user(
    email_address: str = typer.Argument(..., help="Email address used to sign in"),
    password: str = typer.Option(
        ...,
        "--password",
        "-p",
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
        help="Password (prompted when omitted)",
    ),
) -> None:
    """Create a user."""
    db_service = DbSessionService()
    init_db(db_service.engine)
    try:
        with db_service.session_scope() as session:
            user = UserService(session).register(email_address, password)
            console.print(
                f"[green]✅ Created user '{user.email_address}' ({user.id})[/green]"
            )
    except ValueError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(code=1) from e
    finally:
        db_service.dispose()


@users_app.command("list")
def list_users() -> None:
    """List all users."""
    db_service = DbSessionService()
    init_db(db_service.engine)
    try:
        with db_service.session_scope() as session:
            users = UserService(session).list_users()
    finally:
        db_service.dispose()

    if not users:
        console.print("[yellow]No users found[/yellow]")
        return

    table = Table(title="Users")
    table.add_column("ID", style="cyan")
    table.add_column("Email address", style="blue")
    table.add_column("Created", style="magenta")

    for user in users:
        table.add_row(user.id, user.email_address, user.created_at.isoformat())

    console.print(table)
    console.print(f"\n[green]Found {len(users)} users[/green]")
