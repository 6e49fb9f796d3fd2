"""Database CLI commands."""

import typer

from src.storefront.core.services import DbSessionService
from src.storefront.runtime.context import get_config
from src.storefront.runtime.init_db import init_db

from .console import console

db_app = typer.Typer(help="🗄️  Database commands")


@db_app.command("init")
def init() -> None:
    """Create the database tables if they do not exist yet."""
    database = get_config().database
    db_service = DbSessionService()
    try:
        init_db(db_service.engine)
    except Exception as e:
        console.print(f"[red]❌ Failed to initialize database: {e}[/red]")
        raise typer.Exit(code=1) from e
    finally:
        db_service.dispose()

    kind = "sqlite" if database.is_sqlite else "postgresql"
    console.print(f"[green]✅ Database initialized ({kind})[/green]")
