"""Main CLI entry point."""

import click
import uvicorn

from supplyledger.api.app import create_app
from supplyledger.config import Settings
from supplyledger.database.factories import create_sqlite_database
from supplyledger.domain.errors import StoreError
from supplyledger.domain.summary import SummaryService
from supplyledger.cli.error_handling import handle_error


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides SUPPLYLEDGER_DB_PATH environment variable)",
    envvar="SUPPLYLEDGER_DB_PATH",
)
@click.pass_context
def cli(ctx, db_path: str | None):
    """Supplyledger - supplier and procurement transaction records.

    Serve the HTTP API or inspect the database from the command line.
    """
    ctx.ensure_object(dict)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


@cli.command("init-db")
@click.pass_context
def init_db(ctx):
    """Create the suppliers and transactions tables if missing."""
    db = ctx.obj["db"]
    try:
        db.initialize_schema()
    except StoreError as e:
        handle_error(ctx, e)
        return
    click.echo(f"Initialized database at {db.database_url}")


@cli.command("summary")
@click.pass_context
def summary(ctx):
    """Print the supplier count and total spend."""
    db = ctx.obj["db"]
    service = SummaryService(db)
    try:
        db.initialize_schema()
        supplier_count = service.total_suppliers()
        total = service.total_spent()
    except StoreError as e:
        handle_error(ctx, e)
        return

    click.echo(f"Suppliers:   {supplier_count}")
    click.echo(f"Total spent: {total:,.2f} NOK")


@cli.command("serve")
@click.option("--host", default=None, help="Bind address (default: SUPPLYLEDGER_HOST or 127.0.0.1)")
@click.option("--port", type=int, default=None, help="Port (default: SUPPLYLEDGER_PORT or 3000)")
@click.pass_context
def serve(ctx, host: str | None, port: int | None):
    """Run the HTTP API.

    Examples:
        supplyledger serve
        supplyledger --db-path /var/lib/supplyledger/prod.db serve --port 8080
    """
    settings = Settings()
    app = create_app(db=ctx.obj["db"], settings=settings)
    host = host or settings.host
    port = port if port is not None else settings.port
    click.echo(f"Running on http://{host}:{port}")
    uvicorn.run(app, host=host, port=port, log_level=settings.log_level.lower())


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
