"""Main CLI application module."""

import typer

from src.catalog.runtime.context import get_config

from .catalog_commands import categories_app, products_app
from .db_commands import db_app

app = typer.Typer(
    help="🛒 Catalog CLI - database setup and catalog browsing",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(db_app, name="db")
app.add_typer(products_app, name="products")
app.add_typer(categories_app, name="categories")


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Bind address (defaults to config)"),
    port: int | None = typer.Option(None, help="Bind port (defaults to config)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """🚀 Run the catalog API with uvicorn."""
    import uvicorn

    config = get_config()
    uvicorn.run(
        "src.catalog.api.http.app:create_app",
        factory=True,
        host=host or config.app.host,
        port=port or config.app.port,
        reload=reload,
    )


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
