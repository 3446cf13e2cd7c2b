"""Read-only catalog browsing commands."""

import typer
from rich.panel import Panel
from rich.table import Table

from src.catalog.core.exceptions import ResourceNotFoundError
from src.catalog.core.models.page import PageRequest
from src.catalog.core.services.catalog import CategoryService, ProductService
from src.catalog.entities.catalog.category import CategoryRepository
from src.catalog.entities.catalog.product import ProductRepository
from src.catalog.entities.core.errors import InvalidSortFieldError

from .utils import cli_session, console

products_app = typer.Typer(help="📦 Product commands")
categories_app = typer.Typer(help="🏷️  Category commands")


@products_app.command("list")
def list_products(
    page: int = typer.Option(0, min=0, help="Zero-based page number"),
    size: int = typer.Option(12, min=1, help="Products per page"),
    sort: str | None = typer.Option(None, help="Field to order by"),
) -> None:
    """📋 List products one page at a time."""
    try:
        with cli_session() as session:
            service = ProductService(ProductRepository(session), CategoryRepository(session))
            result = service.find_all_paged(PageRequest(page=page, size=size, sort=sort))
    except InvalidSortFieldError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1) from None

    if not result.content:
        console.print("[yellow]No products found[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Name", style="green")
    table.add_column("Price", style="yellow", justify="right")
    table.add_column("Categories", style="blue")

    for product in result.content:
        price = f"{product.price:.2f}" if product.price is not None else "-"
        categories = ", ".join(category.name for category in product.categories)
        table.add_row(str(product.id), product.name, price, categories or "-")

    console.print(table)
    console.print(
        f"Page {result.number + 1} of {result.total_pages} "
        f"({result.total_elements} products)"
    )


@products_app.command("show")
def show_product(product_id: int = typer.Argument(..., help="Product id")) -> None:
    """🔎 Show one product."""
    try:
        with cli_session() as session:
            service = ProductService(ProductRepository(session), CategoryRepository(session))
            product = service.find_by_id(product_id)
    except ResourceNotFoundError:
        console.print(f"[red]❌ Product {product_id} not found[/red]")
        raise typer.Exit(1) from None

    lines = [
        f"[bold]{product.name}[/bold]",
        product.description or "",
        f"Price: {product.price if product.price is not None else '-'}",
        f"Image: {product.img_url or '-'}",
        f"Date: {product.date.isoformat() if product.date else '-'}",
        "Categories: " + (", ".join(c.name for c in product.categories) or "-"),
    ]
    console.print(Panel.fit("\n".join(lines), title=f"Product {product.id}", border_style="cyan"))


@categories_app.command("list")
def list_categories(
    page: int = typer.Option(0, min=0, help="Zero-based page number"),
    size: int = typer.Option(50, min=1, help="Categories per page"),
) -> None:
    """📋 List categories."""
    with cli_session() as session:
        result = CategoryService(CategoryRepository(session)).find_all_paged(
            PageRequest(page=page, size=size, sort="name")
        )

    if not result.content:
        console.print("[yellow]No categories found[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Name", style="green")
    for category in result.content:
        table.add_row(str(category.id), category.name)
    console.print(table)
