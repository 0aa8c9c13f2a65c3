"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from catalog.application.create_product import CreateProductHandler
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.dto import (
    CreateProductCommand,
    DeleteProductCommand,
    PagedProductsDTO,
    ProductDTO,
    SearchProductsQuery,
    UpdateProductCommand,
)
from catalog.application.get_product import GetProductHandler
from catalog.application.list_products import ListProductsHandler
from catalog.application.search_products import SearchProductsHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import DomainException
from catalog.domain.model.product import ProductStatus
from catalog.infrastructure.cli.context import CliContext, pass_cli

STATUS_CHOICE = click.Choice([s.value for s in ProductStatus], case_sensitive=False)


def _print_table(products: list[ProductDTO]) -> None:
    """Shared formatting for a list of products."""
    click.echo(f"{'ID':<6} {'Name':<24} {'Price':>10} {'Stock':>7} {'Status':<12}")
    click.echo("-" * 63)
    for p in products:
        click.echo(
            f"{p.id!s:<6} {p.name:<24} {p.price:>10} {p.stock:>7} {p.status:<12}"
        )


def _print_product(ctx: CliContext, dto: ProductDTO, headline: str) -> None:
    if ctx.as_json:
        ctx.emit_json(dto.to_dict())
        return
    click.echo(headline)
    click.echo(f"  Name:   {dto.name}")
    click.echo(f"  Price:  {dto.price}")
    click.echo(f"  Stock:  {dto.stock}")
    click.echo(f"  Status: {dto.status}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 9.99).")
@click.option("--stock", required=True, type=int, help="Units in stock.")
@click.option("--status", type=STATUS_CHOICE, default=None, help="Defaults to ACTIVE.")
@pass_cli
def product_add(ctx: CliContext, name: str, price: str, stock: int, status: str | None) -> None:
    """Add a new product to the catalog."""
    handler = CreateProductHandler(product_repo=ctx.repository())

    try:
        product = handler.handle(CreateProductCommand(name, price, stock, status))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _print_product(ctx, ProductDTO.from_domain(product), f"Product #{product.id} added")


@click.command("get")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@pass_cli
def product_get(ctx: CliContext, product_id: int) -> None:
    """Show a single product."""
    handler = GetProductHandler(product_repo=ctx.repository())

    try:
        product = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _print_product(ctx, ProductDTO.from_domain(product), f"Product #{product.id}")


@click.command("list")
@pass_cli
def product_list(ctx: CliContext) -> None:
    """List all products in the catalog."""
    products = [ProductDTO.from_domain(p) for p in ListProductsHandler(ctx.repository()).handle()]

    if ctx.as_json:
        ctx.emit_json([p.to_dict() for p in products])
        return
    if not products:
        click.echo("No products found.")
        return
    _print_table(products)


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 29.99).")
@click.option("--stock", required=True, type=int, help="Units in stock.")
@click.option("--status", required=True, type=STATUS_CHOICE, help="Product status.")
@pass_cli
def product_update(
    ctx: CliContext, product_id: int, name: str, price: str, stock: int, status: str
) -> None:
    """Replace all fields of an existing product."""
    handler = UpdateProductHandler(product_repo=ctx.repository())

    try:
        product = handler.handle(
            UpdateProductCommand(id=product_id, name=name, price=price, stock=stock, status=status)
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _print_product(ctx, ProductDTO.from_domain(product), f"Product #{product.id} updated")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@pass_cli
def product_delete(ctx: CliContext, product_id: int) -> None:
    """Remove a product from the catalog."""
    handler = DeleteProductHandler(product_repo=ctx.repository())

    try:
        handler.handle(DeleteProductCommand(product_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if ctx.as_json:
        ctx.emit_json({"deleted": product_id})
    else:
        click.echo(f"Product #{product_id} deleted")


@click.command("search")
@click.option("--query", "-q", default=None, help="Case-insensitive name fragment.")
@click.option("--status", type=STATUS_CHOICE, default=None, help="Only this status.")
@click.option("--page", default=0, type=int, show_default=True, help="0-based page index.")
@click.option("--size", default=None, type=int, help="Page size (1-200).")
@click.option("--sort", default=None, help="e.g. 'price,desc;name,asc'.")
@pass_cli
def product_search(
    ctx: CliContext,
    query: str | None,
    status: str | None,
    page: int,
    size: int | None,
    sort: str | None,
) -> None:
    """Search the catalog one page at a time."""
    handler = SearchProductsHandler(product_repo=ctx.repository())
    search = SearchProductsQuery(
        term=query,
        status=status,
        page=page,
        size=size if size is not None else ctx.settings.default_page_size,
        sort=sort,
    )

    try:
        result = PagedProductsDTO.from_page(handler.handle(search))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if ctx.as_json:
        ctx.emit_json(result.to_dict())
        return
    if not result.items:
        click.echo("No products found.")
    else:
        _print_table(result.items)
    click.echo(
        f"Page {result.page + 1} of {result.total_pages} "
        f"({result.total_elements} products total)"
    )
