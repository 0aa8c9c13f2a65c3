import dataclasses
from pathlib import Path

import click

from catalog.domain.exceptions import DomainException
from catalog.infrastructure.cli.context import CliContext, pass_cli
from catalog.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_get,
    product_list,
    product_search,
    product_update,
)
from catalog.infrastructure.config import load_settings
from catalog.infrastructure.logging_config import configure_logging
from catalog.infrastructure.persistence.seed import seed_catalog


@click.group()
@click.option("--data-dir", type=click.Path(file_okay=False, path_type=Path), default=None,
              help="Directory holding products.json.")
@click.option("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
@click.option("--json", "as_json", is_flag=True, help="Print machine-readable JSON.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, log_level: str | None, as_json: bool) -> None:
    """Catalog: product catalog management"""
    settings = load_settings()
    if data_dir is not None:
        settings = dataclasses.replace(settings, data_dir=data_dir)
    configure_logging(log_level or settings.log_level)
    ctx.obj = CliContext(settings=settings, as_json=as_json)


@cli.group()
def product() -> None:
    """Manage products."""


@cli.command("seed")
@pass_cli
def seed(ctx: CliContext) -> None:
    """Load the sample catalog into an empty store."""
    try:
        created = seed_catalog(ctx.repository())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if created:
        click.echo(f"Seeded {created} products")
    else:
        click.echo("Catalog already has products; nothing seeded")


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_get)
product.add_command(product_list)
product.add_command(product_search)
product.add_command(product_update)
