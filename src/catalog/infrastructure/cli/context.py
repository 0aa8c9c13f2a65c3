"""State shared by every CLI command through ``click``'s context object."""

from __future__ import annotations

import json
from dataclasses import dataclass

import click

from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.bootstrap import product_repository
from catalog.infrastructure.config import Settings


@dataclass
class CliContext:
    settings: Settings
    as_json: bool = False

    def repository(self) -> ProductRepository:
        return product_repository(self.settings)

    def emit_json(self, payload: object) -> None:
        click.echo(json.dumps(payload, indent=2))


pass_cli = click.make_pass_decorator(CliContext)
