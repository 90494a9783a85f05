"""CLI commands for browsing the demo catalog."""

from __future__ import annotations

import click

from storefront.infrastructure.bootstrap import build_storefront, seed_demo_catalog
from storefront.infrastructure.settings import Settings


@click.command("catalog")
@click.pass_obj
def catalog(settings: Settings) -> None:
    """List the demo catalog with stock levels."""
    store = build_storefront(settings)
    seed_demo_catalog(store)
    lines = store.show_inventory().handle()

    click.echo(f"{'Product':<15} {'Price':>10} {'Stock':>6}  {'Expires':<20}")
    click.echo("-" * 55)
    for line in lines:
        if line.expires_at is None:
            expires = "-"
        elif line.expired:
            expires = f"{line.expires_at} (expired)"
        else:
            expires = line.expires_at
        click.echo(f"{line.product_name:<15} {line.price:>10} {line.on_hand:>6}  {expires:<20}")
