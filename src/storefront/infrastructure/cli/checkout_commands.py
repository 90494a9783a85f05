"""CLI commands that run a checkout against the demo catalog."""

from __future__ import annotations

import click

from storefront.application.dto import CartItemSpec, ReceiptDTO
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import build_storefront, seed_demo_catalog
from storefront.infrastructure.settings import Settings

DEMO_CART = [
    CartItemSpec("Cheese", 2),
    CartItemSpec("Biscuits", 1),
    CartItemSpec("TV", 3),
    CartItemSpec("ScratchCard", 1),
]


def _parse_items(raw: str) -> list[CartItemSpec]:
    """Parse 'Cheese:2,TV:1' into CartItemSpec list."""
    specs: list[CartItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductName:Quantity'."
            )
        name, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{name}'."
            )
        specs.append(CartItemSpec(product_name=name.strip(), quantity=qty))
    return specs


def _run_checkout(settings: Settings, balance: str, specs: list[CartItemSpec]) -> ReceiptDTO:
    store = build_storefront(settings)
    seed_demo_catalog(store)

    customer = store.register_customer().handle(name="Customer", balance=balance)
    cart_id = store.open_cart().handle(customer.id)  # type: ignore[arg-type]

    add_to_cart = store.add_to_cart()
    for spec in specs:
        add_to_cart.handle(cart_id, spec)

    return store.checkout().handle(cart_id)


def _display_receipt(dto: ReceiptDTO) -> None:
    click.echo()
    click.echo("** Checkout receipt **")
    for line in dto.lines:
        click.echo(f"{line.quantity}x {line.product_name} {line.line_total}")
    click.echo(f"Subtotal {dto.subtotal}")
    click.echo(f"Shipping {dto.shipping}")
    click.echo(f"Amount {dto.total}")
    click.echo(f"Customer balance after payment: {dto.balance_after}")


@click.command("demo")
@click.option("--balance", default="1000", show_default=True, help="Customer starting balance.")
@click.pass_obj
def demo(settings: Settings, balance: str) -> None:
    """Check out the fixed demo cart (Cheese, Biscuits, TV, ScratchCard)."""
    try:
        dto = _run_checkout(settings, balance, DEMO_CART)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_receipt(dto)


@click.command("checkout")
@click.option("--balance", required=True, help="Customer starting balance.")
@click.option("--items", required=True, help="Items as 'Product:Qty,Product:Qty'.")
@click.pass_obj
def checkout(settings: Settings, balance: str, items: str) -> None:
    """Check out a custom cart against the demo catalog."""
    specs = _parse_items(items)

    try:
        dto = _run_checkout(settings, balance, specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_receipt(dto)
