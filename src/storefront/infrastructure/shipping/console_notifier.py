"""Shipment notifier that prints the manifest to the terminal."""

from __future__ import annotations

import click

from storefront.application.checkout import shipment_to_dto
from storefront.domain.model.shipment import ShipmentNotice
from storefront.domain.repository.shipment_notifier import ShipmentNotifier


class ConsoleShipmentNotifier(ShipmentNotifier):

    def notify(self, notice: ShipmentNotice) -> None:
        dto = shipment_to_dto(notice)
        click.echo("** Shipment notice **")
        for item in dto.items:
            click.echo(f"{item.name} {item.weight_grams} g")
        click.echo(f"Total package weight {dto.total_weight_kg} kg")
