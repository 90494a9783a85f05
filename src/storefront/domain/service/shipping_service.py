"""Domain service: Shipping.

Turns the shippable items of a checkout into a shipment notice and hands
it to the notifier. There is no carrier integration; the notice is the
whole shipment.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.shipment import ShipmentNotice, ShippableView
from storefront.domain.repository.shipment_notifier import ShipmentNotifier

logger = structlog.get_logger(__name__)


class ShippingService:

    def __init__(self, notifier: ShipmentNotifier) -> None:
        self._notifier = notifier

    def ship(self, items: Sequence[ShippableView]) -> ShipmentNotice:
        if not items:
            raise ValidationError("Nothing to ship")

        notice = ShipmentNotice(items=tuple(items))
        self._notifier.notify(notice)

        logger.info(
            "shipment_notified",
            item_count=len(notice.items),
            total_weight_kg=str(notice.total_weight.kg),
        )
        return notice
