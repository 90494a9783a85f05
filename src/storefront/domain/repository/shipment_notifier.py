"""Port for announcing shipments.

The domain decides *what* ships; an implementation decides where the
notice goes (console, carrier API, a list in a test).
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.shipment import ShipmentNotice


class ShipmentNotifier(ABC):

    @abstractmethod
    def notify(self, notice: ShipmentNotice) -> None:
        """Publish a shipment notice."""
