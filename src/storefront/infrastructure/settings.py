"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money
from storefront.domain.service.checkout_service import FLAT_SHIPPING_FEE

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    shipping_fee: Money = FLAT_SHIPPING_FEE

    def __post_init__(self) -> None:
        if self.log_level not in _LOG_LEVELS:
            raise ValidationError(
                f"Unknown log level {self.log_level!r}, "
                f"expected one of {', '.join(_LOG_LEVELS)}"
            )


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build settings from ``STOREFRONT_*`` environment variables."""
    env = os.environ if environ is None else environ

    log_level = env.get("STOREFRONT_LOG_LEVEL", "WARNING").upper()
    fee = env.get("STOREFRONT_SHIPPING_FEE")
    shipping_fee = Money.of(fee) if fee is not None else FLAT_SHIPPING_FEE

    return Settings(log_level=log_level, shipping_fee=shipping_fee)
