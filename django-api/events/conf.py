"""App settings for the storefront, read from ``settings.STOREFRONT``."""

from decimal import Decimal

from django.conf import settings

DEFAULTS = {
    "SERVICE_FEE_RATE": Decimal("0.05"),
    "MAX_TICKETS_PER_ORDER": 10,
    "DEFAULT_MIN_PRICE": Decimal("0"),
    "DEFAULT_MAX_PRICE": Decimal("1000"),
    "EVENT_STORE": "events.stores.memory_store.seeded_store",
}


def storefront_settings() -> dict:
    """Project overrides merged over DEFAULTS."""
    configured = getattr(settings, "STOREFRONT", {}) or {}
    merged = {**DEFAULTS, **configured}
    merged["SERVICE_FEE_RATE"] = Decimal(str(merged["SERVICE_FEE_RATE"]))
    merged["MAX_TICKETS_PER_ORDER"] = int(merged["MAX_TICKETS_PER_ORDER"])
    return merged
