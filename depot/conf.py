"""
Depot configuration.

Usage in settings.py:
    DEPOT = {
        "ENFORCE_AVAILABLE_STOCK": True,
        "REQUIRE_DELETION_COMMENT": True,
        "SEARCH_RESULT_LIMIT": 50,
    }
"""

from dataclasses import dataclass
from typing import Any

from django.conf import settings


@dataclass
class DepotSettings:
    """Depot configuration settings."""

    # Refuse shipment lines that would take an item's stock below zero
    ENFORCE_AVAILABLE_STOCK: bool = False

    # Soft-deleting an item requires a non-blank comment
    REQUIRE_DELETION_COMMENT: bool = True

    # Max results returned by ItemStore.search_items()
    SEARCH_RESULT_LIMIT: int = 50


def get_depot_settings() -> DepotSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "DEPOT", {})
    return DepotSettings(**{
        k: v for k, v in user_settings.items()
        if k in DepotSettings.__dataclass_fields__
    })


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_depot_settings(), name)


depot_settings = _LazySettings()
