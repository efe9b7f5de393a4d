"""Django app configuration for Depot."""

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class DepotConfig(AppConfig):
    """Configuration for Depot app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "depot"
    verbose_name = _("Warehouse Inventory")
