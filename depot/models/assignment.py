"""
ItemAssignment model — append-only ledger of quantity movements.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class ItemAssignment(models.Model):
    """
    Immutable record of a signed quantity movement for one item.

    Rules:
    - NEVER update(); the sign is fixed at creation
    - Positive = inbound/restock, negative = shipped out
    - Only removed as part of ShipmentAggregate.delete()

    The sum of an item's assigned_count is its current stock.
    """

    item = models.ForeignKey(
        'depot.Item',
        on_delete=models.PROTECT,
        related_name='assignments',
        verbose_name=_('Item'),
    )

    assigned_count = models.IntegerField(
        verbose_name=_('Assigned count'),
        help_text=_('Positive = inbound, negative = outbound'),
    )

    shipment = models.ForeignKey(
        'depot.Shipment',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='entries',
        verbose_name=_('Shipment'),
    )

    # Reference into an external system (supplier delivery, order line, ...)
    external_assignment_id = models.PositiveBigIntegerField(
        null=True,
        blank=True,
        verbose_name=_('External assignment ID'),
    )

    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_('Created at'))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_('Updated at'))

    class Meta:
        db_table = 'item_assignments'
        verbose_name = _('Assignment')
        verbose_name_plural = _('Assignments')
        ordering = ['id']

    def save(self, *args, **kwargs):
        # Immutability check
        if self.pk:
            raise ValueError(
                "Assignments are immutable. "
                "Record a new assignment with the inverse count instead."
            )
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        """Prevent standalone deletion; rows only go away with their shipment."""
        raise ValueError(
            "Assignments cannot be deleted directly. "
            "Delete the owning shipment instead."
        )

    def __str__(self) -> str:
        signal = '+' if self.assigned_count > 0 else ''
        return f"{signal}{self.assigned_count} | item {self.item_id}"
