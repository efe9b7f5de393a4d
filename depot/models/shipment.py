"""
Shipment models — immutable header plus its link table to the ledger.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class Shipment(models.Model):
    """
    Outbound shipment header.

    LIFECYCLE:  absent ──create()──► created ──delete()──► deleted

    There is no update-in-place transition. The quantities live in
    the ledger (ItemAssignment rows with negative counts), reached
    through ShipmentAssignment links.
    """

    name = models.CharField(
        max_length=255,
        verbose_name=_('Name'),
    )
    destination = models.CharField(
        max_length=255,
        verbose_name=_('Destination'),
    )

    class Meta:
        db_table = 'shipments'
        verbose_name = _('Shipment')
        verbose_name_plural = _('Shipments')
        ordering = ['id']

    def save(self, *args, **kwargs):
        if self.pk:
            raise ValueError("Shipments are immutable once created.")
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"{self.name} → {self.destination}"


class ShipmentAssignment(models.Model):
    """
    Join row between a shipment and one of its ledger entries.

    Exactly one per ledger entry created for a shipment.
    """

    shipment = models.ForeignKey(
        Shipment,
        on_delete=models.PROTECT,
        related_name='links',
        verbose_name=_('Shipment'),
    )
    assignment = models.OneToOneField(
        'depot.ItemAssignment',
        on_delete=models.PROTECT,
        related_name='shipment_link',
        verbose_name=_('Assignment'),
    )

    class Meta:
        db_table = 'shipments_to_assignments'
        verbose_name = _('Shipment assignment')
        verbose_name_plural = _('Shipment assignments')
        ordering = ['assignment_id']

    def __str__(self) -> str:
        return f"shipment {self.shipment_id} ↔ assignment {self.assignment_id}"
