"""
Assignment ledger — append-only signed quantity movements.

The ledger takes any signed integer; stock policy is the caller's business.
Storage errors propagate unchanged.
"""

import logging

from django.db.models import Sum, Value
from django.db.models.functions import Coalesce

from depot.exceptions import ValidationFailed
from depot.models.assignment import ItemAssignment

logger = logging.getLogger('depot')


def _check_count(count) -> None:
    # bool is an int subclass, but True is not a quantity
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValidationFailed('INVALID_COUNT', count=count)


class AssignmentLedger:
    """Ledger row writes and reads."""

    @classmethod
    def record(cls, item_id: int, signed_count: int, shipment=None,
               external_ref: int | None = None) -> int:
        """
        Insert one ledger row.

        Args:
            item_id: Item primary key
            signed_count: Positive = inbound, negative = outbound
            shipment: Owning Shipment (or its pk), None for direct adjustments
            external_ref: Optional id in an external system

        Returns:
            The new row's id
        """
        _check_count(signed_count)

        shipment_id = getattr(shipment, 'pk', shipment)
        entry = ItemAssignment.objects.create(
            item_id=item_id,
            assigned_count=signed_count,
            shipment_id=shipment_id,
            external_assignment_id=external_ref,
        )
        logger.debug(
            "ledger.record",
            extra={
                "item_id": item_id,
                "count": signed_count,
                "shipment_id": shipment_id,
                "entry_id": entry.pk,
            },
        )
        return entry.pk

    @classmethod
    def remove(cls, entry_id: int) -> bool:
        """Delete one row. Returns whether it existed."""
        return cls.remove_many([entry_id]) > 0

    @classmethod
    def remove_many(cls, entry_ids) -> int:
        """
        Delete exactly the given rows.

        Only called from shipment deletion, after the link rows pointing
        at these entries are gone.

        Returns:
            Number of rows deleted
        """
        entry_ids = list(entry_ids)
        if not entry_ids:
            return 0
        deleted, _ = ItemAssignment.objects.filter(pk__in=entry_ids).delete()
        logger.debug("ledger.remove", extra={"entry_ids": entry_ids, "deleted": deleted})
        return deleted

    @classmethod
    def balance(cls, item_id: int) -> int:
        """Sum of the item's rows (0 when there are none)."""
        return ItemAssignment.objects.filter(item_id=item_id).aggregate(
            t=Coalesce(Sum('assigned_count'), Value(0))
        )['t']

    @classmethod
    def entries(cls, item_id: int):
        """The item's rows in insertion order."""
        return ItemAssignment.objects.filter(item_id=item_id).order_by('pk')
