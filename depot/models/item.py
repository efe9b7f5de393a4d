"""
Item model — what is stored in the warehouse.
"""

from django.db import models
from django.db.models import Sum, Value
from django.db.models.functions import Coalesce
from django.utils.translation import gettext_lazy as _


class ItemQuerySet(models.QuerySet):
    """QuerySet with helpers for the soft-delete state and ledger totals."""

    def active(self):
        """Items that are not soft-deleted."""
        return self.filter(deletion__isnull=True)

    def deleted(self):
        """Soft-deleted items."""
        return self.filter(deletion__isnull=False)

    def with_count(self):
        """Annotate current_count = sum of the item's ledger rows."""
        return self.annotate(
            current_count=Coalesce(Sum('assignments__assigned_count'), Value(0))
        )


class Item(models.Model):
    """
    A stocked item.

    Stock is never stored here: it is the sum of the item's
    ItemAssignment rows (see AssignmentLedger.balance()).

    deletion = None means active; otherwise the item is soft-deleted
    and the Deletion row carries the comment. Items are never hard-deleted.
    """

    name = models.CharField(
        max_length=255,
        verbose_name=_('Name'),
    )

    # One-to-one: a Deletion row belongs to at most one item
    deletion = models.OneToOneField(
        'depot.Deletion',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='item',
        verbose_name=_('Deletion'),
    )

    objects = ItemQuerySet.as_manager()

    class Meta:
        db_table = 'items'
        verbose_name = _('Item')
        verbose_name_plural = _('Items')
        ordering = ['id']

    @property
    def is_deleted(self) -> bool:
        return self.deletion_id is not None

    def delete(self, *args, **kwargs):
        """Prevent hard deletion; items are soft-deleted."""
        raise ValueError(
            "Items are never deleted. "
            "Use ItemStore.mark_deleted() instead."
        )

    def __str__(self) -> str:
        return self.name
