"""
Deletion model — audit comment for a soft-deleted item.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class Deletion(models.Model):
    """
    Why an item was soft-deleted.

    Lives exactly as long as the item's deleted state: created by
    ItemStore.mark_deleted(), destroyed by ItemStore.restore().
    The item points at it through Item.deletion.
    """

    comment = models.TextField(
        blank=True,
        verbose_name=_('Comment'),
    )

    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_('Created at'))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_('Updated at'))

    class Meta:
        db_table = 'deletions'
        verbose_name = _('Deletion')
        verbose_name_plural = _('Deletions')
        ordering = ['id']

    def __str__(self) -> str:
        return self.comment or f"Deletion #{self.pk}"
