"""
Item store — item identity, soft-delete/restore lifecycle, derived stock.

All state-changing methods run under transaction.atomic() and lock the
item row with select_for_update() before deciding anything.
"""

import logging
from dataclasses import dataclass

from django.db import transaction

from depot.conf import depot_settings
from depot.exceptions import Conflict, NotFound, ValidationFailed
from depot.models.deletion import Deletion
from depot.models.item import Item
from depot.services.deletions import DeletionRegistry
from depot.services.ledger import AssignmentLedger

logger = logging.getLogger('depot')


@dataclass(frozen=True)
class DeletionState:
    """Current deletion state of an item."""

    deleted: bool
    deletion_id: int | None = None

    @property
    def active(self) -> bool:
        return not self.deleted


def _lock_item(item_id: int) -> Item:
    try:
        return Item.objects.select_for_update().get(pk=item_id)
    except Item.DoesNotExist:
        raise NotFound('ITEM_NOT_FOUND', item_id=item_id)


def _check_name(name) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationFailed('NAME_REQUIRED')
    return name.strip()


def _check_quantity(count, allow_zero: bool) -> None:
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValidationFailed('INVALID_COUNT', count=count)
    if count < 0 or (count == 0 and not allow_zero):
        raise ValidationFailed('INVALID_COUNT', count=count)


class ItemStore:
    """Item operations."""

    # ══════════════════════════════════════════════════════════════
    # QUERIES
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def get_current_count(cls, item_id: int) -> int:
        """Current stock: sum of the item's ledger rows, 0 without rows."""
        return AssignmentLedger.balance(item_id)

    @classmethod
    def get_deletion_state(cls, item_id: int) -> DeletionState:
        """
        Deletion state of an item.

        The answer can be stale by the time the caller acts on it;
        mark_deleted() and restore() re-check under a row lock.

        Raises:
            NotFound('ITEM_NOT_FOUND')
        """
        row = Item.objects.filter(pk=item_id).values('deletion_id').first()
        if row is None:
            raise NotFound('ITEM_NOT_FOUND', item_id=item_id)
        if row['deletion_id'] is None:
            return DeletionState(deleted=False)
        return DeletionState(deleted=True, deletion_id=row['deletion_id'])

    @classmethod
    def get_item(cls, item_id: int, include_deleted: bool = False) -> Item:
        """
        Item annotated with current_count.

        Raises:
            NotFound('ITEM_NOT_FOUND'): Missing, or soft-deleted and
                include_deleted is False
        """
        qs = Item.objects.with_count().select_related('deletion')
        if not include_deleted:
            qs = qs.active()
        try:
            return qs.get(pk=item_id)
        except Item.DoesNotExist:
            raise NotFound('ITEM_NOT_FOUND', item_id=item_id)

    @classmethod
    def list_items(cls):
        """Active items with current_count, by id."""
        return Item.objects.active().with_count().order_by('pk')

    @classmethod
    def list_deleted_items(cls):
        """Soft-deleted items with current_count and their Deletion, by id."""
        return Item.objects.deleted().with_count().select_related('deletion').order_by('pk')

    @classmethod
    def search_items(cls, term: str):
        """Active items whose name contains term (case-insensitive). None matches all."""
        limit = depot_settings.SEARCH_RESULT_LIMIT
        return cls.list_items().filter(name__icontains=term or '')[:limit]

    # ══════════════════════════════════════════════════════════════
    # ITEM LIFECYCLE
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def create_item(cls, name: str, count: int = 0) -> Item:
        """
        Create an item with its initial stock.

        A positive count is recorded as the item's first ledger row,
        in the same transaction as the item itself.
        """
        name = _check_name(name)
        _check_quantity(count, allow_zero=True)

        with transaction.atomic():
            item = Item.objects.create(name=name)
            if count:
                AssignmentLedger.record(item.pk, count)

        logger.info(
            "item.create",
            extra={"item_id": item.pk, "item_name": name, "count": count},
        )
        return cls.get_item(item.pk)

    @classmethod
    def update_item(cls, item_id: int, name: str | None = None,
                    count: int | None = None) -> Item:
        """
        Rename an item and/or set its stock to an absolute count.

        The stock change is recorded as a ledger row with
        delta = count - current; nothing is recorded when delta is 0.

        Raises:
            NotFound('ITEM_NOT_FOUND')
            Conflict('ITEM_DELETED')
            ValidationFailed('NAME_REQUIRED' | 'INVALID_COUNT')
        """
        if name is not None:
            name = _check_name(name)
        if count is not None:
            _check_quantity(count, allow_zero=True)

        with transaction.atomic():
            item = _lock_item(item_id)
            if item.is_deleted:
                raise Conflict('ITEM_DELETED', item_id=item_id)

            if name is not None and name != item.name:
                Item.objects.filter(pk=item.pk).update(name=name)

            delta = 0
            if count is not None:
                delta = count - AssignmentLedger.balance(item.pk)
                if delta:
                    AssignmentLedger.record(item.pk, delta)

        logger.info(
            "item.update",
            extra={"item_id": item_id, "item_name": name, "delta": delta},
        )
        return cls.get_item(item_id)

    @classmethod
    def restock(cls, item_id: int, count: int, external_ref: int | None = None) -> int:
        """
        Record an inbound movement.

        Returns:
            The new ledger row's id

        Raises:
            NotFound('ITEM_NOT_FOUND')
            Conflict('ITEM_DELETED')
            ValidationFailed('INVALID_COUNT'): count <= 0
        """
        _check_quantity(count, allow_zero=False)

        with transaction.atomic():
            item = _lock_item(item_id)
            if item.is_deleted:
                raise Conflict('ITEM_DELETED', item_id=item_id)
            entry_id = AssignmentLedger.record(item.pk, count, external_ref=external_ref)

        logger.info(
            "item.restock",
            extra={"item_id": item_id, "count": count, "entry_id": entry_id},
        )
        return entry_id

    # ══════════════════════════════════════════════════════════════
    # SOFT DELETE
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def mark_deleted(cls, item_id: int, comment: str) -> Deletion:
        """
        Soft-delete an item with an audit comment.

        Creates the Deletion row and links it, in one transaction.
        The link is a conditional update (deletion_id IS NULL), so a
        concurrent writer that got there first turns this call into
        a Conflict and the new Deletion row is rolled back.

        Raises:
            NotFound('ITEM_NOT_FOUND')
            Conflict('ALREADY_DELETED')
            ValidationFailed('COMMENT_REQUIRED')
        """
        comment = '' if comment is None else comment
        if not isinstance(comment, str):
            raise ValidationFailed('COMMENT_REQUIRED', item_id=item_id)
        if depot_settings.REQUIRE_DELETION_COMMENT and not comment.strip():
            raise ValidationFailed('COMMENT_REQUIRED', item_id=item_id)

        with transaction.atomic():
            item = _lock_item(item_id)
            if item.is_deleted:
                raise Conflict('ALREADY_DELETED', item_id=item_id,
                               deletion_id=item.deletion_id)

            deletion = DeletionRegistry.create(comment)
            linked = Item.objects.filter(
                pk=item.pk, deletion__isnull=True,
            ).update(deletion=deletion)
            if not linked:
                raise Conflict('ALREADY_DELETED', item_id=item_id)

        logger.info(
            "item.mark_deleted",
            extra={"item_id": item_id, "deletion_id": deletion.pk},
        )
        return deletion

    @classmethod
    def restore(cls, item_id: int) -> None:
        """
        Reverse a soft delete.

        Clears the item's link, then removes the Deletion row, in one
        transaction. The ledger is untouched, so the item comes back
        with its full stock history.

        Raises:
            NotFound('ITEM_NOT_FOUND')
            Conflict('NOT_DELETED')
            NotFound('DELETION_NOT_FOUND'): Item points at a missing
                Deletion row. Data-integrity fault, do not retry.
        """
        with transaction.atomic():
            item = _lock_item(item_id)
            deletion_id = item.deletion_id
            if deletion_id is None:
                raise Conflict('NOT_DELETED', item_id=item_id)

            unlinked = Item.objects.filter(
                pk=item.pk, deletion_id=deletion_id,
            ).update(deletion=None)
            if not unlinked:
                raise Conflict('NOT_DELETED', item_id=item_id)

            if not DeletionRegistry.remove(deletion_id):
                logger.error(
                    "item.restore.missing_deletion",
                    extra={"item_id": item_id, "deletion_id": deletion_id},
                )
                raise NotFound('DELETION_NOT_FOUND', item_id=item_id,
                               deletion_id=deletion_id)

        logger.info(
            "item.restore",
            extra={"item_id": item_id, "deletion_id": deletion_id},
        )
