"""
Shipment aggregate — header + ledger entries + link rows.

A shipment is created and deleted as a whole, each in one
transaction.atomic() block. Nothing is ever updated in place.

Sign convention at the aggregate boundary:
    ledger row  assigned_count = -count   (stock leaves the warehouse)
    views       assigned_count = +count   (how many were shipped)
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Any

from django.db import transaction
from django.db.models import Prefetch

from depot.conf import depot_settings
from depot.exceptions import Conflict, NotFound, ValidationFailed
from depot.models.item import Item
from depot.models.shipment import Shipment, ShipmentAssignment
from depot.services.ledger import AssignmentLedger

logger = logging.getLogger('depot')


@dataclass(frozen=True)
class ShipmentLine:
    """One item of a shipment, as shipped."""

    shipment_id: int
    id: int  # item id
    name: str
    assigned_count: int

    def as_dict(self) -> dict[str, Any]:
        return {
            'shipment_id': self.shipment_id,
            'id': self.id,
            'name': self.name,
            'assigned_count': self.assigned_count,
        }


@dataclass(frozen=True)
class ShipmentView:
    """A shipment header with its lines in ledger order."""

    id: int
    name: str
    destination: str
    items: tuple[ShipmentLine, ...] = field(default_factory=tuple)

    def as_dict(self) -> dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'destination': self.destination,
            'items': [line.as_dict() for line in self.items],
        }


def _line_from_link(link: ShipmentAssignment) -> ShipmentLine:
    entry = link.assignment
    return ShipmentLine(
        shipment_id=link.shipment_id,
        id=entry.item_id,
        name=entry.item.name,
        assigned_count=-entry.assigned_count,
    )


def _links_queryset():
    return ShipmentAssignment.objects.select_related('assignment__item').order_by('assignment_id')


def _parse_lines(items) -> list[tuple[int, int]]:
    """
    Normalize [{'id': 3, 'count': 5}, ...] into [(3, 5), ...].

    'item_id' is accepted as an alias of 'id'.
    """
    if not items:
        raise ValidationFailed('EMPTY_SHIPMENT')

    lines = []
    for raw in items:
        if not isinstance(raw, dict):
            raise ValidationFailed('INVALID_ITEM', item=raw)
        item_id = raw.get('id', raw.get('item_id'))
        count = raw.get('count')
        if isinstance(item_id, bool) or not isinstance(item_id, int):
            raise ValidationFailed('INVALID_ITEM', item=raw)
        if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
            raise ValidationFailed('INVALID_COUNT', item_id=item_id, count=count)
        lines.append((item_id, count))
    return lines


class ShipmentAggregate:
    """Shipment create / read / delete."""

    @classmethod
    def create(cls, name: str, destination: str, items) -> int:
        """
        Create a shipment.

        1. Validates input (no writes on failure)
        2. Locks the referenced items (pk order)
        3. Inserts the header
        4. Records one negative ledger row per line
        5. Inserts one link row per ledger row

        Returns:
            The new shipment id

        Raises:
            ValidationFailed: Empty list, bad count, blank name/destination
            NotFound('ITEM_NOT_FOUND'): Unknown item id
            Conflict('ITEM_DELETED'): Item is soft-deleted
            Conflict('INSUFFICIENT_STOCK'): Only with ENFORCE_AVAILABLE_STOCK

        Concurrency:
            - Runs under transaction.atomic(); any failure rolls back
              header, ledger rows and links together
            - select_for_update() on the items serializes shipments
              competing for the same stock
        """
        if not isinstance(name, str) or not name.strip():
            raise ValidationFailed('NAME_REQUIRED')
        if not isinstance(destination, str) or not destination.strip():
            raise ValidationFailed('DESTINATION_REQUIRED')
        lines = _parse_lines(items)

        requested = Counter()
        for item_id, count in lines:
            requested[item_id] += count

        with transaction.atomic():
            locked = {
                item.pk: item
                for item in Item.objects.select_for_update().filter(
                    pk__in=list(requested)
                ).order_by('pk')
            }

            for item_id in requested:
                item = locked.get(item_id)
                if item is None:
                    raise NotFound('ITEM_NOT_FOUND', item_id=item_id)
                if item.is_deleted:
                    raise Conflict('ITEM_DELETED', item_id=item_id)

            if depot_settings.ENFORCE_AVAILABLE_STOCK:
                for item_id, total in requested.items():
                    available = AssignmentLedger.balance(item_id)
                    if available < total:
                        raise Conflict(
                            'INSUFFICIENT_STOCK',
                            item_id=item_id,
                            available=available,
                            requested=total,
                        )

            shipment = Shipment.objects.create(name=name, destination=destination)

            entry_ids = [
                AssignmentLedger.record(item_id, -count, shipment=shipment)
                for item_id, count in lines
            ]

            ShipmentAssignment.objects.bulk_create([
                ShipmentAssignment(shipment=shipment, assignment_id=entry_id)
                for entry_id in entry_ids
            ])

        logger.info(
            "shipment.create",
            extra={
                "shipment_id": shipment.pk,
                "destination": destination,
                "lines": len(lines),
            },
        )
        return shipment.pk

    @classmethod
    def get(cls, shipment_id: int) -> ShipmentView:
        """
        Shipment with its lines.

        Raises:
            NotFound('SHIPMENT_NOT_FOUND')
        """
        try:
            shipment = Shipment.objects.get(pk=shipment_id)
        except Shipment.DoesNotExist:
            raise NotFound('SHIPMENT_NOT_FOUND', shipment_id=shipment_id)

        links = _links_queryset().filter(shipment=shipment)
        return ShipmentView(
            id=shipment.pk,
            name=shipment.name,
            destination=shipment.destination,
            items=tuple(_line_from_link(link) for link in links),
        )

    @classmethod
    def get_all(cls) -> list[ShipmentView]:
        """All shipments by id; lines by ledger id within each."""
        shipments = Shipment.objects.order_by('pk').prefetch_related(
            Prefetch('links', queryset=_links_queryset())
        )
        return [
            ShipmentView(
                id=shipment.pk,
                name=shipment.name,
                destination=shipment.destination,
                items=tuple(_line_from_link(link) for link in shipment.links.all()),
            )
            for shipment in shipments
        ]

    @classmethod
    def delete(cls, shipment_id: int) -> bool:
        """
        Delete a shipment and the ledger rows it created.

        1. Collects the ids of the linked ledger rows
        2. Deletes the link rows
        3. Deletes exactly those ledger rows
        4. Deletes the header

        Rows of other shipments and direct adjustments of the same
        items are never touched: step 3 is scoped to the ids from
        step 1, not to the items.

        Returns:
            False if the shipment did not exist, True otherwise
        """
        with transaction.atomic():
            shipment = Shipment.objects.select_for_update().filter(pk=shipment_id).first()
            if shipment is None:
                return False

            links = ShipmentAssignment.objects.filter(shipment=shipment)
            entry_ids = list(links.values_list('assignment_id', flat=True))

            links.delete()
            removed = AssignmentLedger.remove_many(entry_ids)
            Shipment.objects.filter(pk=shipment.pk).delete()

        logger.info(
            "shipment.delete",
            extra={"shipment_id": shipment_id, "entries_removed": removed},
        )
        return True
