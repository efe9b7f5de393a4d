"""
Ledger audit — integrity checks across items, ledger, shipments and deletions.

Usage:
    from depot.services.audit import check_ledger

    # Run periodically (cron) or after a suspected inconsistency
    issues = check_ledger()
    # Returns list of LedgerIssue

The services keep these relations consistent inside transactions; the
audit exists for data written around them (raw SQL, restored backups).
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from django.db.models import F, Q

from depot.models.assignment import ItemAssignment
from depot.models.deletion import Deletion
from depot.models.shipment import ShipmentAssignment

logger = logging.getLogger('depot')


@dataclass(frozen=True)
class LedgerIssue:
    """One integrity finding."""

    code: str  # "UNLINKED_SHIPMENT_ENTRY", "LINK_SHIPMENT_MISMATCH", "ORPHAN_DELETION"
    data: dict[str, Any] = field(default_factory=dict)


def check_ledger() -> list[LedgerIssue]:
    """
    Check the relations the services maintain.

    - Every ledger row with a shipment has a link row
    - Every link row points at a ledger row of the same shipment
    - Every Deletion row is referenced by an item

    Returns:
        List of LedgerIssue, empty when everything is consistent.
    """
    issues = []

    unlinked = ItemAssignment.objects.filter(
        shipment__isnull=False,
        shipment_link__isnull=True,
    ).values_list('pk', 'shipment_id')
    for entry_id, shipment_id in unlinked:
        issues.append(LedgerIssue(
            'UNLINKED_SHIPMENT_ENTRY',
            {'entry_id': entry_id, 'shipment_id': shipment_id},
        ))

    mismatched = ShipmentAssignment.objects.filter(
        Q(assignment__shipment__isnull=True)
        | ~Q(assignment__shipment=F('shipment'))
    ).values_list('shipment_id', 'assignment_id')
    for shipment_id, entry_id in mismatched:
        issues.append(LedgerIssue(
            'LINK_SHIPMENT_MISMATCH',
            {'entry_id': entry_id, 'shipment_id': shipment_id},
        ))

    orphans = Deletion.objects.filter(item__isnull=True).values_list('pk', flat=True)
    for deletion_id in orphans:
        issues.append(LedgerIssue('ORPHAN_DELETION', {'deletion_id': deletion_id}))

    for issue in issues:
        logger.warning(
            "ledger.audit.issue",
            extra={"code": issue.code, **issue.data},
        )

    return issues
