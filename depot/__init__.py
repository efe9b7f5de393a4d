"""
Django Depot — warehouse inventory on an append-only ledger.

Usage:
    from depot import ItemStore, ShipmentAggregate, DepotError

    chairs = ItemStore.create_item('Chairs', 100)
    shipment_id = ShipmentAggregate.create('Test', 'Heidelberg', [{'id': chairs.pk, 'count': 50}])
    ItemStore.get_current_count(chairs.pk)  # 50
"""

_LAZY = {
    'AssignmentLedger': 'depot.services.ledger',
    'DeletionRegistry': 'depot.services.deletions',
    'ItemStore': 'depot.services.items',
    'ShipmentAggregate': 'depot.services.shipments',
    'ReportExporter': 'depot.services.reports',
    'DepotError': 'depot.exceptions',
    'NotFound': 'depot.exceptions',
    'Conflict': 'depot.exceptions',
    'ValidationFailed': 'depot.exceptions',
    'Item': 'depot.models.item',
    'Deletion': 'depot.models.deletion',
    'ItemAssignment': 'depot.models.assignment',
    'Shipment': 'depot.models.shipment',
    'ShipmentAssignment': 'depot.models.shipment',
}


def __getattr__(name):
    """Lazy import to avoid circular imports during app loading."""
    if name in _LAZY:
        from importlib import import_module
        return getattr(import_module(_LAZY[name]), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = list(_LAZY)

__version__ = '0.1.0'
