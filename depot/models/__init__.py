"""
Depot Models.

Core models for warehouse inventory:
- Item: What is stored (soft-deletable)
- Deletion: Audit comment of a soft-deleted item
- ItemAssignment: Append-only ledger of quantity movements
- Shipment: Immutable outbound shipment header
- ShipmentAssignment: Link between a shipment and its ledger entries
"""

from depot.models.assignment import ItemAssignment
from depot.models.deletion import Deletion
from depot.models.item import Item
from depot.models.shipment import Shipment, ShipmentAssignment

__all__ = [
    'Item',
    'Deletion',
    'ItemAssignment',
    'Shipment',
    'ShipmentAssignment',
]
