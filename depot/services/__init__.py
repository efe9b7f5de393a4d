"""
Depot services — modular organization of inventory operations.

    from depot.services import (
        AssignmentLedger, DeletionRegistry, ItemStore,
        ShipmentAggregate, ReportExporter,
    )
"""

from depot.services.deletions import DeletionRegistry
from depot.services.items import DeletionState, ItemStore
from depot.services.ledger import AssignmentLedger
from depot.services.reports import ReportExporter
from depot.services.shipments import ShipmentAggregate, ShipmentLine, ShipmentView

__all__ = [
    'AssignmentLedger',
    'DeletionRegistry',
    'DeletionState',
    'ItemStore',
    'ReportExporter',
    'ShipmentAggregate',
    'ShipmentLine',
    'ShipmentView',
]
