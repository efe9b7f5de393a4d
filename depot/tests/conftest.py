"""
Pytest fixtures for Depot tests.
"""

import pytest

from depot.models import Item, ItemAssignment
from depot.services import ShipmentAggregate


def _create_item(name, count):
    """Insert an item and its opening ledger row directly."""
    item = Item.objects.create(name=name)
    ItemAssignment.objects.create(item=item, assigned_count=count)
    return item


@pytest.fixture
def chairs(db):
    """Chairs, 100 in stock."""
    return _create_item('Chairs', 100)


@pytest.fixture
def beds(db):
    """Beds, 55 in stock."""
    return _create_item('Beds', 55)


@pytest.fixture
def tables(db):
    """Tables, 1 in stock."""
    return _create_item('Tables', 1)


@pytest.fixture
def shipments(chairs, beds, tables):
    """
    Three shipments, in creation order:

    Test:  Heidelberg   | Chairs: 50
    Test2: Heidelberg2  | Chairs: 5, Beds: 10
    Test3: Heidelberg3  | Chairs: 10, Beds: 2, Tables: 1

    Returns the shipment ids.
    """
    return [
        ShipmentAggregate.create('Test', 'Heidelberg', [
            {'id': chairs.pk, 'count': 50},
        ]),
        ShipmentAggregate.create('Test2', 'Heidelberg2', [
            {'id': chairs.pk, 'count': 5},
            {'id': beds.pk, 'count': 10},
        ]),
        ShipmentAggregate.create('Test3', 'Heidelberg3', [
            {'id': chairs.pk, 'count': 10},
            {'id': beds.pk, 'count': 2},
            {'id': tables.pk, 'count': 1},
        ]),
    ]
