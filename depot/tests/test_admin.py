"""
Tests for the admin actions.
"""

import pytest
from django.contrib import admin
from django.test import RequestFactory

from depot.admin import ItemAdmin, ShipmentAdmin
from depot.models import Deletion, Item, ItemAssignment, Shipment


pytestmark = pytest.mark.django_db


@pytest.fixture
def request_(monkeypatch):
    monkeypatch.setattr(ItemAdmin, 'message_user', lambda *args, **kwargs: None)
    monkeypatch.setattr(ShipmentAdmin, 'message_user', lambda *args, **kwargs: None)
    return RequestFactory().post('/admin/')


class TestAdmin:
    """Admin goes through the services."""

    def test_ledger_is_read_only(self, request_):
        model_admin = admin.site._registry[ItemAssignment]

        assert not model_admin.has_add_permission(request_)
        assert not model_admin.has_change_permission(request_)
        assert not model_admin.has_delete_permission(request_)

    def test_item_actions(self, request_, chairs, beds):
        model_admin = admin.site._registry[Item]

        model_admin.mark_deleted(request_, Item.objects.all())
        assert Item.objects.deleted().count() == 2
        assert Deletion.objects.count() == 2

        model_admin.restore(request_, Item.objects.filter(pk=chairs.pk))
        assert list(Item.objects.active()) == [chairs]
        assert Deletion.objects.count() == 1

    def test_item_list_shows_count(self, request_, chairs):
        model_admin = admin.site._registry[Item]
        item = model_admin.get_queryset(request_).get(pk=chairs.pk)

        assert model_admin.current_count_display(item) == 100

    def test_delete_shipments_action(self, request_, shipments, chairs):
        model_admin = admin.site._registry[Shipment]

        model_admin.delete_shipments(request_, Shipment.objects.filter(pk__in=shipments[:2]))

        assert list(Shipment.objects.values_list('pk', flat=True)) == [shipments[2]]
        assert list(
            ItemAssignment.objects.filter(item=chairs).values_list('assigned_count', flat=True)
        ) == [100, -10]
