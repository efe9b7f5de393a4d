"""
Depot Admin.

Provides views for production debugging:
- Item: list + rename, soft-delete/restore actions (through ItemStore)
- ItemAssignment: read-only audit trail
- Shipment: read-only with link inline, deletion through ShipmentAggregate
- Deletion: read-only
"""

import logging

from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from depot.exceptions import DepotError
from depot.models import Deletion, Item, ItemAssignment, Shipment, ShipmentAssignment

logger = logging.getLogger(__name__)


class ReadOnlyAdminMixin:
    """Ledger data only changes via the services."""

    def has_add_permission(self, request, obj=None):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


# =========================================================================
# ITEM ADMIN
# =========================================================================

@admin.register(Item)
class ItemAdmin(admin.ModelAdmin):
    """Item admin — rename only; stock and deletion go through ItemStore."""

    list_display = ['id', 'name', 'current_count_display', 'is_deleted_display']
    list_filter = [('deletion', admin.EmptyFieldListFilter)]
    search_fields = ['name']
    fields = ['name']
    actions = ['mark_deleted', 'restore']

    def get_queryset(self, request):
        return super().get_queryset(request).with_count()

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False

    @admin.display(description=_('Count'), ordering='current_count')
    def current_count_display(self, obj):
        return obj.current_count

    @admin.display(description=_('Deleted?'), boolean=True)
    def is_deleted_display(self, obj):
        return obj.is_deleted

    @admin.action(description=_('Mark selected items as deleted'))
    def mark_deleted(self, request, queryset):
        from depot.services.items import ItemStore

        count = 0
        for item in queryset.active():
            try:
                ItemStore.mark_deleted(item.pk, comment='Deleted via admin')
                count += 1
            except DepotError as exc:
                logger.warning("mark_deleted: failed for item %s: %s", item.pk, exc)

        self.message_user(request, _('{count} item(s) deleted.').format(count=count))

    @admin.action(description=_('Restore selected items'))
    def restore(self, request, queryset):
        from depot.services.items import ItemStore

        count = 0
        for item in queryset.deleted():
            try:
                ItemStore.restore(item.pk)
                count += 1
            except DepotError as exc:
                logger.warning("restore: failed for item %s: %s", item.pk, exc)

        self.message_user(request, _('{count} item(s) restored.').format(count=count))


# =========================================================================
# ASSIGNMENT ADMIN (read-only audit trail)
# =========================================================================

@admin.register(ItemAssignment)
class ItemAssignmentAdmin(ReadOnlyAdminMixin, admin.ModelAdmin):
    """Assignment admin — read-only. Append-only ledger."""

    list_display = ['id', 'item', 'assigned_count', 'shipment', 'external_assignment_id', 'created_at']
    list_filter = ['created_at']
    search_fields = ['item__name']
    list_select_related = ['item', 'shipment']
    date_hierarchy = 'created_at'


# =========================================================================
# SHIPMENT ADMIN
# =========================================================================

class ShipmentAssignmentInline(ReadOnlyAdminMixin, admin.TabularInline):
    model = ShipmentAssignment
    fields = ['assignment']
    readonly_fields = ['assignment']
    extra = 0


@admin.register(Shipment)
class ShipmentAdmin(admin.ModelAdmin):
    """Shipment admin — read-only; deleting removes links and ledger rows."""

    list_display = ['id', 'name', 'destination']
    search_fields = ['name', 'destination']
    inlines = [ShipmentAssignmentInline]
    actions = ['delete_shipments']

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False

    @admin.action(description=_('Delete selected shipments and their assignments'))
    def delete_shipments(self, request, queryset):
        from depot.services.shipments import ShipmentAggregate

        count = 0
        for shipment_id in list(queryset.values_list('pk', flat=True)):
            if ShipmentAggregate.delete(shipment_id):
                count += 1

        self.message_user(request, _('{count} shipment(s) deleted.').format(count=count))


# =========================================================================
# DELETION ADMIN
# =========================================================================

@admin.register(Deletion)
class DeletionAdmin(ReadOnlyAdminMixin, admin.ModelAdmin):
    """Deletion admin — read-only. Created and removed by ItemStore."""

    list_display = ['id', 'item_display', 'comment', 'created_at']
    search_fields = ['comment']

    @admin.display(description=_('Item'))
    def item_display(self, obj):
        item = getattr(obj, 'item', None)
        return str(item) if item else '?'
