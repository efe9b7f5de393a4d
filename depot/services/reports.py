"""
Report exporter — CSV projections of the inventory and shipments.

Pure projections: rows come out in the order the queries return
them, every line ends with a newline.
"""

import csv
import io

from depot.services.items import ItemStore
from depot.services.shipments import ShipmentAggregate

SHIPMENT_COLUMNS = ['shipment', 'destination', 'item_name', 'count']
INVENTORY_COLUMNS = ['id', 'name', 'count']
DELETED_INVENTORY_COLUMNS = ['id', 'name', 'count', 'comment']


def _render(header: list[str], rows) -> str:
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(header)
    writer.writerows(rows)
    return output.getvalue()


class ReportExporter:
    """CSV exports."""

    @classmethod
    def export_shipments_csv(cls, aggregates=None) -> str:
        """
        One row per (shipment, item), preserving input order.

        Args:
            aggregates: ShipmentView list (None = ShipmentAggregate.get_all())
        """
        if aggregates is None:
            aggregates = ShipmentAggregate.get_all()

        rows = (
            [shipment.name, shipment.destination, line.name, line.assigned_count]
            for shipment in aggregates
            for line in shipment.items
        )
        return _render(SHIPMENT_COLUMNS, rows)

    @classmethod
    def export_inventory_csv(cls) -> str:
        rows = (
            [item.pk, item.name, item.current_count]
            for item in ItemStore.list_items()
        )
        return _render(INVENTORY_COLUMNS, rows)

    @classmethod
    def export_deleted_inventory_csv(cls) -> str:
        rows = (
            [item.pk, item.name, item.current_count, item.deletion.comment]
            for item in ItemStore.list_deleted_items()
        )
        return _render(DELETED_INVENTORY_COLUMNS, rows)
