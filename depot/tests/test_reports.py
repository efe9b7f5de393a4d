"""
Tests for CSV exports.
"""

import pytest

from depot.services import ItemStore, ReportExporter, ShipmentAggregate


pytestmark = pytest.mark.django_db


class TestShipmentsCsv:
    """Tests for ReportExporter.export_shipments_csv()."""

    def test_three_shipments(self, shipments):
        """One row per (shipment, item) in creation and ledger order."""
        assert ReportExporter.export_shipments_csv() == (
            "shipment,destination,item_name,count\n"
            "Test,Heidelberg,Chairs,50\n"
            "Test2,Heidelberg2,Chairs,5\n"
            "Test2,Heidelberg2,Beds,10\n"
            "Test3,Heidelberg3,Chairs,10\n"
            "Test3,Heidelberg3,Beds,2\n"
            "Test3,Heidelberg3,Tables,1\n"
        )

    def test_preserves_input_order(self, shipments):
        """No reordering of its own."""
        aggregates = list(reversed(ShipmentAggregate.get_all()))

        lines = ReportExporter.export_shipments_csv(aggregates).splitlines()
        assert lines[1] == "Test3,Heidelberg3,Chairs,10"
        assert lines[-1] == "Test,Heidelberg,Chairs,50"

    def test_no_shipments(self, db):
        assert ReportExporter.export_shipments_csv() == "shipment,destination,item_name,count\n"

    def test_quotes_commas(self, chairs):
        ShipmentAggregate.create('Rush', 'Mannheim, Hafen', [{'id': chairs.pk, 'count': 2}])

        assert ReportExporter.export_shipments_csv().splitlines()[1] == 'Rush,"Mannheim, Hafen",Chairs,2'


class TestInventoryCsv:
    """Tests for the inventory exports."""

    def test_inventory(self, shipments, chairs, beds, tables):
        """Active items with their ledger totals."""
        ItemStore.mark_deleted(tables.pk, 'Gone')

        assert ReportExporter.export_inventory_csv() == (
            "id,name,count\n"
            f"{chairs.pk},Chairs,35\n"
            f"{beds.pk},Beds,43\n"
        )

    def test_deleted_inventory(self, chairs, beds):
        ItemStore.mark_deleted(beds.pk, 'Broken, returned')

        assert ReportExporter.export_deleted_inventory_csv() == (
            "id,name,count,comment\n"
            f'{beds.pk},Beds,55,"Broken, returned"\n'
        )
