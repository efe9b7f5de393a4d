"""
Tests for the ledger audit and the management commands.
"""

from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from depot.models import Deletion, ItemAssignment, ShipmentAssignment
from depot.services import ReportExporter
from depot.services.audit import check_ledger


pytestmark = pytest.mark.django_db


class TestCheckLedger:
    """Tests for check_ledger()."""

    def test_consistent(self, shipments):
        """Data written through the services has no issues."""
        assert check_ledger() == []

    def test_unlinked_shipment_entry(self, shipments, chairs):
        entry = ItemAssignment.objects.create(
            item=chairs, assigned_count=-3, shipment_id=shipments[0],
        )

        [issue] = check_ledger()
        assert issue.code == 'UNLINKED_SHIPMENT_ENTRY'
        assert issue.data == {'entry_id': entry.pk, 'shipment_id': shipments[0]}

    def test_link_to_other_shipment(self, shipments, chairs):
        entry = ItemAssignment.objects.create(
            item=chairs, assigned_count=-3, shipment_id=shipments[0],
        )
        ShipmentAssignment.objects.create(shipment_id=shipments[1], assignment=entry)

        [issue] = check_ledger()
        assert issue.code == 'LINK_SHIPMENT_MISMATCH'
        assert issue.data == {'entry_id': entry.pk, 'shipment_id': shipments[1]}

    def test_link_to_direct_adjustment(self, shipments, chairs):
        entry = ItemAssignment.objects.create(item=chairs, assigned_count=4)
        ShipmentAssignment.objects.create(shipment_id=shipments[0], assignment=entry)

        assert [issue.code for issue in check_ledger()] == ['LINK_SHIPMENT_MISMATCH']

    def test_orphan_deletion(self, db):
        deletion = Deletion.objects.create(comment='Nobody points here')

        [issue] = check_ledger()
        assert issue.code == 'ORPHAN_DELETION'
        assert issue.data == {'deletion_id': deletion.pk}


class TestCommands:
    """Tests for the management commands."""

    def test_check_ledger_consistent(self, shipments):
        out = StringIO()
        call_command('check_ledger', stdout=out)

        assert 'Ledger is consistent' in out.getvalue()

    def test_check_ledger_fail_on_issues(self, db):
        Deletion.objects.create(comment='Orphan')
        out = StringIO()

        with pytest.raises(CommandError):
            call_command('check_ledger', '--fail-on-issues', stdout=out)

        assert 'ORPHAN_DELETION' in out.getvalue()

    def test_export_csv_to_stdout(self, shipments):
        out = StringIO()
        call_command('export_csv', 'shipments', stdout=out)

        assert out.getvalue() == ReportExporter.export_shipments_csv()

    def test_export_csv_to_file(self, chairs, tmp_path):
        path = tmp_path / 'inventory_report.csv'

        call_command('export_csv', 'inventory', '--output', str(path), stderr=StringIO())

        assert path.read_text(encoding='utf-8') == f"id,name,count\n{chairs.pk},Chairs,100\n"

    def test_export_unknown_report(self, db):
        with pytest.raises(CommandError):
            call_command('export_csv', 'holds')
