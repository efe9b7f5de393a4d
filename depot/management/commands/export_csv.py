"""
Management command to export inventory reports as CSV.

Usage:
    python manage.py export_csv shipments
    python manage.py export_csv inventory --output inventory_report.csv
    python manage.py export_csv deleted
"""

from django.core.management.base import BaseCommand

from depot.services.reports import ReportExporter

REPORTS = {
    'shipments': ReportExporter.export_shipments_csv,
    'inventory': ReportExporter.export_inventory_csv,
    'deleted': ReportExporter.export_deleted_inventory_csv,
}


class Command(BaseCommand):
    """Export a CSV report."""

    help = 'Exports shipments, inventory or deleted inventory as CSV'

    def add_arguments(self, parser):
        parser.add_argument('report', choices=sorted(REPORTS))
        parser.add_argument(
            '--output',
            help='Write to this file instead of stdout'
        )

    def handle(self, *args, **options):
        text = REPORTS[options['report']]()

        if options['output']:
            with open(options['output'], 'w', encoding='utf-8', newline='') as fh:
                fh.write(text)
            self.stderr.write(
                self.style.SUCCESS(f"Report written to {options['output']}")
            )
        else:
            self.stdout.write(text, ending='')
