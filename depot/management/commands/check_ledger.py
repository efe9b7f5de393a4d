"""
Management command to audit ledger integrity.

Usage:
    python manage.py check_ledger
    python manage.py check_ledger --fail-on-issues
"""

from django.core.management.base import BaseCommand, CommandError

from depot.services.audit import check_ledger


class Command(BaseCommand):
    """Audit ledger, shipment links and deletions."""

    help = 'Checks ledger rows, shipment links and deletion records for inconsistencies'

    def add_arguments(self, parser):
        parser.add_argument(
            '--fail-on-issues',
            action='store_true',
            help='Exit with an error when any issue is found'
        )

    def handle(self, *args, **options):
        issues = check_ledger()

        for issue in issues:
            details = ', '.join(f'{k}={v}' for k, v in sorted(issue.data.items()))
            self.stdout.write(f'{issue.code}: {details}')

        if not issues:
            self.stdout.write(self.style.SUCCESS('Ledger is consistent'))
        elif options['fail_on_issues']:
            raise CommandError(f'{len(issues)} issue(s) found')
        else:
            self.stdout.write(self.style.WARNING(f'{len(issues)} issue(s) found'))
