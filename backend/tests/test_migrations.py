"""
The hand-written schema migration must stay in step with the models.
"""
from io import StringIO

from django.core.management import call_command
from django.test import TestCase, override_settings


class MigrationStateTests(TestCase):

    @override_settings(MIGRATION_MODULES={})
    def test_no_pending_model_changes(self):
        out = StringIO()

        # Exits with status 1 when the models have drifted from the migrations
        call_command('makemigrations', 'persistence', '--check', '--dry-run', stdout=out)

        self.assertIn('No changes detected', out.getvalue())
