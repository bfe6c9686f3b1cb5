"""Tests for management commands"""

import json
import os
import tempfile
from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase
from ..models import Location


class ImportLocationsCommandTest(TestCase):
    def write_json(self, data):
        handle, path = tempfile.mkstemp(suffix='.json')
        with os.fdopen(handle, 'w', encoding='utf-8') as file:
            json.dump(data, file)
        self.addCleanup(os.remove, path)
        return path

    def test_import_locations(self):
        Location.objects.create(location_name='Airport', location_type='terminal')
        path = self.write_json([
            {'location_name': 'airport', 'location_type': 'commercial'},
            {'location_name': 'Mall of Sofia'},
            'Central Station',
            {'location_name': ''},
        ])
        out, err = StringIO(), StringIO()

        call_command('import_locations', path, stdout=out, stderr=err)

        self.assertEqual(Location.objects.count(), 3)
        self.assertEqual(Location.objects.get(location_name='Airport').location_type, 'terminal')
        self.assertIn('2 new', out.getvalue())
        self.assertIn('Skipping', err.getvalue())

    def test_missing_file(self):
        with self.assertRaises(CommandError):
            call_command('import_locations', '/nonexistent/locations.json')
