"""Tests for location service"""

from unittest import mock

from django.test import TestCase
from ..models import Location
from ..services import LocationService


class LocationServiceTest(TestCase):
    def setUp(self):
        self.service = LocationService()

    def test_get_or_create_creates_new(self):
        location, created = self.service.get_or_create('Downtown', 'terminal')

        self.assertTrue(created)
        self.assertEqual(location.location_name, 'Downtown')
        self.assertEqual(location.location_type, 'terminal')

    def test_default_type_is_commercial(self):
        location, _ = self.service.get_or_create('Airport')
        self.assertEqual(location.location_type, 'commercial')

    def test_get_or_create_is_case_insensitive(self):
        first, created_first = self.service.get_or_create('Downtown')
        second, created_second = self.service.get_or_create('DOWNTOWN', 'residential')

        self.assertTrue(created_first)
        self.assertFalse(created_second)
        self.assertEqual(first.location_id, second.location_id)
        self.assertEqual(second.location_type, 'commercial')
        self.assertEqual(Location.objects.count(), 1)

    def test_concurrent_insert_returns_existing(self):
        existing = Location.objects.create(location_name='Harbor', location_type='terminal')

        # Simulate losing the race: the lookup misses, the insert hits the unique index
        with mock.patch('django.db.models.query.QuerySet.first', return_value=None):
            location, created = self.service.get_or_create('harbor', 'residential')

        self.assertFalse(created)
        self.assertEqual(location.location_id, existing.location_id)
        self.assertEqual(Location.objects.count(), 1)

    def test_list_locations_ordered_by_name(self):
        for name in ['Uptown', 'Airport', 'Midtown']:
            self.service.get_or_create(name)

        names = [location.location_name for location in self.service.list_locations()]
        self.assertEqual(names, ['Airport', 'Midtown', 'Uptown'])
