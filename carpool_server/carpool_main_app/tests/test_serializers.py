"""Tests for request serializers"""

from datetime import time

from django.test import SimpleTestCase, TestCase
from ..models import Location, CarpoolUser
from ..serializers import (
    LocationInputSerializer, UserCreateSerializer, RideCreateSerializer,
    RideUpdateSerializer, InterestCreateSerializer, first_error,
)


class LocationInputSerializerTest(SimpleTestCase):
    def validate(self, data):
        serializer = LocationInputSerializer(data=data)
        valid = serializer.is_valid()
        return valid, serializer

    def test_trims_name_and_defaults_type(self):
        valid, serializer = self.validate({'location_name': '  Downtown  '})

        self.assertTrue(valid)
        self.assertEqual(serializer.validated_data, {'location_name': 'Downtown', 'location_type': 'commercial'})

    def test_unknown_or_empty_type_becomes_commercial(self):
        for location_type in ('spaceport', '', None, 5):
            valid, serializer = self.validate({'location_name': 'Airport', 'location_type': location_type})
            self.assertTrue(valid)
            self.assertEqual(serializer.validated_data['location_type'], 'commercial')

    def test_known_type_kept(self):
        _, serializer = self.validate({'location_name': 'Airport', 'location_type': 'terminal'})
        self.assertEqual(serializer.validated_data['location_type'], 'terminal')

    def test_rejects_missing_and_blank_name(self):
        for data in ({}, {'location_name': None}, {'location_name': '   '}):
            valid, serializer = self.validate(data)
            self.assertFalse(valid)
            self.assertEqual(first_error(serializer.errors), 'Location name is required')

    def test_name_length_limit_is_inclusive(self):
        self.assertTrue(self.validate({'location_name': 'x' * 100})[0])

        valid, serializer = self.validate({'location_name': 'x' * 101})
        self.assertFalse(valid)
        self.assertEqual(first_error(serializer.errors), 'Location name too long (max 100 characters)')

    def test_rejects_non_object_body(self):
        valid, serializer = self.validate([])

        self.assertFalse(valid)
        self.assertIn('non_field_errors', serializer.errors)


class UserCreateSerializerTest(SimpleTestCase):
    def test_trims_fields(self):
        serializer = UserCreateSerializer(data={
            'name': ' Maria ', 'contact_method': ' viber ', 'contact_info': ' +359 888 123 456 ',
        })

        self.assertTrue(serializer.is_valid())
        self.assertEqual(serializer.validated_data, {
            'name': 'Maria', 'contact_method': 'viber', 'contact_info': '+359 888 123 456',
        })

    def test_numeric_contact_info_accepted_as_text(self):
        serializer = UserCreateSerializer(data={'name': 'Maria', 'contact_method': 'phone', 'contact_info': 888123})

        self.assertTrue(serializer.is_valid(), serializer.errors)
        self.assertEqual(serializer.validated_data['contact_info'], '888123')

    def test_missing_fields_rejected(self):
        cases = [
            ({'contact_method': 'phone', 'contact_info': '0888'}, 'Name is required'),
            ({'name': 'Maria', 'contact_method': '', 'contact_info': '0888'}, 'Contact method is required'),
            ({'name': 'Maria', 'contact_method': 'phone', 'contact_info': None}, 'Contact info is required'),
        ]
        for data, message in cases:
            serializer = UserCreateSerializer(data=data)
            self.assertFalse(serializer.is_valid())
            self.assertEqual(first_error(serializer.errors), message)


class InterestCreateSerializerTest(SimpleTestCase):
    def test_valid_interest(self):
        serializer = InterestCreateSerializer(data={
            'interested_name': ' Alex ', 'contact_method': 'telegram', 'contact_info': ' @alex ',
        })

        self.assertTrue(serializer.is_valid())
        self.assertEqual(serializer.validated_data['interested_name'], 'Alex')
        self.assertEqual(serializer.validated_data['contact_info'], '@alex')

    def test_invalid_fields(self):
        cases = [
            ('', 'phone', '0877', 'Interested name is required'),
            ('N' * 101, 'phone', '0877', 'Interested name too long'),
            ('Alex', 'carrier pigeon', '0877', 'Contact method must be one of: messenger, viber, phone, telegram'),
            ('Alex', 'phone', '  ', 'Contact info is required'),
            ('Alex', 'phone', '0' * 101, 'Contact info too long'),
        ]
        for name, method, info, message in cases:
            serializer = InterestCreateSerializer(data={
                'interested_name': name, 'contact_method': method, 'contact_info': info,
            })
            self.assertFalse(serializer.is_valid())
            self.assertIn(message, first_error(serializer.errors))


class RideUpdateSerializerTest(SimpleTestCase):
    def validate(self, **data):
        serializer = RideUpdateSerializer(data=data)
        return serializer.is_valid(), serializer

    def test_days_normalized_to_week_order(self):
        valid, serializer = self.validate(days_of_week=['FRI', 'monday', 'Friday'], departure_time='18:30')

        self.assertTrue(valid)
        self.assertEqual(serializer.validated_data['days_of_week'], ['monday', 'friday'])
        self.assertEqual(serializer.validated_data['departure_time'], time(18, 30))
        self.assertEqual(serializer.validated_data['notes'], '')

    def test_time_with_seconds_accepted(self):
        valid, serializer = self.validate(days_of_week=['monday'], departure_time='07:05:30', notes=None)

        self.assertTrue(valid)
        self.assertEqual(serializer.validated_data['departure_time'], time(7, 5, 30))
        self.assertEqual(serializer.validated_data['notes'], '')

    def test_days_errors(self):
        cases = [
            ({}, 'Days of week are required'),
            ({'days_of_week': []}, 'Days of week are required'),
            ({'days_of_week': 'monday'}, 'Days of week must be a list of weekday names'),
            ({'days_of_week': ['monday', 'funday']}, 'Invalid day of week: funday'),
        ]
        for data, message in cases:
            valid, serializer = self.validate(departure_time='08:00', **data)
            self.assertFalse(valid)
            self.assertEqual(first_error(serializer.errors), message)

    def test_time_errors(self):
        for value, message in ((None, 'Departure time is required'),
                               ('25:00', 'Departure time must be in HH:MM format'),
                               ('8am', 'Departure time must be in HH:MM format')):
            valid, serializer = self.validate(days_of_week=['monday'], departure_time=value)
            self.assertFalse(valid)
            self.assertEqual(first_error(serializer.errors), message)


class RideCreateSerializerTest(TestCase):
    def setUp(self):
        self.user = CarpoolUser.objects.create(name='Ivan', contact_method='phone', contact_info='0888')
        self.origin = Location.objects.create(location_name='Lozenets', location_type='residential')
        self.destination = Location.objects.create(location_name='Business Park')

    def validate(self, **overrides):
        data = {
            'user_id': self.user.user_id,
            'post_type': 'offer',
            'origin_id': self.origin.location_id,
            'destination_id': self.destination.location_id,
            'days_of_week': ['monday'],
            'departure_time': '08:15',
        }
        data.update(overrides)
        serializer = RideCreateSerializer(data=data)
        return serializer.is_valid(), serializer

    def test_resolves_references(self):
        valid, serializer = self.validate(vehicle_model=' Skoda ', available_seats='3')

        self.assertTrue(valid, serializer.errors)
        self.assertEqual(serializer.validated_data['user'], self.user)
        self.assertEqual(serializer.validated_data['origin'], self.origin)
        self.assertEqual(serializer.validated_data['destination'], self.destination)
        self.assertEqual(serializer.validated_data['vehicle_model'], 'Skoda')
        self.assertEqual(serializer.validated_data['available_seats'], 3)

    def test_optional_fields(self):
        for extra in ({}, {'vehicle_model': None, 'available_seats': None}, {'vehicle_model': '  '}):
            valid, serializer = self.validate(**extra)
            self.assertTrue(valid, serializer.errors)
            self.assertIsNone(serializer.validated_data['vehicle_model'])
            self.assertIsNone(serializer.validated_data['available_seats'])

    def test_seat_range(self):
        for seats in (1, 10):
            self.assertTrue(self.validate(available_seats=seats)[0])
        for seats in (0, 11, '12', -1):
            valid, serializer = self.validate(available_seats=seats)
            self.assertFalse(valid)
            self.assertEqual(first_error(serializer.errors), 'Available seats must be between 1 and 10')

    def test_fractional_seats_rejected(self):
        for seats in (2.5, '2.5', 'two'):
            valid, serializer = self.validate(available_seats=seats)
            self.assertFalse(valid)
            self.assertEqual(first_error(serializer.errors), 'Available seats must be a whole number')

    def test_vehicle_model_too_long(self):
        valid, serializer = self.validate(vehicle_model='V' * 101)

        self.assertFalse(valid)
        self.assertEqual(first_error(serializer.errors), 'Vehicle model too long (max 100 characters)')

    def test_invalid_post_type(self):
        valid, serializer = self.validate(post_type='hitchhike')

        self.assertFalse(valid)
        self.assertEqual(first_error(serializer.errors), 'Post type must be one of: offer, request')

    def test_unknown_references(self):
        cases = [
            ({'user_id': 9999}, 'User does not exist'),
            ({'origin_id': 9999}, 'Origin location does not exist'),
            ({'destination_id': 'abc'}, 'Destination location does not exist'),
            ({'user_id': None}, 'User is required'),
        ]
        for overrides, message in cases:
            valid, serializer = self.validate(**overrides)
            self.assertFalse(valid)
            self.assertEqual(first_error(serializer.errors), message)


class FirstErrorTest(SimpleTestCase):
    def test_nested_structures(self):
        self.assertEqual(first_error({'days_of_week': {1: ['Invalid day of week: x']}}), 'Invalid day of week: x')
        self.assertEqual(first_error({'non_field_errors': ['Invalid data']}), 'Invalid data')
        self.assertEqual(first_error('plain'), 'plain')
        self.assertEqual(first_error([]), '')
