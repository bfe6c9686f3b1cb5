"""Tests for user service"""

from django.test import TestCase
from ..models import CarpoolUser
from ..services import UserService


class UserServiceTest(TestCase):
    def setUp(self):
        self.service = UserService()

    def test_create_user(self):
        user = self.service.create_user('Maria', 'viber', '+359 888 123 456')

        self.assertIsNotNone(user.user_id)
        self.assertIsNotNone(user.created_at)
        self.assertEqual(CarpoolUser.objects.get(pk=user.user_id).contact_info, '+359 888 123 456')

    def test_identical_submissions_create_distinct_users(self):
        first = self.service.create_user('Maria', 'phone', '0888')
        second = self.service.create_user('Maria', 'phone', '0888')

        self.assertNotEqual(first.user_id, second.user_id)
        self.assertEqual(CarpoolUser.objects.count(), 2)
