"""User-related serializers"""
from rest_framework import serializers
from ..models import CarpoolUser
from ..utils.constants import BusinessRules
from .fields import text_field


class CarpoolUserSerializer(serializers.ModelSerializer):
    class Meta:
        model = CarpoolUser
        fields = ['user_id', 'name', 'contact_method', 'contact_info', 'created_at']


class UserCreateSerializer(serializers.Serializer):
    name = text_field('Name', BusinessRules.NAME_MAX_LENGTH)
    # Free text for users; only interests restrict the contact method
    contact_method = text_field('Contact method', BusinessRules.NAME_MAX_LENGTH)
    contact_info = text_field('Contact info', BusinessRules.CONTACT_INFO_MAX_LENGTH)
