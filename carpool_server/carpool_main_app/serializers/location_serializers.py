"""Location-related serializers"""
from rest_framework import serializers
from ..models import Location
from ..utils.constants import LocationType, BusinessRules, choice_values
from .fields import text_field


class LocationSerializer(serializers.ModelSerializer):
    class Meta:
        model = Location
        fields = ['location_id', 'location_name', 'location_type', 'created_at']


class LocationInputSerializer(serializers.Serializer):
    """Body of a location get-or-create request"""
    location_name = text_field('Location name', BusinessRules.NAME_MAX_LENGTH)
    location_type = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, default=LocationType.DEFAULT
    )

    def validate_location_type(self, value):
        # Unknown types are not an error, the location just gets the default type
        if value not in choice_values(LocationType.CHOICES):
            return LocationType.DEFAULT
        return value
