"""Ride-related serializers"""
from rest_framework import serializers
from ..models import RidePost, RideInterest, CarpoolUser, Location
from ..utils.constants import PostType, ContactMethod, Weekday, BusinessRules
from .fields import text_field, choice_field, required_messages, WeekdayField


SEATS_RANGE_MESSAGE = f'Available seats must be between {BusinessRules.MIN_SEATS} and {BusinessRules.MAX_SEATS}'


class RidePostSerializer(serializers.ModelSerializer):
    """Row of the active rides projection; expects a queryset built with ``with_details()``"""
    user_id = serializers.IntegerField(read_only=True)
    origin_id = serializers.IntegerField(read_only=True)
    destination_id = serializers.IntegerField(read_only=True)
    origin_name = serializers.CharField(read_only=True)
    origin_type = serializers.CharField(read_only=True)
    destination_name = serializers.CharField(read_only=True)
    destination_type = serializers.CharField(read_only=True)
    user_name = serializers.CharField(read_only=True)
    contact_method = serializers.CharField(read_only=True)
    contact_info = serializers.CharField(read_only=True)
    interest_count = serializers.IntegerField(read_only=True)

    class Meta:
        model = RidePost
        fields = ['post_id', 'user_id', 'post_type', 'origin_id', 'destination_id',
                  'days_of_week', 'departure_time', 'notes', 'vehicle_model', 'available_seats',
                  'is_active', 'created_at', 'updated_at',
                  'origin_name', 'origin_type', 'destination_name', 'destination_type',
                  'user_name', 'contact_method', 'contact_info', 'interest_count']


class RideUpdateSerializer(serializers.Serializer):
    """Schedule fields; the only part of a ride that can change after posting"""
    days_of_week = serializers.ListField(
        child=WeekdayField(),
        allow_empty=False,
        error_messages={
            'required': 'Days of week are required',
            'null': 'Days of week are required',
            'empty': 'Days of week are required',
            'not_a_list': 'Days of week must be a list of weekday names',
        },
    )
    departure_time = serializers.TimeField(
        input_formats=['%H:%M', '%H:%M:%S'],
        error_messages={
            **required_messages('Departure time'),
            'invalid': 'Departure time must be in HH:MM format',
        },
    )
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True, default='')

    def validate_days_of_week(self, value):
        # Stored once each, in week order
        return [day for day in Weekday.ORDER if day in value]

    def validate_notes(self, value):
        return value or ''


def reference_field(label, source, queryset):
    error_messages = required_messages(label)
    error_messages.update({
        'does_not_exist': f'{label} does not exist',
        'incorrect_type': f'{label} does not exist',
    })
    return serializers.PrimaryKeyRelatedField(
        source=source, queryset=queryset, error_messages=error_messages
    )


class RideCreateSerializer(RideUpdateSerializer):
    user_id = reference_field('User', 'user', CarpoolUser.objects.all())
    post_type = choice_field('Post type', PostType.CHOICES)
    origin_id = reference_field('Origin location', 'origin', Location.objects.all())
    destination_id = reference_field('Destination location', 'destination', Location.objects.all())
    vehicle_model = serializers.CharField(
        max_length=BusinessRules.VEHICLE_MODEL_MAX_LENGTH,
        required=False,
        allow_null=True,
        allow_blank=True,
        default=None,
        error_messages={
            'invalid': 'Vehicle model must be text',
            'max_length': 'Vehicle model too long (max {max_length} characters)',
        },
    )
    available_seats = serializers.IntegerField(
        min_value=BusinessRules.MIN_SEATS,
        max_value=BusinessRules.MAX_SEATS,
        required=False,
        allow_null=True,
        default=None,
        error_messages={
            'invalid': 'Available seats must be a whole number',
            'min_value': SEATS_RANGE_MESSAGE,
            'max_value': SEATS_RANGE_MESSAGE,
        },
    )

    def validate_vehicle_model(self, value):
        return value or None


class RideInterestSerializer(serializers.ModelSerializer):
    ride_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = RideInterest
        fields = ['interest_id', 'ride_id', 'interested_name', 'contact_method', 'contact_info', 'created_at']


class InterestCreateSerializer(serializers.Serializer):
    interested_name = text_field('Interested name', BusinessRules.NAME_MAX_LENGTH)
    contact_method = choice_field('Contact method', ContactMethod.CHOICES)
    contact_info = text_field('Contact info', BusinessRules.CONTACT_INFO_MAX_LENGTH)


class InterestContactSerializer(serializers.Serializer):
    """Contact disclosure returned when listing a ride's interests"""
    interested_name = serializers.CharField()
    contact_method = serializers.CharField()
    contact_info = serializers.CharField()
    created_at = serializers.DateTimeField()
