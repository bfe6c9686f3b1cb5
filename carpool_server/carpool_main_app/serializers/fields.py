"""Shared input fields and error helpers for the request serializers"""
from rest_framework import serializers

from ..utils.constants import Weekday, choice_values


def required_messages(label):
    return {
        'required': f'{label} is required',
        'null': f'{label} is required',
        'blank': f'{label} is required',
    }


def text_field(label, max_length, **kwargs):
    """Trimmed CharField whose errors read '<label> is required' / '<label> too long'"""
    error_messages = required_messages(label)
    error_messages.update({
        'invalid': f'{label} must be text',
        'max_length': f'{label} too long (max {{max_length}} characters)',
    })
    return serializers.CharField(
        max_length=max_length, trim_whitespace=True, error_messages=error_messages, **kwargs
    )


def choice_field(label, choices, **kwargs):
    error_messages = required_messages(label)
    error_messages['invalid_choice'] = f'{label} must be one of: {", ".join(choice_values(choices))}'
    return serializers.ChoiceField(choices=choices, error_messages=error_messages, **kwargs)


class WeekdayField(serializers.ChoiceField):
    """Lowercase weekday name; three letter abbreviations are expanded"""
    default_error_messages = {
        'invalid_choice': 'Invalid day of week: {input}',
    }

    def __init__(self, **kwargs):
        super().__init__(choices=Weekday.ORDER, **kwargs)

    def to_internal_value(self, data):
        day = str(data).strip().lower()
        return super().to_internal_value(Weekday.ABBREVIATIONS.get(day, day))


def first_error(detail):
    """Pick the first message out of a nested DRF error structure"""
    if isinstance(detail, dict):
        return first_error(next(iter(detail.values()), ''))
    if isinstance(detail, (list, tuple)):
        return first_error(detail[0]) if detail else ''
    return str(detail)
